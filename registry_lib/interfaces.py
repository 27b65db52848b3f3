from typing import Protocol, Any, Callable, runtime_checkable


@runtime_checkable
class IndexedAccessProtocol(Protocol):
    """Bracket-style access to a registry.

    `c[name] = factory` registers a provider, never a singleton, and
    `del c[name]` removes the name from both collections.
    """

    def __contains__(self, name: object) -> bool: ...

    def __getitem__(self, name: str) -> Any: ...

    def __setitem__(self, name: str, factory: Callable[[], Any]) -> None: ...

    def __delitem__(self, name: str) -> None: ...


@runtime_checkable
class ContainerProtocol(IndexedAccessProtocol, Protocol):
    """Service container protocol mirroring `registry_lib.container.Container`.

    Implementations raise the errors from `registry_lib.errors`
    (InvalidNameError, DuplicateNameError, ServiceNotFoundError).
    """

    def singleton(self, name: str, value: Any) -> None: ...

    def provide(self, name: str, factory: Callable[[], Any]) -> None: ...

    def get(self, name: str) -> Any: ...

    def has_service(self, name: str) -> bool: ...

    def has_provider(self, name: str) -> bool: ...

    def remove(self, name: str) -> None: ...

    def remove_service(self, name: str) -> None: ...

    def remove_provider(self, name: str) -> None: ...
