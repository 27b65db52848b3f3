import functools
import logging
import types
from threading import RLock
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, cast

from registry_lib.errors import DuplicateNameError, InvalidNameError, ServiceNotFoundError

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Values of these types stored as singletons are treated as factories and
# invoked on first lookup. Classes and objects with __call__ are plain values.
_FACTORY_TYPES = (
    types.FunctionType,
    types.MethodType,
    types.BuiltinFunctionType,
    functools.partial,
)


def is_factory(value: Any) -> bool:
    return isinstance(value, _FACTORY_TYPES)


class Container:
    """A small, explicit DI container for named singletons and providers.

    Singletons are registered with `singleton`. If the registered value is a
    function it is called on the first `get` and the result replaces it, so
    later lookups return the cached instance. Any other value is returned as
    is. Providers are registered with `provide` and called on every `get`.

    A name lives in at most one of the two collections. Bracket access is
    supported: `name in c`, `c[name]`, `del c[name]`, and `c[name] = factory`
    which always registers a *provider*.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._singletons: Dict[str, Any] = {}
        self._providers: Dict[str, Callable[[], Any]] = {}

    def check_service_name(self, name: str) -> None:
        """Raise InvalidNameError unless `name` is a non-empty string."""
        if not isinstance(name, str) or not name:
            raise InvalidNameError(name)

    def check_duplicated_name(self, name: str) -> None:
        """Raise DuplicateNameError if `name` is registered in either collection."""
        if self.has_service(name) or self.has_provider(name):
            raise DuplicateNameError(name)

    def singleton(self, name: str, value: Any) -> None:
        with self._lock:
            self.check_service_name(name)
            self.check_duplicated_name(name)
            self._singletons[name] = value
        logger.debug("Registered singleton: %s (%s)", name, type(value).__name__)

    def provide(self, name: str, factory: Callable[[], Any]) -> None:
        with self._lock:
            self.check_service_name(name)
            if not callable(factory):
                raise TypeError(f"provider '{name}' must be callable, got {type(factory).__name__}")
            self.check_duplicated_name(name)
            self._providers[name] = factory
        logger.debug("Registered provider: %s", name)

    def get(self, name: str) -> Any:
        """Return the service or a fresh provider result registered under `name`.

        Raises ServiceNotFoundError if nothing is registered under `name`.
        """
        with self._lock:
            if name in self._singletons:
                return self.get_singleton_service(name)
            provider = self._providers.get(name)
        if provider is None:
            raise ServiceNotFoundError(name)
        return provider()

    def get_singleton_service(self, name: str) -> Any:
        """Return a singleton, materializing it first if it was stored as a factory."""
        with self._lock:
            if name not in self._singletons:
                raise ServiceNotFoundError(name)
            value = self._singletons[name]
            if not is_factory(value):
                return value
            logger.debug("Materializing singleton: %s", name)
            instance = value()
            self._singletons[name] = instance
            return instance

    def get_typed(self, name: str, expected: Optional[Type[T]] = None) -> T:
        """Resolve and cast to the expected type.

        When `expected` is given the resolved object is checked with
        isinstance and a TypeError raised on mismatch.
        """
        obj = self.get(name)
        if expected is not None and not isinstance(obj, expected):
            raise TypeError(
                f"service '{name}' is {type(obj).__name__}, expected {expected.__name__}"
            )
        return cast(T, obj)

    def has_service(self, name: str) -> bool:
        return name in self._singletons

    def has_provider(self, name: str) -> bool:
        return name in self._providers

    def remove(self, name: str) -> None:
        self.remove_service(name)
        self.remove_provider(name)

    def remove_service(self, name: str) -> None:
        with self._lock:
            if name not in self._singletons:
                return
            del self._singletons[name]
        logger.debug("Removed singleton: %s", name)

    def remove_provider(self, name: str) -> None:
        with self._lock:
            if name not in self._providers:
                return
            del self._providers[name]
        logger.debug("Removed provider: %s", name)

    def clear(self) -> None:
        with self._lock:
            self._singletons.clear()
            self._providers.clear()
        logger.debug("Cleared service container")

    def names(self) -> List[str]:
        with self._lock:
            return sorted(set(self._singletons) | set(self._providers))

    # Bracket access

    def __contains__(self, name: object) -> bool:
        return self.has_service(name) or self.has_provider(name)  # type: ignore[arg-type]

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, factory: Callable[[], Any]) -> None:
        self.provide(name, factory)

    def __delitem__(self, name: str) -> None:
        self.remove_service(name)
        self.remove_provider(name)

    def __repr__(self) -> str:
        return f"<Container singletons={len(self._singletons)} providers={len(self._providers)}>"
