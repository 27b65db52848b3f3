from typing import Any
from starlette.testclient import TestClient
from registry_lib.container import Container


def register_service_on_client(client: TestClient, name: str, instance: Any) -> None:
    """Register a service instance into the app's DI container for tests.

    Creates `app.state.container` when the app does not have one yet.

    Usage in tests:
        from tests.helpers import register_service_on_client
        register_service_on_client(client, 'clock', fake_clock)
    """
    container = getattr(client.app.state, 'container', None)
    if container is None:
        container = Container()
        client.app.state.container = container

    container.singleton(name, instance)


def register_services_on_client(client: TestClient, services: dict[str, Any]) -> None:
    for name, inst in services.items():
        register_service_on_client(client, name, inst)


class CallCounter:
    """Zero-argument factory that counts its invocations.

    Returns the current count before incrementing, so the first call
    yields 0, the next 1, and so on.
    """

    def __init__(self, result: Any = None):
        self.calls = 0
        self._result = result

    def __call__(self) -> Any:
        n = self.calls
        self.calls += 1
        return n if self._result is None else self._result
