"""FastAPI helpers for reading services out of `app.state.container`.

Applications attach one `Container` to `app.state.container` at startup and
route handlers resolve their collaborators through it:

    @app.get('/now')
    async def now(clock = Depends(service_dependency('clock'))):
        return {'now': clock.now()}
"""
import logging
from typing import Any, Callable, Optional

from fastapi import HTTPException
from starlette.requests import Request

from registry_lib.errors import ServiceNotFoundError
from registry_lib.interfaces import ContainerProtocol

logger = logging.getLogger(__name__)


def get_container(request: Request) -> Optional[ContainerProtocol]:
    return getattr(request.app.state, 'container', None)


def resolve_service(request: Request, name: str) -> Any:
    """Resolve `name` from the request's application container.

    Raises HTTPException(500) when no container is attached or nothing is
    registered under `name`.
    """
    container = get_container(request)
    if container is None:
        logger.error("No service container on app.state while resolving '%s'", name)
        raise HTTPException(status_code=500, detail="Service container not configured")
    try:
        return container.get(name)
    except ServiceNotFoundError:
        logger.error("Service '%s' is not registered", name)
        raise HTTPException(status_code=500, detail=f"Service '{name}' not configured")


def resolve_optional_service(request: Request, name: str) -> Any:
    """Like `resolve_service` but returns None instead of failing."""
    container = get_container(request)
    if container is None or name not in container:
        return None
    return container.get(name)


def service_dependency(name: str, optional: bool = False) -> Callable[[Request], Any]:
    """Build a FastAPI dependency that resolves `name` per request."""
    resolve = resolve_optional_service if optional else resolve_service

    def _dependency(request: Request) -> Any:
        return resolve(request, name)

    _dependency.__name__ = f"resolve_{name}"
    return _dependency
