"""Minimal named service registry / dependency-injection container.

Exposes the container, its error types and the Protocols it satisfies.
The FastAPI helpers live in `registry_lib.resolver` and are imported on
demand.
"""
from .container import Container
from .errors import (
    ContainerError,
    DuplicateNameError,
    InvalidNameError,
    ServiceNotFoundError,
)
from .interfaces import ContainerProtocol, IndexedAccessProtocol

__all__ = [
    "Container",
    "ContainerError",
    "DuplicateNameError",
    "InvalidNameError",
    "ServiceNotFoundError",
    "ContainerProtocol",
    "IndexedAccessProtocol",
]
