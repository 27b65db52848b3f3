"""Exceptions raised by the service container.

Each error also derives from the builtin exception callers would naturally
catch for that failure, so code that only knows about ``KeyError`` or
``ValueError`` keeps working.
"""


class ContainerError(Exception):
    """Base class for all container errors."""


class InvalidNameError(ContainerError, ValueError):
    def __init__(self, name=None):
        super().__init__('service name can not be empty')
        self.name = name


class DuplicateNameError(ContainerError, RuntimeError):
    def __init__(self, name: str):
        super().__init__(f"service or provider '{name}' already exists")
        self.name = name


class ServiceNotFoundError(ContainerError, KeyError):
    def __init__(self, name: str):
        super().__init__(f"No service or provider registered for key '{name}'")
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ wraps the message in quotes
        return str(self.args[0])
