"""Error taxonomy for service reconciliation."""

from __future__ import annotations


class ServiceMapError(Exception):
    """Base class for all servicemap errors."""

    status_code: int | None = None


class ValidationError(ServiceMapError, ValueError):
    """Malformed or conflicting input parameters."""


class NotFoundError(ServiceMapError, LookupError):
    """No service matches the requested name in the namespace."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Service with Name: {name} not found.")
        self.name = name


class RegistryError(ServiceMapError):
    """The registry returned a response we cannot use."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
