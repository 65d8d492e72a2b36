"""Specification ABCs for reconciled resources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from .context import Context

R = TypeVar("R")


class Specification(ABC, Generic[R]):
    """Desired state of a single resource."""

    @abstractmethod
    def find(self, ctx: Context) -> R:
        """Return the existing resource; raise NotFoundError if there is none."""

    @abstractmethod
    def apply(self, ctx: Context) -> R:
        """Create the resource."""


class Removal(ABC):
    """A resource scheduled for deletion."""

    @abstractmethod
    def remove(self, ctx: Context) -> Mapping[str, Any]:
        """Delete the resource and return the registry response."""
