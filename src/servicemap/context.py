"""Runtime execution context for a reconciliation run."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .registry import RegistryClient


class Context:
    """Runtime state passed to specifications."""

    def __init__(self, registry: RegistryClient) -> None:
        self.registry = registry
