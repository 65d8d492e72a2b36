"""SpecOp strategies."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from .context import Context
from .errors import NotFoundError
from .spec import Removal, Specification

logger = logging.getLogger(__name__)

R = TypeVar("R")


class Present(Generic[R]):
    """Return the resource if it exists, otherwise create it."""

    def __init__(self, spec: Specification[R]) -> None:
        self.spec = spec

    def __call__(self, ctx: Context) -> R:
        spec_name = str(self.spec)
        try:
            found = self.spec.find(ctx)
        except NotFoundError:
            logger.info("Unable to find %s; creating", spec_name)
            return self.spec.apply(ctx)
        logger.info("Found %s", spec_name)
        return found


class Absent:
    """Remove the resource unconditionally."""

    def __init__(self, spec: Removal) -> None:
        self.spec = spec

    def __call__(self, ctx: Context) -> Mapping[str, Any]:
        logger.info("Removing %s", self.spec)
        return self.spec.remove(ctx)
