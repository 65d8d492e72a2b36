"""Invocation outputs and failure reporting for the GitHub Actions runner."""

from __future__ import annotations

import logging
import sys
import uuid
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TextIO

from .models import dump_response

logger = logging.getLogger(__name__)


def _to_text(value: Any) -> str:
    return value if isinstance(value, str) else dump_response(value)


def _escape_message(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class Outputs(ABC):
    """Destination for step outputs and the failure message."""

    @abstractmethod
    def set_output(self, name: str, value: Any) -> None: ...

    @abstractmethod
    def set_failed(self, message: str) -> None: ...


class GithubOutputs(Outputs):
    """Write outputs to the GITHUB_OUTPUT file and failures as workflow commands."""

    def __init__(self, path: Path | None = None, stream: TextIO | None = None) -> None:
        self.path = path
        self.stream = stream or sys.stdout

    def set_output(self, name: str, value: Any) -> None:
        text = _to_text(value)
        if self.path is None:
            logger.info("Output %s: %s", name, text)
            return
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with self.path.open("a", encoding="utf-8") as fp:
            fp.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")
        logger.debug("Wrote output '%s' to %s", name, self.path)

    def set_failed(self, message: str) -> None:
        print(f"::error::{_escape_message(message)}", file=self.stream)


class MemoryOutputs(Outputs):
    """Collect outputs in memory."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.failure: str | None = None

    def set_output(self, name: str, value: Any) -> None:
        self.values[name] = _to_text(value)

    def set_failed(self, message: str) -> None:
        self.failure = message
