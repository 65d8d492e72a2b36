"""Parameter normalization: turn raw string inputs into typed requests."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from typing import Any, Protocol

import pydantic

from .errors import ValidationError
from .models import DeleteRequest, ServiceRequest

logger = logging.getLogger(__name__)

ACTIONS = ("create", "delete")

# request field -> input name
_TEXT_INPUTS: dict[str, str] = {
    "Name": "name",
    "Description": "description",
    "NamespaceId": "namespace-id",
    "Type": "type",
}

_JSON_INPUTS: dict[str, str] = {
    "DnsConfig": "dns-config",
    "HealthCheckConfig": "health-check-config",
    "HealthCheckCustomConfig": "health-check-custom-config",
    "Tags": "tags",
}

_INPUT_NAMES = {**_TEXT_INPUTS, **_JSON_INPUTS}


class InputProvider(Protocol):
    """Source of raw, string-valued invocation inputs."""

    def get(self, name: str) -> str: ...


class MappingInputs:
    """Inputs held in a plain mapping, keyed by input name."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = values

    def get(self, name: str) -> str:
        return self._values.get(name, "")


class EnvironmentInputs:
    """Inputs passed by the GitHub Actions runner as INPUT_<NAME> variables."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, name: str) -> str:
        key = "INPUT_" + name.replace(" ", "_").upper()
        return self._environ.get(key, "")


def _read(inputs: InputProvider, name: str) -> str | None:
    """Read an input, collapsing empty values to None."""
    return inputs.get(name).strip() or None


def _parse_json(field: str, raw: str, expected: type) -> Any:
    """Decode a JSON input, naming the field on failure."""
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Invalid JSON for {field}: {exc.msg}: {raw}") from exc
    if not isinstance(value, expected):
        kind = "an object" if expected is dict else "an array"
        raise ValidationError(f"Invalid JSON for {field}: expected {kind}: {raw}")
    return value


def _translate(exc: pydantic.ValidationError) -> ValidationError:
    """Convert a model validation failure into a field-named ValidationError."""
    err = exc.errors()[0]
    original = err.get("ctx", {}).get("error")
    if isinstance(original, ValidationError):
        return original
    loc = err["loc"][0] if err["loc"] else ""
    field = _INPUT_NAMES.get(str(loc), loc)
    return ValidationError(f"Invalid value for `{field}`: {err['msg']}")


def get_action(inputs: InputProvider) -> str:
    action = (_read(inputs, "action") or "create").lower()
    if action not in ACTIONS:
        raise ValidationError(f"`action` must be one of {', '.join(ACTIONS)} (got '{action}')")
    return action


def normalize_delete(inputs: InputProvider) -> DeleteRequest:
    service_id = _read(inputs, "id")
    if service_id is None:
        raise ValidationError("`id` is required when `action` is delete.")
    return DeleteRequest(Id=service_id)


def normalize_service(inputs: InputProvider) -> ServiceRequest:
    """Build a ServiceRequest from the create inputs.

    Empty inputs are treated as not provided. JSON inputs are decoded, and
    the namespace id must be given exactly once, either as `namespace-id` or
    inside `dns-config`.
    """
    fields: dict[str, Any] = {}
    for field, name in _TEXT_INPUTS.items():
        value = _read(inputs, name)
        if value is not None:
            fields[field] = value

    for field, name in _JSON_INPUTS.items():
        raw = _read(inputs, name)
        if raw is not None:
            fields[field] = _parse_json(name, raw, list if field == "Tags" else dict)

    if "Name" not in fields:
        raise ValidationError("`name` is required when `action` is create.")

    try:
        return ServiceRequest.model_validate(fields)
    except pydantic.ValidationError as exc:
        raise _translate(exc) from exc


def normalize(inputs: InputProvider) -> ServiceRequest | DeleteRequest:
    """Read the invocation inputs and return the request for the selected action."""
    action = get_action(inputs)
    logger.debug("Normalizing inputs for action '%s'", action)
    if action == "delete":
        return normalize_delete(inputs)
    return normalize_service(inputs)
