"""Entrypoint: read inputs, reconcile the service, and post the results."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from botocore.exceptions import ClientError

from .config import Settings
from .context import Context
from .errors import ServiceMapError
from .identity import extract_identity
from .models import CreatedService, DeleteRequest, ServiceRecord, ServiceRequest
from .outputs import GithubOutputs, Outputs
from .params import EnvironmentInputs, InputProvider, normalize
from .registry import RegistryClient, ServiceDiscoveryRegistry
from .services import ServiceRemoval, ServiceSpec
from .specop import Absent, Present

logger = logging.getLogger(__name__)


def run(
    inputs: InputProvider,
    registry: RegistryClient,
    outputs: Outputs,
) -> ServiceRecord | CreatedService | Mapping[str, Any]:
    """Reconcile the service described by `inputs` and post the outputs."""
    request = normalize(inputs)
    ctx = Context(registry)

    match request:
        case DeleteRequest():
            response = Absent(ServiceRemoval(request))(ctx)
            outputs.set_output("response", response)
            return response
        case ServiceRequest():
            result = Present(ServiceSpec(request))(ctx)
            identity = extract_identity(result)
            logger.info("ARN found or created: %s", identity.arn)
            outputs.set_output("response", result)
            outputs.set_output("arn", identity.arn)
            outputs.set_output("id", identity.id)
            return result


def describe_failure(err: BaseException) -> str:
    """Format an error as `<ErrorKind> (Status code: <code>): <message>`."""
    kind = type(err).__name__
    status: int | None = None
    message = str(err)

    if isinstance(err, ClientError):
        error = err.response.get("Error", {})
        kind = error.get("Code") or kind
        message = error.get("Message") or message
        status = err.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    elif isinstance(err, ServiceMapError):
        status = err.status_code

    code = "undefined" if status is None else str(status)
    return f"{kind} (Status code: {code}): {message}"


def main() -> int:
    """Run once against the configured registry; return the process exit status."""
    settings = Settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    outputs = GithubOutputs(settings.github_output)

    try:
        registry = ServiceDiscoveryRegistry.from_settings(settings)
        run(EnvironmentInputs(), registry, outputs)
    except Exception as err:
        outputs.set_failed(describe_failure(err))
        logger.debug("Received error", exc_info=err)
        return 1
    return 0
