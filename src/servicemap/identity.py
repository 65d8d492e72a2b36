"""Identity extraction from find or create results."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .errors import RegistryError
from .models import CreatedService, ServiceRecord, dump_response

logger = logging.getLogger(__name__)

_ARN_PATTERN = re.compile(r"^arn:aws:servicediscovery:[\w-]*:[0-9]*:service/(srv-\w+)")


@dataclass(frozen=True)
class Identity:
    arn: str
    id: str


def _arn_of(result: ServiceRecord | CreatedService) -> str:
    match result:
        case ServiceRecord(arn=str(arn)) if arn:
            return arn
        case CreatedService(service=ServiceRecord(arn=str(arn))) if arn:
            return arn
        case _:
            raise RegistryError(f"Unable to determine ARN: {dump_response(result)}")


def extract_identity(result: ServiceRecord | CreatedService) -> Identity:
    """Return the ARN and service id of a found record or a creation response."""
    arn = _arn_of(result)
    m = _ARN_PATTERN.match(arn)
    if m is None:
        raise RegistryError(f"Unable to determine service id from ARN: {arn}")
    logger.debug("Resolved %s -> %s", arn, m.group(1))
    return Identity(arn=arn, id=m.group(1))
