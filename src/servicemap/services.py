"""Cloud Map service specifications."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .context import Context
from .errors import RegistryError
from .models import CreatedService, DeleteRequest, ServiceRecord, ServiceRequest, dump_response
from .search import find_service
from .spec import Removal, Specification

logger = logging.getLogger(__name__)

HTTP_OK = 200


class ServiceSpec(Specification[ServiceRecord | CreatedService]):
    """A service identified by name within its namespace."""

    def __init__(self, request: ServiceRequest) -> None:
        self.request = request

    def __str__(self) -> str:
        return self.request.name

    def find(self, ctx: Context) -> ServiceRecord:
        return find_service(ctx.registry, self.request.effective_namespace_id, self.request.name)

    def apply(self, ctx: Context) -> CreatedService:
        response = ctx.registry.create_service(**self.request.create_inputs())
        return CreatedService.model_validate(response)


class ServiceRemoval(Removal):
    """A service identified by id."""

    def __init__(self, request: DeleteRequest) -> None:
        self.request = request

    def __str__(self) -> str:
        return self.request.id

    def remove(self, ctx: Context) -> Mapping[str, Any]:
        response = ctx.registry.delete_service(self.request.id)
        status = (response.get("ResponseMetadata") or {}).get("HTTPStatusCode")
        if status != HTTP_OK:
            raise RegistryError(
                f"Failed to delete service: {dump_response(response)}",
                status_code=status,
            )
        logger.info("Successfully deleted service with Id: %s", self.request.id)
        return response
