"""Registry client: the AWS Service Discovery calls used by reconciliation."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

import boto3
from botocore.config import Config

if TYPE_CHECKING:
    from .config import Settings

logger = logging.getLogger(__name__)

SERVICE_NAME = "servicediscovery"


class RegistryClient(Protocol):
    """The three registry operations reconciliation depends on."""

    def list_services(
        self, namespace_id: str, next_token: str | None = None
    ) -> Mapping[str, Any]: ...

    def create_service(self, **fields: Any) -> Mapping[str, Any]: ...

    def delete_service(self, service_id: str) -> Mapping[str, Any]: ...


def _trace_call(params: Mapping[str, Any], model: Any, **kwargs: Any) -> None:
    """Log each outgoing request before it is sent."""
    logger.debug(
        "Sending %s to %s with: %s",
        model.name,
        SERVICE_NAME,
        json.dumps(params, default=str),
    )


class ServiceDiscoveryRegistry:
    """RegistryClient backed by a boto3 servicediscovery client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> ServiceDiscoveryRegistry:
        """Build a traced boto3 client from runtime settings."""
        config = Config(user_agent_extra=settings.user_agent)
        client = boto3.client(
            SERVICE_NAME,
            region_name=settings.region,
            endpoint_url=settings.endpoint_url,
            config=config,
        )
        client.meta.events.register(f"before-parameter-build.{SERVICE_NAME}", _trace_call)
        logger.debug("Created %s client in %s", SERVICE_NAME, client.meta.region_name)
        return cls(client)

    def list_services(
        self, namespace_id: str, next_token: str | None = None
    ) -> Mapping[str, Any]:
        params: dict[str, Any] = {
            "Filters": [{"Name": "NAMESPACE_ID", "Condition": "EQ", "Values": [namespace_id]}],
        }
        if next_token:
            params["NextToken"] = next_token
        return self._client.list_services(**params)

    def create_service(self, **fields: Any) -> Mapping[str, Any]:
        return self._client.create_service(**fields)

    def delete_service(self, service_id: str) -> Mapping[str, Any]:
        return self._client.delete_service(Id=service_id)
