"""Request and registry models."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from .errors import RegistryError, ValidationError

logger = logging.getLogger(__name__)

# fields accepted by the CreateService operation
CREATE_FIELDS = frozenset(
    {
        "name",
        "description",
        "dns_config",
        "health_check_config",
        "health_check_custom_config",
        "namespace_id",
        "tags",
        "type",
    }
)


def dump_response(response: Any) -> str:
    """Render a raw registry response as JSON for messages and outputs."""
    if isinstance(response, BaseModel):
        response = response.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(response, default=str)


def resolve_namespace_id(namespace_id: str | None, dns_config: Mapping[str, Any] | None) -> str:
    """Return the namespace id, which must be given in exactly one place."""
    nested = dns_config.get("NamespaceId") if dns_config else None
    match bool(namespace_id), bool(nested):
        case True, False:
            return namespace_id  # type: ignore[return-value]
        case False, True:
            return nested  # type: ignore[return-value]
        case True, True:
            raise ValidationError(
                "`namespace-id` must be defined either as an input, "
                "or as part of `dns-config` (not both)."
            )
        case _:
            logger.debug("No namespace id in %s or %s", namespace_id, dns_config)
            raise ValidationError(
                "`namespace-id` must be defined either as an input, or as part of `dns-config`."
            )


class ServiceType(StrEnum):
    HTTP = "HTTP"
    DNS_HTTP = "DNS_HTTP"
    DNS = "DNS"


class Tag(BaseModel):
    """A single resource tag; accepts either key/value spelling."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        validation_alias=AliasChoices("Key", "key"),
        serialization_alias="Key",
    )
    value: str = Field(
        validation_alias=AliasChoices("Value", "value"),
        serialization_alias="Value",
    )


class ServiceRequest(BaseModel):
    """Desired state of a service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")
    description: str | None = Field(default=None, alias="Description")
    namespace_id: str | None = Field(default=None, alias="NamespaceId")
    dns_config: dict[str, Any] | None = Field(default=None, alias="DnsConfig")
    health_check_config: dict[str, Any] | None = Field(default=None, alias="HealthCheckConfig")
    health_check_custom_config: dict[str, Any] | None = Field(
        default=None, alias="HealthCheckCustomConfig"
    )
    tags: tuple[Tag, ...] | None = Field(default=None, alias="Tags")
    type: ServiceType | None = Field(default=None, alias="Type")

    @model_validator(mode="after")
    def _check_namespace(self) -> ServiceRequest:
        resolve_namespace_id(self.namespace_id, self.dns_config)
        return self

    @property
    def effective_namespace_id(self) -> str:
        """Namespace from the top level or from DnsConfig, whichever is set."""
        return resolve_namespace_id(self.namespace_id, self.dns_config)

    def create_inputs(self) -> dict[str, Any]:
        """Return only the fields CreateService accepts, omitting unset ones."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            include=set(CREATE_FIELDS),
        )


class DeleteRequest(BaseModel):
    """Identifies a service to remove."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="Id")


class ServiceRecord(BaseModel):
    """A service as returned by the registry; unknown fields are preserved."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: str | None = Field(default=None, alias="Id")
    name: str | None = Field(default=None, alias="Name")
    arn: str | None = Field(default=None, alias="Arn")
    description: str | None = Field(default=None, alias="Description")
    namespace_id: str | None = Field(default=None, alias="NamespaceId")
    type: str | None = Field(default=None, alias="Type")
    dns_config: dict[str, Any] | None = Field(default=None, alias="DnsConfig")
    health_check_config: dict[str, Any] | None = Field(default=None, alias="HealthCheckConfig")
    health_check_custom_config: dict[str, Any] | None = Field(
        default=None, alias="HealthCheckCustomConfig"
    )


class CreatedService(BaseModel):
    """A CreateService response wrapping the new record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    service: ServiceRecord | None = Field(default=None, alias="Service")


class ResourcePage(BaseModel):
    """One page of a filtered service listing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    services: tuple[ServiceRecord, ...] = Field(alias="Services")
    next_token: str | None = Field(default=None, alias="NextToken")

    @classmethod
    def from_response(cls, response: Mapping[str, Any] | None) -> ResourcePage:
        """Build a page from a raw ListServices response.

        Raises RegistryError if the response carries no list of services.
        """
        if not response or not isinstance(response.get("Services"), list):
            raise RegistryError(f"Error searching for Service: Response: {dump_response(response)}")
        return cls.model_validate(response)
