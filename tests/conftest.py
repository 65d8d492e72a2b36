"""Shared fixtures for servicemap tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

ARN = "arn:aws:servicediscovery:us-east-1:1234567890:service/srv-abc12345"
OTHER_ARN = "arn:aws:servicediscovery:us-east-1:1234567890:service/srv-xyz12345"

MY_SERVICE = {"Id": "srv-abc12345", "Name": "my-service", "Arn": ARN, "Type": "HTTP"}
NOT_MY_SERVICE = {"Id": "srv-xyz12345", "Name": "not-my-service", "Arn": OTHER_ARN}


class FakeRegistry:
    """In-memory RegistryClient that replays canned responses and records calls."""

    def __init__(
        self,
        pages: list[Mapping[str, Any] | Exception] | None = None,
        created: Mapping[str, Any] | None = None,
        deleted: Mapping[str, Any] | Exception | None = None,
    ) -> None:
        self.pages = list(pages or [])
        self.created = created
        self.deleted = deleted
        self.list_calls: list[tuple[str, str | None]] = []
        self.create_calls: list[dict[str, Any]] = []
        self.delete_calls: list[str] = []

    def list_services(self, namespace_id: str, next_token: str | None = None) -> Mapping[str, Any]:
        self.list_calls.append((namespace_id, next_token))
        page = self.pages.pop(0)
        if isinstance(page, Exception):
            raise page
        return page

    def create_service(self, **fields: Any) -> Mapping[str, Any]:
        self.create_calls.append(fields)
        if self.created is None:
            return {"Service": {**fields, "Id": "srv-abc12345", "Arn": ARN}}
        return self.created

    def delete_service(self, service_id: str) -> Mapping[str, Any]:
        self.delete_calls.append(service_id)
        if isinstance(self.deleted, Exception):
            raise self.deleted
        return self.deleted or {"ResponseMetadata": {"HTTPStatusCode": 200}}


class PersistentRegistry(FakeRegistry):
    """FakeRegistry whose listing reflects services created through it."""

    def __init__(self) -> None:
        super().__init__()
        self.services: list[dict[str, Any]] = []

    def list_services(self, namespace_id: str, next_token: str | None = None) -> Mapping[str, Any]:
        self.list_calls.append((namespace_id, next_token))
        return {"Services": [s for s in self.services if s["NamespaceId"] == namespace_id]}

    def create_service(self, **fields: Any) -> Mapping[str, Any]:
        response = super().create_service(**fields)
        self.services.append(response["Service"])
        return response


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
def persistent_registry() -> PersistentRegistry:
    return PersistentRegistry()


@pytest.fixture
def make_registry():
    return FakeRegistry


@pytest.fixture
def my_service() -> dict[str, Any]:
    return dict(MY_SERVICE)


@pytest.fixture
def not_my_service() -> dict[str, Any]:
    return dict(NOT_MY_SERVICE)
