"""Paginated search for a service by name within a namespace."""

from __future__ import annotations

import logging

from .errors import NotFoundError
from .models import ResourcePage, ServiceRecord
from .registry import RegistryClient

logger = logging.getLogger(__name__)


def find_service(registry: RegistryClient, namespace_id: str, name: str) -> ServiceRecord:
    """Walk the namespace listing page by page and return the first service named `name`.

    Raises NotFoundError when the last page is reached without a match and
    RegistryError when a page has no list of services. Client errors are not
    caught.
    """
    next_token: str | None = None
    pages = 0
    while True:
        page = ResourcePage.from_response(registry.list_services(namespace_id, next_token))
        pages += 1
        logger.debug("Searching page %d (%d services) for '%s'", pages, len(page.services), name)

        for record in page.services:
            if record.name == name:
                logger.debug("Matched '%s' on page %d", name, pages)
                return record

        if not page.next_token:
            raise NotFoundError(name)
        next_token = page.next_token
