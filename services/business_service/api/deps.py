from typing import Iterator

import httpx

from business_service.core_settings import get_settings


def get_http_client() -> Iterator[httpx.Client]:
    """One data service client per request, closed when the request ends."""
    settings = get_settings()
    with httpx.Client(base_url=settings.DATA_SERVICE_URL, timeout=settings.DATA_SERVICE_TIMEOUT) as client:
        yield client
