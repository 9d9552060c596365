"""
Client factory.
"""
from typing import Optional

import httpx

from mail_polisher.config import Settings, get_settings
from mail_polisher.integrations.http_transport import ApiTransport
from mail_polisher.services.polishing_service import PolishingClient
from mail_polisher.utils.logger import setup_logging


def create_client(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> PolishingClient:
    """
    Build a polishing client with a fresh session.

    Args:
        settings: Settings to use (defaults to environment settings)
        http_client: Optional shared httpx client, owned by the caller

    Returns:
        PolishingClient bound to settings.api_base_url
    """
    setup_logging()
    settings = settings or get_settings()

    transport = ApiTransport(settings.api_base_url, client=http_client)
    return PolishingClient(transport, language=settings.language)
