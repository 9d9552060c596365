"""
Pytest fixtures for mail_polisher tests.
"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from unittest.mock import AsyncMock, MagicMock

from mail_polisher.integrations.http_transport import ApiTransport
from mail_polisher.models.draft import EmailDraft, Tone, Sector, PolishedResult
from mail_polisher.services.polishing_service import PolishingClient

from fake_backend import create_fake_backend

BASE_URL = "http://testserver"


@pytest.fixture
def report_draft():
    """The draft used in the end-to-end scenarios."""
    return EmailDraft(
        text="Hi, need the report",
        tone=Tone.FORMAL,
        sector=Sector.BUSINESS,
        empathy=5,
    )


@pytest.fixture
def reply_draft():
    """A reply-mode draft with no own text."""
    return EmailDraft(
        text="",
        tone=Tone.FRIENDLY,
        sector=Sector.ACADEMIA,
        empathy=8,
        incoming_mail="Could you review my thesis chapter by Friday?",
    )


@pytest.fixture
def fake_backend():
    """Fresh fake backend app."""
    return create_fake_backend()


@pytest_asyncio.fixture
async def http_client(fake_backend):
    """httpx client routed to the fake backend in-process."""
    transport = ASGITransport(app=fake_backend)
    async with AsyncClient(transport=transport) as client:
        yield client


@pytest.fixture
def polishing_client(http_client):
    """Polishing client talking to the fake backend."""
    return PolishingClient(ApiTransport(BASE_URL, client=http_client))


@pytest.fixture
def mock_polishing_client():
    """Polishing client with refine/polish mocked out."""
    client = MagicMock(spec=PolishingClient)
    client.session_id = "test-session-123"
    client.polish = AsyncMock(return_value=[PolishedResult(text="Dear Team, Please find the report attached.")])
    client.refine = AsyncMock(return_value="Dear Team, short version.")
    return client
