"""
Polishing client - the owner of one backend conversation.

This module handles:
1. Holding the session id (generated once, never rotated)
2. Mapping drafts to PolishRequest bodies
3. Polish / refine through the single /polish endpoint
4. Session suggestions, command history and reset

The backend keeps all session state; the client only holds the id.
"""
from typing import List, Optional
from uuid import uuid4

from mail_polisher.integrations.endpoints import (
    build_polish, build_suggestions, build_command_history, build_clear_session,
)
from mail_polisher.integrations.http_transport import ApiTransport
from mail_polisher.models.draft import EmailDraft, PolishedResult
from mail_polisher.models.wire import (
    PolishRequest, PolishResponse, SuggestionsResponse,
    CommandHistoryItem, HistoryResponse, EmptyResponse,
)
from mail_polisher.utils.logger import get_logger
from mail_polisher.utils.errors import TransportError, PolishFailed, RefineFailed

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "en"


class PolishingClient:
    """
    Session-scoped polishing client.

    Usage:
        client = PolishingClient(ApiTransport(base_url))
        results = await client.polish(draft)
        refined = await client.refine(results[0].text, "Shorten by 20%", draft)
        await client.clear_session()
    """

    def __init__(
        self,
        transport: ApiTransport,
        session_id: Optional[str] = None,
        language: str = DEFAULT_LANGUAGE,
    ):
        """
        Initialize client with a fresh session.

        Args:
            transport: Transport bound to the backend base address
            session_id: Fixed session id (tests only); a UUID is generated otherwise
            language: Language code sent with every polish/refine request
        """
        self._transport = transport
        self._session_id = session_id or str(uuid4())
        self._language = language

    @property
    def session_id(self) -> str:
        return self._session_id

    def _build_request(
        self,
        draft: EmailDraft,
        text: Optional[str],
        instructions: Optional[str] = None,
        previous_polished: Optional[str] = None,
    ) -> PolishRequest:
        return PolishRequest(
            text=text,
            tone=draft.tone.wire_value,
            domain=draft.sector.wire_value,
            language=self._language,
            empathy=draft.empathy,
            instructions=instructions,
            previous_polished=previous_polished,
            incoming_mail=draft.incoming_mail,
        )

    async def polish(self, draft: EmailDraft) -> List[PolishedResult]:
        """
        Polish a draft (or write a reply to its incoming mail).

        The caller must only submit valid drafts (see EmailDraft.is_valid).

        Returns:
            Exactly one PolishedResult

        Raises:
            PolishFailed: Any transport or decode failure
        """
        request = self._build_request(draft, text=draft.text or None)

        try:
            response = await self._transport.send(
                build_polish(request, session_id=self._session_id),
                PolishResponse,
            )
        except TransportError as e:
            logger.debug(f"Polish failed for session {self._session_id}: {e.code}")
            raise PolishFailed() from e

        logger.info(f"Polished draft for session {self._session_id}")
        return [PolishedResult(text=response.polished_text)]

    async def refine(self, previous_text: str, instructions: str, draft: EmailDraft) -> str:
        """
        Refine the previous polished text with a free-text instruction.

        Args:
            previous_text: Text of the latest assistant turn (must be non-empty)
            instructions: What to change
            draft: Original draft context

        Returns:
            The new polished text

        Raises:
            RefineFailed: Any transport or decode failure
        """
        request = self._build_request(
            draft,
            text=draft.text or previous_text,
            instructions=instructions,
            previous_polished=previous_text,
        )

        try:
            response = await self._transport.send(
                build_polish(request, session_id=self._session_id),
                PolishResponse,
            )
        except TransportError as e:
            logger.debug(f"Refine failed for session {self._session_id}: {e.code}")
            raise RefineFailed() from e

        logger.info(f"Refined text for session {self._session_id}")
        return response.polished_text

    async def get_suggestions(self) -> List[str]:
        """Backend suggestions for the current session (may be empty)."""
        response = await self._transport.send(
            build_suggestions(self._session_id),
            SuggestionsResponse,
        )
        return response.suggestions

    async def get_command_history(self) -> List[CommandHistoryItem]:
        """Commands the backend applied in this session, oldest first."""
        response = await self._transport.send(
            build_command_history(self._session_id),
            HistoryResponse,
        )
        return response.commands

    async def clear_session(self) -> None:
        """
        Reset server-side state for this session.

        The session id is kept; later calls reuse it.
        """
        await self._transport.send(
            build_clear_session(self._session_id),
            EmptyResponse,
        )
        logger.info(f"Cleared session {self._session_id}")
