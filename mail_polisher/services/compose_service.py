"""
Compose service - validates a draft and starts a refinement conversation.
"""
from mail_polisher.models.draft import EmailDraft
from mail_polisher.services.conversation_service import RefinementConversation
from mail_polisher.services.polishing_service import PolishingClient
from mail_polisher.utils.logger import get_logger
from mail_polisher.utils.errors import InvalidDraftError

logger = get_logger(__name__)


class ComposeService:
    """
    Entry point for submitting a draft.

    Usage:
        service = ComposeService(client)
        conversation = await service.submit(draft)
    """

    def __init__(self, client: PolishingClient):
        self.client = client

    async def submit(self, draft: EmailDraft) -> RefinementConversation:
        """
        Polish a draft and open a conversation on the result.

        Raises:
            InvalidDraftError: Draft has neither text nor incoming mail
            PolishFailed: Backend call failed
        """
        if not draft.is_valid:
            logger.info("Rejected empty draft")
            raise InvalidDraftError()

        results = await self.client.polish(draft)
        return RefinementConversation(self.client, draft, results)
