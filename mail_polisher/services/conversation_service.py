"""
Refinement conversation - the chat-style thread after the first polish.

This module ties together:
1. The polishing client (refine calls)
2. The draft snapshot the conversation started from
3. Quick actions and smart tips for the latest turn

It handles the lifecycle of one refine turn:
Instruction → Check an assistant turn exists → Refine → Record reply
"""
from typing import List, Optional

from mail_polisher.models.chat import ChatMessage, MessageRole
from mail_polisher.models.draft import EmailDraft, PolishedResult
from mail_polisher.services.polishing_service import PolishingClient
from mail_polisher.services.quick_actions import QuickAction, available_actions, smart_tips
from mail_polisher.utils.logger import get_logger
from mail_polisher.utils.errors import SessionRequiredError

logger = get_logger(__name__)


class RefinementConversation:
    """
    Conversation seeded with the first polished result.

    Turns must be awaited one at a time; each refine works on the latest
    assistant turn.

    Usage:
        conversation = RefinementConversation(client, draft, results)
        await conversation.apply_refine("Make it shorter")
        await conversation.apply_quick_action(QuickAction.WARMER)
    """

    def __init__(
        self,
        client: PolishingClient,
        draft: EmailDraft,
        results: Optional[List[PolishedResult]] = None,
    ):
        self.client = client
        self.draft = draft
        self.messages: List[ChatMessage] = []

        if results:
            self.messages.append(ChatMessage(role=MessageRole.ASSISTANT, text=results[0].text))

    @property
    def last_assistant_text(self) -> Optional[str]:
        for message in reversed(self.messages):
            if message.role == MessageRole.ASSISTANT:
                return message.text
        return None

    @property
    def last_text(self) -> Optional[str]:
        return self.messages[-1].text if self.messages else None

    async def apply_refine(self, instruction: str, show_user_turn: bool = True) -> Optional[str]:
        """
        Refine the latest assistant turn.

        Args:
            instruction: Free-text instruction; blank instructions are ignored
            show_user_turn: Record the instruction as a user turn

        Returns:
            The refined text, or None if the instruction was blank

        Raises:
            SessionRequiredError: No assistant turn to refine yet
            RefineFailed: Backend call failed (the user turn stays recorded)
        """
        instruction = instruction.strip()
        if not instruction:
            return None

        previous = self.last_assistant_text
        if previous is None:
            raise SessionRequiredError()

        if show_user_turn:
            self.messages.append(ChatMessage(role=MessageRole.USER, text=instruction))

        new_text = await self.client.refine(previous, instruction, self.draft)

        self.messages.append(ChatMessage(role=MessageRole.ASSISTANT, text=new_text))
        logger.info(f"Conversation now has {len(self.messages)} turns")
        return new_text

    async def apply_quick_action(self, action: QuickAction) -> Optional[str]:
        """Refine with the fixed instruction of a quick action."""
        return await self.apply_refine(action.instruction, show_user_turn=True)

    def available_quick_actions(self) -> List[QuickAction]:
        """Quick actions offered for the latest turn."""
        return available_actions(self.last_text)

    def smart_tips(self) -> List[str]:
        """Local tips about the latest turn."""
        return smart_tips(self.last_text)
