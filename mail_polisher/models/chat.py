"""
Conversation-related Pydantic models.
"""
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class MessageRole(str, Enum):
    """Author of a conversation turn."""
    ASSISTANT = "assistant"
    USER = "user"


class ChatMessage(BaseModel):
    """A single turn in a refinement conversation."""
    id: UUID = Field(default_factory=uuid4)
    role: MessageRole
    text: str
