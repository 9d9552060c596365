"""
Draft-related Pydantic models.
"""
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Tone(str, Enum):
    """Writing tone of the polished email."""
    FORMAL = "Formal"
    FRIENDLY = "Friendly"
    DIRECT = "Direct"
    APOLOGETIC = "Apologetic"

    @property
    def wire_value(self) -> str:
        return self.value.lower()

    @property
    def help_text(self) -> str:
        """Short description for tooltips / captions."""
        return TONE_HELP[self]


TONE_HELP = {
    Tone.FORMAL: "Formal tone, uses 'Dear', concise and clear.",
    Tone.FRIENDLY: "Warm and approachable tone, starts with 'Hi' or 'Hello'.",
    Tone.DIRECT: "Gets to the point quickly; minimal hedging.",
    Tone.APOLOGETIC: "Expresses apology, high empathy, takes responsibility.",
}


class Sector(str, Enum):
    """Domain the email is written for."""
    BUSINESS = "Business"
    ACADEMIA = "Academia"
    GENERAL = "General"

    @property
    def wire_value(self) -> str:
        return self.value.lower()


class EmailDraft(BaseModel):
    """Snapshot of the user's draft at the moment of submission."""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    tone: Tone = Tone.FORMAL
    sector: Sector = Sector.BUSINESS
    empathy: int = Field(default=5, ge=0, le=10)

    # Original body of the email being replied to (reply mode)
    incoming_mail: Optional[str] = None

    @classmethod
    def empty(cls) -> "EmailDraft":
        return cls()

    @property
    def is_valid(self) -> bool:
        """A draft can be sent if it has its own text or an incoming mail."""
        has_text = bool(self.text.strip())
        has_incoming = bool((self.incoming_mail or "").strip())
        return has_text or has_incoming


class PolishedResult(BaseModel):
    """One polished candidate. Identity is the client-side id."""
    id: UUID = Field(default_factory=uuid4)
    text: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolishedResult):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
