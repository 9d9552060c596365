"""
One-tap refinements and local tips for the latest polished text.
"""
from enum import Enum
from typing import List, Optional


class QuickAction(str, Enum):
    """Predefined refine instructions."""
    SHORTER = "Shorter"
    FORMAL = "Formal"
    WARMER = "Warmer"
    URGENT = "Urgent"
    ALT_TIME = "Alt Time"
    ADD_DETAILS = "Add Details"

    @property
    def instruction(self) -> str:
        return QUICK_ACTION_INSTRUCTIONS[self]


QUICK_ACTION_INSTRUCTIONS = {
    QuickAction.SHORTER: "Shorten the text by 20%. Keep the content the same, remove filler.",
    QuickAction.FORMAL: "Write more formally in a business tone. Use standard salutation and closing.",
    QuickAction.WARMER: "Make the tone warmer and kinder; add a brief thank-you if appropriate.",
    QuickAction.URGENT: "Increase urgency; state a clear action and deadline.",
    QuickAction.ALT_TIME: "Suggest alternative meeting times.",
    QuickAction.ADD_DETAILS: "Add concise details without changing the main message.",
}

ALWAYS_AVAILABLE = [QuickAction.SHORTER, QuickAction.FORMAL, QuickAction.WARMER, QuickAction.URGENT]

SCHEDULING_KEYWORDS = ("meeting", "schedule", "appointment", "call")

# Texts shorter than this can take more detail
ADD_DETAILS_MAX_LENGTH = 280

TOO_LONG_LENGTH = 200

DEFAULT_TIPS = ["Improve tone", "Check clarity"]


def available_actions(text: Optional[str]) -> List[QuickAction]:
    """Quick actions that make sense for the given text."""
    actions = list(ALWAYS_AVAILABLE)
    if text is None:
        return actions + [QuickAction.ADD_DETAILS]

    low = text.lower()
    if any(word in low for word in SCHEDULING_KEYWORDS):
        actions.append(QuickAction.ALT_TIME)
    if len(text) < ADD_DETAILS_MAX_LENGTH:
        actions.append(QuickAction.ADD_DETAILS)
    return actions


def smart_tips(text: Optional[str]) -> List[str]:
    """
    Cheap local hints about the text, shown next to the quick actions.

    Falls back to generic tips when nothing specific applies.
    """
    tips = []
    if text is not None:
        low = text.lower()
        if len(text) > TOO_LONG_LENGTH:
            tips.append("Too long")
        if "please" not in low and "thank" not in low:
            tips.append("Add politeness")
        if "asap" in low or "urgent" in low:
            tips.append("Set deadline")
        if "best" not in low and "regards" not in low:
            tips.append("Add closing")
    return tips or list(DEFAULT_TIPS)
