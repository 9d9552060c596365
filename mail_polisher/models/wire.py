"""
Request/response shapes of the polishing backend.

Field names match the backend's JSON exactly.
"""
from pydantic import BaseModel
from typing import Optional, List


# =============================================================================
# REQUESTS
# =============================================================================

class PolishRequest(BaseModel):
    """Body of POST /polish. Unset fields are omitted from the JSON."""
    text: Optional[str] = None
    tone: Optional[str] = None
    domain: Optional[str] = None
    language: Optional[str] = None
    empathy: Optional[int] = None
    instructions: Optional[str] = None
    previous_polished: Optional[str] = None
    incoming_mail: Optional[str] = None
    session_id: Optional[str] = None  # never set; session goes in the query


# =============================================================================
# RESPONSES
# =============================================================================

class PolishResponse(BaseModel):
    """Response of POST /polish."""
    polished_text: str
    suggestions: List[str] = []
    session_id: Optional[str] = None
    error: Optional[str] = None


class SuggestionsResponse(BaseModel):
    """Response of GET /suggestions/{session_id}."""
    suggestions: List[str] = []
    current_length: Optional[int] = None
    session_id: str


class CommandHistoryItem(BaseModel):
    """One command the backend applied within a session."""
    command: str
    actions: List[str]
    timestamp: float  # epoch seconds
    explanation: Optional[str] = None


class HistoryResponse(BaseModel):
    """Response of GET /history/{session_id}."""
    session_id: Optional[str] = None
    commands: List[CommandHistoryItem] = []
    total_commands: int = 0


class EmptyResponse(BaseModel):
    """Response of DELETE /session/{session_id}."""
