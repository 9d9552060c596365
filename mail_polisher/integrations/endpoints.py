"""
Request descriptors for the polishing backend.

Pure functions, no network access:
1. POST   /polish                 (polish and refine)
2. GET    /suggestions/{session}
3. GET    /history/{session}
4. DELETE /session/{session}
"""
from typing import Dict, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from mail_polisher.models.wire import PolishRequest
from mail_polisher.utils.errors import AddressError


class RequestDescriptor(BaseModel):
    """Everything the transport needs to issue one request."""
    model_config = ConfigDict(frozen=True)

    path: str
    method: str = "POST"
    body: Optional[bytes] = None
    query: Optional[Dict[str, str]] = None


def _session_segment(session_id: str) -> str:
    """Percent-encode a session id for use as a single path segment."""
    if not session_id:
        raise AddressError("Session id must not be empty.")
    return quote(session_id, safe="")


def build_polish(dto: PolishRequest, session_id: Optional[str] = None) -> RequestDescriptor:
    """POST /polish with the JSON body and an optional ?session= query."""
    body = dto.model_dump_json(exclude_none=True).encode("utf-8")
    query = {"session": session_id} if session_id else None
    return RequestDescriptor(path="/polish", method="POST", body=body, query=query)


def build_suggestions(session_id: str) -> RequestDescriptor:
    return RequestDescriptor(path=f"/suggestions/{_session_segment(session_id)}", method="GET")


def build_command_history(session_id: str) -> RequestDescriptor:
    return RequestDescriptor(path=f"/history/{_session_segment(session_id)}", method="GET")


def build_clear_session(session_id: str) -> RequestDescriptor:
    return RequestDescriptor(path=f"/session/{_session_segment(session_id)}", method="DELETE")
