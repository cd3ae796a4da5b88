# =============================================================================
# agent/events.py  —  Turning ADK event parts into console lines
# =============================================================================
# While the assistant works, the runner yields events whose parts are either
# model text, a function_call (the model asking for `search_notices`) or a
# function_response (the MCP envelope coming back).  These helpers only read
# attributes, so they work on ADK's genai types and on plain test doubles.
# =============================================================================

from typing import Any, Optional

from core.config import DEFAULT_LIMIT, SEARCH_NOTICES


def _envelope_text(payload: Any) -> str:
    if not isinstance(payload, dict):
        return ""
    for block in payload.get("content") or []:
        if isinstance(block, dict) and block.get("type") == "text":
            return block.get("text", "")
    return ""


def describe_tool_call(part: Any) -> Optional[str]:
    """One line for a search request the model decided to make."""
    call = getattr(part, "function_call", None)
    if not call:
        return None
    args = call.args or {}
    if call.name == SEARCH_NOTICES:
        return f"🔎 검색: {args.get('query')!r} (최대 {args.get('limit', DEFAULT_LIMIT)}개)"
    return f"🔧 {call.name}({args})"


def describe_tool_response(part: Any) -> Optional[str]:
    """One line summarizing what the tool sent back.

    Error envelopes are shown in full ("오류: ..."); reports are reduced to
    their first line, which is the result count or the no-results notice.
    """
    response = getattr(part, "function_response", None)
    if not response:
        return None
    payload = response.response or {}
    text = _envelope_text(payload)
    if payload.get("isError"):
        return f"⚠️  {response.name}: {text or '오류'}"
    first_line = text.splitlines()[0] if text else "(빈 응답)"
    return f"📄 {response.name}: {first_line}"


def final_text(part: Any) -> Optional[str]:
    text = getattr(part, "text", None)
    return text or None
