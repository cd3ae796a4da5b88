# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server for startup notice search
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes ONE MCP tool, `search_notices`, and is the boundary where every
#   outcome becomes a result envelope:
#
#       {"content": [{"type": "text", "text": "..."}], "isError": bool}
#
# HOW A CALL FLOWS:
#   1. The agent calls `search_notices` over stdio
#   2. call_tool() validates the arguments (core/validation.py)
#   3. core/notices.py makes the single POST to the search service
#   4. core/formatting.py renders the report
#   5. Success → isError False.  ANY exception → isError True with
#      "오류: <message>".  A bad request never takes the process down.
#
# RUNNING THIS SERVER:
#     python -m tools.mcp_server       (or the `notice-search-mcp` script)
#   The demo agent (agent/notice_agent.py) spawns it the same way.
# =============================================================================

import json
import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, Optional

import httpx
from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import NotFoundError, ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools.tool import Tool, ToolResult

from core import notices
from core.config import SEARCH_NOTICES, get_log_level
from core.errors import UnknownToolError
from core.formatting import format_results
from core.validation import SearchRequest, validate_arguments

load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP JSON stream, so every log line goes to STDERR.
# Colours: CYAN for incoming calls, GREEN for envelopes, YELLOW for progress.
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=getattr(logging, get_log_level(), logging.INFO),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, envelope: dict) -> dict:
    """Log the envelope as compact JSON in GREEN, then return it."""
    logging.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(envelope, ensure_ascii=False, separators=(',', ':'))}{_RESET}"
    )
    return envelope


# =============================================================================
# Envelope + dispatcher
# =============================================================================
SEARCH_NOTICES_DESCRIPTION = (
    "사용자의 요청과 관련된 스타트업 공고를 검색합니다. "
    "키워드나 조건을 포함한 자연스러운 쿼리를 입력하면 "
    "유사한 공고들을 찾아 반환합니다. "
    "예: '서울에서 열리는 공고', '기술 스타트업 지원', '멘토링 프로그램'"
)


def _text_envelope(text: str, is_error: bool) -> dict:
    return {"content": [{"type": "text", "text": text}], "isError": is_error}


async def _run_search_notices(arguments: Any, client: Optional[httpx.AsyncClient]) -> str:
    request = validate_arguments(arguments)
    _log_status(f"Validated: query={request.query!r}, limit={request.limit}")

    results = await notices.search_notices(request.query, request.limit, client=client)
    _log_status(f"Got {len(results)} notices")

    return format_results(results, request.query)


async def call_tool(
    name: str,
    arguments: Any = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> dict:
    """Run one tool invocation and wrap the outcome in a result envelope.

    Args:
        name: Requested tool name.  Only "search_notices" exists.
        arguments: Raw arguments from the caller.
        client: Optional httpx.AsyncClient handed to the search client.

    Returns:
        {"content": [{"type": "text", "text": ...}], "isError": bool}.
        Never raises for request or remote failures.
    """
    _log_request(name, arguments=arguments)
    try:
        if name != SEARCH_NOTICES:
            raise UnknownToolError(name)
        report = await _run_search_notices(arguments, client)
    except Exception as exc:
        message = str(exc) or f"공고 검색 중 오류 발생: {exc!r}"
        _log_status(f"{type(exc).__name__}: {message}")
        return _log_response(name, _text_envelope(f"오류: {message}", True))
    return _log_response(name, _text_envelope(report, False))


def _to_tool_result(envelope: dict) -> ToolResult:
    """Hand an envelope to FastMCP.

    FastMCP reports a raised ToolError as {"isError": true} with the
    exception text as the only content block, so error envelopes keep their
    "오류: ..." text byte for byte.
    """
    text = envelope["content"][0]["text"]
    if envelope["isError"]:
        raise ToolError(text)
    return ToolResult(content=text)


# =============================================================================
# FastMCP server
# =============================================================================
# FastMCP publishes SearchRequest's schema for `search_notices` but never
# checks arguments against it: every call, valid or not, reaches call_tool
# untouched, and unknown names are routed there by UnknownToolMiddleware.
# =============================================================================
class SearchNoticesTool(Tool):
    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        return _to_tool_result(await call_tool(SEARCH_NOTICES, arguments))


class UnknownToolMiddleware(Middleware):
    """Route calls to unregistered names through call_tool's envelope."""

    async def on_call_tool(self, context: MiddlewareContext, call_next) -> ToolResult:
        try:
            return await call_next(context)
        except NotFoundError:
            envelope = await call_tool(context.message.name, context.message.arguments)
        return _to_tool_result(envelope)


@asynccontextmanager
async def _announce_ready(server: FastMCP):
    # Diagnostic only; stdout belongs to the transport.
    logging.info("공고 검색 MCP 서버가 시작되었습니다 (stdio)")
    yield


mcp = FastMCP("notice-search-server", lifespan=_announce_ready, strict_input_validation=False)
mcp.add_middleware(UnknownToolMiddleware())
mcp.add_tool(
    SearchNoticesTool(
        name=SEARCH_NOTICES,
        description=SEARCH_NOTICES_DESCRIPTION,
        parameters=SearchRequest.model_json_schema(),
    )
)


def main() -> None:
    """Serve over stdio.  A startup failure is the only fatal error."""
    try:
        mcp.run()
    except Exception as exc:
        logging.critical(f"서버 실행 중 치명적 오류: {exc}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
