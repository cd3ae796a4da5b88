# =============================================================================
# core/config.py  —  Environment-driven settings
# =============================================================================
#
# Every knob is an environment variable read at call time, so a .env file
# loaded by the entry point (python-dotenv) or a monkeypatched env in tests
# takes effect without re-importing anything.
#
#   NOTICE_SEARCH_URL        remote search endpoint
#   NOTICE_SEARCH_TIMEOUT    seconds before an outbound call is abandoned
#   NOTICE_SEARCH_LOG_LEVEL  logging level of the MCP server (stderr)
#   NOTICE_AGENT_MODEL       LiteLlm model string used by the demo agent
# =============================================================================

import os

SEARCH_NOTICES = "search_notices"              # the one MCP tool name

DEFAULT_SEARCH_URL = "https://ai.start-hub.kr/search"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LIMIT = 5
MAX_LIMIT = 50
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_AGENT_MODEL = "openrouter/openai/gpt-4o"


def get_search_url() -> str:
    return os.getenv("NOTICE_SEARCH_URL", "").strip() or DEFAULT_SEARCH_URL


def get_search_timeout() -> float:
    """Timeout in seconds for one search call.

    Unparsable or non-positive values fall back to the 10 second default
    rather than disabling the timeout.
    """
    raw = os.getenv("NOTICE_SEARCH_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS
    return value if value > 0 else DEFAULT_TIMEOUT_SECONDS


def get_log_level() -> str:
    return os.getenv("NOTICE_SEARCH_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL


def get_agent_model() -> str:
    return os.getenv("NOTICE_AGENT_MODEL", "").strip() or DEFAULT_AGENT_MODEL
