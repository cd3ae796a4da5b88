# =============================================================================
# core/errors.py  —  Error taxonomy
# =============================================================================
#
# Every failure the search pipeline knows about has its own class so callers
# (and tests) can tell a timeout from a bad status from a bad payload.  The
# messages are the user-facing Korean text; the MCP façade only prefixes them
# with "오류: " before handing them back to the agent.
#
# Anything that is NOT a NoticeSearchError (e.g. httpx.ConnectError) is an
# unexpected error and is reported with its own message.
# =============================================================================


class NoticeSearchError(Exception):
    """Base class for all expected search failures."""


class ArgumentValidationError(NoticeSearchError):
    """Caller arguments did not match the tool's input schema.

    `violations` maps a dotted field path ("query", "limit") to the reason it
    was rejected.  All violations are reported at once.
    """

    def __init__(self, violations: dict[str, str]):
        self.violations = dict(violations)
        details = ", ".join(f"{path}: {reason}" for path, reason in self.violations.items())
        super().__init__(f"잘못된 인자: {details}")


class SearchTimeoutError(NoticeSearchError):
    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__("요청 타임아웃: 검색 서버에서 응답이 없습니다")


class RemoteStatusError(NoticeSearchError):
    """The search service answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"API 응답 오류: {status_code} {reason}")


class MalformedResponseError(NoticeSearchError):
    def __init__(self):
        super().__init__("잘못된 응답 형식입니다")


class UnknownToolError(NoticeSearchError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"알 수 없는 도구: {name}")
