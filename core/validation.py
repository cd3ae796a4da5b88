# =============================================================================
# core/validation.py  —  Argument Validator for search_notices
# =============================================================================
#
# The tool's input contract lives here, once, as pydantic annotated types:
#
#   NoticeQuery  → required string, at least one character (no trimming)
#   NoticeLimit  → integer in [1, 50]
#
# SearchRequest uses them to check raw arguments, and tools/mcp_server.py
# publishes SearchRequest's JSON schema as the tool's input schema, so the
# schema the agent discovers is the schema we enforce.
#
# The model is strict: "5" and True are not integers.  A JSON number with no
# fractional part (5.0) is the integer 5 and is accepted as such.
# =============================================================================

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.config import DEFAULT_LIMIT, MAX_LIMIT
from core.errors import ArgumentValidationError

EMPTY_QUERY_MESSAGE = "검색어는 비워둘 수 없습니다"

NoticeQuery = Annotated[
    str,
    Field(
        min_length=1,
        description="검색할 공고 쿼리 (예: '서울에서 열리는 공고 5개')",
    ),
]

NoticeLimit = Annotated[
    int,
    Field(
        ge=1,
        le=MAX_LIMIT,
        description=f"반환할 최대 공고 수 (1-{MAX_LIMIT})",
    ),
]


class SearchRequest(BaseModel):
    """Validated arguments of one search_notices call."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    query: NoticeQuery
    limit: NoticeLimit = DEFAULT_LIMIT

    @field_validator("limit", mode="before")
    @classmethod
    def _integral_float_to_int(cls, value: Any) -> Any:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "arguments"


def validate_arguments(arguments: Any) -> SearchRequest:
    """Parse raw tool arguments into a SearchRequest.

    Args:
        arguments: Whatever the caller sent.  None counts as "no arguments".

    Returns:
        The normalized request (limit defaulted to 5 when absent).

    Raises:
        ArgumentValidationError: listing every offending field with a reason.
    """
    if arguments is None:
        arguments = {}

    try:
        return SearchRequest.model_validate(arguments)
    except ValidationError as exc:
        violations: dict[str, str] = {}
        for error in exc.errors():
            path = _field_path(error["loc"])
            if path == "query" and error["type"] == "string_too_short":
                reason = EMPTY_QUERY_MESSAGE
            else:
                reason = error["msg"]
            violations.setdefault(path, reason)
        raise ArgumentValidationError(violations) from exc
