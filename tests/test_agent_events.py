# ==============================
# Agent console: event part rendering
# ==============================
from __future__ import annotations

from types import SimpleNamespace

from agent.events import describe_tool_call, describe_tool_response, final_text


def _call(name: str, args):
    return SimpleNamespace(function_call=SimpleNamespace(name=name, args=args), function_response=None, text=None)


def _response(payload):
    return SimpleNamespace(
        function_call=None,
        function_response=SimpleNamespace(name="search_notices", response=payload),
        text=None,
    )


def test_search_call_shows_query_and_limit() -> None:
    assert describe_tool_call(_call("search_notices", {"query": "서울 멘토링", "limit": 3})) == (
        "🔎 검색: '서울 멘토링' (최대 3개)"
    )


def test_search_call_without_limit_shows_default() -> None:
    assert describe_tool_call(_call("search_notices", {"query": "q"})).endswith("(최대 5개)")


def test_report_is_summarized_by_its_first_line() -> None:
    payload = {
        "content": [{"type": "text", "text": "총 2개의 공고를 찾았습니다.\n" + "=" * 60 + "\n\n[1] A"}],
        "isError": False,
    }
    assert describe_tool_response(_response(payload)) == "📄 search_notices: 총 2개의 공고를 찾았습니다."


def test_error_envelope_is_shown_in_full() -> None:
    payload = {"content": [{"type": "text", "text": "오류: 요청 타임아웃: 검색 서버에서 응답이 없습니다"}], "isError": True}
    assert describe_tool_response(_response(payload)) == (
        "⚠️  search_notices: 오류: 요청 타임아웃: 검색 서버에서 응답이 없습니다"
    )


def test_plain_text_part_is_not_tool_activity() -> None:
    part = SimpleNamespace(function_call=None, function_response=None, text="추천 공고는...")
    assert describe_tool_call(part) is None
    assert describe_tool_response(part) is None
    assert final_text(part) == "추천 공고는..."
