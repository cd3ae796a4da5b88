# ==============================
# Result Formatter
# ==============================
from __future__ import annotations

from core.formatting import format_results
from core.models import NoticeMetadata, NoticeResult


def _notice(title: str, score: float) -> NoticeResult:
    return NoticeResult(
        title=title,
        url="http://x",
        score=score,
        metadata=NoticeMetadata(organization="Org", region="Seoul", startup_history="2yr"),
    )


def test_empty_results_echo_the_query() -> None:
    assert format_results([], "quantum widgets") == '"quantum widgets"에 대한 검색 결과가 없습니다.'


def test_single_result_layout() -> None:
    report = format_results([_notice("Grant A", 0.873)], "grants")
    assert report == (
        "총 1개의 공고를 찾았습니다.\n"
        + "=" * 60
        + "\n\n[1] Grant A\n"
        "URL: http://x\n"
        "기관: Org\n"
        "지역: Seoul\n"
        "대상: 2yr\n"
        "유사도: 87.3%"
    )


def test_blocks_keep_input_order_and_are_divided() -> None:
    notices = [_notice("B", 0.5), _notice("A", 0.9), _notice("A", 0.9)]
    report = format_results(notices, "q")

    assert report.startswith("총 3개의 공고를 찾았습니다.\n")
    assert report.count("\n\n" + "-" * 60 + "\n") == 2
    assert report.index("[1] B") < report.index("[2] A") < report.index("[3] A")


def test_score_is_not_clamped() -> None:
    assert "유사도: 120.0%" in format_results([_notice("Over", 1.2)], "q")
    assert "유사도: 0.0%" in format_results([_notice("Zero", 0)], "q")
