# =============================================================================
# core/formatting.py  —  Result Formatter
# =============================================================================
# Turns a list of NoticeResult into the Korean text report the agent reads.
# Pure function: same inputs, same string.
# =============================================================================

from core.models import NoticeResult

_RULE_WIDTH = 60


def _format_notice(position: int, notice: NoticeResult) -> str:
    score_percent = f"{notice.score * 100:.1f}"
    return (
        f"\n[{position}] {notice.title}\n"
        f"URL: {notice.url}\n"
        f"기관: {notice.metadata.organization}\n"
        f"지역: {notice.metadata.region}\n"
        f"대상: {notice.metadata.startup_history}\n"
        f"유사도: {score_percent}%"
    )


def format_results(results: list[NoticeResult], query: str) -> str:
    """Render search results as a report.

    An empty list yields a single "no results" line echoing the query.
    Otherwise: a count header, a `=` rule, then one numbered block per notice
    in the order given, separated by `-` rules.
    """
    if not results:
        return f'"{query}"에 대한 검색 결과가 없습니다.'

    header = f"총 {len(results)}개의 공고를 찾았습니다.\n{'=' * _RULE_WIDTH}\n"
    divider = "\n\n" + "-" * _RULE_WIDTH + "\n"
    blocks = [_format_notice(i, notice) for i, notice in enumerate(results, start=1)]
    return header + divider.join(blocks)
