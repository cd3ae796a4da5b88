# =============================================================================
# core/notices.py  —  Remote Search Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends one POST to the startup-notice search service and returns its
#   ranked results, truncated to the caller's limit.
#
# THE CONTRACT WITH THE REMOTE SIDE:
#   request   POST <NOTICE_SEARCH_URL>   {"query": "..."}
#   response  {"results": [ {title, url, score, metadata}, ... ]}
#
#   Only the query goes upstream.  The service decides how many hits to send
#   back and the limit is applied here, after the response arrives.
#
# TIMEOUT:
#   The whole call (connect + send + read body) races a timer.  When the timer
#   wins, asyncio.wait_for cancels the in-flight request and we raise
#   SearchTimeoutError.  Cancellation only touches this call's task.
#
# NO RETRIES:
#   A failed call is reported once.  The agent decides whether to ask again.
# =============================================================================

import asyncio
import logging
from typing import Any, Optional

import httpx

from core.config import DEFAULT_LIMIT, get_search_timeout, get_search_url
from core.errors import MalformedResponseError, RemoteStatusError, SearchTimeoutError
from core.models import NoticeResult

logger = logging.getLogger(__name__)


async def _post_query(client: httpx.AsyncClient, url: str, query: str) -> httpx.Response:
    return await client.post(
        url,
        json={"query": query},
        headers={"Content-Type": "application/json"},
    )


def _parse_results(payload: Any, limit: int) -> list[NoticeResult]:
    """Validate the response body and keep the first `limit` entries."""
    if not isinstance(payload, dict):
        raise MalformedResponseError()
    results = payload.get("results")
    if not isinstance(results, list):
        raise MalformedResponseError()

    kept = results[:limit]
    try:
        return [NoticeResult.from_dict(entry) for entry in kept]
    except (KeyError, TypeError) as exc:
        raise MalformedResponseError() from exc


async def search_notices(
    query: str,
    limit: int = DEFAULT_LIMIT,
    *,
    client: Optional[httpx.AsyncClient] = None,
    url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> list[NoticeResult]:
    """Search the remote notice index.

    Args:
        query: Natural-language query, sent as-is.
        limit: Maximum number of results to return.  Extra results from the
            service are dropped, order is preserved.
        client: Optional httpx.AsyncClient to send the request with.  When
            omitted a short-lived client is opened for this one call.
        url: Endpoint override (defaults to NOTICE_SEARCH_URL).
        timeout: Seconds before the call is abandoned (defaults to
            NOTICE_SEARCH_TIMEOUT, 10s).

    Returns:
        At most `limit` NoticeResult objects, highest-ranked first.

    Raises:
        SearchTimeoutError: the service did not answer in time.
        RemoteStatusError: the service answered with a non-2xx status.
        MalformedResponseError: the body has no `results` array.
        httpx.HTTPError: any other transport failure, unchanged.
    """
    url = url or get_search_url()
    timeout = timeout if timeout is not None else get_search_timeout()

    logger.debug("POST %s query=%r (limit %d applied locally)", url, query, limit)

    try:
        if client is not None:
            response = await asyncio.wait_for(_post_query(client, url, query), timeout)
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await asyncio.wait_for(_post_query(own_client, url, query), timeout)
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        logger.warning("Search request timed out after %.1fs", timeout)
        raise SearchTimeoutError(timeout) from exc

    if not response.is_success:
        logger.warning("Search service returned %d %s", response.status_code, response.reason_phrase)
        raise RemoteStatusError(response.status_code, response.reason_phrase)

    try:
        payload = response.json()
    except ValueError as exc:
        raise MalformedResponseError() from exc

    notices = _parse_results(payload, limit)
    logger.info("Search service returned %d results, keeping %d", len(payload["results"]), len(notices))
    return notices
