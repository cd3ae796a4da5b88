# ==============================
# Testing Fixtures
# ==============================
from __future__ import annotations

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

SEARCH_URL = "https://search.test/search"


def make_notice(index: int, score: float = 0.9) -> Dict[str, Any]:
    return {
        "title": f"Notice {index}",
        "url": f"https://notices.test/{index}",
        "score": score,
        "metadata": {
            "organization": f"Org {index}",
            "region": "Seoul",
            "startupHistory": "3년 이내",
        },
    }


@pytest.fixture(autouse=True)
def search_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the client at a fake endpoint so no test can reach the network."""
    monkeypatch.setenv("NOTICE_SEARCH_URL", SEARCH_URL)
    monkeypatch.delenv("NOTICE_SEARCH_TIMEOUT", raising=False)


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    return []


@pytest.fixture
def mock_client(requests_seen: List[httpx.Request]) -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient whose transport answers with a canned response."""

    def _factory(*, status: int = 200, body: Any = None, content: bytes | None = None) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            if content is not None:
                return httpx.Response(status, content=content)
            return httpx.Response(status, json=body)

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _factory


def request_body(request: httpx.Request) -> Dict[str, Any]:
    return json.loads(request.content)
