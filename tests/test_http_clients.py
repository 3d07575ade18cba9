"""Tests for HTTP-based adapters."""

import json

import httpx
import pytest

from nosh.adapters.fdc_client import HttpxFdcClient


def test_fdc_client_search() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"foods": []})

    transport = httpx.MockTransport(handler)
    client = HttpxFdcClient(
        api_key="key",
        base_url="https://api.test",
        http_client=httpx.Client(transport=transport),
    )

    result = client.search_foods("rice", page_number=2, page_size=5)

    assert result == {"foods": []}
    assert seen[0].url.path == "/foods/search"
    assert seen[0].url.params["api_key"] == "key"
    assert json.loads(seen[0].content.decode()) == {
        "query": "rice",
        "pageNumber": 2,
        "pageSize": 5,
    }
    client.close()


def test_fdc_client_raises_on_http_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(429))
    client = HttpxFdcClient(
        api_key="key",
        base_url="https://api.test",
        http_client=httpx.Client(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError):
        client.search_foods("rice")
