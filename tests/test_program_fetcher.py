"""Tests for fetching program documents."""

import asyncio

import httpx
import pytest

from sarasara.core.errors import ProgramFetchError, ProgramNotFoundError
from sarasara.services.program_fetcher import fetch_program, program_url

BASE = "https://www.raiplaysound.it"


def run_fetch(handler, program="ilmondodizeta", base=BASE):
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_program(client, base, program)
    return asyncio.run(go())


def test_program_url_replaces_base_path():
    assert str(program_url("https://host/some/path", "zeta")) == "https://host/programmi/zeta.json"


def test_fetches_program(program_json):
    requested = []

    def handler(request):
        requested.append(request)
        return httpx.Response(200, content=program_json.encode("utf-8"))

    program = run_fetch(handler)

    assert program.podcast_info.title == "Il Mondo di Zeta"
    assert len(requested) == 1
    assert requested[0].method == "GET"
    assert str(requested[0].url) == "https://www.raiplaysound.it/programmi/ilmondodizeta.json"


@pytest.mark.parametrize("status", [301, 404, 500])
def test_non_200_is_not_found(status):
    def handler(request):
        return httpx.Response(status, content=b"this is not json")

    with pytest.raises(ProgramNotFoundError) as exc_info:
        run_fetch(handler)
    assert exc_info.value.status_code == status
    assert exc_info.value.program == "ilmondodizeta"


def test_missing_cards_is_fetch_error(program_data):
    del program_data["block"]["cards"]

    def handler(request):
        return httpx.Response(200, json=program_data)

    with pytest.raises(ProgramFetchError):
        run_fetch(handler)


def test_invalid_json_is_fetch_error():
    def handler(request):
        return httpx.Response(200, content=b"<html></html>")

    with pytest.raises(ProgramFetchError):
        run_fetch(handler)


def test_network_error_is_fetch_error():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ProgramFetchError):
        run_fetch(handler)
    assert len(calls) == 1
