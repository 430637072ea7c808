import io
import json

import pytest
import requests

from exa_search import SEARCH_URL, ApiError, InvalidConfiguration, InvalidQuery, SearchClient


@pytest.mark.parametrize("key", ["", "   ", None])
def test_missing_key_rejected(key):
    with pytest.raises(InvalidConfiguration):
        SearchClient(key)


def test_non_empty_key_accepted(session):
    client = SearchClient("k-123", session=session)
    assert client.logging_enabled is False


def test_request_shape(session):
    client = SearchClient("k-123", session=session)
    client.search_and_contents("AI news", {"category": "news_article", "numResults": 5})

    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == SEARCH_URL == "https://api.exa.ai/search"
    assert call["headers"] == {
        "accept": "application/json",
        "content-type": "application/json",
        "x-api-key": "k-123",
    }
    assert call["timeout"] is None
    body = json.loads(call["data"])
    assert body == {
        "query": "AI news",
        "category": "news_article",
        "numResults": 5,
        "type": "neural",
        "useAutoprompt": True,
        "contents": {},
    }


def test_timeout_is_forwarded(session):
    SearchClient("k", session=session, timeout_s=12.5).search_and_contents("x")
    assert session.calls[0]["timeout"] == 12.5


def test_success_returns_body_unmodified(session):
    session.text = '{"requestId":"r1","results":[]}'
    result = SearchClient("k", session=session).search_and_contents("x")
    assert result == {"requestId": "r1", "results": []}


def test_non_200_raises_api_error(session):
    session.status_code = 404
    session.text = "not found"
    with pytest.raises(ApiError) as excinfo:
        SearchClient("k", session=session).search_and_contents("x")
    assert excinfo.value.status_code == 404
    assert excinfo.value.body == "not found"
    assert "404" in str(excinfo.value)
    assert "not found" in str(excinfo.value)
    assert len(session.calls) == 1


def test_transport_errors_propagate(session):
    session.exc = requests.ConnectionError("dns failure")
    with pytest.raises(requests.ConnectionError):
        SearchClient("k", session=session).search_and_contents("x")


@pytest.mark.parametrize("query", ["", "  ", None])
def test_blank_query_rejected_before_network(session, query):
    with pytest.raises(InvalidQuery):
        SearchClient("k", session=session).search_and_contents(query)
    assert session.calls == []


def test_logging_off_prints_nothing(session, capsys):
    SearchClient("k", session=session).search_and_contents("x")
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_logging_snapshots(session):
    stream = io.StringIO()
    client = SearchClient("secret-key", session=session, log_enabled=True, log_stream=stream)
    client.search_and_contents("AI news", {"note": "secret-key"})

    out = stream.getvalue()
    lines = [ln for ln in out.splitlines() if ln.startswith("[DEBUG] exa:")]
    labels = [ln.split(":")[1].strip() for ln in lines]
    assert labels == ["query", "payload", "status", "response"]
    assert "secret-key" not in out
    assert "REDACTED" in out


def test_logging_error_then_raises(session):
    session.status_code = 500
    session.text = "boom"
    stream = io.StringIO()
    client = SearchClient("k", session=session, log_stream=stream)
    client.set_logging(True)
    with pytest.raises(ApiError):
        client.search_and_contents("x")
    assert "[DEBUG] exa: error: Exa API error 500: boom" in stream.getvalue()


def test_logging_tolerates_cyclic_options(session):
    cyclic = {"label": "loop"}
    cyclic["self"] = cyclic
    stream = io.StringIO()
    client = SearchClient("k", session=session, log_enabled=True, log_stream=stream)
    with pytest.raises(ValueError):
        # the wire body still refuses cycles; only the diagnostics tolerate them
        client.search_and_contents("x", {"extra": cyclic})
    assert "[Circular]" in stream.getvalue()


def test_transport_error_logged_then_raised(session):
    session.exc = requests.ConnectionError("connection refused for secret-key")
    stream = io.StringIO()
    client = SearchClient("secret-key", session=session, log_enabled=True, log_stream=stream)
    with pytest.raises(requests.ConnectionError):
        client.search_and_contents("x")
    out = stream.getvalue()
    assert "[DEBUG] exa: error: ConnectionError: connection refused for REDACTED" in out
    assert "status" not in out


def test_short_key_does_not_garble_logs(session):
    stream = io.StringIO()
    client = SearchClient("e", session=session, log_enabled=True, log_stream=stream)
    client.search_and_contents("neural search")
    assert "[DEBUG] exa: query: neural search" in stream.getvalue()
