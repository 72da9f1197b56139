"""Tests for per-call trace buffers and the tracing wrapper."""

from __future__ import annotations

import io

import httpx
import pytest

from daumapi.services import search as search_module
from daumapi.services import transport
from daumapi.services.exceptions import DecodeError
from daumapi.services.tracing import TraceBuffer, run_with_trace

BASE_URL = "https://api.example/v2/search"


@pytest.fixture
def provider(monkeypatch):
    """Route the module-level search functions to an in-memory provider."""

    monkeypatch.setenv("DAUM_BASE_URL", BASE_URL)
    bodies = {"body": b'{"meta": {"total_count": 7}, "documents": []}'}
    real_client = httpx.Client

    def factory(**kwargs):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=bodies["body"])

        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(transport.httpx, "Client", factory)
    return bodies


def test_trace_buffer_flush_writes_and_clears():
    trace = TraceBuffer()
    trace.record("first")
    trace.record("second")
    stream = io.StringIO()

    trace.flush(stream)

    assert stream.getvalue() == "INFO: first\nINFO: second\n"
    assert len(trace) == 0


def test_trace_buffers_are_independent():
    first, second = TraceBuffer(), TraceBuffer()
    first.record("only here")
    assert second.lines == []


def test_run_with_trace_passes_result_through(provider):
    direct = search_module.web("KakaoAK abc123", "cats")
    traced = run_with_trace(search_module.web, "KakaoAK abc123", "cats", stream=io.StringIO())
    assert traced == direct


def test_run_with_trace_writes_call_lines(provider):
    stream = io.StringIO()
    run_with_trace(search_module.vclip, "KakaoAK abc123", "cats", stream=stream)

    lines = stream.getvalue().splitlines()
    assert lines[0] == "INFO: Tracing vclip call."
    assert "INFO: Running vclip function." in lines
    assert f"INFO: Composed URL: {BASE_URL}/vclip?query=cats" in lines
    assert "INFO: Header: {'Authorization': 'KakaoAK abc123'}" in lines
    assert lines[-1].startswith("INFO: resp.Body: ")


def test_run_with_trace_does_not_accumulate_between_calls(provider):
    first, second = io.StringIO(), io.StringIO()
    run_with_trace(search_module.image, "KakaoAK abc123", "cats", stream=first)
    run_with_trace(search_module.image, "KakaoAK abc123", "dogs", stream=second)

    assert "query=cats" not in second.getvalue()
    assert len(first.getvalue().splitlines()) == len(second.getvalue().splitlines())


def test_run_with_trace_defaults_to_stdout(provider, capsys):
    run_with_trace(search_module.book, "KakaoAK abc123", "cats")
    out = capsys.readouterr().out
    assert f"INFO: Composed URL: {BASE_URL}/book?query=cats" in out


def test_run_with_trace_flushes_then_propagates_errors(provider):
    provider["body"] = b'{"foo":'
    stream = io.StringIO()

    with pytest.raises(DecodeError):
        run_with_trace(search_module.cafe, "KakaoAK abc123", "cats", stream=stream)

    assert 'INFO: resp.Body: {"foo":' in stream.getvalue()


def test_run_with_trace_prints_only_trace_lines(provider, capsys):
    run_with_trace(search_module.web, "KakaoAK secret123", "cats")
    lines = capsys.readouterr().out.splitlines()

    assert lines
    assert all(line.startswith("INFO: ") for line in lines)
    assert sum("secret123" in line for line in lines) == 1
