"""
Summarizer boundary: external answers, fallback selection on every failure mode, and the deterministic fallback template.
"""

import json
from datetime import timedelta

import httpx
import pytest

from connectors.exceptions import MalformedResponse, SummarizerTimeout, SummarizerUnavailable
from connectors.openai import OpenAIConnector
from engine.correlation import correlate
from engine.enums import SummarySource
from services.summarizer import (
    FALLBACK_RECOMMENDATION,
    Summarizer,
    api_key_configured,
    build_event_context,
    fallback_summary,
)
from conftest import NOW, make_alarm, make_sample


def _events(n=4):
    alarms = [make_alarm(name=f"alarm-{i}", at=NOW + timedelta(hours=i)) for i in range(n)]
    samples = [make_sample(at=NOW + timedelta(hours=i, minutes=-1)) for i in range(n)]
    return correlate(alarms, samples)


def _connector(handler):
    return OpenAIConnector(
        url="https://llm.test/v1/chat/completions",
        api_key="sk-test",
        model="gpt-4o-mini",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


def test_fallback_lists_top_three_in_original_order():
    events = _events(4)
    text = fallback_summary(events, "what broke in the last hour?")
    assert "Query: what broke in the last hour?" in text
    assert "Found 4 correlated events in the specified time range." in text
    assert "1. API_Latency metric anomaly triggered alarm-0 alarm (Confidence: 100.0%)" in text
    assert "3. API_Latency metric anomaly triggered alarm-2 alarm" in text
    assert "alarm-3" not in text
    assert text.count("   Action: Investigate service dependencies") == 3
    assert text.endswith(FALLBACK_RECOMMENDATION)


def test_fallback_without_events_has_no_listing():
    text = fallback_summary([], "status")
    assert "time range.\n\n\nRecommendation:" in text
    assert "Found 0 correlated events" in text
    assert "Top Correlations" not in text
    assert text.endswith(FALLBACK_RECOMMENDATION)


def test_event_context_is_bounded():
    context = build_event_context(_events(4), limit=2)
    assert "alarm-1" in context
    assert "alarm-2" not in context
    assert "Telemetry: API_Latency = 310.00" in context


@pytest.mark.parametrize("key,expected", [
    ("", False), (None, False), ("your-api-key-here", False), ("  ", False), ("sk-live", True),
])
def test_api_key_configured(key, expected):
    assert api_key_configured(key) is expected


@pytest.mark.asyncio
async def test_unconfigured_summarizer_uses_fallback():
    summary = await Summarizer(connector=None).summarize(_events(1), "status")
    assert summary.source is SummarySource.fallback
    assert summary.is_fallback
    assert "Found 1 correlated events" in summary.text


@pytest.mark.asyncio
async def test_external_answer_is_returned_verbatim():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "Gateway latency is DB bound."}}]})

    summary = await Summarizer(_connector(handler)).summarize(_events(2), "why is it slow?")

    assert summary.source is SummarySource.external
    assert summary.text == "Gateway latency is DB bound."
    assert seen["auth"] == "Bearer sk-test"
    assert seen["body"]["model"] == "gpt-4o-mini"
    assert seen["body"]["max_tokens"] == 500
    assert "User Question: why is it slow?" in seen["body"]["messages"][1]["content"]


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [
    httpx.Response(500, text="boom"),
    httpx.Response(200, json={"choices": []}),
    httpx.Response(200, json={"choices": [{"message": {"content": ""}}]}),
    httpx.Response(200, text="not json"),
])
async def test_failed_external_call_falls_back(response):
    summary = await Summarizer(_connector(lambda request: response)).summarize(_events(1), "status")
    assert summary.source is SummarySource.fallback
    assert summary.text.endswith(FALLBACK_RECOMMENDATION)


@pytest.mark.asyncio
async def test_connector_error_mapping():
    def unavailable(request):
        return httpx.Response(503, text="down")

    def timeout(request):
        raise httpx.ReadTimeout("slow", request=request)

    def unreachable(request):
        raise httpx.ConnectError("refused", request=request)

    def empty(request):
        return httpx.Response(200, json={"choices": [{"message": {}}]})

    with pytest.raises(SummarizerUnavailable):
        await _connector(unavailable).complete("sys", "prompt")
    with pytest.raises(SummarizerTimeout):
        await _connector(timeout).complete("sys", "prompt")
    with pytest.raises(SummarizerUnavailable):
        await _connector(unreachable).complete("sys", "prompt")
    with pytest.raises(MalformedResponse):
        await _connector(empty).complete("sys", "prompt")


def test_from_settings_without_key_is_unconfigured():
    assert Summarizer.from_settings().configured is False


def test_from_settings_with_key(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "openai_api_key", "sk-live")
    assert Summarizer.from_settings().configured is True


def test_fallback_layout_with_events():
    text = fallback_summary(_events(1), "status")
    assert "time range.\n\nTop Correlations:\n1. " in text
    assert "performance\n\nRecommendation:" in text
