"""
Summarization of correlated events into a natural-language answer, using the chat completion connector when configured and a deterministic template built from the same events otherwise.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from config import OPENAI_PLACEHOLDER_KEY, SUMMARIZER_SYSTEM_PROMPT, settings
from connectors.exceptions import SummarizerError
from connectors.openai import OpenAIConnector
from engine.correlation import CorrelatedEvent
from engine.enums import SummarySource

log = logging.getLogger(__name__)

FALLBACK_HEADER = "AI Analysis (Mock Mode - Set OPENAI_API_KEY for real AI responses)"
FALLBACK_RECOMMENDATION = (
    "Recommendation: Monitor these patterns and investigate services with high correlation confidence."
)


@dataclass(frozen=True)
class Summary:
    text: str
    source: SummarySource

    @property
    def is_fallback(self) -> bool:
        return self.source is SummarySource.fallback


def fallback_summary(
    events: Sequence[CorrelatedEvent],
    query: str,
    top_n: Optional[int] = None,
) -> str:
    if top_n is None:
        top_n = settings.fallback_top_n
    lines: List[str] = [
        FALLBACK_HEADER,
        "",
        f"Query: {query}",
        "",
        "Analysis Summary:",
        f"Found {len(events)} correlated events in the specified time range.",
        "",
    ]
    if events:
        lines.append("Top Correlations:")
        for i, event in enumerate(events[:top_n], start=1):
            lines.append(f"{i}. {event.description} (Confidence: {event.confidence_pct:.1f}%)")
            if event.recommended_action is not None:
                lines.append(f"   Action: {event.recommended_action}")
    lines.append("")
    lines.append(FALLBACK_RECOMMENDATION)
    return "\n".join(lines)


def build_event_context(events: Sequence[CorrelatedEvent], limit: Optional[int] = None) -> str:
    if limit is None:
        limit = settings.summarizer_max_events
    lines: List[str] = ["Recent Events and Correlations:", ""]
    for i, event in enumerate(events[:limit], start=1):
        lines.append(
            f"{i}. [{event.correlation_timestamp.isoformat()}] {event.description} "
            f"(Confidence: {event.confidence_pct:.1f}%)"
        )
        alarm = event.alarm
        lines.append(f"   Alarm: {alarm.service_name} - {alarm.alarm_name} (Severity: {alarm.severity})")
        lines.append(f"   Telemetry: {event.telemetry.metric_type} = {event.telemetry.value:.2f}")
        lines.append("")
    return "\n".join(lines)


def build_prompt(context: str, query: str) -> str:
    return (
        f"Based on the following telemetry and alarm data:\n\n{context}\n\n"
        f"User Question: {query}\n\n"
        "Provide a concise, actionable answer. Include specific metrics, "
        "identify root causes, and suggest remediation steps if applicable."
    )


def api_key_configured(api_key: Optional[str]) -> bool:
    return bool(api_key and api_key.strip() and api_key != OPENAI_PLACEHOLDER_KEY)


class Summarizer:
    """Decides between the external answer and the local fallback.

    Connector failures never cross this boundary; they select the fallback
    variant of :class:`Summary` instead.
    """

    def __init__(self, connector: Optional[OpenAIConnector] = None) -> None:
        self._connector = connector

    @classmethod
    def from_settings(cls) -> "Summarizer":
        if not api_key_configured(settings.openai_api_key):
            return cls(connector=None)
        return cls(connector=OpenAIConnector(
            url=settings.openai_url,
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout=settings.summarizer_timeout,
            max_tokens=settings.summarizer_max_tokens,
            temperature=settings.summarizer_temperature,
        ))

    @property
    def configured(self) -> bool:
        return self._connector is not None

    async def summarize(self, events: Sequence[CorrelatedEvent], query: str) -> Summary:
        if self._connector is None:
            log.warning("OpenAI API key not configured, returning fallback summary")
            return Summary(text=fallback_summary(events, query), source=SummarySource.fallback)

        prompt = build_prompt(build_event_context(events), query)
        try:
            text = await self._connector.complete(SUMMARIZER_SYSTEM_PROMPT, prompt)
        except SummarizerError as exc:
            log.error("Summarizer failed, using fallback: %s", exc)
            return Summary(text=fallback_summary(events, query), source=SummarySource.fallback)

        log.info("Summary generated for query: %s", query)
        return Summary(text=text, source=SummarySource.external)
