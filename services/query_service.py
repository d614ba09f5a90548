"""
Query orchestration: turns a free-text operator question into a bounded retrieval interval, correlates the alarms and telemetry stored for that interval, and hands the result to the summarizer.

The time-range hint is taken from plain substring matches on the lowercased
query, first matching rule wins:

* ``"hour"``                -> 1 hour
* ``"24 hours"`` or ``"day"`` -> 24 hours (note ``"24 hours"`` already hits the
  first rule)
* ``"week"``                -> 7 days
* anything else             -> ``settings.default_range_hours``

Every failure inside :meth:`QueryOrchestrator.process_query` is logged and
returned as an error string; nothing propagates to the caller.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Tuple

from config import TIME_RANGE_RULES, settings
from engine.correlation import CorrelatedEvent, CorrelationEngine
from engine.records import as_utc, utcnow
from services.notifier import Notifier
from services.summarizer import Summarizer
from store.events import EventStore

log = logging.getLogger(__name__)

ERROR_PREFIX = "Error processing your query: "


def extract_time_range(query: str) -> timedelta:
    lowered = (query or "").lower()
    for needles, hours in TIME_RANGE_RULES:
        if any(needle in lowered for needle in needles):
            return timedelta(hours=hours)
    return timedelta(hours=settings.default_range_hours)


def time_window(query: str, now: datetime) -> Tuple[datetime, datetime]:
    return now - extract_time_range(query), now


class QueryOrchestrator:
    def __init__(
        self,
        store: EventStore,
        engine: CorrelationEngine,
        summarizer: Summarizer,
        notifier: Optional[Notifier] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._store = store
        self._engine = engine
        self._summarizer = summarizer
        self._notifier = notifier
        self._clock = clock

    def retrieve(self, start: datetime, end: datetime) -> List[CorrelatedEvent]:
        start, end = as_utc(start), as_utc(end)
        alarms = self._store.alarms_between(start, end)
        if not alarms:
            return []

        # telemetry shortly before the interval can still pair with an alarm inside it
        lookback = start - timedelta(minutes=settings.match_tolerance_minutes + 1)
        pairs: Dict[Tuple[str, str], None] = dict.fromkeys(
            (a.service_name, a.metric_type) for a in alarms
        )
        telemetry = []
        for service_name, metric_type in pairs:
            telemetry.extend(self._store.query_telemetry(service_name, metric_type, lookback, end))

        return self._engine.correlate(alarms, telemetry)

    def notify(self, events: List[CorrelatedEvent]) -> int:
        if self._notifier is None:
            return 0
        sent = 0
        for event in events:
            if event.confidence_score >= settings.notify_min_confidence:
                self._notifier.send(event)
                sent += 1
        return sent

    async def process_query(self, query: str) -> str:
        try:
            log.info("Processing query: %s", query)
            start, end = time_window(query, as_utc(self._clock()))
            events = self.retrieve(start, end)
            self.notify(events)
            summary = await self._summarizer.summarize(events, query)
            log.info(
                "Query processed successfully (%d event(s), %s summary)",
                len(events), summary.source.value,
            )
            return summary.text
        except Exception as exc:
            log.exception("Error processing query")
            return f"{ERROR_PREFIX}{exc}"
