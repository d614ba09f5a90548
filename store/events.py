"""
Keyed in-memory storage for telemetry samples and alarm records with filtered retrieval by service, metric type, severity and an exclusive time interval.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from engine.exceptions import InvalidRecord
from engine.records import AlarmRecord, TelemetrySample, as_utc

log = logging.getLogger(__name__)


def _within(ts: datetime, start: datetime, end: datetime) -> bool:
    # both bounds exclusive
    return start < ts < end


def _bounds(start: datetime, end: datetime) -> Tuple[datetime, datetime]:
    if not isinstance(start, datetime) or not isinstance(end, datetime):
        raise InvalidRecord("query bounds must be datetimes")
    return as_utc(start), as_utc(end)


def _require_id(record: object, kind: type) -> None:
    if not isinstance(record, kind):
        raise InvalidRecord(f"expected {kind.__name__}, got {type(record).__name__}")
    rid = getattr(record, "id", None)
    if not isinstance(rid, str) or not rid.strip():
        raise InvalidRecord(f"{kind.__name__} id must be a non-empty string")


class EventStore:
    """Canonical telemetry and alarm records keyed by id, last write wins.

    Results carry no ordering guarantee.
    """

    def __init__(self) -> None:
        self._telemetry: Dict[str, TelemetrySample] = {}
        self._alarms: Dict[str, AlarmRecord] = {}
        self._lock = threading.Lock()

    def put_telemetry(self, sample: TelemetrySample) -> None:
        _require_id(sample, TelemetrySample)
        with self._lock:
            self._telemetry[sample.id] = sample
        log.debug("Saved telemetry: %s", sample.id)

    def put_alarm(self, record: AlarmRecord) -> None:
        _require_id(record, AlarmRecord)
        with self._lock:
            self._alarms[record.id] = record
        log.debug("Saved alarm: %s", record.id)

    def query_telemetry(
        self,
        service_name: str,
        metric_type: str,
        start: datetime,
        end: datetime,
    ) -> List[TelemetrySample]:
        start, end = _bounds(start, end)
        return [
            s for s in self.all_telemetry()
            if s.service_name == service_name
            and s.metric_type == metric_type
            and _within(s.timestamp, start, end)
        ]

    def query_alarms(
        self,
        service_name: str,
        severity: Optional[str],
        start: datetime,
        end: datetime,
    ) -> List[AlarmRecord]:
        start, end = _bounds(start, end)
        return [
            a for a in self.all_alarms()
            if a.service_name == service_name
            and (severity is None or a.severity == severity)
            and _within(a.timestamp, start, end)
        ]

    def alarms_between(self, start: datetime, end: datetime) -> List[AlarmRecord]:
        start, end = _bounds(start, end)
        return [a for a in self.all_alarms() if _within(a.timestamp, start, end)]

    def all_telemetry(self) -> List[TelemetrySample]:
        with self._lock:
            return list(self._telemetry.values())

    def all_alarms(self) -> List[AlarmRecord]:
        with self._lock:
            return list(self._alarms.values())

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {"telemetry": len(self._telemetry), "alarms": len(self._alarms)}

    def clear(self) -> None:
        with self._lock:
            self._telemetry.clear()
            self._alarms.clear()
