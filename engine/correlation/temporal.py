"""
Temporal correlation of alarms against telemetry samples: every alarm is joined with every sample that shares its service and metric type and lies within the match tolerance, and each pairing is scored and explained independently.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from config import CORRELATION_TYPE
from engine.correlation.signals import is_match
from engine.exceptions import InvalidRecord
from engine.rca import describe, recommend_action, root_cause, score_confidence
from engine.records import AlarmRecord, TelemetrySample, as_utc, new_id, utcnow

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorrelatedEvent:
    alarm: AlarmRecord
    telemetry: TelemetrySample
    confidence_score: float
    description: str
    correlation_timestamp: datetime
    root_cause: str
    recommended_action: Optional[str] = None
    correlation_type: str = CORRELATION_TYPE
    id: str = field(default_factory=new_id)

    @property
    def confidence_pct(self) -> float:
        return self.confidence_score * 100


def _checked(items: Iterable[object], kind: type) -> List:
    if items is None:
        raise InvalidRecord(f"{kind.__name__} sequence must not be None")
    checked = list(items)
    for item in checked:
        if not isinstance(item, kind):
            raise InvalidRecord(f"expected {kind.__name__}, got {type(item).__name__}")
    return checked


class CorrelationEngine:
    """Pure alarm x telemetry join.

    Overlapping matches are not deduplicated: an alarm that matches three
    samples yields three events, each pairing being independent evidence.
    Output order follows the inputs, alarms outer and telemetry inner.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self._clock = clock

    def correlate(
        self,
        alarms: Iterable[AlarmRecord],
        telemetry: Iterable[TelemetrySample],
    ) -> List[CorrelatedEvent]:
        alarm_list = _checked(alarms, AlarmRecord)
        sample_list = _checked(telemetry, TelemetrySample)
        if not alarm_list or not sample_list:
            return []

        events: List[CorrelatedEvent] = []
        for alarm in alarm_list:
            for sample in sample_list:
                if not is_match(alarm, sample):
                    continue
                event = self._build(alarm, sample)
                events.append(event)
                log.debug(
                    "Created correlation: %s (confidence: %.2f)",
                    event.description, event.confidence_score,
                )

        log.info(
            "Correlated %d alarm(s) against %d sample(s): %d event(s)",
            len(alarm_list), len(sample_list), len(events),
        )
        return events

    def _build(self, alarm: AlarmRecord, sample: TelemetrySample) -> CorrelatedEvent:
        return CorrelatedEvent(
            alarm=alarm,
            telemetry=sample,
            confidence_score=score_confidence(alarm, sample),
            description=describe(alarm, sample),
            correlation_timestamp=as_utc(self._clock()),
            root_cause=root_cause(alarm, sample),
            recommended_action=recommend_action(alarm.metric_type),
        )


def correlate(
    alarms: Iterable[AlarmRecord],
    telemetry: Iterable[TelemetrySample],
) -> List[CorrelatedEvent]:
    return CorrelationEngine().correlate(alarms, telemetry)
