"""
Confidence scoring for alarm/telemetry pairings: a fixed additive heuristic over alarm severity and temporal proximity, capped and clamped to the unit interval.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from engine.records import AlarmRecord, TelemetrySample, minutes_between
from config import settings


def is_critical(alarm: AlarmRecord) -> bool:
    return alarm.severity == settings.critical_severity


def score_confidence(alarm: AlarmRecord, telemetry: TelemetrySample) -> float:
    score = settings.base_confidence
    if is_critical(alarm):
        score += settings.critical_bonus
    if minutes_between(alarm.timestamp, telemetry.timestamp) <= settings.close_match_minutes:
        score += settings.proximity_bonus
    # rounding keeps 0.7 + 0.2 + 0.1 at exactly 1.0
    return round(max(0.0, min(score, settings.confidence_cap, 1.0)), 4)
