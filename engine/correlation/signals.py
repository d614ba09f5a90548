"""
Join predicate for pairing alarms with telemetry samples by service and metric identity and by temporal proximity measured in whole minutes.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from engine.records import AlarmRecord, TelemetrySample, minutes_between
from config import settings


def gap_minutes(alarm: AlarmRecord, telemetry: TelemetrySample) -> int:
    return minutes_between(alarm.timestamp, telemetry.timestamp)


def same_signal(alarm: AlarmRecord, telemetry: TelemetrySample) -> bool:
    return (
        alarm.service_name == telemetry.service_name
        and alarm.metric_type == telemetry.metric_type
    )


def is_match(
    alarm: AlarmRecord,
    telemetry: TelemetrySample,
    tolerance_minutes: int | None = None,
) -> bool:
    if tolerance_minutes is None:
        tolerance_minutes = settings.match_tolerance_minutes
    if not same_signal(alarm, telemetry):
        return False
    return gap_minutes(alarm, telemetry) <= tolerance_minutes
