"""
Root cause statements and recommended actions for alarm/telemetry pairings.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from engine.records import AlarmRecord, TelemetrySample
from config import ACTION_RULES, DEFAULT_ACTION


def root_cause(alarm: AlarmRecord, telemetry: TelemetrySample) -> str:
    return (
        f"Service {alarm.service_name} experienced {alarm.metric_type} "
        f"exceeding threshold of {alarm.threshold:.2f} with value {telemetry.value:.2f}"
    )


def recommend_action(metric_type: str) -> str:
    for needles, action in ACTION_RULES:
        if any(needle in metric_type for needle in needles):
            return action
    return DEFAULT_ACTION


def describe(alarm: AlarmRecord, telemetry: TelemetrySample) -> str:
    return f"{telemetry.metric_type} metric anomaly triggered {alarm.alarm_name} alarm"
