"""
Immutable domain records for telemetry samples and alarm notifications, validated on construction so that malformed input is reported to the caller of the operation that received it rather than silently dropped.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from engine.enums import AlarmState
from engine.exceptions import InvalidRecord


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # naive datetimes are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _require_text(kind: str, name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidRecord(f"{kind} {name} must be a non-empty string")


def _require_number(kind: str, name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidRecord(f"{kind} {name} must be numeric, got {type(value).__name__}")
    number = float(value)
    if math.isnan(number):
        raise InvalidRecord(f"{kind} {name} must not be NaN")
    return number


def _require_timestamp(kind: str, value: Any) -> datetime:
    if not isinstance(value, datetime):
        raise InvalidRecord(f"{kind} timestamp must be a datetime")
    return as_utc(value)


@dataclass(frozen=True)
class TelemetrySample:
    service_name: str
    metric_type: str
    value: float
    timestamp: datetime
    region: str = ""
    environment: str = "production"
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        _require_text("telemetry", "id", self.id)
        _require_text("telemetry", "service_name", self.service_name)
        _require_text("telemetry", "metric_type", self.metric_type)
        object.__setattr__(self, "value", _require_number("telemetry", "value", self.value))
        object.__setattr__(self, "timestamp", _require_timestamp("telemetry", self.timestamp))


@dataclass(frozen=True)
class AlarmRecord:
    alarm_name: str
    service_name: str
    metric_type: str
    severity: str
    threshold: float
    value: float
    timestamp: datetime
    state: str = AlarmState.alarm.value
    description: str = ""
    region: str = ""
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        for name in ("severity", "state"):
            value = getattr(self, name)
            if isinstance(value, Enum):
                object.__setattr__(self, name, value.value)
        _require_text("alarm", "id", self.id)
        _require_text("alarm", "alarm_name", self.alarm_name)
        _require_text("alarm", "service_name", self.service_name)
        _require_text("alarm", "metric_type", self.metric_type)
        _require_text("alarm", "severity", self.severity)
        object.__setattr__(self, "threshold", _require_number("alarm", "threshold", self.threshold))
        object.__setattr__(self, "value", _require_number("alarm", "value", self.value))
        object.__setattr__(self, "timestamp", _require_timestamp("alarm", self.timestamp))


def minutes_between(later: datetime, earlier: datetime) -> int:
    """Absolute whole minutes between two instants, truncated toward zero.

    A 5m59s gap counts as 5 minutes.
    """
    seconds = (later - earlier).total_seconds()
    return abs(int(seconds / 60))
