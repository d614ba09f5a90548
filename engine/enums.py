"""
Enumerations for Alarm Severity and Summary Sources

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class AlarmSeverity(str, Enum):
    critical = "CRITICAL"
    warning = "WARNING"
    info = "INFO"


class AlarmState(str, Enum):
    alarm = "ALARM"
    ok = "OK"
    insufficient_data = "INSUFFICIENT_DATA"


class SummarySource(str, Enum):
    external = "external"
    fallback = "fallback"
