"""
Engine Packages for RATIP

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.enums import AlarmSeverity, AlarmState, SummarySource
from engine.exceptions import CorrelationError, InvalidRecord
from engine.records import AlarmRecord, TelemetrySample

__all__ = [
    "AlarmSeverity", "AlarmState", "SummarySource",
    "CorrelationError", "InvalidRecord",
    "AlarmRecord", "TelemetrySample",
]
