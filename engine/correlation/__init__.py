"""
Correlation logic for pairing alarms with telemetry samples by service and metric identity and temporal proximity, with a confidence score and explanation per pairing.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.correlation.temporal import CorrelatedEvent, CorrelationEngine, correlate
from engine.correlation.signals import gap_minutes, is_match, same_signal

__all__ = ["CorrelatedEvent", "CorrelationEngine", "correlate", "gap_minutes", "is_match", "same_signal"]
