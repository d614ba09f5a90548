"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel

from engine.records import TelemetrySample


class QueryResponse(BaseModel):

    query: str
    response: str
    timestamp: str


class IngestAccepted(BaseModel):

    status: str = "accepted"
    id: str


class TelemetryView(BaseModel):

    id: str
    service_name: str
    metric_type: str
    value: float
    timestamp: datetime
    region: str
    environment: str

    @classmethod
    def from_record(cls, sample: TelemetrySample) -> "TelemetryView":
        return cls(
            id=sample.id,
            service_name=sample.service_name,
            metric_type=sample.metric_type,
            value=sample.value,
            timestamp=sample.timestamp,
            region=sample.region,
            environment=sample.environment,
        )


class WindowSnapshot(BaseModel):

    window_minutes: float
    count: int
    samples: List[TelemetryView]
