from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from engine.enums import AlarmState
from engine.records import AlarmRecord, TelemetrySample, new_id


class QueryRequest(BaseModel):
    query: Optional[str] = None


class TelemetryRequest(BaseModel):
    id: str = Field(default_factory=new_id)
    service_name: str
    metric_type: str
    value: float
    timestamp: datetime
    region: str = ""
    environment: str = "production"

    def to_record(self) -> TelemetrySample:
        return TelemetrySample(
            id=self.id,
            service_name=self.service_name,
            metric_type=self.metric_type,
            value=self.value,
            timestamp=self.timestamp,
            region=self.region,
            environment=self.environment,
        )


class AlarmRequest(BaseModel):
    id: str = Field(default_factory=new_id)
    alarm_name: str
    service_name: str
    metric_type: str
    severity: str
    state: str = AlarmState.alarm.value
    threshold: float
    value: float
    timestamp: datetime
    description: str = ""
    region: str = ""

    def to_record(self) -> AlarmRecord:
        return AlarmRecord(
            id=self.id,
            alarm_name=self.alarm_name,
            service_name=self.service_name,
            metric_type=self.metric_type,
            severity=self.severity,
            state=self.state,
            threshold=self.threshold,
            value=self.value,
            timestamp=self.timestamp,
            description=self.description,
            region=self.region,
        )
