import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from config import settings
from engine.records import AlarmRecord, TelemetrySample
from services import runtime


NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Mutable clock so tests can move time forward between calls."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


def make_sample(
    service="api-gateway",
    metric="API_Latency",
    value=310.0,
    at=NOW,
    **kwargs,
) -> TelemetrySample:
    return TelemetrySample(service_name=service, metric_type=metric, value=value, timestamp=at, **kwargs)


def make_alarm(
    service="api-gateway",
    metric="API_Latency",
    severity="CRITICAL",
    threshold=200.0,
    value=310.0,
    at=NOW,
    name="High Latency Alarm",
    **kwargs,
) -> AlarmRecord:
    return AlarmRecord(
        alarm_name=name,
        service_name=service,
        metric_type=metric,
        severity=severity,
        threshold=threshold,
        value=value,
        timestamp=at,
        **kwargs,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def isolated_runtime(monkeypatch):
    """Fresh runtime per test, never talking to a real summarizer."""
    monkeypatch.setattr(settings, "openai_api_key", "")
    runtime.reset_runtime()
    yield
    runtime.reset_runtime()
