"""
Validation of telemetry and alarm records.
"""

from datetime import datetime, timedelta, timezone

import pytest

from engine.exceptions import InvalidRecord
from engine.records import TelemetrySample, minutes_between
from conftest import NOW, make_alarm, make_sample


def test_sample_gets_generated_id_and_float_value():
    sample = make_sample(value=5)
    assert sample.id
    assert isinstance(sample.value, float)
    assert make_sample().id != sample.id


def test_naive_timestamp_is_treated_as_utc():
    sample = make_sample(at=datetime(2026, 3, 1, 12, 0, 0))
    assert sample.timestamp == NOW
    assert sample.timestamp.tzinfo is timezone.utc


@pytest.mark.parametrize("field,value", [
    ("service_name", ""),
    ("metric_type", "   "),
    ("id", ""),
    ("value", "high"),
    ("timestamp", "2026-03-01T12:00:00Z"),
])
def test_malformed_sample_is_rejected(field, value):
    kwargs = dict(service_name="svc", metric_type="CPU", value=1.0, timestamp=NOW)
    kwargs[field] = value
    with pytest.raises(InvalidRecord):
        TelemetrySample(**kwargs)


def test_malformed_alarm_is_rejected():
    with pytest.raises(InvalidRecord):
        make_alarm(severity="")
    with pytest.raises(InvalidRecord):
        make_alarm(threshold=None)


def test_records_are_immutable():
    alarm = make_alarm()
    with pytest.raises(Exception):
        alarm.severity = "WARNING"


def test_minutes_between_truncates_toward_zero():
    assert minutes_between(NOW, NOW - timedelta(minutes=5, seconds=59)) == 5
    assert minutes_between(NOW - timedelta(minutes=5, seconds=59), NOW) == 5
    assert minutes_between(NOW, NOW - timedelta(minutes=6)) == 6
    assert minutes_between(NOW, NOW) == 0


def test_enum_severity_is_stored_as_plain_value():
    from engine.enums import AlarmSeverity, AlarmState
    from engine.rca.scoring import is_critical

    alarm = make_alarm(severity=AlarmSeverity.critical, state=AlarmState.ok)
    assert alarm.severity == "CRITICAL" and type(alarm.severity) is str
    assert alarm.state == "OK"
    assert is_critical(alarm)
    assert make_alarm().state == AlarmState.alarm.value
