import logging

from engine.correlation import correlate
from services.notifier import Notifier, build_message
from conftest import make_alarm, make_sample


def _event():
    return correlate([make_alarm()], [make_sample()])[0]


def test_build_message_contains_alarm_and_action():
    message = build_message(_event())
    assert message.startswith("RATIP Correlation Alert")
    assert "Confidence: 100.0%" in message
    assert "  - Name: High Latency Alarm" in message
    assert "  - Severity: CRITICAL" in message
    assert "  - Metric: API_Latency" in message
    assert "Investigate service dependencies" in message


def test_send_logs_and_counts(caplog):
    notifier = Notifier()
    with caplog.at_level(logging.INFO, logger="services.notifier"):
        notifier.send(_event())
    assert notifier.sent == 1
    assert "Notification sent for correlation" in caplog.text


def test_send_swallows_errors(caplog):
    notifier = Notifier()
    with caplog.at_level(logging.ERROR, logger="services.notifier"):
        notifier.send(object())
    assert notifier.sent == 0
    assert "Error sending notification" in caplog.text
