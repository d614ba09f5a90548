from datetime import timedelta

import pytest

from engine.rca.scoring import is_critical, score_confidence
from conftest import NOW, make_alarm, make_sample


@pytest.mark.parametrize("severity,gap,expected", [
    ("CRITICAL", timedelta(minutes=1), 1.0),
    ("CRITICAL", timedelta(minutes=2, seconds=59), 1.0),
    ("CRITICAL", timedelta(minutes=4), 0.9),
    ("WARNING", timedelta(seconds=10), 0.8),
    ("WARNING", timedelta(minutes=3), 0.7),
    ("critical", timedelta(minutes=4), 0.7),
])
def test_score_confidence(severity, gap, expected):
    alarm = make_alarm(severity=severity, at=NOW)
    sample = make_sample(at=NOW - gap)
    assert score_confidence(alarm, sample) == pytest.approx(expected)


def test_score_is_capped(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "critical_bonus", 0.5)
    assert score_confidence(make_alarm(), make_sample()) == 1.0


def test_is_critical_is_exact_match():
    assert is_critical(make_alarm(severity="CRITICAL"))
    assert not is_critical(make_alarm(severity="Critical"))


def test_full_bonus_lands_exactly_on_one():
    assert score_confidence(make_alarm(at=NOW), make_sample(at=NOW)) == 1.0


def test_score_is_rounded_to_four_places(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "base_confidence", 0.123456)
    assert score_confidence(make_alarm(severity="WARNING", at=NOW), make_sample(at=NOW - timedelta(minutes=4))) == 0.1235
