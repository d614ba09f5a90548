"""
Fire-and-forget correlation alerts. Messages are emitted through the logging stack; delivery failures are logged and swallowed so callers never depend on notification success.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from typing import List

from config import SERVICE_NAME
from engine.correlation import CorrelatedEvent

log = logging.getLogger(__name__)


def build_message(event: CorrelatedEvent) -> str:
    lines: List[str] = [
        f"{SERVICE_NAME} Correlation Alert",
        "",
        f"Type: {event.correlation_type}",
        f"Confidence: {event.confidence_pct:.1f}%",
        f"Description: {event.description}",
        "",
        "Alarm Details:",
        f"  - Name: {event.alarm.alarm_name}",
        f"  - Service: {event.alarm.service_name}",
        f"  - Severity: {event.alarm.severity}",
        "",
        "Telemetry Context:",
        f"  - Metric: {event.telemetry.metric_type}",
        f"  - Value: {event.telemetry.value}",
    ]
    if event.recommended_action is not None:
        lines.extend(["", "Recommended Action:", f"  {event.recommended_action}"])
    return "\n".join(lines)


class Notifier:
    def __init__(self) -> None:
        self.sent = 0

    def send(self, event: CorrelatedEvent) -> None:
        try:
            message = build_message(event)
            log.info(
                "Notification sent for correlation: %s (Confidence: %.1f%%)",
                event.description, event.confidence_pct,
            )
            log.debug("Notification message:\n%s", message)
            self.sent += 1
        except Exception:
            log.exception("Error sending notification")
