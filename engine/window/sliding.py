"""
Sliding telemetry window holding the most recent samples for live recency views, with eviction performed lazily on every read and write instead of by a background sweep.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from config import settings
from engine.exceptions import InvalidRecord
from engine.records import TelemetrySample, as_utc, utcnow

log = logging.getLogger(__name__)


class TelemetryWindow:
    """Concurrency-safe append log bounded to the trailing ``window_size``.

    Appends and evictions run under the same lock, so an eviction triggered by
    one caller can never discard a fresh sample appended by another. Samples
    may arrive out of timestamp order; eviction therefore scans the whole log
    rather than trimming from the front.
    """

    def __init__(
        self,
        window_size: Optional[timedelta] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        if window_size is None:
            window_size = timedelta(minutes=settings.window_minutes)
        if window_size <= timedelta(0):
            raise ValueError("window_size must be positive")
        self._window_size = window_size
        self._clock = clock
        self._samples: List[TelemetrySample] = []
        self._lock = threading.Lock()

    @property
    def window_size(self) -> timedelta:
        return self._window_size

    def append(self, sample: TelemetrySample) -> None:
        if not isinstance(sample, TelemetrySample):
            raise InvalidRecord(f"expected TelemetrySample, got {type(sample).__name__}")
        with self._lock:
            self._samples.append(sample)
            self._evict_locked()

    def snapshot(self) -> List[TelemetrySample]:
        with self._lock:
            self._evict_locked()
            return list(self._samples)

    def snapshot_by_service(self, service_name: str) -> List[TelemetrySample]:
        with self._lock:
            self._evict_locked()
            return [s for s in self._samples if s.service_name == service_name]

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()

    def __len__(self) -> int:
        with self._lock:
            self._evict_locked()
            return len(self._samples)

    def _evict_locked(self) -> None:
        cutoff = as_utc(self._clock()) - self._window_size
        kept = [s for s in self._samples if not s.timestamp < cutoff]
        dropped = len(self._samples) - len(kept)
        if dropped:
            self._samples = kept
            log.debug("Evicted %d telemetry sample(s) older than %s", dropped, cutoff.isoformat())
