"""
Process-wide wiring of the store, telemetry window, correlation engine and orchestrator. Consumers hold the handles obtained here rather than reaching for module globals.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from engine.correlation import CorrelationEngine
from engine.records import AlarmRecord, TelemetrySample
from engine.window import TelemetryWindow
from services.notifier import Notifier
from services.query_service import QueryOrchestrator
from services.summarizer import Summarizer
from store.events import EventStore


@dataclass
class Runtime:
    store: EventStore
    window: TelemetryWindow
    engine: CorrelationEngine
    summarizer: Summarizer
    notifier: Notifier
    orchestrator: QueryOrchestrator

    def ingest_telemetry(self, sample: TelemetrySample) -> None:
        self.store.put_telemetry(sample)
        self.window.append(sample)

    def ingest_alarm(self, record: AlarmRecord) -> None:
        self.store.put_alarm(record)


def build_runtime(summarizer: Optional[Summarizer] = None) -> Runtime:
    store = EventStore()
    engine = CorrelationEngine()
    notifier = Notifier()
    summarizer = summarizer or Summarizer.from_settings()
    return Runtime(
        store=store,
        window=TelemetryWindow(),
        engine=engine,
        summarizer=summarizer,
        notifier=notifier,
        orchestrator=QueryOrchestrator(store, engine, summarizer, notifier),
    )


_runtime: Optional[Runtime] = None
_runtime_lock = threading.Lock()


def get_runtime() -> Runtime:
    global _runtime
    if _runtime is None:
        with _runtime_lock:
            if _runtime is None:
                _runtime = build_runtime()
    return _runtime


def reset_runtime() -> None:
    global _runtime
    with _runtime_lock:
        _runtime = None
