"""
Telemetry ingestion and live window routes. Ingested samples land in both the keyed event store and the trailing telemetry window.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter

from api.requests import TelemetryRequest
from api.responses import IngestAccepted, TelemetryView, WindowSnapshot
from api.routes.exception import handle_exceptions
from services.runtime import get_runtime

router = APIRouter(tags=["Telemetry"])


@router.post("/telemetry", summary="Ingest a telemetry sample")
@handle_exceptions
async def ingest_telemetry(req: TelemetryRequest) -> IngestAccepted:
    sample = req.to_record()
    get_runtime().ingest_telemetry(sample)
    return IngestAccepted(id=sample.id)


@router.get("/telemetry/window", summary="Samples currently held in the trailing window")
@handle_exceptions
async def telemetry_window(service: Optional[str] = None) -> WindowSnapshot:
    window = get_runtime().window
    samples = window.snapshot() if service is None else window.snapshot_by_service(service)
    return WindowSnapshot(
        window_minutes=window.window_size.total_seconds() / 60,
        count=len(samples),
        samples=[TelemetryView.from_record(s) for s in samples],
    )
