"""
Alarm ingestion route.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter

from api.requests import AlarmRequest
from api.responses import IngestAccepted
from api.routes.exception import handle_exceptions
from services.runtime import get_runtime

router = APIRouter(tags=["Alarms"])


@router.post("/alarms", summary="Ingest an alarm notification")
@handle_exceptions
async def ingest_alarm(req: AlarmRequest) -> IngestAccepted:
    record = req.to_record()
    get_runtime().ingest_alarm(record)
    return IngestAccepted(id=record.id)
