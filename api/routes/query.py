"""
Free-text query route: answers operator questions from correlated alarms and telemetry.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from api.requests import QueryRequest
from api.responses import QueryResponse
from api.routes.exception import handle_exceptions
from services.runtime import get_runtime

log = logging.getLogger(__name__)

router = APIRouter(tags=["Query"])


@router.post("/query", summary="Answer a free-text question from correlated events")
@handle_exceptions
async def handle_query(req: QueryRequest) -> QueryResponse:
    query = req.query
    if query is None or not query.strip():
        raise HTTPException(status_code=400, detail="Query cannot be empty")

    log.info("Received query: %s", query)
    response = await get_runtime().orchestrator.process_query(query)
    return QueryResponse(
        query=query,
        response=response,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
