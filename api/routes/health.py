"""
Health check route reporting static liveness.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter

from config import HEALTH_PATH, SERVICE_NAME

router = APIRouter(tags=["Health"])


@router.get(HEALTH_PATH)
async def health() -> Dict[str, str]:
    return {
        "status": "UP",
        "service": SERVICE_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
