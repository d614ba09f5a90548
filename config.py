"""
Constants and configuration for RATIP.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


SERVICE_NAME = "RATIP"
CORRELATION_TYPE = "Metric-Alarm Correlation"

RATIP_OPENAI_API_KEY: str = os.getenv("RATIP_OPENAI_API_KEY", os.getenv("OPENAI_API_KEY", ""))
RATIP_OPENAI_MODEL: str = os.getenv("RATIP_OPENAI_MODEL", "gpt-4o-mini")
RATIP_OPENAI_URL: str = os.getenv("RATIP_OPENAI_URL", "https://api.openai.com/v1/chat/completions")
RATIP_SUMMARIZER_TIMEOUT: float = float(os.getenv("RATIP_SUMMARIZER_TIMEOUT", "30"))

# placeholder shipped in sample env files; treated the same as an empty key
OPENAI_PLACEHOLDER_KEY = "your-api-key-here"

SUMMARIZER_SYSTEM_PROMPT = (
    "You are an expert DevOps assistant analyzing telemetry and alarm data. "
    "Provide concise, actionable insights."
)

# metric-type substring -> recommended action, checked in order, first hit wins
ACTION_RULES: list[tuple[tuple[str, ...], str]] = [
    (("Latency",), "Investigate service dependencies and database query performance"),
    (("Error",), "Review application logs and check for recent deployments"),
    (("CPU", "Memory"), "Scale up service capacity or optimize resource usage"),
]
DEFAULT_ACTION = "Monitor the situation and investigate if pattern persists"

# query keyword(s) -> lookback hours, checked in order, first hit wins
TIME_RANGE_RULES: list[tuple[tuple[str, ...], float]] = [
    (("hour",), 1.0),
    (("24 hours", "day"), 24.0),
    (("week",), 7 * 24.0),
]

HEALTH_PATH = "/health"


class Settings(BaseSettings):
    # sliding telemetry window
    window_minutes: float = 15.0

    # alarm/telemetry join
    match_tolerance_minutes: int = 5
    close_match_minutes: int = 2
    base_confidence: float = 0.70
    critical_bonus: float = 0.20
    proximity_bonus: float = 0.10
    confidence_cap: float = 1.0
    critical_severity: str = "CRITICAL"

    # query orchestration
    default_range_hours: float = 2.0
    notify_min_confidence: float = 0.9

    # summarizer boundary
    openai_api_key: str = RATIP_OPENAI_API_KEY
    openai_model: str = RATIP_OPENAI_MODEL
    openai_url: str = RATIP_OPENAI_URL
    summarizer_timeout: float = RATIP_SUMMARIZER_TIMEOUT
    summarizer_max_events: int = 20
    summarizer_max_tokens: int = 500
    summarizer_temperature: float = 0.7
    fallback_top_n: int = 3

    # server
    host: str = "0.0.0.0"
    port: int = 8080

    model_config = {
        "env_prefix": "RATIP_",
        "extra": "ignore",
    }


settings = Settings()
