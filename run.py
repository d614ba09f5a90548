#!/usr/bin/env python3

"""
Smoke runner for a live RATIP API server: seeds telemetry and alarms, then exercises the query, window and validation paths.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import argparse
import asyncio
import json
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import httpx

BASE_URL = os.getenv("RATIP_BASE_URL", "http://localhost:8080/api/v1")
HEADERS = {"Content-Type": "application/json"}
NOW = datetime.now(timezone.utc)


def ago(**kwargs: float) -> str:
    return (NOW - timedelta(**kwargs)).isoformat()


@dataclass(frozen=True)
class Case:
    label: str
    method: str
    path: str
    body: Dict[str, Any] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)
    expect: int = 200
    section: str = ""


def telemetry(service: str, metric: str, value: float, minutes_ago: float) -> Dict[str, Any]:
    return {
        "service_name": service, "metric_type": metric, "value": value,
        "timestamp": ago(minutes=minutes_ago), "region": "us-east-1", "environment": "production",
    }


def alarm(service: str, metric: str, severity: str, threshold: float, value: float, minutes_ago: float) -> Dict[str, Any]:
    return {
        "alarm_name": f"High {metric} Alarm", "service_name": service, "metric_type": metric,
        "severity": severity, "state": "ALARM", "threshold": threshold, "value": value,
        "timestamp": ago(minutes=minutes_ago), "description": f"{metric} exceeded threshold",
        "region": "us-east-1",
    }


CASES: list[Case] = [
    # ── Health ────────────────────────────────────────────
    Case("liveness", "GET", "/health", section="Health"),

    # ── Ingestion ─────────────────────────────────────────
    Case("latency sample", "POST", "/telemetry", section="Ingestion",
         body=telemetry("api-gateway", "API_Latency", 310, 11)),
    Case("error rate sample", "POST", "/telemetry", section="Ingestion",
         body=telemetry("orders", "Error_Rate", 0.12, 95)),
    Case("cpu sample", "POST", "/telemetry", section="Ingestion",
         body=telemetry("ecs-worker", "CPU_Utilization", 97, 30 * 60)),
    Case("critical latency alarm", "POST", "/alarms", section="Ingestion",
         body=alarm("api-gateway", "API_Latency", "CRITICAL", 200, 310, 10)),
    Case("warning error alarm", "POST", "/alarms", section="Ingestion",
         body=alarm("orders", "Error_Rate", "WARNING", 0.05, 0.12, 91)),
    Case("cpu alarm", "POST", "/alarms", section="Ingestion",
         body=alarm("ecs-worker", "CPU_Utilization", "CRITICAL", 85, 97, 30 * 60 - 1)),

    # ── Window ────────────────────────────────────────────
    Case("full window", "GET", "/telemetry/window", section="Window"),
    Case("service window", "GET", "/telemetry/window", section="Window",
         params={"service": "api-gateway"}),

    # ── Query ─────────────────────────────────────────────
    Case("last hour", "POST", "/query", section="Query",
         body={"query": "What happened in the last hour?"}),
    Case("default range", "POST", "/query", section="Query",
         body={"query": "Any errors on orders?"}),
    Case("today", "POST", "/query", section="Query",
         body={"query": "Summarize today"}),
    Case("week", "POST", "/query", section="Query",
         body={"query": "Report for the past week"}),

    # ── Validation ────────────────────────────────────────
    Case("blank query", "POST", "/query", section="Validation",
         body={"query": "   "}, expect=400),
    Case("missing telemetry fields", "POST", "/telemetry", section="Validation",
         body={"service_name": "api-gateway"}, expect=422),
    Case("blank service name", "POST", "/telemetry", section="Validation",
         body=telemetry(" ", "API_Latency", 1, 1), expect=400),
]


async def run_case(client: httpx.AsyncClient, case: Case) -> tuple[bool, str, Any]:
    attempt = 0
    last_exc: Exception | None = None
    while attempt < 2:
        try:
            if case.method == "GET":
                r = await client.get(case.path, params=case.params)
            else:
                r = await client.request(case.method, case.path, json=case.body or None,
                                         params=case.params)
            ok = r.status_code == case.expect
            body: Any = None
            try:
                body = r.json()
            except Exception:
                body = r.text
            if ok:
                return True, "", body
            return False, f"{r.status_code} {r.reason_phrase}: {body}", body
        except httpx.TransportError as exc:
            last_exc = exc
            attempt += 1
            if attempt < 2:
                await asyncio.sleep(0.1)
                continue
            return False, f"transport error: {exc}", None
        except Exception as e:
            return False, str(e), None
    return False, str(last_exc), None


def _pretty(body: Any) -> str:
    if body is None:
        return "<no response>"
    try:
        return json.dumps(body, indent=2)
    except (TypeError, ValueError):
        return str(body)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke-test a running RATIP server")
    parser.add_argument("--section", help="only run cases from this section name")
    parser.add_argument("--label", help="only run the case with this exact label")
    args = parser.parse_args()

    selected = [
        c for c in CASES
        if (not args.section or c.section == args.section)
        and (not args.label or c.label == args.label)
    ]
    if not selected:
        print("no matching cases (check --section or --label)")
        return 1

    failed = 0
    current_section = ""
    async with httpx.AsyncClient(base_url=BASE_URL, headers=HEADERS, timeout=30) as client:
        for case in selected:
            if case.section != current_section:
                current_section = case.section
                print(f"\n── {current_section} {'─' * max(0, 44 - len(current_section))}")

            ok, detail, body = await run_case(client, case)
            if ok:
                print(f"  ✓ PASS  {case.method} {case.path} — {case.label}")
            else:
                failed += 1
                print(f"  ✗ FAIL  {case.method} {case.path} — {case.label} (expected {case.expect})")
                print(f"         {detail}")
            print(f"         response:\n{_pretty(body)}")

    print(f"\n  Results: {len(selected) - failed} passed / {failed} failed / {len(selected)} total\n")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
