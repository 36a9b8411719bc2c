from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel

from globalfailover.apps.api.openapi import DEFAULT_ERROR_RESPONSES
from globalfailover.apps.api.response import Envelope, envelope
from globalfailover.services.telemetry import counters_snapshot, external_latency_by_integration


router = APIRouter(prefix="/ops", tags=["ops"], responses=DEFAULT_ERROR_RESPONSES)


class MetricsResponse(BaseModel):
    counters: dict[str, int]
    external_calls: dict[str, dict[str, Any]]
    window_s: int


@router.get("/metrics", response_model=Envelope[MetricsResponse])
async def metrics(request: Request, window_s: int = Query(default=3600, ge=1, le=86400)) -> dict:
    # Outcome counters plus control-plane call latency for dashboards.
    payload = MetricsResponse(
        counters=counters_snapshot(),
        external_calls=external_latency_by_integration(window_s),
        window_s=window_s,
    )
    return envelope(request, payload)
