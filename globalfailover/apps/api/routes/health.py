from __future__ import annotations

from fastapi import APIRouter, Request
from pydantic import BaseModel

from globalfailover.apps.api.openapi import DEFAULT_ERROR_RESPONSES
from globalfailover.apps.api.response import Envelope, envelope

router = APIRouter(tags=["health"], responses=DEFAULT_ERROR_RESPONSES)


class HealthResponse(BaseModel):
    status: str


# Liveness only; it never touches the control plane.
@router.get("/health", response_model=Envelope[HealthResponse])
async def health(request: Request) -> dict:
    payload = HealthResponse(status="ok")
    return envelope(request, payload)
