from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from pydantic import BaseModel

from globalfailover.apps.api.deps import get_app_settings, get_clients_factory
from globalfailover.apps.api.openapi import DEFAULT_ERROR_RESPONSES
from globalfailover.apps.api.response import Envelope, envelope, request_meta
from globalfailover.core.config import Settings
from globalfailover.services.invocation import ClientsFactory, handle_invocation


router = APIRouter(prefix="/failover", tags=["failover"], responses=DEFAULT_ERROR_RESPONSES)


class EvaluateResponse(BaseModel):
    # Decision outcomes are data: every evaluation answers 200, including no-action codes.
    outcome: str | None
    error: str | None = None


@router.post("/evaluate", response_model=Envelope[EvaluateResponse])
async def evaluate_failover(
    request: Request,
    event: Any = Body(default=None),
    settings: Settings = Depends(get_app_settings),
    clients_factory: ClientsFactory = Depends(get_clients_factory),
) -> dict:
    context = {
        "request_id": request_meta(request).request_id,
        "client": request.client.host if request.client else None,
        "user_agent": request.headers.get("User-Agent"),
    }
    result = await handle_invocation(
        event,
        context,
        settings=settings,
        clients_factory=clients_factory,
    )
    payload = EvaluateResponse(outcome=result.code, error=result.error)
    return envelope(request, payload)
