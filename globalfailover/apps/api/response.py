from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar
from uuid import uuid4

from fastapi import Request
from pydantic import BaseModel


API_VERSION = "v1"

PayloadT = TypeVar("PayloadT")


class Meta(BaseModel):
    request_id: str
    api_version: str = API_VERSION
    served_at: datetime


class Envelope(BaseModel, Generic[PayloadT]):
    data: PayloadT
    meta: Meta


class Problem(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class ProblemEnvelope(BaseModel):
    error: Problem
    meta: Meta


def request_meta(request: Request) -> Meta:
    request_id = getattr(request.state, "request_id", None) or str(uuid4())
    return Meta(request_id=request_id, served_at=datetime.now(timezone.utc))


def envelope(request: Request, payload: BaseModel) -> dict[str, Any]:
    return {
        "data": payload.model_dump(mode="json"),
        "meta": request_meta(request).model_dump(mode="json"),
    }


def problem(request: Request, code: str, message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    body = ProblemEnvelope(error=Problem(code=code, message=message, details=details), meta=request_meta(request))
    return body.model_dump(mode="json", exclude_none=True)
