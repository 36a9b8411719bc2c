from __future__ import annotations

from typing import Any

from globalfailover.apps.api.response import ProblemEnvelope


def _error_example(*, code: str, message: str) -> dict[str, Any]:
    return {
        "error": {"code": code, "message": message},
        "meta": {"request_id": "req_example", "api_version": "v1", "served_at": "2026-01-01T00:00:00Z"},
    }


DEFAULT_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    422: {
        "model": ProblemEnvelope,
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": _error_example(code="REQUEST_VALIDATION_ERROR", message="Invalid request"),
            }
        },
    },
    500: {
        "model": ProblemEnvelope,
        "description": "Internal error",
        "content": {
            "application/json": {
                "example": _error_example(code="INTERNAL_ERROR", message="Internal server error"),
            }
        },
    },
}
