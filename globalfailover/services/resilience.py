from __future__ import annotations

import asyncio
import time
from typing import Any, Callable

from botocore.config import Config

from globalfailover.core.config import Settings
from globalfailover.services.telemetry import record_external_call


def sdk_client_config(settings: Settings) -> Config:
    # Timeouts live in botocore so a timed-out call is really over; one attempt, no SDK retries.
    return Config(
        connect_timeout=settings.aws_connect_timeout_s,
        read_timeout=settings.aws_read_timeout_s,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )


async def call_sdk(integration: str, func: Callable[..., Any], **request: Any) -> Any:
    # Run a blocking SDK call off the event loop and record its latency and outcome.
    start = time.monotonic()
    try:
        response = await asyncio.to_thread(func, **request)
    except Exception:
        record_external_call(
            integration=integration,
            latency_ms=(time.monotonic() - start) * 1000.0,
            success=False,
        )
        raise
    record_external_call(
        integration=integration,
        latency_ms=(time.monotonic() - start) * 1000.0,
        success=True,
    )
    return response
