from __future__ import annotations

import asyncio
import threading
from typing import Any

from globalfailover.core.config import Settings, get_settings
from globalfailover.core.logging import configure_logging
from globalfailover.core.parameters import FailoverParameters
from globalfailover.providers.clients import AwsClients, build_aws_clients
from globalfailover.services.invocation import InvocationResult, handle_invocation


_clients: AwsClients | None = None
_clients_lock = threading.Lock()


def process_clients(parameters: FailoverParameters, settings: Settings) -> AwsClients:
    # Build SDK clients once per process and reuse them across warm invocations.
    global _clients
    with _clients_lock:
        if _clients is None:
            _clients = build_aws_clients(parameters, settings)
        return _clients


def reset_process_clients() -> None:
    global _clients
    with _clients_lock:
        _clients = None


async def evaluate(event: Any = None, context: Any = None) -> InvocationResult:
    return await handle_invocation(
        event,
        context,
        settings=get_settings(),
        clients_factory=process_clients,
    )


def handler(event: Any, context: Any) -> str | None:
    """Function entry point: returns the decision result code.

    ``None`` is returned only when the handler itself failed; the failure is
    already logged.
    """
    configure_logging()
    result = asyncio.run(evaluate(event, context))
    return result.code
