from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

from globalfailover.core.config import Settings
from globalfailover.core.parameters import ConfigurationResolver, FailoverParameters
from globalfailover.domain.models import DecisionOutcome
from globalfailover.providers.clients import AwsClients
from globalfailover.services.decision import FailoverDecisionEngine
from globalfailover.services.telemetry import increment_counter


logger = logging.getLogger(__name__)

ClientsFactory = Callable[[FailoverParameters, Settings], AwsClients]


@dataclass(frozen=True)
class InvocationResult:
    # outcome is None only when the handler itself failed; error then carries the reason.
    outcome: DecisionOutcome | None
    error: str | None = None

    @property
    def code(self) -> str | None:
        return self.outcome.value if self.outcome is not None else None


def _describe(value: Any) -> str:
    # Event and context are logged only; their content never influences the decision.
    if value is None:
        return "null"
    try:
        return json.dumps(value, default=lambda obj: getattr(obj, "__dict__", repr(obj)), sort_keys=True)
    except (TypeError, ValueError):
        return repr(value)


async def handle_invocation(
    event: Any,
    context: Any,
    *,
    settings: Settings,
    clients_factory: ClientsFactory,
) -> InvocationResult:
    """Run one failover evaluation; never raises.

    Parameters are validated before any client is built, so a missing
    parameter results in ``PARAMETERS_MISSING`` with no external calls.
    """
    resolver = ConfigurationResolver(settings)
    missing = resolver.validate()
    if len(missing) > 0:
        logger.error("parameters_missing names=%s aborting", ", ".join(missing))
        increment_counter(f"failover_outcome.{DecisionOutcome.PARAMETERS_MISSING.value}")
        return InvocationResult(outcome=DecisionOutcome.PARAMETERS_MISSING)

    try:
        logger.info("global_cluster_failover_triggered")
        logger.info("invocation_context context=%s", _describe(context))
        logger.info("invocation_event event=%s", _describe(event))
        parameters = resolver.resolve()
        clients = clients_factory(parameters, settings)
        outcome = await FailoverDecisionEngine(parameters, clients).evaluate()
    except Exception as exc:  # noqa: BLE001 - nothing escapes the invocation boundary
        logger.exception("handler_error")
        increment_counter("failover_handler_errors")
        return InvocationResult(outcome=None, error=f"{exc.__class__.__name__}: {exc}")

    increment_counter(f"failover_outcome.{outcome.value}")
    logger.info("failover_decision outcome=%s", outcome.value)
    return InvocationResult(outcome=outcome)
