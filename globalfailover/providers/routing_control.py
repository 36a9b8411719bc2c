from __future__ import annotations

import logging
from typing import Any, Mapping

from globalfailover.core.errors import RoutingControlReadError
from globalfailover.domain.models import RoutingControlState, RoutingControlStates
from globalfailover.services.resilience import call_sdk


logger = logging.getLogger(__name__)

ROUTING_CONTROL_INTEGRATION = "route53_recovery.get_routing_control_state"


class RoutingControlOracle:
    """Read every region's routing control state through the cluster endpoints.

    Any single endpoint can read all controls, so endpoints are tried in
    configuration order and the first endpoint that reads every control
    cleanly wins. Results are never merged across endpoints.
    """

    def __init__(
        self,
        endpoint_clients: Mapping[str, Any],
        routing_control_arns: Mapping[str, str],
    ) -> None:
        self._endpoint_clients = endpoint_clients
        self._routing_control_arns = routing_control_arns

    async def query(self) -> RoutingControlStates:
        for endpoint_region, client in self._endpoint_clients.items():
            try:
                states = await self._read_all(endpoint_region, client)
            except RoutingControlReadError as exc:
                logger.warning(
                    "routing_control_endpoint_failed endpoint_region=%s error=%s",
                    endpoint_region,
                    exc,
                )
                continue
            logger.info(
                "routing_control_states endpoint_region=%s states=%s",
                endpoint_region,
                {region: state.value for region, state in states.items()},
            )
            return RoutingControlStates(states=states, endpoint_region=endpoint_region)
        logger.error("routing_control_states_unavailable endpoints=%s", list(self._endpoint_clients))
        return RoutingControlStates.failed()

    async def _read_all(self, endpoint_region: str, client: Any) -> dict[str, RoutingControlState]:
        # Keyed by the control's owning region, not the endpoint's region.
        states: dict[str, RoutingControlState] = {}
        for control_region, control_arn in self._routing_control_arns.items():
            try:
                response = await call_sdk(
                    ROUTING_CONTROL_INTEGRATION,
                    client.get_routing_control_state,
                    RoutingControlArn=control_arn,
                )
            except Exception as exc:  # noqa: BLE001 - abandon this endpoint pass
                logger.error(
                    "routing_control_read_failed endpoint_region=%s control_region=%s error=%s",
                    endpoint_region,
                    control_region,
                    exc,
                )
                raise RoutingControlReadError(f"{control_region} read failed via {endpoint_region}") from exc
            raw = response.get("RoutingControlState") if isinstance(response, dict) else None
            state = RoutingControlState.from_response(raw)
            if state is RoutingControlState.ERROR:
                raise RoutingControlReadError(
                    f"{control_region} returned unexpected state {raw!r} via {endpoint_region}"
                )
            states[control_region] = state
        return states
