from __future__ import annotations

import logging

from globalfailover.core.errors import FailoverRequestError
from globalfailover.core.parameters import FailoverParameters
from globalfailover.domain.models import ClusterState, DecisionOutcome
from globalfailover.providers.clients import AwsClients
from globalfailover.providers.rds import GlobalClusterFailoverExecutor, GlobalClusterStatusOracle
from globalfailover.providers.routing_control import RoutingControlOracle


logger = logging.getLogger(__name__)


class FailoverDecisionEngine:
    """Reconcile cluster status with routing controls and fail over when they disagree.

    One call to ``evaluate`` is a single, stateless pass:

    1. cluster status: ``failing-over`` or ``error`` stops here;
    2. routing controls: exactly one region must read ``On``;
    3. writer check: nothing to do when that region's cluster already writes;
    4. otherwise submit one failover request.

    Every ambiguous signal resolves to a no-action outcome.
    """

    def __init__(self, parameters: FailoverParameters, clients: AwsClients) -> None:
        self._parameters = parameters
        self._status_oracle = GlobalClusterStatusOracle(clients.rds, parameters.aurora_global_cluster_id)
        self._routing_oracle = RoutingControlOracle(clients.routing_control, parameters.routing_control_arns)
        self._executor = GlobalClusterFailoverExecutor(clients.rds)

    async def evaluate(self) -> DecisionOutcome:
        cluster_status = await self._status_oracle.query()
        if cluster_status.state is ClusterState.FAILING_OVER:
            logger.info("database_already_failing_over taking no action")
            return DecisionOutcome.DATABASE_ALREADY_FAILING_OVER
        if cluster_status.state is ClusterState.ERROR:
            logger.info("database_status_error taking no action")
            return DecisionOutcome.DATABASE_STATUS_ERROR

        routing_states = await self._routing_oracle.query()
        target_regions = routing_states.target_regions()
        logger.info("target_regions regions=%s", target_regions)
        if len(target_regions) != 1:
            logger.info("target_database_unclear taking no action")
            return DecisionOutcome.TARGET_DATABASE_UNCLEAR

        target_region = target_regions[0]
        target_cluster_id = self._parameters.aurora_cluster_arns.get(target_region)
        if not target_cluster_id:
            logger.warning("target_cluster_not_configured region=%s", target_region)
            return DecisionOutcome.TARGET_DATABASE_UNCLEAR

        if cluster_status.is_writer(target_cluster_id):
            logger.info("database_active_in_target_region region=%s taking no action", target_region)
            return DecisionOutcome.NO_ACTION_REQUIRED

        logger.info(
            "database_not_active_in_target_region region=%s target=%s initiating failover",
            target_region,
            target_cluster_id,
        )
        try:
            await self._executor.request_failover(
                self._parameters.aurora_global_cluster_id,
                target_cluster_id,
            )
        except FailoverRequestError as exc:
            logger.error("failover_request_failed error=%s", exc, exc_info=exc.__cause__)
            return DecisionOutcome.ERROR_REQUESTING_FAILOVER
        return DecisionOutcome.REQUESTED_FAILOVER
