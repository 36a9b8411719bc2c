from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from globalfailover.core.errors import ControlPlaneError, FailoverRequestError
from globalfailover.domain.models import ClusterStatus
from globalfailover.services.resilience import call_sdk


logger = logging.getLogger(__name__)

DESCRIBE_INTEGRATION = "rds.describe_global_clusters"
FAILOVER_INTEGRATION = "rds.failover_global_cluster"


class GlobalClusterStatusOracle:
    """Read global cluster topology and status from the RDS control plane.

    Errors never escape ``query``: transport failures and unexpected response
    shapes both come back as an ``error`` status for the caller to inspect.
    """

    def __init__(self, client: Any, global_cluster_id: str) -> None:
        self._client = client
        self._global_cluster_id = global_cluster_id

    async def query(self) -> ClusterStatus:
        try:
            response = await call_sdk(
                DESCRIBE_INTEGRATION,
                self._client.describe_global_clusters,
                GlobalClusterIdentifier=self._global_cluster_id,
            )
            return self._parse(response)
        except Exception as exc:  # noqa: BLE001 - any failure folds into the error status
            logger.error(
                "global_cluster_status_query_failed cluster=%s error=%s",
                self._global_cluster_id,
                exc,
                exc_info=not isinstance(exc, (BotoCoreError, ClientError, ControlPlaneError)),
            )
            return ClusterStatus.error()

    def _parse(self, response: Any) -> ClusterStatus:
        clusters = response.get("GlobalClusters") if isinstance(response, dict) else None
        if not isinstance(clusters, list) or len(clusters) != 1:
            count = len(clusters) if isinstance(clusters, list) else None
            raise ControlPlaneError(f"unexpected global cluster count: {count}")
        cluster = clusters[0]
        members: dict[str, bool] = {}
        for member in cluster.get("GlobalClusterMembers") or []:
            arn = member.get("DBClusterArn")
            if not arn:
                continue
            members[arn] = bool(member.get("IsWriter", False))
        status = ClusterStatus.from_status(cluster.get("Status"), members)
        logger.info(
            "global_cluster_status cluster=%s status=%s writers=%s",
            self._global_cluster_id,
            status.status,
            [arn for arn, writer in members.items() if writer],
        )
        return status


class GlobalClusterFailoverExecutor:
    # Submit a single failover request; completion is not polled and failures are not retried.

    def __init__(self, client: Any) -> None:
        self._client = client

    async def request_failover(self, global_cluster_id: str, target_cluster_id: str) -> dict[str, Any]:
        try:
            response = await call_sdk(
                FAILOVER_INTEGRATION,
                self._client.failover_global_cluster,
                GlobalClusterIdentifier=global_cluster_id,
                TargetDbClusterIdentifier=target_cluster_id,
            )
        except Exception as exc:
            raise FailoverRequestError(
                f"failover of {global_cluster_id} to {target_cluster_id} was not accepted: {exc}"
            ) from exc
        logger.info(
            "global_cluster_failover_requested cluster=%s target=%s",
            global_cluster_id,
            target_cluster_id,
        )
        return response if isinstance(response, dict) else {}
