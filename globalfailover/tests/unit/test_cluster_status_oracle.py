from __future__ import annotations

import pytest

from globalfailover.domain.models import ClusterState
from globalfailover.providers.rds import (
    DESCRIBE_INTEGRATION,
    GlobalClusterStatusOracle,
)
from globalfailover.services.telemetry import external_latency_by_integration
from globalfailover.tests.utils.aws import (
    EAST_CLUSTER_ARN,
    GLOBAL_CLUSTER_ID,
    WEST_CLUSTER_ARN,
    FakeRdsClient,
    client_error,
)


@pytest.mark.asyncio
async def test_status_and_writer_flags_are_recorded() -> None:
    client = FakeRdsClient(writers={EAST_CLUSTER_ARN: False, WEST_CLUSTER_ARN: True})
    status = await GlobalClusterStatusOracle(client, GLOBAL_CLUSTER_ID).query()
    assert client.describe_calls == [{"GlobalClusterIdentifier": GLOBAL_CLUSTER_ID}]
    assert status.state is ClusterState.AVAILABLE
    assert dict(status.members) == {EAST_CLUSTER_ARN: False, WEST_CLUSTER_ARN: True}


@pytest.mark.asyncio
async def test_unrecognized_status_passes_through() -> None:
    status = await GlobalClusterStatusOracle(FakeRdsClient(status="modifying"), GLOBAL_CLUSTER_ID).query()
    assert status.state is ClusterState.OTHER
    assert status.status == "modifying"


@pytest.mark.asyncio
async def test_failing_over_status_is_classified() -> None:
    status = await GlobalClusterStatusOracle(FakeRdsClient(status="failing-over"), GLOBAL_CLUSTER_ID).query()
    assert status.state is ClusterState.FAILING_OVER


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "clusters",
    [
        [],
        [
            {"Status": "available", "GlobalClusterMembers": []},
            {"Status": "available", "GlobalClusterMembers": []},
        ],
    ],
)
async def test_cluster_count_other_than_one_is_an_error(clusters: list) -> None:
    status = await GlobalClusterStatusOracle(FakeRdsClient(clusters=clusters), GLOBAL_CLUSTER_ID).query()
    assert status.state is ClusterState.ERROR
    assert dict(status.members) == {}


@pytest.mark.asyncio
async def test_api_error_becomes_error_state_and_is_counted() -> None:
    client = FakeRdsClient(
        describe_error=client_error("GlobalClusterNotFoundFault", "DescribeGlobalClusters")
    )
    status = await GlobalClusterStatusOracle(client, GLOBAL_CLUSTER_ID).query()
    assert status.state is ClusterState.ERROR
    stats = external_latency_by_integration(60)
    assert stats[DESCRIBE_INTEGRATION]["failures"] == 1
