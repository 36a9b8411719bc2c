from __future__ import annotations

import pytest

from globalfailover.apps.lambda_handler import reset_process_clients
from globalfailover.core.config import get_settings
from globalfailover.services import telemetry


_FAILOVER_ENV = (
    "DeploymentRegions",
    "AuroraGlobalClusterId",
    "AuroraClusterArns",
    "RoutingControlArns",
    "ClusterEndpoints",
)


@pytest.fixture(autouse=True)
def isolate_failover_environment(monkeypatch) -> None:
    # Keep host env and cached settings/clients from leaking into decisions under test.
    for name in _FAILOVER_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_process_clients()
    telemetry.reset()
    yield
    get_settings.cache_clear()
    reset_process_clients()
    telemetry.reset()
