from __future__ import annotations

import json
from typing import Any

from botocore.exceptions import ClientError, EndpointConnectionError

from globalfailover.core.config import Settings
from globalfailover.core.parameters import FailoverParameters
from globalfailover.providers.clients import AwsClients


GLOBAL_CLUSTER_ID = "orders-global"
EAST = "us-east-1"
WEST = "us-west-2"
EAST_CLUSTER_ARN = "arn:aws:rds:us-east-1:111122223333:cluster:orders-east"
WEST_CLUSTER_ARN = "arn:aws:rds:us-west-2:111122223333:cluster:orders-west"
EAST_CONTROL_ARN = "arn:aws:route53-recovery-control::111122223333:controlpanel/abc/routingcontrol/east"
WEST_CONTROL_ARN = "arn:aws:route53-recovery-control::111122223333:controlpanel/abc/routingcontrol/west"

CLUSTER_ARNS = {EAST: EAST_CLUSTER_ARN, WEST: WEST_CLUSTER_ARN}
CONTROL_ARNS = {EAST: EAST_CONTROL_ARN, WEST: WEST_CONTROL_ARN}
ENDPOINTS = {
    EAST: "https://host-aaaaaa.us-east-1.example.com/v1",
    WEST: "https://host-bbbbbb.us-west-2.example.com/v1",
}


def failover_env() -> dict[str, str]:
    # Raw values as the deployment template writes them: JSON-encoded, cluster id included.
    return {
        "DeploymentRegions": json.dumps([EAST, WEST]),
        "AuroraGlobalClusterId": json.dumps(GLOBAL_CLUSTER_ID),
        "AuroraClusterArns": json.dumps(CLUSTER_ARNS),
        "RoutingControlArns": json.dumps(CONTROL_ARNS),
        "ClusterEndpoints": json.dumps(ENDPOINTS),
    }


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {**failover_env(), **overrides}
    return Settings(_env_file=None, **values)


def make_parameters() -> FailoverParameters:
    return FailoverParameters(
        deployment_regions=[EAST, WEST],
        aurora_global_cluster_id=GLOBAL_CLUSTER_ID,
        aurora_cluster_arns=dict(CLUSTER_ARNS),
        routing_control_arns=dict(CONTROL_ARNS),
        cluster_endpoints=dict(ENDPOINTS),
    )


def client_error(code: str, operation: str, message: str = "request failed") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeRdsClient:
    def __init__(
        self,
        *,
        status: str = "available",
        writers: dict[str, bool] | None = None,
        clusters: list[dict[str, Any]] | None = None,
        describe_error: Exception | None = None,
        failover_error: Exception | None = None,
    ) -> None:
        self.status = status
        self.writers = writers if writers is not None else {EAST_CLUSTER_ARN: True, WEST_CLUSTER_ARN: False}
        self.clusters = clusters
        self.describe_error = describe_error
        self.failover_error = failover_error
        self.describe_calls: list[dict[str, Any]] = []
        self.failover_calls: list[dict[str, Any]] = []

    def describe_global_clusters(self, **kwargs: Any) -> dict[str, Any]:
        self.describe_calls.append(kwargs)
        if self.describe_error is not None:
            raise self.describe_error
        if self.clusters is not None:
            return {"GlobalClusters": self.clusters}
        return {
            "GlobalClusters": [
                {
                    "GlobalClusterIdentifier": kwargs.get("GlobalClusterIdentifier"),
                    "Status": self.status,
                    "GlobalClusterMembers": [
                        {"DBClusterArn": arn, "IsWriter": is_writer, "Readers": []}
                        for arn, is_writer in self.writers.items()
                    ],
                }
            ]
        }

    def failover_global_cluster(self, **kwargs: Any) -> dict[str, Any]:
        self.failover_calls.append(kwargs)
        if self.failover_error is not None:
            raise self.failover_error
        return {
            "GlobalCluster": {
                "GlobalClusterIdentifier": kwargs.get("GlobalClusterIdentifier"),
                "Status": "failing-over",
            }
        }


class FakeRoutingControlClient:
    def __init__(
        self,
        states: dict[str, str] | None = None,
        *,
        errors: dict[str, Exception] | None = None,
    ) -> None:
        self.states = states if states is not None else {EAST_CONTROL_ARN: "On", WEST_CONTROL_ARN: "Off"}
        self.errors = errors or {}
        self.calls: list[str] = []

    def get_routing_control_state(self, *, RoutingControlArn: str) -> dict[str, Any]:
        self.calls.append(RoutingControlArn)
        if RoutingControlArn in self.errors:
            raise self.errors[RoutingControlArn]
        return {
            "RoutingControlArn": RoutingControlArn,
            "RoutingControlState": self.states.get(RoutingControlArn),
            "RoutingControlName": RoutingControlArn.rsplit("/", 1)[-1],
        }


def unreachable_endpoint() -> FakeRoutingControlClient:
    error = EndpointConnectionError(endpoint_url="https://host-unreachable.example.com/v1")
    return FakeRoutingControlClient(errors={EAST_CONTROL_ARN: error, WEST_CONTROL_ARN: error})


def make_clients(
    rds: FakeRdsClient | None = None,
    routing_control: dict[str, FakeRoutingControlClient] | None = None,
) -> AwsClients:
    if routing_control is None:
        routing_control = {EAST: FakeRoutingControlClient(), WEST: FakeRoutingControlClient()}
    return AwsClients(rds=rds or FakeRdsClient(), routing_control=routing_control)
