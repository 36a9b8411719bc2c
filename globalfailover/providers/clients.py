from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import boto3

from globalfailover.core.config import Settings
from globalfailover.core.parameters import FailoverParameters
from globalfailover.services.resilience import sdk_client_config


@dataclass(frozen=True)
class AwsClients:
    # Process-scoped SDK clients; routing_control is keyed by endpoint region in configuration order.
    rds: Any
    routing_control: Mapping[str, Any] = field(default_factory=dict)


def build_aws_clients(parameters: FailoverParameters, settings: Settings) -> AwsClients:
    config = sdk_client_config(settings)
    rds = boto3.client("rds", region_name=settings.aws_region, config=config)
    routing_control = {
        region: boto3.client(
            "route53-recovery-cluster",
            region_name=region,
            endpoint_url=endpoint,
            config=config,
        )
        for region, endpoint in parameters.cluster_endpoints.items()
    }
    return AwsClients(rds=rds, routing_control=routing_control)
