from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    app_name: str = "globalfailover"
    log_level: str = "INFO"

    # Region hosting the RDS control-plane client used for describe/failover calls.
    aws_region: str = "us-east-1"
    # Per-call socket bounds applied by botocore; calls run sequentially, so they add up per invocation.
    aws_connect_timeout_s: float = 2.0
    aws_read_timeout_s: float = 5.0

    # Failover parameters keep their deployment-template env names and raw (possibly JSON) values.
    deployment_regions: str | None = Field(
        default=None, validation_alias=AliasChoices("DeploymentRegions", "DEPLOYMENT_REGIONS")
    )
    aurora_global_cluster_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AuroraGlobalClusterId", "AURORA_GLOBAL_CLUSTER_ID"),
    )
    aurora_cluster_arns: str | None = Field(
        default=None, validation_alias=AliasChoices("AuroraClusterArns", "AURORA_CLUSTER_ARNS")
    )
    routing_control_arns: str | None = Field(
        default=None, validation_alias=AliasChoices("RoutingControlArns", "ROUTING_CONTROL_ARNS")
    )
    cluster_endpoints: str | None = Field(
        default=None, validation_alias=AliasChoices("ClusterEndpoints", "CLUSTER_ENDPOINTS")
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
