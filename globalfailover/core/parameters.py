from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import TypeAdapter, ValidationError

from globalfailover.core.config import Settings
from globalfailover.core.errors import ParametersMissingError


_REGION_LIST = TypeAdapter(list[str])
_REGION_MAP = TypeAdapter(dict[str, str])
_CLUSTER_ID = TypeAdapter(str)


@dataclass(frozen=True)
class FailoverParameters:
    # Typed view of the deployment parameters; mapping order is configuration order.
    deployment_regions: list[str]
    aurora_global_cluster_id: str
    aurora_cluster_arns: dict[str, str]
    routing_control_arns: dict[str, str]
    cluster_endpoints: dict[str, str]


def _parse_json(adapter: TypeAdapter) -> Callable[[str], Any]:
    def _parse(raw: str) -> Any:
        return adapter.validate_json(raw)

    return _parse


def _parse_cluster_id(raw: str) -> str:
    # Templates may pass the identifier JSON-encoded or as a bare string.
    try:
        return _CLUSTER_ID.validate_json(raw)
    except ValidationError:
        return raw.strip()


# Parameter name -> (settings attribute, parser). Order drives the reported missing list.
_PARAMETERS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "DeploymentRegions": ("deployment_regions", _parse_json(_REGION_LIST)),
    "AuroraGlobalClusterId": ("aurora_global_cluster_id", _parse_cluster_id),
    "AuroraClusterArns": ("aurora_cluster_arns", _parse_json(_REGION_MAP)),
    "RoutingControlArns": ("routing_control_arns", _parse_json(_REGION_MAP)),
    "ClusterEndpoints": ("cluster_endpoints", _parse_json(_REGION_MAP)),
}


class ConfigurationResolver:
    """Parse the required failover parameters from settings, collecting failures.

    Missing, empty and unparsable values are all reported by parameter name;
    nothing is raised from ``validate``.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._values: dict[str, Any] = {}
        self._missing: list[str] = []
        self._resolved = False

    def _resolve_all(self) -> None:
        if self._resolved:
            return
        for name, (attribute, parse) in _PARAMETERS.items():
            raw = getattr(self._settings, attribute)
            if raw is None or not str(raw).strip():
                self._missing.append(name)
                continue
            try:
                value = parse(raw)
            except (ValidationError, ValueError):
                self._missing.append(name)
                continue
            if not value:
                self._missing.append(name)
                continue
            self._values[attribute] = value
        self._resolved = True

    def validate(self) -> list[str]:
        self._resolve_all()
        return list(self._missing)

    def resolve(self) -> FailoverParameters:
        missing = self.validate()
        if len(missing) > 0:
            raise ParametersMissingError(missing)
        return FailoverParameters(**self._values)
