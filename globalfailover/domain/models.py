from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ClusterState(str, Enum):
    # Closed subset the engine branches on; every other control-plane status maps to OTHER.
    AVAILABLE = "available"
    FAILING_OVER = "failing-over"
    ERROR = "error"
    OTHER = "other"

    @classmethod
    def from_status(cls, status: str | None) -> "ClusterState":
        for member in (cls.AVAILABLE, cls.FAILING_OVER, cls.ERROR):
            if status == member.value:
                return member
        return cls.OTHER


class RoutingControlState(str, Enum):
    ON = "On"
    OFF = "Off"
    ERROR = "error"

    @classmethod
    def from_response(cls, value: object) -> "RoutingControlState":
        # Anything other than On/Off is a malformed read.
        if value == cls.ON.value:
            return cls.ON
        if value == cls.OFF.value:
            return cls.OFF
        return cls.ERROR


class DecisionOutcome(str, Enum):
    PARAMETERS_MISSING = "PARAMETERS_MISSING"
    DATABASE_ALREADY_FAILING_OVER = "DATABASE_ALREADY_FAILING_OVER"
    DATABASE_STATUS_ERROR = "DATABASE_STATUS_ERROR"
    TARGET_DATABASE_UNCLEAR = "TARGET_DATABASE_UNCLEAR"
    NO_ACTION_REQUIRED = "NO_ACTION_REQUIRED"
    REQUESTED_FAILOVER = "REQUESTED_FAILOVER"
    ERROR_REQUESTING_FAILOVER = "ERROR_REQUESTING_FAILOVER"


@dataclass(frozen=True)
class ClusterStatus:
    """Snapshot of the global cluster as reported by the control plane.

    ``status`` keeps the control-plane string verbatim (``None`` when the
    query failed); ``state`` is its classification. ``members`` maps each
    member cluster identifier to its writer flag.
    """

    state: ClusterState
    status: str | None = None
    members: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    @classmethod
    def error(cls) -> "ClusterStatus":
        return cls(state=ClusterState.ERROR, status=None)

    @classmethod
    def from_status(cls, status: str | None, members: Mapping[str, bool]) -> "ClusterStatus":
        return cls(state=ClusterState.from_status(status), status=status, members=members)

    def is_writer(self, cluster_id: str) -> bool:
        return bool(self.members.get(cluster_id, False))


@dataclass(frozen=True)
class RoutingControlStates:
    # Per-region control states from a single endpoint pass; error=True means no pass was clean.
    states: Mapping[str, RoutingControlState] = field(default_factory=dict)
    error: bool = False
    endpoint_region: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", MappingProxyType(dict(self.states)))

    @classmethod
    def failed(cls) -> "RoutingControlStates":
        return cls(states={}, error=True)

    def target_regions(self) -> list[str]:
        # An error sentinel makes every read unusable, even a partially filled one.
        if self.error:
            return []
        return [region for region, state in self.states.items() if state is RoutingControlState.ON]
