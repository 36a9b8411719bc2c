from __future__ import annotations


class FailoverEngineError(Exception):
    """Base error for the failover engine."""


class ParametersMissingError(FailoverEngineError):
    """Required failover parameters are missing or unparsable."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"{', '.join(self.missing)} parameters are missing")


class ControlPlaneError(FailoverEngineError):
    """Database control-plane request failure or unexpected response."""


class RoutingControlReadError(FailoverEngineError):
    """Routing control state could not be read from a cluster endpoint."""


class FailoverRequestError(FailoverEngineError):
    """Global cluster failover request was rejected or failed to submit."""
