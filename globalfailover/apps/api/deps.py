from __future__ import annotations

from globalfailover.apps.lambda_handler import process_clients
from globalfailover.core.config import Settings, get_settings
from globalfailover.services.invocation import ClientsFactory


def get_app_settings() -> Settings:
    return get_settings()


def get_clients_factory() -> ClientsFactory:
    # Share the process-scoped client set with the function entry point; tests override this.
    return process_clients
