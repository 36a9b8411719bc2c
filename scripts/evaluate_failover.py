from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from globalfailover.apps.lambda_handler import evaluate
from globalfailover.core.logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run one global cluster failover evaluation and print the result code."
    )
    parser.add_argument(
        "--event",
        default=None,
        help="Optional JSON event payload recorded in the invocation log",
    )
    return parser


def _parse_event(raw: str | None) -> Any:
    if raw is None:
        return {"source": "cli"}
    return json.loads(raw)


def main() -> int:
    parser = _build_parser()
    args = parser.parse_args()
    try:
        event = _parse_event(args.event)
    except ValueError as exc:
        print(f"INVALID_EVENT: {exc}", file=sys.stderr)
        return 2
    configure_logging()
    result = asyncio.run(evaluate(event, {"source": "cli"}))
    if result.outcome is None:
        print(f"HANDLER_ERROR: {result.error}", file=sys.stderr)
        return 1
    print(result.code)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
