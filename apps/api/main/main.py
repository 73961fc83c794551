"""
Process entrypoint serving `apps.api.main.app:app` with uvicorn.
"""

from __future__ import annotations

import argparse
import os
from typing import Mapping, Sequence

import uvicorn

_HOST_ENV_KEY = "EQUITY_SIGNALS_API_HOST"
_PORT_ENV_KEY = "EQUITY_SIGNALS_API_PORT"


def _build_parser(*, environ: Mapping[str, str]) -> argparse.ArgumentParser:
    """
    Build the API process parser; env values provide the defaults.

    Args:
        environ: Environment mapping read for `EQUITY_SIGNALS_API_HOST` / `_PORT`.
    Returns:
        argparse.ArgumentParser: Parser for `--host`, `--port` and `--log-level`.
    Assumptions:
        Command-line flags win over environment values.
    Raises:
        ValueError: If the port env value is not an integer.
    Side Effects:
        None.
    """
    parser = argparse.ArgumentParser(prog="equity-signals-api")
    parser.add_argument("--host", default=environ.get(_HOST_ENV_KEY, "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(environ.get(_PORT_ENV_KEY, "8000")))
    parser.add_argument(
        "--log-level",
        choices=("debug", "info", "warning", "error"),
        default="info",
    )
    return parser


def main(argv: Sequence[str] | None = None, *, environ: Mapping[str, str] | None = None) -> int:
    effective_environ = environ if environ is not None else os.environ
    args = _build_parser(environ=effective_environ).parse_args(argv)
    uvicorn.run(
        "apps.api.main.app:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
