from __future__ import annotations

import logging
import os
import sys

from apps.cli.commands.analyse import AnalyseCli

_LOG_LEVEL_ENV_KEY = "EQUITY_SIGNALS_LOG_LEVEL"
_USAGE = (
    "Usage:\n"
    "  backtest --prices CSV --ticker T [--ticker T2 ...] [--config PATH] [args...]\n"
    "  live --prices CSV --ticker T [--ticker T2 ...] [--config PATH] [args...]\n"
)


def _configure_logging() -> None:
    level_name = os.environ.get(_LOG_LEVEL_ENV_KEY, "INFO").strip().upper() or "INFO"
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    args = argv if argv is not None else sys.argv[1:]
    mode, rest = (args[0], args[1:]) if args else ("", [])

    if mode not in ("backtest", "live"):
        print(_USAGE)
        return 2
    return AnalyseCli(mode).run(rest)


if __name__ == "__main__":
    raise SystemExit(main())
