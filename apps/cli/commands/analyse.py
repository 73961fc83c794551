from __future__ import annotations

import argparse
import json
import logging
import os
from dataclasses import dataclass
from datetime import date, timedelta
from functools import partial
from pathlib import Path
from typing import Mapping, Sequence

from equity_signals.contexts.analysis.adapters import LoggingSignalSink
from equity_signals.contexts.analysis.application import (
    BacktestAnalysis,
    BatchAnalysisRunner,
    LiveAnalysis,
    SignalOutcomeReport,
)
from equity_signals.contexts.analysis.domain import AnalysisResult
from equity_signals.contexts.prices.adapters import CsvPriceHistory
from equity_signals.contexts.prices.application import PriceHistory
from equity_signals.contexts.strategy.adapters import (
    StrategyRuntimeConfig,
    load_strategy_config,
    resolve_strategy_config_path,
)
from equity_signals.contexts.strategy.application import StrategyFactory, TradingStrategy
from equity_signals.platform.time import Clock, SystemClock
from equity_signals.shared_kernel.primitives import DateRange, Ticker

log = logging.getLogger(__name__)

_MODES = ("backtest", "live")


@dataclass(frozen=True, slots=True)
class AnalyseCliArgs:
    mode: str
    prices_path: Path
    tickers: tuple[Ticker, ...]
    config_path: str | None
    date_range: DateRange
    horizon_days: int
    window_days: int | None
    report_format: str


@dataclass(frozen=True, slots=True)
class TickerReport:
    result: AnalysisResult
    outcome: SignalOutcomeReport | None

    def as_dict(self) -> dict[str, object]:
        payload = self.result.as_dict()
        payload["outcome"] = self.outcome.as_dict() if self.outcome is not None else None
        return payload


class AnalyseCli:
    """
    `backtest` / `live` command: run the configured strategy over CSV prices per ticker.

    Exit codes: 0 success, 1 analysis failure, 2 invalid arguments.

    Related:
      - apps/cli/main/main.py
      - src/equity_signals/contexts/strategy/adapters/outbound/config/strategy_runtime_config.py
      - src/equity_signals/contexts/analysis/application/services/batch_analysis_runner.py
    """

    def __init__(
        self,
        mode: str,
        *,
        environ: Mapping[str, str] | None = None,
        clock: Clock | None = None,
    ) -> None:
        if mode not in _MODES:
            raise ValueError(f"mode must be one of {_MODES}, got {mode!r}")
        self._mode = mode
        self._environ = dict(environ) if environ is not None else None
        self._clock = clock if clock is not None else SystemClock()

    def run(self, argv: Sequence[str]) -> int:
        ns = self._build_arg_parser().parse_args(list(argv))
        try:
            args = self._to_args(ns)
        except ValueError as e:
            log.error("Invalid arguments: %s", e)
            return 2

        try:
            runtime = load_strategy_config(
                resolve_strategy_config_path(
                    environ=self._effective_environ(),
                    cli_config_path=args.config_path,
                ),
                environ=self._effective_environ(),
            )
            strategy = StrategyFactory().strategy(runtime.strategy)
            reports = self._analyse(
                args=args,
                runtime=runtime,
                strategy=strategy,
                history=CsvPriceHistory(args.prices_path),
            )
        except Exception as e:  # noqa: BLE001
            log.exception("%s failed: %s", self._mode, e)
            return 1

        print(self._render(reports, report_format=args.report_format))
        return 0

    def _analyse(
        self,
        *,
        args: AnalyseCliArgs,
        runtime: StrategyRuntimeConfig,
        strategy: TradingStrategy,
        history: PriceHistory,
    ) -> dict[str, TickerReport]:
        runner = BatchAnalysisRunner(
            workers=runtime.analysis.workers,
            timeout_seconds=runtime.analysis.output_timeout_seconds,
        )
        window_days = (
            args.window_days if args.window_days is not None else runtime.analysis.live_window_days
        )
        tasks = {
            ticker.value: partial(
                self._analyse_ticker,
                ticker=ticker,
                args=args,
                strategy=strategy,
                history=history,
                window_days=window_days,
            )
            for ticker in args.tickers
        }
        return runner.run(tasks)

    def _analyse_ticker(
        self,
        *,
        ticker: Ticker,
        args: AnalyseCliArgs,
        strategy: TradingStrategy,
        history: PriceHistory,
        window_days: int,
    ) -> TickerReport:
        prices = history.prices(ticker, args.date_range)
        sink = LoggingSignalSink()
        if self._mode == "live":
            live = LiveAnalysis(strategy, sink, window_days=window_days, clock=self._clock)
            return TickerReport(result=live.run(prices), outcome=None)

        result = BacktestAnalysis(strategy, sink).run(prices)
        outcome = SignalOutcomeReport.build(
            prices,
            result.buy_signals,
            horizon_days=args.horizon_days,
        )
        return TickerReport(result=result, outcome=outcome)

    def _render(self, reports: Mapping[str, TickerReport], *, report_format: str) -> str:
        if report_format == "json":
            return json.dumps(
                {ticker: report.as_dict() for ticker, report in reports.items()},
                ensure_ascii=False,
            )

        lines = [f"{self._mode} report:"]
        for ticker, report in reports.items():
            result = report.result
            lines.append(
                f"- {ticker} {result.first_date}..{result.last_date}: "
                f"buys={len(result.buy_signals)} sells={len(result.sell_signals)}"
            )
            for buy in result.buy_signals:
                lines.append(f"    buy  {buy.date}")
            for sell in result.sell_signals:
                lines.append(f"    sell {sell.date}")
            outcome = report.outcome
            if outcome is not None and outcome.count:
                lines.append(
                    f"    outcome horizon={outcome.horizon_days}d count={outcome.count} "
                    f"mean={outcome.mean_return:.4f} median={outcome.median_return:.4f} "
                    f"hit_rate={outcome.hit_rate:.2%}"
                )
        return "\n".join(lines)

    def _effective_environ(self) -> Mapping[str, str]:
        if self._environ is not None:
            return self._environ
        return os.environ

    def _build_arg_parser(self) -> argparse.ArgumentParser:
        p = argparse.ArgumentParser(prog=self._mode)
        p.add_argument("--prices", required=True, help="CSV with ticker,date,open,high,low,close")
        p.add_argument(
            "--ticker",
            required=True,
            action="append",
            help="Ticker, e.g. VGS.AX. Can be passed multiple times.",
        )
        p.add_argument(
            "--config",
            default=None,
            help="Path to strategy.yaml (default: EQUITY_SIGNALS_STRATEGY_CONFIG or "
            "configs/<env>/strategy.yaml)",
        )
        p.add_argument("--start", default=None, help="ISO date, inclusive")
        p.add_argument("--end", default=None, help="ISO date, exclusive (default: tomorrow)")
        p.add_argument(
            "--horizon-days",
            default=20,
            type=int,
            help="Forward trading days for the buy-signal outcome report",
        )
        p.add_argument(
            "--window-days",
            default=None,
            type=int,
            help="Live window in calendar days (default: analysis.live_window_days)",
        )
        p.add_argument(
            "--report-format",
            choices=("text", "json"),
            default="text",
            help="Output format",
        )
        return p

    def _to_args(self, ns: argparse.Namespace) -> AnalyseCliArgs:
        tickers = tuple(dict.fromkeys(Ticker(str(raw)) for raw in ns.ticker))

        end = date.fromisoformat(ns.end) if ns.end else self._clock.today() + timedelta(days=1)
        start = date.fromisoformat(ns.start) if ns.start else date(1900, 1, 1)
        if start >= end:
            raise ValueError(f"start must be < end, got start={start} end={end}")

        if ns.horizon_days <= 0:
            raise ValueError(f"--horizon-days must be > 0, got {ns.horizon_days}")
        if ns.window_days is not None and ns.window_days <= 0:
            raise ValueError(f"--window-days must be > 0, got {ns.window_days}")

        return AnalyseCliArgs(
            mode=self._mode,
            prices_path=Path(ns.prices),
            tickers=tickers,
            config_path=ns.config,
            date_range=DateRange(start, end),
            horizon_days=ns.horizon_days,
            window_days=ns.window_days,
            report_format=ns.report_format,
        )


__all__ = ["AnalyseCli", "AnalyseCliArgs", "TickerReport"]
