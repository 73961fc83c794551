from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, Mapping, TypeVar

from equity_signals.platform.errors import require_positive_int

log = logging.getLogger(__name__)

T = TypeVar("T")


class BatchAnalysisRunner:
    """
    Run independent per-ticker analyses on a fixed-size thread pool with a bounded wait.

    Tasks share no mutable state; a failing task fails the batch with its own exception and
    nothing is retried.

    Related:
      - src/equity_signals/contexts/analysis/application/services/backtest_analysis.py
      - src/equity_signals/contexts/analysis/application/services/live_analysis.py
      - apps/cli/commands/analyse.py
    """

    def __init__(self, *, workers: int, timeout_seconds: float) -> None:
        self._workers = require_positive_int(value=workers, name="batch.workers")
        if isinstance(timeout_seconds, bool) or timeout_seconds <= 0:
            raise ValueError(f"batch.timeout_seconds must be > 0, got {timeout_seconds!r}")
        self._timeout_seconds = float(timeout_seconds)

    def run(self, tasks: Mapping[str, Callable[[], T]]) -> dict[str, T]:
        """
        Execute every task and collect results by key.

        Args:
            tasks: Zero-argument callables keyed by ticker.
        Returns:
            dict[str, T]: Results in the key order of `tasks`.
        Assumptions:
            The wait bound covers the whole batch, not each task.
        Raises:
            TimeoutError: If some tasks are unfinished after `timeout_seconds`; pending work
                is cancelled first.
            Exception: The first failing task's exception, in key order.
        Side Effects:
            Starts up to `workers` threads for the duration of the call.
        """
        if not tasks:
            return {}

        executor = ThreadPoolExecutor(
            max_workers=min(self._workers, len(tasks)),
            thread_name_prefix="equity-signals-analysis",
        )
        try:
            future_by_key: dict[str, Future[T]] = {
                key: executor.submit(task) for key, task in tasks.items()
            }
            _, not_done = wait(future_by_key.values(), timeout=self._timeout_seconds)
            if not_done:
                for future in not_done:
                    future.cancel()
                pending = sorted(
                    key for key, future in future_by_key.items() if future in not_done
                )
                log.warning(
                    "batch analysis timed out timeout_seconds=%s pending=%s",
                    self._timeout_seconds,
                    pending,
                )
                raise TimeoutError(
                    f"batch analysis exceeded {self._timeout_seconds}s, pending={pending}"
                )
            return {key: future.result() for key, future in future_by_key.items()}
        finally:
            executor.shutdown(wait=False, cancel_futures=True)


__all__ = ["BatchAnalysisRunner"]
