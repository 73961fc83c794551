from __future__ import annotations

import logging
from typing import Any, Sequence

from equity_signals.contexts.indicators.application.ports import IndicatorCalculator
from equity_signals.contexts.indicators.application.services import validate_prices
from equity_signals.contexts.signals.application.ports import SignalRangeFilter, SignalRule
from equity_signals.contexts.signals.domain.entities import IndicatorSignal, IndicatorSignalId
from equity_signals.platform.errors import InvalidConfigurationError, require_non_negative_int
from equity_signals.shared_kernel.primitives import TradingDayPrice

from .signal_range_filters import WholeSeriesSignalRangeFilter

log = logging.getLogger(__name__)


class IndicatorSignalGenerator:
    """
    One indicator calculator plus the rules that turn its output into signals.

    Related:
      - src/equity_signals/contexts/signals/application/services/builders.py
      - src/equity_signals/contexts/filters/application/services/signal_analysis.py
      - src/equity_signals/contexts/strategy/application/services/entries/indicator_entry.py
    """

    def __init__(
        self,
        *,
        signal_id: IndicatorSignalId | str,
        calculator: IndicatorCalculator[Any],
        rules: Sequence[SignalRule[Any]],
        range_filter: SignalRangeFilter | None = None,
        extra_trading_days: int = 0,
    ) -> None:
        """
        Store the generator configuration.

        Args:
            signal_id: Identity under which generated signals are bucketed.
            calculator: Configured indicator calculator.
            rules: Non-empty rule list evaluated over the calculator output.
            range_filter: Window of reportable dates; whole series when omitted.
            extra_trading_days: Bars needed on top of the calculator minimum.
        Returns:
            None.
        Assumptions:
            Rules accept the output type produced by `calculator`.
        Raises:
            InvalidConfigurationError: If rules are empty or extra days are negative.
        Side Effects:
            None.
        """
        if not rules:
            raise InvalidConfigurationError("IndicatorSignalGenerator requires at least one rule")
        self._signal_id = IndicatorSignalId.of(signal_id)
        self._calculator = calculator
        self._rules = tuple(rules)
        if range_filter is None:
            range_filter = WholeSeriesSignalRangeFilter()
        self._range_filter = range_filter
        self._extra_trading_days = require_non_negative_int(
            value=extra_trading_days,
            name="generator.extra_trading_days",
        )

    @property
    def signal_id(self) -> IndicatorSignalId:
        return self._signal_id

    @property
    def required_number_of_trading_days(self) -> int:
        return self._calculator.minimum_number_of_prices + self._extra_trading_days

    def generate(self, prices: Sequence[TradingDayPrice]) -> list[IndicatorSignal]:
        """
        Calculate the indicator and collect every rule event inside the signal range.

        Args:
            prices: Bars sorted ascending by date.
        Returns:
            list[IndicatorSignal]: De-duplicated signals sorted by date.
        Assumptions:
            An output without defined values yields no signals.
        Raises:
            InsufficientDataError: If `prices` is shorter than the calculator minimum.
        Side Effects:
            None.
        """
        validate_prices(prices, minimum=self._calculator.minimum_number_of_prices)
        output = self._calculator.calculate(prices)
        signal_range = self._range_filter.signal_range(prices)

        signals: set[IndicatorSignal] = set()
        for rule in self._rules:
            for day, direction in rule.evaluate(output, signal_range=signal_range):
                signals.add(
                    IndicatorSignal(date=day, signal_id=self._signal_id, direction=direction)
                )
        ordered = sorted(signals)
        log.debug(
            "indicator signals generated signal_id=%s prices=%s signals=%s",
            self._signal_id,
            len(prices),
            len(ordered),
        )
        return ordered


__all__ = ["IndicatorSignalGenerator"]
