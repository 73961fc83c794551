from __future__ import annotations

import logging
from typing import Sequence

from equity_signals.contexts.filters.application.ports import SignalFilter
from equity_signals.contexts.filters.domain.entities import BY_DATE, SignalOrdering, SignalSet
from equity_signals.contexts.indicators.domain.errors import InsufficientDataError
from equity_signals.contexts.signals.application.services import IndicatorSignalGenerator
from equity_signals.contexts.signals.domain.entities import IndicatorSignal, IndicatorSignalId
from equity_signals.platform.errors import InvalidConfigurationError
from equity_signals.shared_kernel.primitives import TradingDayPrice, sort_by_date

log = logging.getLogger(__name__)


class SignalAnalysis:
    """
    Run several signal generators over one price series and combine them through filters.

    Related:
      - src/equity_signals/contexts/filters/application/services/indicator_signal_filters.py
      - src/equity_signals/contexts/strategy/application/services/entries/analysis_entry.py
    """

    def __init__(
        self,
        *,
        generators: Sequence[IndicatorSignalGenerator],
        filters: Sequence[SignalFilter],
        lenient: bool = False,
        ordering: SignalOrdering = BY_DATE,
    ) -> None:
        """
        Validate the generator and filter wiring.

        Args:
            generators: Generators with unique signal identities.
            filters: Filters whose results are unioned.
            lenient: Whether generators short of data yield empty buckets instead of failing.
            ordering: Ordering of the returned signal set.
        Returns:
            None.
        Assumptions:
            Filters only reference identities of the configured generators.
        Raises:
            InvalidConfigurationError: If generators or filters are empty or ids repeat.
        Side Effects:
            None.
        """
        if not generators:
            raise InvalidConfigurationError("SignalAnalysis requires at least one generator")
        if not filters:
            raise InvalidConfigurationError("SignalAnalysis requires at least one filter")
        signal_ids = [str(generator.signal_id) for generator in generators]
        if len(set(signal_ids)) != len(signal_ids):
            raise InvalidConfigurationError(
                f"SignalAnalysis requires unique generator ids, got {signal_ids}"
            )
        self._generators = tuple(generators)
        self._filters = tuple(filters)
        self._lenient = lenient
        self._ordering = ordering

    @property
    def maximum_number_of_trading_days_required(self) -> int:
        """
        Longest generator lead-in plus the widest filter window.

        Returns:
            int: Bars needed so a confirmation ending on the last bar still sees its anchor.
        """
        generator_days = max(
            generator.required_number_of_trading_days for generator in self._generators
        )
        filter_days = max(
            signal_filter.required_trading_prices() for signal_filter in self._filters
        )
        return generator_days + filter_days

    def analyse(self, prices: Sequence[TradingDayPrice]) -> SignalSet:
        """
        Generate every bucket and union the filter results.

        Args:
            prices: Bars in any order; sorted here.
        Returns:
            SignalSet: Union of all filter outputs.
        Assumptions:
            The latest trading date is the date of the last sorted bar.
        Raises:
            InsufficientDataError: If a generator lacks data in strict mode.
            MissingSignalBucketError: If a filter references an unknown identity.
        Side Effects:
            Logs a warning per skipped generator in lenient mode.
        """
        ordered = sort_by_date(prices)
        if not ordered:
            return SignalSet(ordering=self._ordering)

        buckets: dict[IndicatorSignalId, list[IndicatorSignal]] = {}
        for generator in self._generators:
            try:
                buckets[generator.signal_id] = generator.generate(ordered)
            except InsufficientDataError as error:
                if not self._lenient:
                    raise
                log.warning(
                    "signal generator skipped signal_id=%s required=%s given=%s",
                    generator.signal_id,
                    error.required,
                    error.given,
                )
                buckets[generator.signal_id] = []

        latest_trading_date = ordered[-1].date
        result: SignalSet = SignalSet(ordering=self._ordering)
        for signal_filter in self._filters:
            result = result.union(
                signal_filter.apply(
                    buckets,
                    latest_trading_date=latest_trading_date,
                    ordering=self._ordering,
                )
            )
        log.debug(
            "signal analysis finished latest_trading_date=%s signals=%s",
            latest_trading_date,
            len(result),
        )
        return result


__all__ = ["SignalAnalysis"]
