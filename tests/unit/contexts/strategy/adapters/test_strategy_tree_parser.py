from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Any

import pytest

from equity_signals.contexts.signals.domain import SignalDirection
from equity_signals.contexts.strategy.adapters.outbound.config import parse_entry_node
from equity_signals.contexts.strategy.domain import (
    ConfirmationNodeConfig,
    Frequency,
    IndicatorNodeConfig,
    NeverNodeConfig,
    OperatorNodeConfig,
    PeriodicNodeConfig,
    SignalsNodeConfig,
    StrategyConfigError,
)


def test_parse_indicator_node_with_params() -> None:
    """
    Verify indicator nodes keep typed params and default their id to the type.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        RSI thresholds accept ints and are stored as Decimal.
    Raises:
        AssertionError: If parsing output differs.
    Side Effects:
        None.
    """
    node = parse_entry_node(
        {"indicator": {"type": "RSI", "lookback": 10, "oversold": 25, "direction": "bullish"}},
        yaml_path="strategy.entry",
    )

    assert isinstance(node, IndicatorNodeConfig)
    assert node.indicator == "rsi"
    assert node.signal_id == "rsi"
    assert dict(node.params) == {"lookback": 10, "oversold": Decimal(25)}
    assert node.direction is SignalDirection.BULLISH


def test_parse_nested_operator_and_confirmation_tree() -> None:
    payload = {
        "operator": {
            "op": "AND",
            "left": {"periodic": {"first_signal": "2024-01-01", "frequency": 7}},
            "right": {
                "confirmation": {
                    "anchor": {"indicator": {"type": "ema", "id": "ema-20", "lookback": 20}},
                    "confirmation": {"indicator": {"type": "macd", "lines": "zero_line"}},
                    "delay_days": 1,
                    "range_days": 3,
                }
            },
        }
    }

    node = parse_entry_node(payload, yaml_path="strategy.entry")

    assert isinstance(node, OperatorNodeConfig)
    assert node.operator == "and"
    assert node.left == PeriodicNodeConfig(
        first_signal=date(2024, 1, 1),
        frequency=timedelta(days=7),
    )
    assert isinstance(node.right, ConfirmationNodeConfig)
    assert (node.right.delay_days, node.right.range_days) == (1, 3)
    assert dict(node.right.confirmation.params) == {"lines": ("zero_line",)}


def test_parse_signals_node_with_filters() -> None:
    payload = {
        "signals": {
            "generators": [
                {"type": "rsi", "id": "rsi"},
                {"type": "stochastic", "id": "stoch", "k_smoothing": 3},
            ],
            "filters": [
                {"kind": "confirmation", "anchor": "RSI", "confirmation": "stoch", "range_days": 2},
                {"kind": "any", "ids": ["rsi"], "within_days": 5},
            ],
            "lenient": True,
        }
    }

    node = parse_entry_node(payload, yaml_path="strategy.entry")

    assert isinstance(node, SignalsNodeConfig)
    assert node.lenient is True
    assert [generator.signal_id for generator in node.generators] == ["rsi", "stoch"]
    assert node.filters[0].signal_ids == ("rsi", "stoch")
    assert node.filters[0].range_days == 2
    assert node.filters[1].within_days == 5


def test_parse_never_exit_and_monthly_periodic() -> None:
    periodic = parse_entry_node(
        {"periodic": {"first_signal": date(2020, 1, 1), "frequency": "monthly"}},
        yaml_path="strategy.entry",
    )

    assert parse_entry_node("never", yaml_path="strategy.exit") == NeverNodeConfig()
    assert isinstance(periodic, PeriodicNodeConfig)
    assert periodic.frequency is Frequency.MONTHLY


@pytest.mark.parametrize(
    ("payload", "yaml_path", "message"),
    [
        (
            {"indicator": {"type": "sma", "lookback": 3, "colour": "red"}},
            "strategy.entry.indicator",
            "unknown keys ['colour']",
        ),
        ({"indicator": {"lookback": 3}}, "strategy.entry.indicator.type", "must be one of"),
        (
            {"indicator": {"type": "sma", "lookback": "3"}},
            "strategy.entry.indicator.lookback",
            "expected int",
        ),
        (
            {"operator": {"op": "or", "left": "never"}},
            "strategy.entry.operator",
            "missing required key: right",
        ),
        (
            {"confirmation": {"anchor": "never", "confirmation": "never", "delay_days": -1}},
            "strategy.entry.confirmation.delay_days",
            "must be >= 0",
        ),
        (
            {
                "signals": {
                    "generators": [{"type": "rsi"}],
                    "filters": [{"kind": "any", "ids": ["rsi"], "start": "2024-01-01"}],
                }
            },
            "strategy.entry.signals.filters[0]",
            "start and end must be set together",
        ),
        ({"indicator": {}, "periodic": {}}, "strategy.entry", "single-key node mapping"),
        ({"sometimes": {}}, "strategy.entry", "unknown node kind"),
        ("always", "strategy.entry", "expected node mapping or 'never'"),
        (
            {"periodic": {"first_signal": "soon", "frequency": "weekly"}},
            "strategy.entry.periodic.first_signal",
            "expected ISO date",
        ),
    ],
)
def test_parse_rejects_invalid_nodes_with_path(
    payload: Any,
    yaml_path: str,
    message: str,
) -> None:
    """
    Verify malformed nodes fail with the dotted path of the offending node.

    Args:
        payload: Invalid node payload.
        yaml_path: Expected error path.
        message: Expected message fragment.
    Returns:
        None.
    Assumptions:
        Parsing starts at `strategy.entry`.
    Raises:
        AssertionError: If the error path or message differs.
    Side Effects:
        None.
    """
    with pytest.raises(StrategyConfigError) as error:
        parse_entry_node(payload, yaml_path="strategy.entry")

    assert error.value.yaml_path == yaml_path
    assert message in str(error.value)
    assert str(error.value).startswith(yaml_path)
