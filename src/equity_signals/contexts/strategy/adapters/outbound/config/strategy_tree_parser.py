"""
YAML payload parser for strategy entry/exit trees.

Every node is a single-key mapping (`indicator`, `periodic`, `operator`, `confirmation`,
`signals`); an exit may also be the literal string `never`.

Related: equity_signals.contexts.strategy.domain.entities.strategy_config,
  equity_signals.contexts.strategy.adapters.outbound.config.strategy_runtime_config,
  apps.api.dto.analysis
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Collection, Mapping

from equity_signals.contexts.indicators.domain.entities import RsiSmoothing
from equity_signals.contexts.signals.application.services.rules import CrossoverLine
from equity_signals.contexts.signals.domain.entities import GradientType, SignalDirection
from equity_signals.contexts.strategy.domain.entities import (
    FILTER_KINDS,
    INDICATOR_TYPES,
    OPERATORS,
    ConfigScalar,
    ConfirmationNodeConfig,
    EntryNodeConfig,
    FilterNodeConfig,
    Frequency,
    IndicatorNodeConfig,
    NeverNodeConfig,
    OperatorNodeConfig,
    PeriodicNodeConfig,
    SignalsNodeConfig,
)
from equity_signals.contexts.strategy.domain.errors import StrategyConfigError

_NEVER = "never"
_NODE_KINDS = ("indicator", "periodic", "operator", "confirmation", "signals")


def _int_param(value: Any, *, yaml_path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise StrategyConfigError(f"expected int, got {type(value).__name__}", yaml_path=yaml_path)
    return value


def _threshold_param(value: Any, *, yaml_path: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise StrategyConfigError(
            f"expected number, got {type(value).__name__}",
            yaml_path=yaml_path,
        )
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation as error:
        raise StrategyConfigError(f"expected number, got {value!r}", yaml_path=yaml_path) from error
    if not parsed.is_finite():
        raise StrategyConfigError(f"expected finite number, got {value!r}", yaml_path=yaml_path)
    return parsed


def _choice_param(choices: tuple[str, ...]) -> Callable[..., str]:
    def parse(value: Any, *, yaml_path: str) -> str:
        if not isinstance(value, str) or value.strip().lower() not in choices:
            raise StrategyConfigError(
                f"must be one of {choices}, got {value!r}",
                yaml_path=yaml_path,
            )
        return value.strip().lower()

    return parse


def _lines_param(value: Any, *, yaml_path: str) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not value:
        raise StrategyConfigError("expected non-empty list of lines", yaml_path=yaml_path)
    parse_line = _choice_param(tuple(item.value for item in CrossoverLine))
    return tuple(
        parse_line(item, yaml_path=f"{yaml_path}[{index}]") for index, item in enumerate(value)
    )


_PARAM_PARSERS: Mapping[str, Mapping[str, Callable[..., ConfigScalar]]] = {
    "sma": {
        "lookback": _int_param,
        "gradient_type": _choice_param(tuple(item.value for item in GradientType)),
    },
    "ema": {
        "lookback": _int_param,
        "gradient_type": _choice_param(tuple(item.value for item in GradientType)),
    },
    "rsi": {
        "lookback": _int_param,
        "smoothing": _choice_param(tuple(item.value for item in RsiSmoothing)),
        "oversold": _threshold_param,
        "overbought": _threshold_param,
    },
    "macd": {
        "fast": _int_param,
        "slow": _int_param,
        "signal": _int_param,
        "lines": _lines_param,
    },
    "stochastic": {
        "lookback": _int_param,
        "k_smoothing": _int_param,
        "d_smoothing": _int_param,
    },
}
_INDICATOR_COMMON_KEYS = frozenset({"type", "id", "direction"})


def parse_entry_node(payload: Any, *, yaml_path: str) -> EntryNodeConfig:
    """
    Parse one strategy tree node and its children.

    Args:
        payload: Raw YAML/JSON value of the node.
        yaml_path: Dotted path of the node, for example `strategy.entry`.
    Returns:
        EntryNodeConfig: Frozen configuration node.
    Assumptions:
        Parameter values are validated against their types here; value ranges are validated
        later by the components built from the node.
    Raises:
        StrategyConfigError: If the node shape, a key or a value is invalid.
    Side Effects:
        None.
    """
    if isinstance(payload, str):
        if payload.strip().lower() == _NEVER:
            return NeverNodeConfig()
        raise StrategyConfigError(
            f"expected node mapping or {_NEVER!r}, got {payload!r}",
            yaml_path=yaml_path,
        )
    if not isinstance(payload, Mapping) or len(payload) != 1:
        raise StrategyConfigError(
            f"expected single-key node mapping with one of {_NODE_KINDS}",
            yaml_path=yaml_path,
        )

    kind, body = next(iter(payload.items()))
    node_path = f"{yaml_path}.{kind}"
    if kind not in _NODE_KINDS:
        raise StrategyConfigError(
            f"unknown node kind {kind!r}, expected one of {_NODE_KINDS}",
            yaml_path=yaml_path,
        )
    body = _require_mapping(body, yaml_path=node_path)

    if kind == "indicator":
        return parse_indicator_node(body, yaml_path=node_path)
    if kind == "periodic":
        return _parse_periodic(body, yaml_path=node_path)
    if kind == "operator":
        return _parse_operator(body, yaml_path=node_path)
    if kind == "confirmation":
        return _parse_confirmation(body, yaml_path=node_path)
    return _parse_signals(body, yaml_path=node_path)


def parse_indicator_node(body: Mapping[str, Any], *, yaml_path: str) -> IndicatorNodeConfig:
    """
    Parse an indicator mapping `{type, id, direction, ...params}`.

    Args:
        body: Indicator mapping.
        yaml_path: Dotted path of the mapping.
    Returns:
        IndicatorNodeConfig: Node whose params match the builder of its type.
    Assumptions:
        `id` defaults to the indicator type.
    Raises:
        StrategyConfigError: If the type is unknown or a parameter is not accepted.
    Side Effects:
        None.
    """
    indicator = _choice_param(INDICATOR_TYPES)(body.get("type"), yaml_path=f"{yaml_path}.type")
    parsers = _PARAM_PARSERS[indicator]
    _reject_unknown_keys(
        body,
        allowed=_INDICATOR_COMMON_KEYS | frozenset(parsers),
        yaml_path=yaml_path,
    )

    signal_id = body.get("id", indicator)
    if not isinstance(signal_id, str) or not signal_id.strip():
        raise StrategyConfigError("must be non-empty string", yaml_path=f"{yaml_path}.id")

    params = {
        key: parse(body[key], yaml_path=f"{yaml_path}.{key}")
        for key, parse in parsers.items()
        if key in body
    }
    return IndicatorNodeConfig(
        indicator=indicator,
        signal_id=signal_id,
        params=params,
        direction=_optional_direction(body, yaml_path=yaml_path),
    )


def _parse_periodic(body: Mapping[str, Any], *, yaml_path: str) -> PeriodicNodeConfig:
    _reject_unknown_keys(
        body,
        allowed={"first_signal", "frequency", "direction"},
        yaml_path=yaml_path,
    )
    raw_frequency = body.get("frequency")
    frequency: Frequency | timedelta
    if isinstance(raw_frequency, bool):
        raise StrategyConfigError("expected cadence or days", yaml_path=f"{yaml_path}.frequency")
    if isinstance(raw_frequency, int):
        if raw_frequency <= 0:
            raise StrategyConfigError(
                f"must be > 0, got {raw_frequency}",
                yaml_path=f"{yaml_path}.frequency",
            )
        frequency = timedelta(days=raw_frequency)
    else:
        frequency = Frequency(
            _choice_param(tuple(item.value for item in Frequency))(
                raw_frequency,
                yaml_path=f"{yaml_path}.frequency",
            )
        )
    return PeriodicNodeConfig(
        first_signal=_date_value(body.get("first_signal"), yaml_path=f"{yaml_path}.first_signal"),
        frequency=frequency,
        direction=_optional_direction(body, yaml_path=yaml_path),
    )


def _parse_operator(body: Mapping[str, Any], *, yaml_path: str) -> OperatorNodeConfig:
    _reject_unknown_keys(body, allowed={"op", "left", "right"}, yaml_path=yaml_path)
    operator = _choice_param(OPERATORS)(body.get("op"), yaml_path=f"{yaml_path}.op")
    return OperatorNodeConfig(
        operator=operator,
        left=parse_entry_node(
            _required(body, "left", yaml_path=yaml_path),
            yaml_path=f"{yaml_path}.left",
        ),
        right=parse_entry_node(
            _required(body, "right", yaml_path=yaml_path),
            yaml_path=f"{yaml_path}.right",
        ),
    )


def _parse_confirmation(body: Mapping[str, Any], *, yaml_path: str) -> ConfirmationNodeConfig:
    _reject_unknown_keys(
        body,
        allowed={"anchor", "confirmation", "delay_days", "range_days"},
        yaml_path=yaml_path,
    )
    return ConfirmationNodeConfig(
        anchor=parse_entry_node(
            _required(body, "anchor", yaml_path=yaml_path),
            yaml_path=f"{yaml_path}.anchor",
        ),
        confirmation=parse_entry_node(
            _required(body, "confirmation", yaml_path=yaml_path),
            yaml_path=f"{yaml_path}.confirmation",
        ),
        delay_days=_non_negative_int(body, "delay_days", default=0, yaml_path=yaml_path),
        range_days=_non_negative_int(body, "range_days", default=0, yaml_path=yaml_path),
    )


def _parse_signals(body: Mapping[str, Any], *, yaml_path: str) -> SignalsNodeConfig:
    _reject_unknown_keys(
        body,
        allowed={"generators", "filters", "lenient", "direction"},
        yaml_path=yaml_path,
    )
    raw_generators = _non_empty_list(body, "generators", yaml_path=yaml_path)
    raw_filters = _non_empty_list(body, "filters", yaml_path=yaml_path)
    lenient = body.get("lenient", False)
    if not isinstance(lenient, bool):
        raise StrategyConfigError(
            f"expected bool, got {type(lenient).__name__}",
            yaml_path=f"{yaml_path}.lenient",
        )

    generators = tuple(
        parse_indicator_node(
            _require_mapping(item, yaml_path=f"{yaml_path}.generators[{index}]"),
            yaml_path=f"{yaml_path}.generators[{index}]",
        )
        for index, item in enumerate(raw_generators)
    )
    filters = tuple(
        _parse_filter(
            _require_mapping(item, yaml_path=f"{yaml_path}.filters[{index}]"),
            yaml_path=f"{yaml_path}.filters[{index}]",
        )
        for index, item in enumerate(raw_filters)
    )
    return SignalsNodeConfig(
        generators=generators,
        filters=filters,
        lenient=lenient,
        direction=_optional_direction(body, yaml_path=yaml_path),
    )


def _parse_filter(body: Mapping[str, Any], *, yaml_path: str) -> FilterNodeConfig:
    _reject_unknown_keys(
        body,
        allowed={
            "kind",
            "ids",
            "anchor",
            "confirmation",
            "delay_days",
            "range_days",
            "direction",
            "within_days",
            "start",
            "end",
        },
        yaml_path=yaml_path,
    )
    kind = _choice_param(FILTER_KINDS)(body.get("kind"), yaml_path=f"{yaml_path}.kind")
    if kind == "confirmation":
        signal_ids = (
            _id_value(body.get("anchor"), yaml_path=f"{yaml_path}.anchor"),
            _id_value(body.get("confirmation"), yaml_path=f"{yaml_path}.confirmation"),
        )
    else:
        raw_ids = _non_empty_list(body, "ids", yaml_path=yaml_path)
        signal_ids = tuple(
            _id_value(item, yaml_path=f"{yaml_path}.ids[{index}]")
            for index, item in enumerate(raw_ids)
        )

    within_days = None
    if "within_days" in body:
        within_days = _non_negative_int(body, "within_days", default=0, yaml_path=yaml_path)
    start = (
        _date_value(body["start"], yaml_path=f"{yaml_path}.start") if "start" in body else None
    )
    end = _date_value(body["end"], yaml_path=f"{yaml_path}.end") if "end" in body else None
    if (start is None) != (end is None):
        raise StrategyConfigError("start and end must be set together", yaml_path=yaml_path)
    if start is not None and end is not None and start > end:
        raise StrategyConfigError(f"start must be <= end, got {start} > {end}", yaml_path=yaml_path)

    return FilterNodeConfig(
        kind=kind,
        signal_ids=signal_ids,
        delay_days=_non_negative_int(body, "delay_days", default=0, yaml_path=yaml_path),
        range_days=_non_negative_int(body, "range_days", default=0, yaml_path=yaml_path),
        direction=_optional_direction(body, yaml_path=yaml_path),
        within_days=within_days,
        start=start,
        end=end,
    )


def _require_mapping(value: Any, *, yaml_path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise StrategyConfigError(
            f"expected mapping, got {type(value).__name__}",
            yaml_path=yaml_path,
        )
    return value


def _required(body: Mapping[str, Any], key: str, *, yaml_path: str) -> Any:
    if key not in body:
        raise StrategyConfigError(f"missing required key: {key}", yaml_path=yaml_path)
    return body[key]


def _reject_unknown_keys(
    body: Mapping[str, Any],
    *,
    allowed: Collection[str],
    yaml_path: str,
) -> None:
    unknown = sorted(str(key) for key in body if key not in allowed)
    if unknown:
        raise StrategyConfigError(f"unknown keys {unknown}", yaml_path=yaml_path)


def _non_negative_int(
    body: Mapping[str, Any],
    key: str,
    *,
    default: int,
    yaml_path: str,
) -> int:
    if key not in body:
        return default
    value = _int_param(body[key], yaml_path=f"{yaml_path}.{key}")
    if value < 0:
        raise StrategyConfigError("must be >= 0", yaml_path=f"{yaml_path}.{key}")
    return value


def _non_empty_list(body: Mapping[str, Any], key: str, *, yaml_path: str) -> list[Any]:
    value = body.get(key)
    if not isinstance(value, list) or not value:
        raise StrategyConfigError("expected non-empty list", yaml_path=f"{yaml_path}.{key}")
    return value


def _id_value(value: Any, *, yaml_path: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise StrategyConfigError("expected non-empty signal id", yaml_path=yaml_path)
    return value.strip().lower()


def _date_value(value: Any, *, yaml_path: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise StrategyConfigError(
                f"expected ISO date, got {value!r}",
                yaml_path=yaml_path,
            ) from error
    raise StrategyConfigError(f"expected date, got {type(value).__name__}", yaml_path=yaml_path)


def _optional_direction(body: Mapping[str, Any], *, yaml_path: str) -> SignalDirection | None:
    if body.get("direction") is None:
        return None
    return SignalDirection(
        _choice_param(tuple(item.value for item in SignalDirection))(
            body["direction"],
            yaml_path=f"{yaml_path}.direction",
        )
    )


__all__ = ["parse_entry_node", "parse_indicator_node"]
