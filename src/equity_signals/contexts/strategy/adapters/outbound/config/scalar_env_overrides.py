from __future__ import annotations

from typing import Mapping

from equity_signals.platform.errors import InvalidConfigurationError, require_positive_int


def resolve_positive_int_override(
    *,
    environ: Mapping[str, str],
    key: str,
    default: int,
) -> int:
    """
    Pick an analysis setting from `environ[key]`, falling back to the YAML value.

    Related:
      - src/equity_signals/contexts/strategy/adapters/outbound/config/strategy_runtime_config.py
      - configs/dev/strategy.yaml

    Args:
        environ: Runtime environment mapping.
        key: Environment variable key, for example `EQUITY_SIGNALS_WORKERS`.
        default: Value from YAML (or its built-in default) used when the key is unset.
    Returns:
        int: Positive integer from the environment, or `default`.
    Assumptions:
        Blank values count as unset. `default` is validated by the config dataclass.
    Raises:
        InvalidConfigurationError: If the chosen value is not a positive int.
    Side Effects:
        None.
    """
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    if not raw.lstrip("+-").isdigit():
        raise InvalidConfigurationError(f"{key} must be int, got {raw!r}")
    return require_positive_int(value=int(raw), name=key)


__all__ = ["resolve_positive_int_override"]
