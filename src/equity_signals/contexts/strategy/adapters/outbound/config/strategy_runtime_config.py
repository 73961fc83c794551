from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from equity_signals.contexts.strategy.domain.entities import NeverNodeConfig, StrategyConfig

from .scalar_env_overrides import resolve_positive_int_override
from .strategy_tree_parser import parse_entry_node

_ENV_NAME_KEY = "EQUITY_SIGNALS_ENV"
_STRATEGY_CONFIG_PATH_KEY = "EQUITY_SIGNALS_STRATEGY_CONFIG"
_ALLOWED_ENVS = ("dev", "prod", "test")

_LIVE_WINDOW_DAYS_ENV_KEY = "EQUITY_SIGNALS_LIVE_WINDOW_DAYS"
_WORKERS_ENV_KEY = "EQUITY_SIGNALS_WORKERS"
_OUTPUT_TIMEOUT_SECONDS_ENV_KEY = "EQUITY_SIGNALS_OUTPUT_TIMEOUT_SECONDS"


@dataclass(frozen=True, slots=True)
class AnalysisRuntimeConfig:
    """
    AnalysisRuntimeConfig: live window and batch execution bounds from `strategy.yaml`.

    Related:
      - src/equity_signals/contexts/analysis/application/services/live_analysis.py
      - src/equity_signals/contexts/analysis/application/services/batch_analysis_runner.py
      - configs/dev/strategy.yaml
    """

    live_window_days: int
    workers: int
    output_timeout_seconds: int

    def __post_init__(self) -> None:
        """
        Validate analysis runtime invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            All bounds are strictly positive.
        Raises:
            ValueError: If one of the values is not positive.
        Side Effects:
            None.
        """
        if self.live_window_days <= 0:
            raise ValueError("analysis.live_window_days must be > 0")
        if self.workers <= 0:
            raise ValueError("analysis.workers must be > 0")
        if self.output_timeout_seconds <= 0:
            raise ValueError("analysis.output_timeout_seconds must be > 0")


@dataclass(frozen=True, slots=True)
class StrategyRuntimeConfig:
    """
    StrategyRuntimeConfig: source-of-truth strategy config (`strategy.yaml`).

    Related:
      - configs/dev/strategy.yaml
      - apps/cli/commands/analyse.py
      - src/equity_signals/contexts/strategy/application/services/strategy_factory.py
    """

    version: int
    strategy: StrategyConfig
    analysis: AnalysisRuntimeConfig

    def __post_init__(self) -> None:
        if self.version != 1:
            raise ValueError(f"strategy config version must be 1, got {self.version}")


def resolve_strategy_config_path(
    *,
    environ: Mapping[str, str],
    cli_config_path: str | Path | None = None,
) -> Path:
    """
    Resolve strategy config path using CLI/env/fallback precedence.

    Related:
      - apps/cli/commands/analyse.py
      - configs/dev/strategy.yaml

    Args:
        environ: Runtime environment mapping.
        cli_config_path: Optional explicit CLI override path.
    Returns:
        Path: Resolved path to the strategy config.
    Assumptions:
        Precedence is CLI `--config` > `EQUITY_SIGNALS_STRATEGY_CONFIG` >
        `configs/<env>/strategy.yaml`.
    Raises:
        ValueError: If `EQUITY_SIGNALS_ENV` value is invalid.
    Side Effects:
        None.
    """
    if cli_config_path is not None:
        raw_cli_path = str(cli_config_path).strip()
        if raw_cli_path:
            return Path(raw_cli_path)

    override_path = environ.get(_STRATEGY_CONFIG_PATH_KEY, "").strip()
    if override_path:
        return Path(override_path)

    env_name = _resolve_env_name(environ=environ)
    return Path("configs") / env_name / "strategy.yaml"


def load_strategy_config(
    path: str | Path,
    *,
    environ: Mapping[str, str] | None = None,
) -> StrategyRuntimeConfig:
    """
    Load and validate a strategy YAML config.

    Related:
      - configs/dev/strategy.yaml
      - src/equity_signals/contexts/strategy/adapters/outbound/config/strategy_tree_parser.py
      - apps/cli/commands/analyse.py

    Args:
        path: Path to `strategy.yaml`.
        environ: Optional runtime environment mapping used for scalar overrides.
    Returns:
        StrategyRuntimeConfig: Parsed and validated config.
    Assumptions:
        YAML payload contains top-level `version` and `strategy` mappings; `analysis`
        is optional.
    Raises:
        FileNotFoundError: If config path does not exist.
        StrategyConfigError: If the entry or exit tree is invalid.
        ValueError: If YAML structure, values, or scalar env overrides are invalid.
    Side Effects:
        Reads one UTF-8 YAML file from filesystem.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"strategy config not found: {config_path}")

    payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    return parse_strategy_runtime_config(payload, environ=environ)


def parse_strategy_runtime_config(
    payload: Any,
    *,
    environ: Mapping[str, str] | None = None,
) -> StrategyRuntimeConfig:
    """
    Build runtime config from an already-decoded YAML payload.

    Args:
        payload: Decoded top-level YAML value.
        environ: Optional runtime environment mapping used for scalar overrides.
    Returns:
        StrategyRuntimeConfig: Parsed and validated config.
    Assumptions:
        `environ=None` means the process environment.
    Raises:
        StrategyConfigError: If the entry or exit tree is invalid.
        ValueError: If structure or scalar values are invalid.
    Side Effects:
        None.
    """
    effective_environ = os.environ if environ is None else environ
    if not isinstance(payload, Mapping):
        raise ValueError("strategy config must be mapping at top-level")

    version = _get_int(payload, "version", required=True)
    strategy_map = _get_mapping(payload, "strategy", required=True)
    analysis_map = _get_mapping(payload, "analysis", required=False)

    if "entry" not in strategy_map:
        raise ValueError("missing required key: strategy.entry")
    entry = parse_entry_node(strategy_map["entry"], yaml_path="strategy.entry")
    exit_ = (
        parse_entry_node(strategy_map["exit"], yaml_path="strategy.exit")
        if strategy_map.get("exit") is not None
        else NeverNodeConfig()
    )

    return StrategyRuntimeConfig(
        version=version,
        strategy=StrategyConfig(
            name=_get_str_with_default(strategy_map, "name", default="strategy"),
            entry=entry,
            exit=exit_,
        ),
        analysis=AnalysisRuntimeConfig(
            live_window_days=resolve_positive_int_override(
                environ=effective_environ,
                key=_LIVE_WINDOW_DAYS_ENV_KEY,
                default=_get_int_with_default(analysis_map, "live_window_days", default=5),
            ),
            workers=resolve_positive_int_override(
                environ=effective_environ,
                key=_WORKERS_ENV_KEY,
                default=_get_int_with_default(analysis_map, "workers", default=4),
            ),
            output_timeout_seconds=resolve_positive_int_override(
                environ=effective_environ,
                key=_OUTPUT_TIMEOUT_SECONDS_ENV_KEY,
                default=_get_int_with_default(analysis_map, "output_timeout_seconds", default=60),
            ),
        ),
    )


def _resolve_env_name(*, environ: Mapping[str, str]) -> str:
    """
    Resolve normalized runtime environment name for strategy config fallback path.

    Args:
        environ: Runtime environment mapping.
    Returns:
        str: One of `dev`, `prod`, or `test`.
    Assumptions:
        Missing `EQUITY_SIGNALS_ENV` defaults to `dev`.
    Raises:
        ValueError: If value is outside allowed environment literals.
    Side Effects:
        None.
    """
    raw_env_name = environ.get(_ENV_NAME_KEY, "dev").strip().lower()
    if raw_env_name not in _ALLOWED_ENVS:
        raise ValueError(
            f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {raw_env_name!r}"
        )
    return raw_env_name


def _get_mapping(data: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        if required:
            raise ValueError(f"missing required key: {key}")
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"expected mapping at key '{key}', got {type(value).__name__}")
    return value


def _get_int(data: Mapping[str, Any], key: str, *, required: bool) -> int:
    """
    Read integer config value with bool rejection.

    Args:
        data: Source mapping.
        key: Integer key name.
        required: Whether key is required.
    Returns:
        int: Parsed integer value.
    Assumptions:
        Boolean values are rejected even though bool is an int subclass.
    Raises:
        ValueError: If required key missing or value type is invalid.
    Side Effects:
        None.
    """
    value = data.get(key)
    if value is None:
        if required:
            raise ValueError(f"missing required key: {key}")
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected int at key '{key}', got {type(value).__name__}")
    return value


def _get_int_with_default(data: Mapping[str, Any], key: str, *, default: int) -> int:
    if key not in data:
        return default
    return _get_int(data, key, required=True)


def _get_str_with_default(data: Mapping[str, Any], key: str, *, default: str) -> str:
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"expected string at key '{key}', got {type(value).__name__}")
    normalized = value.strip()
    if not normalized:
        raise ValueError(f"key '{key}' must be non-empty")
    return normalized


__all__ = [
    "AnalysisRuntimeConfig",
    "StrategyRuntimeConfig",
    "load_strategy_config",
    "parse_strategy_runtime_config",
    "resolve_strategy_config_path",
]
