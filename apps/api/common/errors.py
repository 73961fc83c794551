"""
API error contract: domain failures and request validation become one 422 payload shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, cast

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse

from equity_signals.contexts.indicators.domain.errors import InsufficientDataError
from equity_signals.contexts.strategy.domain.errors import StrategyConfigError

_UNPROCESSABLE = 422


@dataclass(frozen=True, slots=True)
class AnalysisRequestError(Exception):
    """
    Analysis request the service cannot serve, rendered as `{"error": {...}}`.

    Codes:
      - `insufficient_data`: the bars do not cover the strategy lead-in
        (`details = {"required", "given"}`).
      - `validation_error`: malformed bars or strategy tree (`details = {"yaml_path"}` when
        the failing node is known, `{"errors": [...]}` for request-body validation).

    Related:
      - apps/api/routes/analysis.py
      - src/equity_signals/contexts/indicators/domain/errors/insufficient_data_error.py
      - src/equity_signals/contexts/strategy/domain/errors/strategy_config_error.py
    """

    code: str
    message: str
    details: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_domain_error(cls, error: ValueError) -> AnalysisRequestError:
        """
        Translate a domain `ValueError` raised while building or running an analysis.

        Args:
            error: InsufficientDataError, StrategyConfigError or any other invalid input.
        Returns:
            AnalysisRequestError: `insufficient_data` with the lead-in numbers, otherwise
                `validation_error`.
        Assumptions:
            The domain message is already user-facing.
        Raises:
            None.
        Side Effects:
            None.
        """
        if isinstance(error, InsufficientDataError):
            return cls(
                code="insufficient_data",
                message=str(error),
                details={"required": error.required, "given": error.given},
            )
        if isinstance(error, StrategyConfigError):
            return cls(
                code="validation_error",
                message=str(error),
                details={"yaml_path": error.yaml_path},
            )
        return cls(code="validation_error", message=str(error))

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_payload(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": dict(self.details),
            }
        }


def register_api_error_handlers(*, app: FastAPI) -> None:
    """
    Install the handlers for AnalysisRequestError and FastAPI request validation.

    Args:
        app: FastAPI application instance.
    Returns:
        None.
    Assumptions:
        Handlers are installed once during application startup.
    Raises:
        None.
    Side Effects:
        Mutates FastAPI exception-handler registry.
    """
    app.add_exception_handler(AnalysisRequestError, analysis_request_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)


def analysis_request_error_handler(_request: Request, error: Exception) -> JSONResponse:
    request_error = cast(AnalysisRequestError, error)
    return JSONResponse(status_code=_UNPROCESSABLE, content=request_error.to_payload())


def request_validation_error_handler(_request: Request, error: Exception) -> JSONResponse:
    """
    Convert FastAPI RequestValidationError to a `validation_error` payload.

    Args:
        _request: Starlette request object (unused).
        error: Raised validation exception from FastAPI/Pydantic.
    Returns:
        JSONResponse: HTTP 422 payload with deterministically sorted `details.errors` list.
    Assumptions:
        Validation errors include `loc`, `type`, and `msg` attributes.
    Raises:
        None.
    Side Effects:
        None.
    """
    validation_error = cast(RequestValidationError, error)
    request_error = AnalysisRequestError(
        code="validation_error",
        message="Validation failed",
        details={"errors": _sorted_validation_errors(raw_errors=validation_error.errors())},
    )
    return analysis_request_error_handler(_request, request_error)


def _sorted_validation_errors(*, raw_errors: Sequence[Any]) -> list[dict[str, str]]:
    items = [_validation_item(raw_error) for raw_error in raw_errors]
    return sorted(items, key=lambda item: (item["path"], item["code"], item["message"]))


def _validation_item(raw_error: Any) -> dict[str, str]:
    if not isinstance(raw_error, Mapping):
        return {"path": "unknown", "code": "validation_error", "message": str(raw_error)}

    loc = raw_error.get("loc") or ()
    path = ".".join(str(part) for part in loc) if isinstance(loc, (list, tuple)) else str(loc)
    code = str(raw_error.get("type") or "").strip().lower() or "validation_error"
    if code == "missing":
        code = "required"
    return {
        "path": path or "unknown",
        "code": code,
        "message": str(raw_error.get("msg", "Validation error")),
    }


__all__ = [
    "AnalysisRequestError",
    "analysis_request_error_handler",
    "register_api_error_handlers",
    "request_validation_error_handler",
]
