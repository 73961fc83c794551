from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, ConfigDict

from apps.api.common import AnalysisRequestError, register_api_error_handlers
from equity_signals.contexts.indicators.domain.errors import InsufficientDataError
from equity_signals.contexts.strategy.domain.errors import StrategyConfigError


class _ValidationPayload(BaseModel):
    """
    Validation payload model with deliberately non-lexicographic field order for sorting test.
    """

    model_config = ConfigDict(extra="forbid")

    b: int
    a: int


def _app_raising(error: Exception) -> FastAPI:
    app = FastAPI()
    register_api_error_handlers(app=app)

    @app.get("/boom")
    def boom() -> None:
        raise error

    return app


@pytest.mark.parametrize(
    ("error", "code", "details"),
    [
        (
            InsufficientDataError("strategy requires 27 trading days", required=27, given=5),
            "insufficient_data",
            {"given": 5, "required": 27},
        ),
        (
            StrategyConfigError("unknown keys ['colour']", yaml_path="entry.indicator"),
            "validation_error",
            {"yaml_path": "entry.indicator"},
        ),
        (ValueError("closing_price must be positive"), "validation_error", {}),
    ],
)
def test_domain_errors_become_422_payloads(
    error: ValueError,
    code: str,
    details: dict[str, object],
) -> None:
    """
    Verify domain failures keep their message and structured fields in the API payload.

    Args:
        error: Domain error raised by the analysis.
        code: Expected payload code.
        details: Expected payload details.
    Returns:
        None.
    Assumptions:
        Every analysis request error is answered with HTTP 422.
    Raises:
        AssertionError: If payload shape or status mapping is broken.
    Side Effects:
        None.
    """
    response = TestClient(
        _app_raising(AnalysisRequestError.from_domain_error(error))
    ).get("/boom")

    assert response.status_code == 422
    assert response.json() == {
        "error": {"code": code, "message": str(error), "details": details},
    }


def test_analysis_request_error_str_names_code_and_message() -> None:
    error = AnalysisRequestError.from_domain_error(
        InsufficientDataError("need more bars", required=4, given=2)
    )

    assert str(error) == "insufficient_data: need more bars"
    assert error.to_payload()["error"]["details"] == {"required": 4, "given": 2}



def test_request_validation_error_handler_returns_sorted_validation_errors() -> None:
    """
    Verify validation handler returns deterministic `validation_error` payload with sorted errors.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Errors are sorted lexicographically by path, then code, then message.
    Raises:
        AssertionError: If response payload differs from deterministic contract.
    Side Effects:
        None.
    """
    app = FastAPI()
    register_api_error_handlers(app=app)

    @app.post("/validate")
    def validate(payload: _ValidationPayload) -> dict[str, int]:
        return {"a": payload.a, "b": payload.b}

    response = TestClient(app).post("/validate", json={"z": 1})

    assert response.status_code == 422
    assert response.json() == {
        "error": {
            "code": "validation_error",
            "message": "Validation failed",
            "details": {
                "errors": [
                    {
                        "path": "body.a",
                        "code": "required",
                        "message": "Field required",
                    },
                    {
                        "path": "body.b",
                        "code": "required",
                        "message": "Field required",
                    },
                    {
                        "path": "body.z",
                        "code": "extra_forbidden",
                        "message": "Extra inputs are not permitted",
                    },
                ]
            },
        }
    }
