"""
FastAPI application factory for the equity-signals API.
"""

from __future__ import annotations

from fastapi import FastAPI

from apps.api.common import register_api_error_handlers
from apps.api.routes import build_analysis_router
from equity_signals.contexts.strategy.application import StrategyFactory
from equity_signals.platform.time import Clock


def create_app(
    *,
    factory: StrategyFactory | None = None,
    clock: Clock | None = None,
) -> FastAPI:
    """
    Build FastAPI app with error handlers and the analysis router.

    Related: apps.api.routes.analysis,
      apps.api.common.errors

    Args:
        factory: Optional strategy factory shared by all requests.
        clock: Optional clock used by live analysis requests without `as_of`.
    Returns:
        FastAPI: Application instance with registered routers.
    Assumptions:
        Strategies are supplied per request; no strategy file is read at startup.
    Raises:
        None.
    Side Effects:
        None.
    """
    app = FastAPI(
        title="equity-signals API",
        version="1.0.0",
    )
    register_api_error_handlers(app=app)
    app.include_router(build_analysis_router(factory=factory, clock=clock))
    return app


app = create_app()
