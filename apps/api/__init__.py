"""
equity-signals HTTP API.

`app` and `create_app` resolve on first attribute access so that importing `apps.api.dto` or
`apps.api.routes` does not build the module-level FastAPI instance.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .main import app, create_app

__all__ = ["app", "create_app"]


def __getattr__(name: str) -> Any:
    if name in __all__:
        return getattr(importlib.import_module(".main", __name__), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
