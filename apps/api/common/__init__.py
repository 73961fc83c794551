from .errors import (
    AnalysisRequestError,
    analysis_request_error_handler,
    register_api_error_handlers,
    request_validation_error_handler,
)

__all__ = [
    "AnalysisRequestError",
    "analysis_request_error_handler",
    "register_api_error_handlers",
    "request_validation_error_handler",
]
