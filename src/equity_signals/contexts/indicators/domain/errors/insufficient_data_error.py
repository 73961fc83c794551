from __future__ import annotations


class InsufficientDataError(ValueError):
    """
    Raised when a calculator or signal generator receives fewer (or less consecutive) bars
    than its stated minimum.

    Related: ...application.services.input_validator, ....signals.application.services
    """

    def __init__(self, message: str, *, required: int, given: int) -> None:
        super().__init__(message)
        self.required = required
        self.given = given
