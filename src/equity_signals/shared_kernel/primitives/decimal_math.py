from __future__ import annotations

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Context, Decimal

MATH_PRECISION = 34


def new_math_context() -> Context:
    """
    Build a fresh decimal context for one calculation.

    Args:
        None.
    Returns:
        Context: Context with 34 significant digits and banker's rounding.
    Assumptions:
        Callers pass the context explicitly (`ctx.add`, `ctx.divide`, ...) and never install it
        as the thread-local default, so concurrent calculations never share flag state.
    Raises:
        None.
    Side Effects:
        None.
    """
    return Context(prec=MATH_PRECISION, rounding=ROUND_HALF_EVEN)


def round_half_up(value: Decimal, *, places: int = 2) -> Decimal:
    """
    Round a decimal to a fixed number of places with HALF_UP semantics.

    Args:
        value: Decimal value to round.
        places: Number of digits after the decimal point.
    Returns:
        Decimal: Quantized value, e.g. `Decimal("37.50")` keeps its trailing zero.
    Assumptions:
        Reporting precision of indicator values is two places.
    Raises:
        ValueError: If `places` is negative.
    Side Effects:
        None.
    """
    if places < 0:
        raise ValueError(f"places must be >= 0, got {places}")
    exponent = Decimal(1).scaleb(-places)
    return value.quantize(exponent, rounding=ROUND_HALF_UP)


def to_decimal(value: object, *, field_name: str) -> Decimal:
    """
    Convert an exact numeric value into a finite Decimal.

    Args:
        value: Decimal, int or decimal text.
        field_name: Field name used in diagnostics.
    Returns:
        Decimal: Finite decimal value.
    Assumptions:
        Binary floats are rejected to avoid rounding drift over long price series.
    Raises:
        TypeError: If value is a float, bool or unsupported type.
        ValueError: If value is not a finite decimal number.
    Side Effects:
        None.
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"{field_name} must be Decimal, int or str, got {type(value).__name__}")
    if isinstance(value, Decimal):
        converted = value
    elif isinstance(value, int):
        converted = Decimal(value)
    elif isinstance(value, str):
        text = value.strip()
        try:
            converted = Decimal(text)
        except ArithmeticError as error:
            raise ValueError(f"{field_name} must be a decimal number, got {value!r}") from error
    else:
        raise TypeError(f"{field_name} must be Decimal, int or str, got {type(value).__name__}")
    if not converted.is_finite():
        raise ValueError(f"{field_name} must be finite, got {converted}")
    return converted


__all__ = [
    "MATH_PRECISION",
    "new_math_context",
    "round_half_up",
    "to_decimal",
]
