from .invalid_configuration_error import InvalidConfigurationError
from .validation import require_non_negative_int, require_positive_int

__all__ = [
    "InvalidConfigurationError",
    "require_non_negative_int",
    "require_positive_int",
]
