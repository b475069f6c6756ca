"""Input validation for package measurements."""

import math

MAX_SAFE_MAGNITUDE = 2**53 - 1

FIELDS = ("width", "height", "length", "mass")


class PackageValidationError(ValueError):
    """Raised when a dimension or mass is not an acceptable measurement.

    Attributes:
        field: Name of the offending measurement ("width", "mass", ...).
        value: The value as it was received.
        kind: Short failure tag, one of "type_mismatch", "not_finite",
            "not_positive" or "too_large".
    """

    kind = "invalid"

    def __init__(self, field, value, message):
        super().__init__(message)
        self.field = field
        self.value = value


class TypeMismatch(PackageValidationError):
    kind = "type_mismatch"


class NotFinite(PackageValidationError):
    kind = "not_finite"


class NotPositive(PackageValidationError):
    kind = "not_positive"


class TooLarge(PackageValidationError):
    kind = "too_large"


def _type_category(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (str, bytes)):
        return "text"
    return "object"


def validate_measurement(value, name: str) -> None:
    """Check that a single dimension or mass is usable for sorting.

    Args:
        value: Dimension in centimeters or mass in kilograms.
        name: Field name used in the error message.

    Raises:
        TypeMismatch: If the value is not an int or float.
        NotFinite: If the value is NaN or infinite.
        NotPositive: If the value is zero or negative.
        TooLarge: If the value exceeds MAX_SAFE_MAGNITUDE.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeMismatch(
            name, value,
            f"{name} must be a number, received {_type_category(value)}",
        )
    # ints are always finite, and math.isfinite overflows on huge ones
    if isinstance(value, float) and not math.isfinite(value):
        raise NotFinite(
            name, value,
            f"{name} must be a finite number, received {value}",
        )
    if value <= 0:
        raise NotPositive(
            name, value,
            f"{name} must be positive, received {value}",
        )
    if value > MAX_SAFE_MAGNITUDE:
        raise TooLarge(name, value, f"{name} exceeds maximum safe value")


def validate_package(width, height, length, mass):
    """Validate all four measurements in order and return them as a tuple.

    The first failing field wins; later fields are not inspected.
    """
    values = (width, height, length, mass)
    for name, value in zip(FIELDS, values):
        validate_measurement(value, name)
    return values
