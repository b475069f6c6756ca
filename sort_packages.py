"""Package sorting rule for intake: STANDARD, SPECIAL or REJECTED."""

import logging
from enum import Enum
from typing import NamedTuple

from sort_validation import validate_package

logger = logging.getLogger(__name__)

BULKY_VOLUME_CM3 = 1_000_000
BULKY_DIMENSION_CM = 150
HEAVY_MASS_KG = 20


class Category(str, Enum):
    """Handling stack a package is dispatched to."""

    STANDARD = "STANDARD"
    SPECIAL = "SPECIAL"
    REJECTED = "REJECTED"

    def __str__(self):
        return self.value


class PackageSpec(NamedTuple):
    """Validated measurements of a single package (cm and kg)."""

    width: float
    height: float
    length: float
    mass: float

    @property
    def volume(self):
        return self.width * self.height * self.length


def is_bulky(spec: PackageSpec) -> bool:
    # volume is always evaluated, even when a dimension already qualifies
    volume = spec.volume
    return (
        volume >= BULKY_VOLUME_CM3
        or spec.width >= BULKY_DIMENSION_CM
        or spec.height >= BULKY_DIMENSION_CM
        or spec.length >= BULKY_DIMENSION_CM
    )


def is_heavy(spec: PackageSpec) -> bool:
    return spec.mass >= HEAVY_MASS_KG


def _category(bulky: bool, heavy: bool) -> Category:
    if bulky and heavy:
        return Category.REJECTED
    if bulky or heavy:
        return Category.SPECIAL
    return Category.STANDARD


def classify(width: float, height: float, length: float, mass: float) -> Category:
    """Dispatch a package to the correct stack based on dimensions and mass.

    A package is bulky when its volume is at least 1,000,000 cm³ or any
    dimension is at least 150 cm, and heavy when its mass is at least
    20 kg. Bulky and heavy is REJECTED, exactly one of the two is
    SPECIAL, neither is STANDARD.

    Args:
        width: Package width in centimeters.
        height: Package height in centimeters.
        length: Package length in centimeters.
        mass: Package mass in kilograms.

    Returns:
        Category.STANDARD, Category.SPECIAL or Category.REJECTED.

    Raises:
        PackageValidationError: If any measurement is invalid. Fields are
            checked in width, height, length, mass order and the first
            failure is raised.
    """
    spec = PackageSpec(*validate_package(width, height, length, mass))
    category = _category(is_bulky(spec), is_heavy(spec))
    logger.debug("Classified %s as %s", spec, category.value)
    return category


def classify_with_details(width, height, length, mass):
    """Sort a package and return a detailed result breakdown.

    Invalid inputs raise exactly as in classify().

    Args:
        width: Package width in centimeters.
        height: Package height in centimeters.
        length: Package length in centimeters.
        mass: Package mass in kilograms.

    Returns:
        A dict with keys:
            stack: "STANDARD", "SPECIAL", or "REJECTED".
            dimensions: {"width": ..., "height": ..., "length": ...}.
            volume_cm3: width * height * length as a float.
            mass_kg: the mass as a float.
            is_bulky: bool.
            is_heavy: bool.
    """
    spec = PackageSpec(*validate_package(width, height, length, mass))
    bulky = is_bulky(spec)
    heavy = is_heavy(spec)
    return {
        "stack": _category(bulky, heavy).value,
        "dimensions": {
            "width": float(spec.width),
            "height": float(spec.height),
            "length": float(spec.length),
        },
        "volume_cm3": float(spec.volume),
        "mass_kg": float(spec.mass),
        "is_bulky": bulky,
        "is_heavy": heavy,
    }
