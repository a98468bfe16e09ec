"""Package sorting module for Thoughtful's robotic automation factory.

Packages are classified by two properties:

    bulky: volume >= 1,000,000 cm^3, or any single dimension >= 150 cm.
    heavy: mass >= 20 kg.

Neither routes to STANDARD, exactly one to SPECIAL, both to REJECTED.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

VOLUME_THRESHOLD_CM3 = 1_000_000
DIMENSION_THRESHOLD_CM = 150
MASS_THRESHOLD_KG = 20


class InvalidQuantity(ValueError):
    """Raised when a dimension or mass is not a finite, non-negative number."""


class Category(str, Enum):
    """The stack a package is dispatched to."""

    STANDARD = "STANDARD"
    SPECIAL = "SPECIAL"
    REJECTED = "REJECTED"


def _validate_quantity(name, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidQuantity(
            f"{name} must be a number, got {type(value).__name__}"
        )
    try:
        value = float(value)
    except OverflowError:
        raise InvalidQuantity(
            f"{name} must be finite, got an int too large for a float"
        ) from None
    if math.isnan(value):
        raise InvalidQuantity(f"{name} must be a number, got nan")
    if math.isinf(value):
        raise InvalidQuantity(f"{name} must be finite, got {value}")
    if value < 0:
        raise InvalidQuantity(f"{name} must be non-negative, got {value:g}")
    return value


@dataclass(frozen=True)
class Length:
    """A single package dimension in centimeters."""

    cm: float

    def __post_init__(self):
        object.__setattr__(self, "cm", _validate_quantity("Length", self.cm))


@dataclass(frozen=True)
class Mass:
    """Package mass in kilograms."""

    kg: float

    def __post_init__(self):
        object.__setattr__(self, "kg", _validate_quantity("Mass", self.kg))


@dataclass(frozen=True)
class Package:
    """Three dimensions and a mass, fixed at construction.

    Fields are typed so that a Mass cannot be passed in place of a
    Length (or the reverse); a wrong type raises TypeError.
    """

    width: Length
    height: Length
    length: Length
    mass: Mass

    def __post_init__(self):
        for name in ("width", "height", "length"):
            value = getattr(self, name)
            if not isinstance(value, Length):
                raise TypeError(
                    f"{name} must be a Length, got {type(value).__name__}"
                )
        if not isinstance(self.mass, Mass):
            raise TypeError(
                f"mass must be a Mass, got {type(self.mass).__name__}"
            )

    @classmethod
    def from_scalars(cls, width, height, length, mass):
        """Build a Package from plain numbers (cm, cm, cm, kg).

        Raises:
            InvalidQuantity: If any value is not a finite,
                non-negative number. The message names the field.
        """
        width = _validate_quantity("width", width)
        height = _validate_quantity("height", height)
        length = _validate_quantity("length", length)
        mass = _validate_quantity("mass", mass)
        return cls(Length(width), Length(height), Length(length), Mass(mass))

    @property
    def dimensions(self):
        """(width, height, length) in centimeters."""
        return self.width.cm, self.height.cm, self.length.cm


def volume(package: Package) -> float:
    """Return width * height * length in cubic centimeters."""
    width, height, length = package.dimensions
    return width * height * length


def is_bulky(package: Package) -> bool:
    """True if volume >= 1,000,000 cm^3 or any dimension >= 150 cm."""
    by_volume = volume(package) >= VOLUME_THRESHOLD_CM3
    by_dimension = max(package.dimensions) >= DIMENSION_THRESHOLD_CM
    return by_volume or by_dimension


def is_heavy(package: Package) -> bool:
    """True if mass >= 20 kg."""
    return package.mass.kg >= MASS_THRESHOLD_KG


def sort_category(package: Package) -> Category:
    """Classify a package into STANDARD, SPECIAL, or REJECTED."""
    bulky = is_bulky(package)
    heavy = is_heavy(package)

    if bulky and heavy:
        return Category.REJECTED
    if bulky or heavy:
        return Category.SPECIAL
    return Category.STANDARD


def sort(width: float, height: float, length: float, mass: float) -> str:
    """Dispatch a package to the correct stack based on dimensions and mass.

    Args:
        width: Package width in centimeters.
        height: Package height in centimeters.
        length: Package length in centimeters.
        mass: Package mass in kilograms.

    Returns:
        "STANDARD", "SPECIAL", or "REJECTED".

    Raises:
        InvalidQuantity: If any dimension or mass is not a finite,
            non-negative number. This is a ValueError subclass.
    """
    package = Package.from_scalars(width, height, length, mass)
    return sort_category(package).value


def sort_with_details(width, height, length, mass):
    """Sort a package and return a detailed result breakdown.

    If the inputs fail validation, the package is routed to
    SPECIAL instead of raising an exception.

    Args:
        width: Package width in centimeters.
        height: Package height in centimeters.
        length: Package length in centimeters.
        mass: Package mass in kilograms.

    Returns:
        A dict with keys:
            stack: "STANDARD", "SPECIAL", or "REJECTED".
            dimensions: {"width": ..., "height": ..., "length": ...}.
            volume_cm3: float or None if inputs are invalid.
            mass_kg: the mass value as given.
            is_bulky: bool or None if inputs are invalid.
            is_heavy: bool or None if inputs are invalid.
    """
    try:
        package = Package.from_scalars(width, height, length, mass)
    except InvalidQuantity as exc:
        logger.warning("Invalid package input, routing to SPECIAL: %s", exc)
        return {
            "stack": Category.SPECIAL.value,
            "dimensions": {
                "width": width,
                "height": height,
                "length": length,
            },
            "volume_cm3": None,
            "mass_kg": mass,
            "is_bulky": None,
            "is_heavy": None,
        }

    return {
        "stack": sort_category(package).value,
        "dimensions": {
            "width": package.width.cm,
            "height": package.height.cm,
            "length": package.length.cm,
        },
        "volume_cm3": volume(package),
        "mass_kg": package.mass.kg,
        "is_bulky": is_bulky(package),
        "is_heavy": is_heavy(package),
    }
