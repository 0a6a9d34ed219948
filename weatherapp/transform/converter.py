"""Temperature conversion between the metric and imperial unit systems."""

from weatherapp.models.common import UnitSystem


class InvalidUnitError(ValueError):
    """Raised when a conversion is requested for an unknown unit system."""


def _as_unit(unit: str) -> UnitSystem:
    try:
        return UnitSystem(unit)
    except ValueError:
        raise InvalidUnitError(f"Unknown unit system: {unit!r}") from None


def convert(value: float, from_unit: UnitSystem | str, to_unit: UnitSystem | str) -> float:
    """Convert a temperature from one unit system to another.

    Same-unit conversion returns ``value`` untouched so no floating-point
    drift is introduced.

    Raises:
        InvalidUnitError: if either unit is not a UnitSystem member.
    """
    src = _as_unit(from_unit)
    dst = _as_unit(to_unit)

    if src == dst:
        return value
    if src == UnitSystem.METRIC and dst == UnitSystem.IMPERIAL:
        return value * 9 / 5 + 32
    if src == UnitSystem.IMPERIAL and dst == UnitSystem.METRIC:
        return (value - 32) * 5 / 9

    raise InvalidUnitError(f"No conversion from {src} to {dst}")
