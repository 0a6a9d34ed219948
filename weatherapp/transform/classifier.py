"""Map a provider condition category onto a page background style."""

from enum import StrEnum


class Backdrop(StrEnum):
    CLOUDY = "bg-cloudy"
    SUNNY = "bg-sunny"
    RAINY = "bg-rainy"
    DEFAULT = "bg-default"


def classify(condition: str) -> Backdrop:
    """Classify by case-insensitive substring; earlier checks take priority."""
    text = condition.lower()
    if "cloud" in text:
        return Backdrop.CLOUDY
    if "sun" in text or "clear" in text:
        return Backdrop.SUNNY
    if "rain" in text:
        return Backdrop.RAINY
    return Backdrop.DEFAULT
