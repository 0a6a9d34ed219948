"""Reduce a 3-hourly forecast list to one representative sample per day."""

from functools import reduce

from weatherapp.models.forecast import DailyForecast, ForecastSample

MIDDAY = "12:00:00"


class InvalidTimestampError(ValueError):
    """Raised when a forecast timestamp has no date/time separator."""


def _split_timestamp(timestamp: str) -> tuple[str, str]:
    date_part, sep, time_part = timestamp.partition(" ")
    if not sep:
        raise InvalidTimestampError(
            f"Timestamp {timestamp!r} is not in 'YYYY-MM-DD HH:MM:SS' form"
        )
    return date_part, time_part


def date_key(timestamp: str) -> str:
    """Return the date portion (before the first space) of a sample timestamp."""
    return _split_timestamp(timestamp)[0]


def _pick(
    grouped: dict[str, DailyForecast], sample: ForecastSample
) -> dict[str, DailyForecast]:
    day, time_of_day = _split_timestamp(sample.timestamp)
    # Midday always wins; otherwise the first sample seen for the day stays
    if day not in grouped or time_of_day == MIDDAY:
        grouped[day] = sample
    return grouped


def group_by_day(samples: list[ForecastSample]) -> list[DailyForecast]:
    """Pick one sample per calendar date, preferring the 12:00:00 entry.

    Dates come out in the order they are first seen in ``samples``. A date
    with no midday sample keeps its first sample; a date with several midday
    samples keeps the last one.

    Raises:
        InvalidTimestampError: if any timestamp lacks the space separator.
    """
    grouped: dict[str, DailyForecast] = reduce(_pick, samples, {})
    return list(grouped.values())
