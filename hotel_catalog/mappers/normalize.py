import math
from typing import Any


def clean_text(value: str | None) -> str | None:
    """Strip whitespace; blank strings become None."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def clean_list(values: list[str]) -> list[str]:
    cleaned = (clean_text(v) for v in values)
    return [v for v in cleaned if v]


def clean_id(value: int | str | None) -> str | None:
    if value is None or isinstance(value, bool):
        return None
    return clean_text(str(value))


def clean_destination(value: int | str | None) -> int | str | None:
    if isinstance(value, str):
        return clean_text(value)
    return value


def parse_coordinate(value: Any) -> float | None:
    """Parse a latitude/longitude value, returning None when unparsable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number
