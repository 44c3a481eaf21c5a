import math
import logging
from typing import Any, Iterable, List

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    Python's built-in round() uses banker's rounding (round(62.5) == 62),
    which would shift percentage scores that land exactly on a half.
    """
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Round a score and clip it to [low, high].

    Args:
        value: Raw score, possibly fractional or out of range

    Returns:
        Integer score in range [low, high]
    """
    score = round_half_up(value)
    if not (low <= score <= high):
        logger.debug(f"Score out of range: {score}, clipping to [{low}, {high}]")
        return max(low, min(high, score))
    return score


def as_text(value: Any) -> str:
    """Normalize an optional free-text field to a string."""
    if value is None:
        return ""
    return str(value)


def as_text_list(values: Any) -> List[str]:
    """
    Normalize a list-ish field to a list of strings.

    None becomes an empty list, a bare string becomes a one-element list,
    and None items are dropped.
    """
    if values is None:
        return []
    if isinstance(values, str):
        return [values]
    if not isinstance(values, Iterable):
        return [str(values)]
    return [str(v) for v in values if v is not None]


def as_int(value: Any, default: int = 0) -> int:
    """Coerce a numeric-ish field to int, falling back to default."""
    if value is None or value == "":
        return default
    try:
        return int(float(value))
    except (ValueError, TypeError):
        logger.warning(f"Could not coerce {value!r} to int, using {default}")
        return default
