import datetime
import math
from decimal import ROUND_HALF_UP, Decimal

from hitting_tracker.domain.hitting import OutingType

_TYPE_LABELS: dict[OutingType, str] = {
    OutingType.GAME: "Game",
    OutingType.BATTING_PRACTICE: "BP",
    OutingType.CAGE_SESSION: "Cage",
    OutingType.LIVE_ABS: "Live ABs",
}

_TYPE_ABBREVIATIONS: dict[OutingType, str] = {
    OutingType.GAME: "Game",
    OutingType.BATTING_PRACTICE: "BP",
    OutingType.CAGE_SESSION: "Cage",
    OutingType.LIVE_ABS: "Live",
}


def _round_half_up(value: float, places: str) -> Decimal:
    # quantizes the exact binary value, so 6.25 -> 6.3 and 0.35 (0.34999...) -> 0.3
    return Decimal(value).quantize(Decimal(places), rounding=ROUND_HALF_UP)


def _one_decimal(value: float) -> str:
    if not math.isfinite(value):
        return f"{value:.1f}"
    return str(_round_half_up(value, "0.1"))


def format_pct(value: float) -> str:
    return f"{_one_decimal(value)}%"


def format_mph(value: float) -> str:
    return f"{_one_decimal(value)} mph"


def format_decimal(value: float) -> str:
    return _one_decimal(value)


def format_whole(value: float) -> str:
    if not math.isfinite(value):
        return f"{value:.0f}"
    return str(_round_half_up(value, "1"))


def format_avg(value: float) -> str:
    """Render a 0-1 batting average in the scorebook style, e.g. 0.275 -> ".275"."""
    if not math.isfinite(value):
        return ".000"
    return "." + str(int(_round_half_up(value * 1000, "1"))).zfill(3)


def format_slg(value: float) -> str:
    """Slugging runs 0-4, so values of 1 or more keep their leading digit: 1.4 -> "1.400"."""
    if not math.isfinite(value):
        return ".000"
    rounded = _round_half_up(value, "0.001")
    if rounded < 1:
        return format_avg(value)
    return str(rounded)


def outing_type_label(outing_type: OutingType) -> str:
    return _TYPE_LABELS[outing_type]


def outing_type_abbreviation(outing_type: OutingType) -> str:
    return _TYPE_ABBREVIATIONS[outing_type]


def short_date(date: datetime.date) -> str:
    return f"{date.month}/{date.day}"
