import datetime
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from hitting_tracker.domain.display import outing_type_abbreviation, short_date
from hitting_tracker.domain.hitting import AtBatResult, Outing, OutingType
from hitting_tracker.domain.stats import (
    avg_exit_velocity,
    barrel_percent,
    batted_balls,
    pitches_of,
    swing_rates,
)


@dataclass(frozen=True)
class OutingTrendPoint:
    outing_id: str
    date: datetime.date
    type: OutingType
    label: str
    at_bats: int
    hits: int
    strikeouts: int
    walks: int
    avg: float
    exit_velo: float
    barrel_pct: float
    whiff_rate: float
    contact_pct: float


class TrendMetric(StrEnum):
    AVG = "avg"
    EXIT_VELO = "exit_velo"
    BARREL_PCT = "barrel_pct"
    WHIFF_RATE = "whiff_rate"
    CONTACT_PCT = "contact_pct"


def metric_values(points: Sequence[OutingTrendPoint], metric: TrendMetric) -> list[float]:
    return [getattr(p, str(metric)) for p in points]


def _trend_point(outing: Outing) -> OutingTrendPoint:
    at_bats = outing.at_bats
    official = sum(1 for ab in at_bats if ab.is_official)
    hits = sum(1 for ab in at_bats if ab.is_hit)
    balls = batted_balls(at_bats)
    whiff_rate, contact_pct = swing_rates(pitches_of(at_bats))
    return OutingTrendPoint(
        outing_id=outing.id,
        date=outing.date,
        type=outing.type,
        label=f"{outing_type_abbreviation(outing.type)} {short_date(outing.date)}",
        at_bats=official,
        hits=hits,
        strikeouts=sum(1 for ab in at_bats if ab.result == AtBatResult.STRIKEOUT),
        walks=sum(1 for ab in at_bats if ab.result == AtBatResult.WALK),
        avg=hits / official if official else 0.0,
        exit_velo=avg_exit_velocity(balls),
        barrel_pct=barrel_percent(balls),
        whiff_rate=whiff_rate,
        contact_pct=contact_pct,
    )


def outing_trends(outings: Iterable[Outing]) -> list[OutingTrendPoint]:
    """One trend point per outing, oldest first.

    Outings sharing a date keep their input order.
    """
    return [_trend_point(o) for o in sorted(outings, key=lambda o: o.date)]


def filter_trends(points: Sequence[OutingTrendPoint], outing_type: OutingType | None) -> list[OutingTrendPoint]:
    if outing_type is None:
        return list(points)
    return [p for p in points if p.type == outing_type]


def rolling_average(values: Sequence[float], window: int = 3) -> list[float]:
    """Trailing mean over up to ``window`` values ending at each position."""
    size = max(window, 1)
    averages: list[float] = []
    for i in range(len(values)):
        chunk = values[max(0, i - size + 1) : i + 1]
        averages.append(sum(chunk) / len(chunk))
    return averages
