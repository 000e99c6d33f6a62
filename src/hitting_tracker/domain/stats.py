import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from hitting_tracker.domain.hitting import (
    CONTACT_OUTCOMES,
    FOUL_OUTCOMES,
    HIT_RESULTS,
    AtBat,
    AtBatResult,
    Outing,
    Pitch,
    PitchOutcome,
    SprayChartPoint,
)


class BattedBall(Protocol):
    @property
    def exit_velocity(self) -> float | None: ...

    @property
    def is_barrel(self) -> bool | None: ...


@dataclass(frozen=True)
class PlateDisciplineStats:
    total_pitches: int = 0
    swings: int = 0
    takes: int = 0
    swing_pct: float = 0.0
    whiff_rate: float = 0.0
    chase_pct: float = 0.0
    called_strike_pct: float = 0.0
    foul_pct: float = 0.0
    contact_pct: float = 0.0
    first_pitch_swing_pct: float = 0.0
    first_pitch_hit_pct: float = 0.0
    avg_pitches_per_ab: float = 0.0


@dataclass(frozen=True)
class HittingSummary:
    plate_appearances: int
    at_bats: int
    hits: int
    singles: int
    doubles: int
    triples: int
    home_runs: int
    strikeouts: int
    walks: int
    hit_by_pitch: int
    avg: float
    slg: float
    barrel_pct: float
    avg_exit_velo: float
    hard_hit_pct: float


@dataclass(frozen=True)
class ZoneCell:
    row: int  # 0 = high
    col: int  # 0 = inside
    total: int
    hits: int
    hit_rate: float | None  # None when no pitch landed in the cell


def _pct(numerator: int, denominator: int) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator * 100


# -- Flattening ---------------------------------------------------------------


def all_at_bats(outings: Iterable[Outing]) -> list[AtBat]:
    return [ab for o in outings for ab in o.at_bats]


def pitches_of(at_bats: Iterable[AtBat]) -> list[Pitch]:
    return [p for ab in at_bats for p in ab.pitches]


def all_pitches(outings: Iterable[Outing]) -> list[Pitch]:
    return pitches_of(all_at_bats(outings))


def spray_points(at_bats: Iterable[AtBat]) -> list[SprayChartPoint]:
    return [ab.spray_point for ab in at_bats if ab.spray_point is not None]


def batted_balls(at_bats: Iterable[AtBat]) -> list[BattedBall]:
    """Collect batted-ball records, preferring each at-bat's spray point.

    At-bats without a spray point contribute their top-level exit velocity and
    barrel fields, but only when the ball was put in play and at least one of
    those fields was recorded.
    """
    balls: list[BattedBall] = []
    for ab in at_bats:
        if ab.spray_point is not None:
            balls.append(ab.spray_point)
        elif ab.is_ball_in_play and (ab.exit_velocity is not None or ab.is_barrel is not None):
            balls.append(ab)
    return balls


# -- Batted ball quality ------------------------------------------------------


def avg_exit_velocity(points: Sequence[BattedBall]) -> float:
    """Mean exit velocity over points with a recorded velocity, 0 when none has one."""
    velocities = [p.exit_velocity for p in points if p.exit_velocity]
    if not velocities:
        return 0.0
    return sum(velocities) / len(velocities)


def barrel_percent(points: Sequence[BattedBall]) -> float:
    return _pct(sum(1 for p in points if p.is_barrel), len(points))


def hard_hit_percent(points: Sequence[BattedBall], threshold_mph: float = 95.0) -> float:
    return _pct(sum(1 for p in points if (p.exit_velocity or 0) >= threshold_mph), len(points))


# -- Plate discipline ---------------------------------------------------------


def plate_discipline(outings: Iterable[Outing]) -> PlateDisciplineStats:
    return plate_discipline_from_at_bats(all_at_bats(outings))


def plate_discipline_from_at_bats(at_bats: Sequence[AtBat]) -> PlateDisciplineStats:
    pitches = pitches_of(at_bats)
    total = len(pitches)
    if total == 0:
        return PlateDisciplineStats()

    swings = sum(1 for p in pitches if p.is_swing)
    takes = total - swings
    whiffs = sum(1 for p in pitches if p.outcome == PitchOutcome.STRIKE_SWINGING)
    called_strikes = sum(1 for p in pitches if p.outcome == PitchOutcome.STRIKE_LOOKING)
    fouls = sum(1 for p in pitches if p.outcome in FOUL_OUTCOMES)
    contacts = sum(1 for p in pitches if p.outcome in CONTACT_OUTCOMES)

    outside = [p for p in pitches if not p.location.in_zone]
    chases = sum(1 for p in outside if p.is_swing)

    tracked = [ab for ab in at_bats if ab.pitches]
    first_pitches = [ab.pitches[0] for ab in tracked]
    first_swings = sum(1 for p in first_pitches if p.is_swing)
    first_hits = sum(1 for p in first_pitches if p.outcome == PitchOutcome.IN_PLAY_HIT)
    avg_per_ab = sum(len(ab.pitches) for ab in tracked) / len(tracked) if tracked else 0.0

    return PlateDisciplineStats(
        total_pitches=total,
        swings=swings,
        takes=takes,
        swing_pct=_pct(swings, total),
        whiff_rate=_pct(whiffs, swings),
        chase_pct=_pct(chases, len(outside)),
        called_strike_pct=_pct(called_strikes, takes),
        foul_pct=_pct(fouls, swings),
        contact_pct=_pct(contacts, swings),
        first_pitch_swing_pct=_pct(first_swings, len(first_pitches)),
        first_pitch_hit_pct=_pct(first_hits, len(first_pitches)),
        avg_pitches_per_ab=avg_per_ab,
    )


def swing_rates(pitches: Sequence[Pitch]) -> tuple[float, float]:
    """Return (whiff_rate, contact_pct) over the swings in ``pitches``."""
    swings = [p for p in pitches if p.is_swing]
    whiffs = sum(1 for p in swings if p.outcome == PitchOutcome.STRIKE_SWINGING)
    contacts = sum(1 for p in swings if p.outcome in CONTACT_OUTCOMES)
    return _pct(whiffs, len(swings)), _pct(contacts, len(swings))


# -- Results ------------------------------------------------------------------


def batting_average(at_bats: Sequence[AtBat]) -> float:
    official = sum(1 for ab in at_bats if ab.is_official)
    if official == 0:
        return 0.0
    return sum(1 for ab in at_bats if ab.is_hit) / official


def hitting_summary(outings: Iterable[Outing], hard_hit_mph: float = 95.0) -> HittingSummary:
    return hitting_summary_from_at_bats(all_at_bats(outings), hard_hit_mph)


def hitting_summary_from_at_bats(at_bats: Sequence[AtBat], hard_hit_mph: float = 95.0) -> HittingSummary:
    counts = {result: 0 for result in AtBatResult}
    for ab in at_bats:
        counts[ab.result] += 1

    official = sum(1 for ab in at_bats if ab.is_official)
    hits = sum(counts[result] for result in HIT_RESULTS)
    total_bases = (
        counts[AtBatResult.SINGLE]
        + 2 * counts[AtBatResult.DOUBLE]
        + 3 * counts[AtBatResult.TRIPLE]
        + 4 * counts[AtBatResult.HR]
    )
    balls = batted_balls(at_bats)

    return HittingSummary(
        plate_appearances=len(at_bats),
        at_bats=official,
        hits=hits,
        singles=counts[AtBatResult.SINGLE],
        doubles=counts[AtBatResult.DOUBLE],
        triples=counts[AtBatResult.TRIPLE],
        home_runs=counts[AtBatResult.HR],
        strikeouts=counts[AtBatResult.STRIKEOUT],
        walks=counts[AtBatResult.WALK],
        hit_by_pitch=counts[AtBatResult.HBP],
        avg=hits / official if official else 0.0,
        slg=total_bases / official if official else 0.0,
        barrel_pct=barrel_percent(balls),
        avg_exit_velo=avg_exit_velocity(balls),
        hard_hit_pct=hard_hit_percent(balls, hard_hit_mph),
    )


# -- Zone heat map ------------------------------------------------------------

_PLOT_EDGE = 1.5


def _bucket(fraction: float, size: int) -> int:
    if math.isnan(fraction):
        return 0
    clamped = min(max(fraction, 0.0), 1.0)
    return min(size - 1, math.floor(clamped * size))


def zone_heat_map(pitches: Iterable[Pitch], rows: int = 5, cols: int = 5) -> tuple[tuple[ZoneCell, ...], ...]:
    """Bucket pitches into a rows x cols grid spanning the full plot area.

    With the default 5x5 grid the inner 3x3 cells cover the strike zone.
    Locations outside the plot area land in the nearest edge cell.
    """
    totals = [[0] * cols for _ in range(rows)]
    hits = [[0] * cols for _ in range(rows)]
    span = 2 * _PLOT_EDGE

    for pitch in pitches:
        col = _bucket((pitch.location.x + _PLOT_EDGE) / span, cols)
        row = _bucket((_PLOT_EDGE - pitch.location.y) / span, rows)
        totals[row][col] += 1
        if pitch.outcome == PitchOutcome.IN_PLAY_HIT:
            hits[row][col] += 1

    return tuple(
        tuple(
            ZoneCell(
                row=r,
                col=c,
                total=totals[r][c],
                hits=hits[r][c],
                hit_rate=hits[r][c] / totals[r][c] if totals[r][c] else None,
            )
            for c in range(cols)
        )
        for r in range(rows)
    )
