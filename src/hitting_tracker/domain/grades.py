from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from hitting_tracker.domain.display import format_avg, format_decimal, format_mph, format_pct


class LetterGrade(StrEnum):
    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    D = "D"
    F = "F"


# Checked in order; first threshold the score reaches wins
GRADE_THRESHOLDS: tuple[tuple[float, LetterGrade], ...] = (
    (97, LetterGrade.A_PLUS),
    (93, LetterGrade.A),
    (90, LetterGrade.A_MINUS),
    (87, LetterGrade.B_PLUS),
    (83, LetterGrade.B),
    (80, LetterGrade.B_MINUS),
    (77, LetterGrade.C_PLUS),
    (73, LetterGrade.C),
    (70, LetterGrade.C_MINUS),
    (60, LetterGrade.D),
    (0, LetterGrade.F),
)


def score_to_grade(score: float) -> LetterGrade:
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return LetterGrade.F


def grade_band(grade: LetterGrade) -> str:
    """Letter family of a grade: "A", "B", "C", "D" or "F"."""
    return grade.value[0]


# -- Benchmark curves ---------------------------------------------------------

# (metric value, score) pairs sorted by metric value ascending
Checkpoint: TypeAlias = tuple[float, float]

# Higher is better
BARREL_PCT_CHECKPOINTS: tuple[Checkpoint, ...] = (
    (0, 35), (2, 55), (5, 65), (8, 75), (12, 85), (15, 95), (20, 100),
)  # fmt: skip

EXIT_VELO_CHECKPOINTS: tuple[Checkpoint, ...] = (
    (40, 30), (50, 50), (55, 60), (60, 70), (65, 80), (70, 88), (75, 95), (85, 100),
)  # fmt: skip

CONTACT_PCT_CHECKPOINTS: tuple[Checkpoint, ...] = (
    (50, 30), (60, 45), (65, 55), (70, 65), (75, 72), (80, 80), (85, 88), (90, 95), (95, 100),
)  # fmt: skip

BATTING_AVG_CHECKPOINTS: tuple[Checkpoint, ...] = (
    (0, 20), (0.100, 35), (0.150, 45), (0.200, 58), (0.250, 70), (0.300, 80), (0.350, 90), (0.400, 97), (0.500, 100),
)  # fmt: skip

PITCHES_PER_AB_CHECKPOINTS: tuple[Checkpoint, ...] = (
    (2.0, 35), (2.5, 50), (3.0, 60), (3.5, 72), (4.0, 82), (4.5, 90), (5.0, 97), (5.5, 100),
)  # fmt: skip

# Lower is better: still sorted by value, scores descend
WHIFF_RATE_CHECKPOINTS: tuple[Checkpoint, ...] = (
    (5, 100), (10, 95), (15, 88), (20, 80), (25, 70), (30, 60), (35, 50), (45, 30),
)  # fmt: skip

CHASE_RATE_CHECKPOINTS: tuple[Checkpoint, ...] = (
    (10, 100), (15, 95), (20, 88), (25, 78), (30, 68), (35, 58), (40, 48), (50, 30),
)  # fmt: skip

CALLED_STRIKE_CHECKPOINTS: tuple[Checkpoint, ...] = (
    (5, 100), (10, 93), (15, 85), (20, 75), (25, 65), (30, 55), (40, 35),
)  # fmt: skip

NEUTRAL_SCORE = 50.0


def interpolate_score(value: float, checkpoints: Sequence[Checkpoint]) -> float:
    """Score ``value`` on a piecewise-linear benchmark curve.

    Values at or beyond either end clamp to that end's score; values between
    two checkpoints are linearly interpolated.
    """
    if not checkpoints:
        return NEUTRAL_SCORE
    first_value, first_score = checkpoints[0]
    last_value, last_score = checkpoints[-1]
    if value <= first_value:
        return float(first_score)
    if value >= last_value:
        return float(last_score)

    for (v1, s1), (v2, s2) in zip(checkpoints, checkpoints[1:]):
        if value == v1:
            return float(s1)
        if value == v2:
            return float(s2)
        if v1 < value < v2:
            t = (value - v1) / (v2 - v1)
            return s1 + t * (s2 - s1)
    return NEUTRAL_SCORE


# -- Report card --------------------------------------------------------------

MIN_AT_BATS = 5

POWER_WEIGHT = 0.30
CONTACT_WEIGHT = 0.35
DISCIPLINE_WEIGHT = 0.35


@dataclass(frozen=True)
class ReportCardInput:
    barrel_pct: float = 0.0
    avg_exit_velo: float = 0.0
    contact_pct: float = 0.0
    whiff_rate: float = 0.0
    batting_avg: float = 0.0
    chase_pct: float = 0.0
    called_strike_pct: float = 0.0
    avg_pitches_per_ab: float = 0.0
    total_at_bats: int = 0
    total_pitches: int = 0


@dataclass(frozen=True)
class MetricGrade:
    label: str
    value: float
    display_value: str
    score: float
    grade: LetterGrade


@dataclass(frozen=True)
class CategoryGrade:
    label: str
    score: float
    grade: LetterGrade
    metrics: tuple[MetricGrade, ...]


@dataclass(frozen=True)
class OverallGrade:
    score: float
    grade: LetterGrade


@dataclass(frozen=True)
class ReportCardData:
    overall: OverallGrade
    power: CategoryGrade
    contact: CategoryGrade
    discipline: CategoryGrade
    has_enough_data: bool


def _metric(label: str, value: float, display_value: str, checkpoints: Sequence[Checkpoint]) -> MetricGrade:
    score = interpolate_score(value, checkpoints)
    return MetricGrade(
        label=label,
        value=value,
        display_value=display_value,
        score=score,
        grade=score_to_grade(score),
    )


def _mean(values: Sequence[float]) -> float:
    if not values:
        return NEUTRAL_SCORE
    return sum(values) / len(values)


def _weighted_mean(pairs: Sequence[tuple[float, float]]) -> float:
    total_weight = sum(weight for _, weight in pairs)
    if total_weight == 0:
        return NEUTRAL_SCORE
    return sum(value * weight for value, weight in pairs) / total_weight


def _category(label: str, metrics: list[MetricGrade]) -> CategoryGrade:
    score = _mean([m.score for m in metrics])
    return CategoryGrade(label=label, score=score, grade=score_to_grade(score), metrics=tuple(metrics))


def calc_report_card(data: ReportCardInput) -> ReportCardData:
    """Grade a hitter's aggregate stats into Power, Contact and Discipline categories.

    Pitch-derived metrics are only graded when pitches were tracked, and exit
    velocity only when at least one batted ball carried a reading. A category
    with no graded metrics scores a neutral 50.
    """
    has_pitches = data.total_pitches > 0

    power = [_metric("Barrel %", data.barrel_pct, format_pct(data.barrel_pct), BARREL_PCT_CHECKPOINTS)]
    if data.avg_exit_velo > 0:
        power.append(_metric("Exit Velo", data.avg_exit_velo, format_mph(data.avg_exit_velo), EXIT_VELO_CHECKPOINTS))

    contact = [_metric("Batting Avg", data.batting_avg, format_avg(data.batting_avg), BATTING_AVG_CHECKPOINTS)]
    discipline: list[MetricGrade] = []
    if has_pitches:
        contact.append(_metric("Contact %", data.contact_pct, format_pct(data.contact_pct), CONTACT_PCT_CHECKPOINTS))
        contact.append(_metric("Whiff Rate", data.whiff_rate, format_pct(data.whiff_rate), WHIFF_RATE_CHECKPOINTS))
        discipline.append(_metric("Chase Rate", data.chase_pct, format_pct(data.chase_pct), CHASE_RATE_CHECKPOINTS))
        discipline.append(
            _metric(
                "Called Strike %",
                data.called_strike_pct,
                format_pct(data.called_strike_pct),
                CALLED_STRIKE_CHECKPOINTS,
            )
        )
        discipline.append(
            _metric(
                "Pitches / AB",
                data.avg_pitches_per_ab,
                format_decimal(data.avg_pitches_per_ab),
                PITCHES_PER_AB_CHECKPOINTS,
            )
        )

    power_grade = _category("Power", power)
    contact_grade = _category("Contact", contact)
    discipline_grade = _category("Discipline", discipline)

    overall_score = _weighted_mean(
        [
            (power_grade.score, POWER_WEIGHT),
            (contact_grade.score, CONTACT_WEIGHT),
            (discipline_grade.score, DISCIPLINE_WEIGHT),
        ]
    )

    return ReportCardData(
        overall=OverallGrade(score=overall_score, grade=score_to_grade(overall_score)),
        power=power_grade,
        contact=contact_grade,
        discipline=discipline_grade,
        has_enough_data=data.total_at_bats >= MIN_AT_BATS,
    )
