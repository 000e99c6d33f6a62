import datetime
import itertools

from hitting_tracker.domain.hitting import (
    AtBat,
    AtBatResult,
    Bats,
    HitType,
    Outing,
    OutingType,
    Pitch,
    PitchLocation,
    PitchOutcome,
    Player,
    SprayChartPoint,
    SprayResult,
)

_ids = itertools.count(1)


def _next_id(prefix: str) -> str:
    return f"{prefix}{next(_ids)}"


def make_player(player_id: str = "p1", name: str = "Test Player", number: str = "7", bats: Bats = Bats.RIGHT) -> Player:
    return Player(id=player_id, name=name, number=number, bats=bats)


def make_pitch(outcome: PitchOutcome, x: float = 0.0, y: float = 0.0) -> Pitch:
    return Pitch(id=_next_id("pitch"), location=PitchLocation(x=x, y=y), outcome=outcome)


def make_spray(
    result: SprayResult = SprayResult.SINGLE,
    *,
    exit_velocity: float | None = None,
    is_barrel: bool | None = None,
    hit_type: HitType = HitType.LINE_DRIVE,
) -> SprayChartPoint:
    return SprayChartPoint(
        id=_next_id("sp"),
        x=0.0,
        y=0.5,
        result=result,
        hit_type=hit_type,
        exit_velocity=exit_velocity,
        is_barrel=is_barrel,
    )


def make_at_bat(
    result: AtBatResult,
    pitches: tuple[Pitch, ...] = (),
    *,
    spray_point: SprayChartPoint | None = None,
    exit_velocity: float | None = None,
    is_barrel: bool | None = None,
) -> AtBat:
    return AtBat(
        id=_next_id("ab"),
        result=result,
        pitches=pitches,
        spray_point=spray_point,
        exit_velocity=exit_velocity,
        is_barrel=is_barrel,
    )


def make_outing(
    at_bats: tuple[AtBat, ...] = (),
    *,
    date: datetime.date = datetime.date(2025, 3, 14),
    outing_type: OutingType = OutingType.BATTING_PRACTICE,
    player_id: str = "p1",
    outing_id: str | None = None,
) -> Outing:
    return Outing(
        id=outing_id or _next_id("o"),
        player_id=player_id,
        type=outing_type,
        date=date,
        at_bats=at_bats,
    )
