import datetime
from dataclasses import dataclass
from enum import StrEnum


class Bats(StrEnum):
    LEFT = "L"
    RIGHT = "R"
    SWITCH = "S"


class OutingType(StrEnum):
    GAME = "game"
    BATTING_PRACTICE = "batting_practice"
    CAGE_SESSION = "cage_session"
    LIVE_ABS = "live_abs"


class AtBatResult(StrEnum):
    STRIKEOUT = "strikeout"
    WALK = "walk"
    HBP = "hbp"
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"
    HR = "hr"
    OUT = "out"


class PitchOutcome(StrEnum):
    BALL = "ball"
    STRIKE_LOOKING = "strike_looking"
    STRIKE_SWINGING = "strike_swinging"
    FOUL = "foul"
    FOUL_TIP = "foul_tip"
    IN_PLAY_OUT = "in_play_out"
    IN_PLAY_HIT = "in_play_hit"


class PitchType(StrEnum):
    FASTBALL = "fastball"
    SINKER = "sinker"
    CUTTER = "cutter"
    SLIDER = "slider"
    CURVEBALL = "curveball"
    CHANGEUP = "changeup"
    SPLITTER = "splitter"
    KNUCKLEBALL = "knuckleball"
    UNKNOWN = "unknown"


class SprayResult(StrEnum):
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"
    HR = "hr"
    OUT = "out"


class HitType(StrEnum):
    GROUND_BALL = "ground_ball"
    LINE_DRIVE = "line_drive"
    FLY_BALL = "fly_ball"
    POPUP = "popup"


SWING_OUTCOMES = frozenset(
    {
        PitchOutcome.STRIKE_SWINGING,
        PitchOutcome.FOUL,
        PitchOutcome.FOUL_TIP,
        PitchOutcome.IN_PLAY_OUT,
        PitchOutcome.IN_PLAY_HIT,
    }
)
CONTACT_OUTCOMES = frozenset(
    {PitchOutcome.FOUL, PitchOutcome.FOUL_TIP, PitchOutcome.IN_PLAY_OUT, PitchOutcome.IN_PLAY_HIT}
)
FOUL_OUTCOMES = frozenset({PitchOutcome.FOUL, PitchOutcome.FOUL_TIP})

HIT_RESULTS = frozenset({AtBatResult.SINGLE, AtBatResult.DOUBLE, AtBatResult.TRIPLE, AtBatResult.HR})
NON_AT_BAT_RESULTS = frozenset({AtBatResult.WALK, AtBatResult.HBP})
BALL_IN_PLAY_RESULTS = HIT_RESULTS | {AtBatResult.OUT}

# Strike zone edge in normalized pitch-location units
ZONE_EDGE = 1.0


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    number: str
    bats: Bats
    position: str | None = None
    avatar: str | None = None


@dataclass(frozen=True)
class PitchLocation:
    x: float  # -1.5 inside to 1.5 outside
    y: float  # -1.5 low to 1.5 high

    @property
    def in_zone(self) -> bool:
        return abs(self.x) <= ZONE_EDGE and -ZONE_EDGE <= self.y <= ZONE_EDGE


@dataclass(frozen=True)
class SprayChartPoint:
    id: str
    x: float  # -1 left field to 1 right field
    y: float  # 0 home to 1 outfield, home runs may exceed 1
    result: SprayResult
    hit_type: HitType
    exit_velocity: float | None = None
    is_barrel: bool | None = None


@dataclass(frozen=True)
class Pitch:
    id: str
    location: PitchLocation
    outcome: PitchOutcome
    pitch_type: PitchType | None = None
    spray_point: SprayChartPoint | None = None

    @property
    def is_swing(self) -> bool:
        return self.outcome in SWING_OUTCOMES


@dataclass(frozen=True)
class AtBat:
    id: str
    result: AtBatResult
    pitches: tuple[Pitch, ...] = ()
    spray_point: SprayChartPoint | None = None
    # Mirrors of spray_point.exit_velocity / is_barrel kept for producer compatibility
    exit_velocity: float | None = None
    is_barrel: bool | None = None
    notes: str | None = None

    @property
    def is_official(self) -> bool:
        return self.result not in NON_AT_BAT_RESULTS

    @property
    def is_hit(self) -> bool:
        return self.result in HIT_RESULTS

    @property
    def is_ball_in_play(self) -> bool:
        return self.result in BALL_IN_PLAY_RESULTS

    @property
    def first_pitch(self) -> Pitch | None:
        return self.pitches[0] if self.pitches else None


@dataclass(frozen=True)
class Outing:
    id: str
    player_id: str
    type: OutingType
    date: datetime.date
    at_bats: tuple[AtBat, ...] = ()
    opponent: str | None = None
    notes: str | None = None
    is_complete: bool = True
