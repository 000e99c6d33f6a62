import datetime
import math
from enum import StrEnum
from typing import Any, TypeVar

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
    PitchType,
    Player,
    SprayChartPoint,
    SprayResult,
)
from hitting_tracker.exceptions import RecordFormatError

_BATS_ALIASES = {"left": Bats.LEFT, "right": Bats.RIGHT, "switch": Bats.SWITCH}


def _require_field(raw: dict[str, Any], field: str, context: str) -> Any:
    if field not in raw or raw[field] is None:
        raise RecordFormatError(f"{context}: missing required field '{field}'")
    return raw[field]


E = TypeVar("E", bound=StrEnum)


def _parse_enum(enum_type: type[E], value: Any, context: str) -> E:
    try:
        return enum_type(str(value))
    except ValueError:
        raise RecordFormatError(f"{context}: invalid {enum_type.__name__} '{value}'") from None


def _to_float(value: Any, context: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise RecordFormatError(f"{context}: expected a number, got {value!r}") from None


def _to_optional_float(value: Any, context: str) -> float | None:
    if value is None or value == "":
        return None
    number = _to_float(value, context)
    if math.isnan(number):
        return None
    return number


def _to_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    s = str(value)
    if s == "":
        return None
    return s


def _to_optional_bool(value: Any) -> bool | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _parse_date(value: Any, context: str) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        # Producers send either a bare calendar date or a full ISO timestamp
        return datetime.date.fromisoformat(str(value)[:10])
    except ValueError:
        raise RecordFormatError(f"{context}: invalid date '{value}'") from None


def _parse_bats(value: Any, context: str) -> Bats:
    alias = _BATS_ALIASES.get(str(value).strip().lower())
    if alias is not None:
        return alias
    return _parse_enum(Bats, str(value).strip().upper(), context)


def _parse_pitch_type(value: Any) -> PitchType | None:
    if value is None or value == "":
        return None
    try:
        return PitchType(str(value))
    except ValueError:
        return PitchType.UNKNOWN


def row_to_player(row: dict[str, Any]) -> Player:
    player_id = str(_require_field(row, "id", "player"))
    context = f"player '{player_id}'"
    return Player(
        id=player_id,
        name=str(_require_field(row, "name", context)),
        number=str(row.get("number", "")),
        bats=_parse_bats(_require_field(row, "bats", context), context),
        position=_to_optional_str(row.get("position")),
        avatar=_to_optional_str(row.get("avatar")),
    )


def row_to_spray_point(row: dict[str, Any], context: str) -> SprayChartPoint:
    context = f"{context} spray point"
    return SprayChartPoint(
        id=str(row.get("id", "")),
        x=_to_float(_require_field(row, "x", context), context),
        y=_to_float(_require_field(row, "y", context), context),
        result=_parse_enum(SprayResult, _require_field(row, "result", context), context),
        hit_type=_parse_enum(HitType, _require_field(row, "hitType", context), context),
        exit_velocity=_to_optional_float(row.get("exitVelocity"), context),
        is_barrel=_to_optional_bool(row.get("isBarrel")),
    )


def row_to_pitch(row: dict[str, Any], context: str) -> Pitch:
    pitch_id = str(_require_field(row, "id", context))
    context = f"{context} pitch '{pitch_id}'"
    location = _require_field(row, "location", context)
    spray = row.get("sprayPoint")
    return Pitch(
        id=pitch_id,
        location=PitchLocation(
            x=_to_float(_require_field(location, "x", context), context),
            y=_to_float(_require_field(location, "y", context), context),
        ),
        outcome=_parse_enum(PitchOutcome, _require_field(row, "outcome", context), context),
        pitch_type=_parse_pitch_type(row.get("pitchType")),
        spray_point=row_to_spray_point(spray, context) if spray else None,
    )


def row_to_at_bat(row: dict[str, Any], context: str) -> AtBat:
    at_bat_id = str(_require_field(row, "id", context))
    context = f"{context} at-bat '{at_bat_id}'"
    spray = row.get("sprayPoint")
    return AtBat(
        id=at_bat_id,
        result=_parse_enum(AtBatResult, _require_field(row, "result", context), context),
        pitches=tuple(row_to_pitch(p, context) for p in row.get("pitches") or ()),
        spray_point=row_to_spray_point(spray, context) if spray else None,
        exit_velocity=_to_optional_float(row.get("exitVelocity"), context),
        is_barrel=_to_optional_bool(row.get("isBarrel")),
        notes=_to_optional_str(row.get("notes")),
    )


def row_to_outing(row: dict[str, Any]) -> Outing:
    outing_id = str(_require_field(row, "id", "outing"))
    context = f"outing '{outing_id}'"
    is_complete = _to_optional_bool(row.get("isComplete"))
    return Outing(
        id=outing_id,
        player_id=str(_require_field(row, "playerId", context)),
        type=_parse_enum(OutingType, _require_field(row, "type", context), context),
        date=_parse_date(_require_field(row, "date", context), context),
        at_bats=tuple(row_to_at_bat(ab, context) for ab in row.get("atBats") or ()),
        opponent=_to_optional_str(row.get("opponent")),
        notes=_to_optional_str(row.get("notes")),
        is_complete=True if is_complete is None else is_complete,
    )
