from dataclasses import dataclass


@dataclass(frozen=True)
class TrackerError:
    message: str


@dataclass(frozen=True)
class IngestError(TrackerError):
    source_type: str
    source_detail: str


@dataclass(frozen=True)
class PlayerNotFoundError(TrackerError):
    player_id: str
