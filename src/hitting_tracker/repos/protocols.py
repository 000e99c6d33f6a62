from typing import Protocol, runtime_checkable

from hitting_tracker.domain.hitting import Outing, Player


@runtime_checkable
class PlayerRepo(Protocol):
    def upsert(self, player: Player) -> str: ...

    def get_by_id(self, player_id: str) -> Player | None: ...

    def all(self) -> list[Player]: ...

    def delete(self, player_id: str) -> bool: ...


@runtime_checkable
class OutingRepo(Protocol):
    def upsert(self, outing: Outing) -> str: ...

    def get_by_id(self, outing_id: str) -> Outing | None: ...

    def get_by_player(self, player_id: str) -> list[Outing]: ...

    def all(self) -> list[Outing]: ...

    def delete(self, outing_id: str) -> bool: ...
