import logging
from collections.abc import Iterable

from hitting_tracker.domain.hitting import Outing, Player
from hitting_tracker.repos.protocols import OutingRepo, PlayerRepo

logger = logging.getLogger(__name__)


class InMemoryPlayerRepo:
    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._players: dict[str, Player] = {p.id: p for p in players}

    def upsert(self, player: Player) -> str:
        self._players[player.id] = player
        return player.id

    def get_by_id(self, player_id: str) -> Player | None:
        return self._players.get(player_id)

    def all(self) -> list[Player]:
        return sorted(self._players.values(), key=lambda p: p.name)

    def delete(self, player_id: str) -> bool:
        return self._players.pop(player_id, None) is not None


class InMemoryOutingRepo:
    def __init__(self, outings: Iterable[Outing] = ()) -> None:
        # Dict insertion order keeps outings in the order they were loaded
        self._outings: dict[str, Outing] = {o.id: o for o in outings}

    def upsert(self, outing: Outing) -> str:
        self._outings[outing.id] = outing
        return outing.id

    def get_by_id(self, outing_id: str) -> Outing | None:
        return self._outings.get(outing_id)

    def get_by_player(self, player_id: str) -> list[Outing]:
        return [o for o in self._outings.values() if o.player_id == player_id]

    def all(self) -> list[Outing]:
        return list(self._outings.values())

    def delete(self, outing_id: str) -> bool:
        return self._outings.pop(outing_id, None) is not None


def delete_player(player_id: str, players: PlayerRepo, outings: OutingRepo) -> int:
    """Delete a player along with all of their outings; returns the number of outings removed."""
    removed = 0
    for outing in outings.get_by_player(player_id):
        if outings.delete(outing.id):
            removed += 1
    if players.delete(player_id):
        logger.info("Deleted player %s and %d outings", player_id, removed)
    return removed
