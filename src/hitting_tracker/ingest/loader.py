import logging
import time
from dataclasses import dataclass

from hitting_tracker.domain.errors import IngestError
from hitting_tracker.domain.hitting import Outing, Player
from hitting_tracker.domain.result import Err, Ok, Result
from hitting_tracker.ingest.column_maps import row_to_outing, row_to_player
from hitting_tracker.ingest.protocols import DataSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Roster:
    players: tuple[Player, ...]
    outings: tuple[Outing, ...]


def load_roster(source: DataSource) -> Result[Roster, IngestError]:
    """Read players and outings from an export document.

    Fetch and mapping failures are logged and returned as ``Err``; nothing is
    partially loaded.
    """
    t0 = time.perf_counter()
    logger.info("Loading roster from %s", source.source_detail)

    try:
        document = source.fetch()
    except Exception as exc:
        logger.error("Fetch failed for %s: %s", source.source_detail, exc)
        return Err(IngestError(message=str(exc), source_type=source.source_type, source_detail=source.source_detail))

    try:
        players = tuple(row_to_player(row) for row in document.get("players") or ())
        outings = tuple(row_to_outing(row) for row in document.get("outings") or ())
    except Exception as exc:
        logger.error("Mapping failed for %s: %s", source.source_detail, exc)
        return Err(IngestError(message=str(exc), source_type=source.source_type, source_detail=source.source_detail))

    logger.info(
        "Loaded %d players and %d outings from %s in %.2fs",
        len(players),
        len(outings),
        source.source_detail,
        time.perf_counter() - t0,
    )
    return Ok(Roster(players=players, outings=outings))
