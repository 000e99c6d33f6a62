import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from hitting_tracker.domain.grades import ReportCardData, ReportCardInput, calc_report_card
from hitting_tracker.domain.hitting import AtBat, Outing, Player
from hitting_tracker.domain.stats import (
    HittingSummary,
    PlateDisciplineStats,
    all_at_bats,
    avg_exit_velocity,
    barrel_percent,
    batted_balls,
    batting_average,
    hitting_summary_from_at_bats,
    plate_discipline_from_at_bats,
)
from hitting_tracker.domain.trends import OutingTrendPoint, outing_trends

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerReport:
    player: Player
    outing_count: int
    summary: HittingSummary
    discipline: PlateDisciplineStats
    trends: list[OutingTrendPoint]
    report_card: ReportCardData


def report_card_input(at_bats: Sequence[AtBat], discipline: PlateDisciplineStats) -> ReportCardInput:
    """Assemble grader input from already-flattened at-bats and their discipline stats."""
    balls = batted_balls(at_bats)
    return ReportCardInput(
        barrel_pct=barrel_percent(balls),
        avg_exit_velo=avg_exit_velocity(balls),
        contact_pct=discipline.contact_pct,
        whiff_rate=discipline.whiff_rate,
        batting_avg=batting_average(at_bats),
        chase_pct=discipline.chase_pct,
        called_strike_pct=discipline.called_strike_pct,
        avg_pitches_per_ab=discipline.avg_pitches_per_ab,
        total_at_bats=sum(1 for ab in at_bats if ab.is_official),
        total_pitches=discipline.total_pitches,
    )


def report_card_for(outings: Iterable[Outing]) -> ReportCardData:
    at_bats = all_at_bats(outings)
    return calc_report_card(report_card_input(at_bats, plate_discipline_from_at_bats(at_bats)))


def build_player_report(player: Player, outings: Iterable[Outing], *, hard_hit_mph: float = 95.0) -> PlayerReport:
    """Compute every statistic shown for one player.

    Only outings belonging to ``player`` are considered; the at-bats are
    flattened once and shared by the discipline and report card computations.
    """
    player_outings = [o for o in outings if o.player_id == player.id]
    at_bats = all_at_bats(player_outings)
    discipline = plate_discipline_from_at_bats(at_bats)
    report = PlayerReport(
        player=player,
        outing_count=len(player_outings),
        summary=hitting_summary_from_at_bats(at_bats, hard_hit_mph),
        discipline=discipline,
        trends=outing_trends(player_outings),
        report_card=calc_report_card(report_card_input(at_bats, discipline)),
    )
    logger.debug(
        "Built report for %s: %d outings, %d at-bats, %d pitches",
        player.id,
        report.outing_count,
        len(at_bats),
        discipline.total_pitches,
    )
    return report
