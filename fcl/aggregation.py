"""Team totals and winner selection."""

import logging
from dataclasses import replace

from .models import AggregateResult, TeamEntry

logger = logging.getLogger('fcl.aggregation')


def calculate_team_total(team: TeamEntry) -> float:
    """
    Calculate total fantasy points for a team entry.

    Args:
        team: TeamEntry with player scores attached

    Returns:
        Sum of the points of the entry's players (unscored players count 0)
    """
    total = 0.0
    for points in team.player_points.values():
        total += points
    return total


def aggregate_teams(teams: list[TeamEntry]) -> AggregateResult:
    """
    Total every team entry and select the winners.

    Winners are all entries whose total equals the top total exactly, so
    tied entries are all returned. Input entries are left untouched; the
    result holds copies with total_points set.

    Args:
        teams: Team entries carrying per-player scores

    Returns:
        AggregateResult. With no teams, winners is empty and top_score is None.
    """
    if not teams:
        logger.warning('No team entries to aggregate; no winners')
        return AggregateResult()

    totalled = [replace(team, total_points=calculate_team_total(team)) for team in teams]
    top_score = max(team.total_points for team in totalled)
    winners = [team for team in totalled if team.total_points == top_score]

    logger.info(
        f'Aggregated {len(totalled)} teams: top score {top_score:.1f} '
        f'({", ".join(team.name for team in winners)})'
    )

    return AggregateResult(teams=totalled, winners=winners, top_score=top_score)


def rank_teams(teams: list[TeamEntry]) -> list[tuple[int, TeamEntry]]:
    """
    Rank team entries by total, highest first.

    Tied totals share a rank and the next rank skips ahead (1, 1, 3).
    Entries without a total are treated as 0.
    """
    ordered = sorted(teams, key=lambda t: t.total_points or 0.0, reverse=True)

    ranked = []
    previous_total = None
    rank = 0
    for position, team in enumerate(ordered, 1):
        total = team.total_points or 0.0
        if total != previous_total:
            rank = position
            previous_total = total
        ranked.append((rank, team))
    return ranked
