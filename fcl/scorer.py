"""Scoring engine that ties the match feed, team entries and aggregation together."""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from .aggregation import aggregate_teams, rank_teams
from .constants import CAPTAIN_MULTIPLIER, UNKNOWN_ROLE, VICE_CAPTAIN_MULTIPLIER
from .models import AggregateResult, BallEvent, PlayerScore, TeamEntry
from .scoring import score_player_events

logger = logging.getLogger('fcl.scorer')


class MatchScorer:
    """
    Scores fantasy team entries against one match.

    The events are frozen into a tuple on construction and shared read-only
    by every scoring call; each player is scored independently of the others.
    """

    def __init__(
        self,
        events: Iterable[BallEvent],
        player_catalog: Optional[dict[str, str]] = None,
        captain_multiplier: float = CAPTAIN_MULTIPLIER,
        vice_captain_multiplier: float = VICE_CAPTAIN_MULTIPLIER,
    ):
        """
        Initialize scorer.

        Args:
            events: Ordered ball events for the match
            player_catalog: Optional player name -> role mapping
            captain_multiplier: Points multiplier for captains
            vice_captain_multiplier: Points multiplier for vice-captains
        """
        self.events = tuple(events)
        self.player_catalog = player_catalog
        self.captain_multiplier = captain_multiplier
        self.vice_captain_multiplier = vice_captain_multiplier
        self._participants = self._collect_participants()

    def _collect_participants(self) -> set:
        participants = set()
        for event in self.events:
            participants.add(event.batter)
            participants.add(event.bowler)
            if event.fielders_involved is not None:
                participants.add(event.fielders_involved)
        return participants

    def score_player(self, name: str, captain: str, vice_captain: str) -> PlayerScore:
        """
        Score a single player for one team entry.

        Args:
            name: Player name
            captain: Captain of the team entry
            vice_captain: Vice-captain of the team entry

        Returns:
            PlayerScore with points and breakdown
        """
        role = UNKNOWN_ROLE
        notes = []
        if self.player_catalog is not None:
            if name in self.player_catalog:
                role = self.player_catalog[name]
            else:
                notes.append(f'{name} not found in player catalog (scored from events only)')

        result = PlayerScore(
            name=name,
            role=role,
            is_captain=name == captain,
            is_vice_captain=name == vice_captain and name != captain,
            found_in_events=name in self._participants,
            data_notes=notes,
        )
        result.total_points, result.breakdown = score_player_events(
            self.events,
            name,
            captain,
            vice_captain,
            captain_multiplier=self.captain_multiplier,
            vice_captain_multiplier=self.vice_captain_multiplier,
        )
        return result

    def score_team_entry(self, team: TeamEntry) -> TeamEntry:
        """
        Score all players of a team entry.

        Args:
            team: TeamEntry to score (left unmodified)

        Returns:
            Copy of the entry with a PlayerScore attached per player
        """
        scores = {
            name: self.score_player(name, team.captain, team.vice_captain)
            for name in team.players
        }
        return replace(team, scores=scores, total_points=None)

    def score_teams(self, teams: list[TeamEntry], verbose: bool = False) -> AggregateResult:
        """
        Score every team entry and select the winners.

        Args:
            teams: Team entries to score
            verbose: Whether to print detailed output

        Returns:
            AggregateResult with scored, totalled entries and the winners
        """
        logger.info(f'Scoring {len(teams)} team entries against {len(self.events)} deliveries')

        scored = [self.score_team_entry(team) for team in teams]
        result = aggregate_teams(scored)

        if verbose:
            print_team_report(result)

        return result


def print_team_report(result: AggregateResult) -> None:
    """Print per-player points and team totals, highest total first."""
    if not result.teams:
        print('\nNo team entries scored')
        return

    winner_ids = {id(team) for team in result.winners}

    for rank, team in rank_teams(result.teams):
        print(f'\n{"=" * 60}')
        print(f'{rank}. {team.name}')
        print('=' * 60)

        for name in team.players:
            ps = team.scores.get(name)
            if ps is None:
                print(f'  {name}: 0.0 pts (not scored)')
                continue
            status = '✓' if ps.found_in_events else '✗'
            mark = ' (C)' if ps.is_captain else ' (VC)' if ps.is_vice_captain else ''
            print(f'  {ps.name}{mark} [{ps.role}]: {ps.total_points:.1f} pts {status}')
            for key, val in ps.breakdown.items():
                print(f'      {key}: {val:g}')
            for note in ps.data_notes:
                print(f'      ⚠️  {note}')

        winner_mark = '  🏆' if id(team) in winner_ids else ''
        print(f'\n  TOTAL: {team.total_points:.1f} points{winner_mark}')
