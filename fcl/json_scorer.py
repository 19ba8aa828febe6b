"""JSON-based match processing.

Team entries come from teams.json, the player catalog from players.json and
the ball-by-ball feed from match.json (or a CSV feed). Results are written
back as JSON.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from .aggregation import rank_teams
from .config import (
    get_captain_multiplier,
    get_role_limits,
    get_team_size,
    get_vice_captain_multiplier,
)
from .match_feed import load_match_events, load_player_catalog
from .models import AggregateResult, TeamEntry
from .schemas import TeamEntryRecord
from .scorer import MatchScorer
from .utils import load_json, save_json, unwrap_records, validate_records
from .validators import validate_team_entry

logger = logging.getLogger('fcl.json_scorer')


def load_team_entries(teams_path: str | Path) -> list[TeamEntry]:
    """Load team entries from teams.json.

    Args:
        teams_path: Path to a list of entries (or {"teams": [...]}) with
            teamName, players, captain and viceCaptain

    Returns:
        List of TeamEntry objects, in file order
    """
    teams_path = Path(teams_path)
    data = load_json(teams_path)
    rows = unwrap_records(data, 'teams', source=teams_path)

    records = validate_records(rows, TeamEntryRecord, source=teams_path)
    return [
        TeamEntry(
            name=record.team_name,
            players=list(record.players),
            captain=record.captain,
            vice_captain=record.vice_captain,
            entry_id=record.entry_id,
            created_at=record.created_at,
        )
        for record in records
    ]


def process_match_from_json(
    match_path: str | Path,
    teams_path: str | Path,
    players_path: Optional[str | Path] = None,
    match_id: Optional[int] = None,
    validate: bool = True,
    verbose: bool = True,
) -> AggregateResult:
    """Score all team entries for one match using file data sources.

    Args:
        match_path: Path to the match feed (JSON or CSV)
        teams_path: Path to teams.json
        players_path: Optional path to players.json (player roles)
        match_id: For multi-match feeds, the match to score
        validate: Drop entries that break the team rules (needs players_path)
        verbose: Whether to print detailed output

    Returns:
        AggregateResult for the match
    """
    events = load_match_events(match_path, match_id=match_id)
    teams = load_team_entries(teams_path)
    catalog = load_player_catalog(players_path) if players_path else None

    if validate and catalog is not None:
        team_size = get_team_size()
        role_limits = get_role_limits()
        valid_teams = []
        for team in teams:
            errors = validate_team_entry(team, catalog, team_size, role_limits)
            if errors:
                logger.error(f'Skipping team entry {team.name}: {"; ".join(errors)}')
                continue
            valid_teams.append(team)
        teams = valid_teams

    if verbose:
        print(f'\nFound {len(teams)} team entries, {len(events)} deliveries')

    scorer = MatchScorer(
        events,
        player_catalog=catalog,
        captain_multiplier=get_captain_multiplier(),
        vice_captain_multiplier=get_vice_captain_multiplier(),
    )
    return scorer.score_teams(teams, verbose=verbose)


def build_results_data(result: AggregateResult) -> dict[str, Any]:
    """Build the JSON-serializable results document for a scored match."""
    winner_ids = {id(team) for team in result.winners}

    teams_data = []
    for rank, team in rank_teams(result.teams):
        roster = []
        for name in team.players:
            ps = team.scores.get(name)
            roster.append(
                {
                    'name': name,
                    'role': ps.role if ps else None,
                    'captain': name == team.captain,
                    'vice_captain': name == team.vice_captain,
                    'points': ps.total_points if ps else 0.0,
                    'breakdown': dict(ps.breakdown) if ps else {},
                }
            )

        teams_data.append(
            {
                'id': team.entry_id,
                'name': team.name,
                'captain': team.captain,
                'vice_captain': team.vice_captain,
                'players': roster,
                'total_points': team.total_points,
                'score_rank': rank,
                'is_winner': id(team) in winner_ids,
            }
        )

    return {
        'scored_at': datetime.now(timezone.utc).isoformat(),
        'top_score': result.top_score,
        'teams': teams_data,
        'winners': [team.name for team in result.winners],
    }


def save_match_results(output_path: str | Path, result: AggregateResult) -> None:
    """Save scored match results to JSON.

    Args:
        output_path: Path to output JSON file
        result: AggregateResult from scoring
    """
    save_json(output_path, build_results_data(result))
    print(f'Results saved to {output_path}')
