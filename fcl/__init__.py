from .models import AggregateResult, BallEvent, PlayerScore, TeamEntry
from .scoring import (
    calculate_points,
    score_batting,
    score_bowling,
    score_fielding,
    score_player_events,
)
from .aggregation import aggregate_teams, calculate_team_total, rank_teams
from .scorer import MatchScorer
from .match_feed import load_match_events, load_player_catalog
from .json_scorer import (
    load_team_entries,
    process_match_from_json,
    save_match_results,
)
from .excel_export import export_results_to_excel
from .validators import validate_team_entry, validate_all_scores

__all__ = [
    # Models
    'AggregateResult',
    'BallEvent',
    'PlayerScore',
    'TeamEntry',
    # Scoring functions
    'calculate_points',
    'score_batting',
    'score_bowling',
    'score_fielding',
    'score_player_events',
    # Aggregation
    'aggregate_teams',
    'calculate_team_total',
    'rank_teams',
    'MatchScorer',
    # Data loading
    'load_match_events',
    'load_player_catalog',
    'load_team_entries',
    'process_match_from_json',
    # Output
    'save_match_results',
    'export_results_to_excel',
    # Validation
    'validate_team_entry',
    'validate_all_scores',
]
