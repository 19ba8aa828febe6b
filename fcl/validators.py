"""Validation functions for team entries and scoring results."""

from collections import Counter
from typing import Callable, Optional

from .constants import ROLE_LIMITS, ROLES, TEAM_SIZE
from .models import AggregateResult, PlayerScore, TeamEntry

# A team rule returns an error message, or None when the entry passes.
TeamRule = Callable[[TeamEntry], Optional[str]]


def team_entry_rules(
    player_roles: dict[str, str],
    team_size: int = TEAM_SIZE,
    role_limits: Optional[dict[str, tuple[int, int]]] = None,
) -> list[TeamRule]:
    """
    Build the rule set a team entry must satisfy.

    Rules:
    - Team name present
    - Exactly team_size players, no duplicates
    - Every player in the reference catalog
    - Each role within its (min, max) count
    - Captain and vice-captain among the players and distinct

    Args:
        player_roles: Player name -> role catalog
        team_size: Required number of players
        role_limits: Role -> (min, max); defaults to 1..8 of every role
    """
    limits = role_limits if role_limits is not None else ROLE_LIMITS

    def name_present(team):
        if not team.name or not team.name.strip():
            return 'Team name is required'

    def exact_size(team):
        if len(team.players) != team_size:
            return f'A team must have exactly {team_size} players (got {len(team.players)})'

    def no_duplicates(team):
        duplicates = sorted(name for name, count in Counter(team.players).items() if count > 1)
        if duplicates:
            return f'{team.name} has duplicate players: {", ".join(duplicates)}'

    def players_known(team):
        missing = [name for name in team.players if name not in player_roles]
        if missing:
            return '; '.join(f'Player {name} not found' for name in missing)

    def role_counts(team):
        counts = Counter(player_roles[name] for name in team.players if name in player_roles)
        problems = []
        for role in ROLES:
            if role not in limits:
                continue
            low, high = limits[role]
            if not low <= counts[role] <= high:
                problems.append(f'{counts[role]} {role} (allowed {low}-{high})')
        if problems:
            return f'Invalid player roles or counts: {", ".join(problems)}'

    def captain_selected(team):
        if team.captain not in team.players:
            return 'Captain must be one of the selected players'

    def vice_captain_selected(team):
        if team.vice_captain not in team.players:
            return 'Vice-captain must be one of the selected players'

    def distinct_captains(team):
        if team.captain == team.vice_captain:
            return 'Captain and vice-captain cannot be the same player'

    return [
        name_present,
        exact_size,
        no_duplicates,
        players_known,
        role_counts,
        captain_selected,
        vice_captain_selected,
        distinct_captains,
    ]


def validate_team_entry(
    team: TeamEntry,
    player_roles: dict[str, str],
    team_size: int = TEAM_SIZE,
    role_limits: Optional[dict[str, tuple[int, int]]] = None,
) -> list[str]:
    """
    Validate that a team entry complies with the team-creation rules.

    Every rule is evaluated once, so all problems are reported together.

    Args:
        team: TeamEntry to validate
        player_roles: Player name -> role catalog
        team_size: Required number of players (default: 11)
        role_limits: Role -> (min, max) counts (default: 1-8 per role)

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    for rule in team_entry_rules(player_roles, team_size, role_limits):
        error = rule(team)
        if error:
            errors.append(error)
    return errors


def validate_player_score(score: PlayerScore) -> list[str]:
    """
    Check that a player's score is reasonable and internally consistent.

    Sanity checks:
    - Total points is a number
    - Total points in a reasonable range (-100 to 500)
    - Breakdown totals match final score (within 0.1)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    if not isinstance(score.total_points, (int, float)):
        warnings.append(f'{score.name} has invalid score type: {type(score.total_points)}')
        return warnings

    if score.total_points > 500:
        warnings.append(
            f'{score.name} scored {score.total_points:.1f} pts (unusually high - check the match feed)'
        )
    elif score.total_points < -100:
        warnings.append(
            f'{score.name} scored {score.total_points:.1f} pts (unusually low - check the match feed)'
        )

    if score.breakdown:
        breakdown_sum = sum(score.breakdown.values())
        diff = abs(breakdown_sum - score.total_points)
        if diff > 0.1:
            warnings.append(
                f'{score.name} breakdown sum ({breakdown_sum:.1f}) != total '
                f'({score.total_points:.1f}) - difference: {diff:.1f}'
            )

    return warnings


def validate_team_score(team_name: str, team_total: float, num_players: int) -> list[str]:
    """
    Check that a team's total score is reasonable.

    Sanity checks:
    - No negative team totals
    - Team total not above 3000
    - Average points per player not above 300

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    if team_total < 0:
        warnings.append(f'{team_name} scored {team_total:.1f} pts (negative total)')
    elif team_total > 3000:
        warnings.append(f'{team_name} scored {team_total:.1f} pts (unusually high)')

    if num_players > 0:
        avg_per_player = team_total / num_players
        if avg_per_player > 300:
            warnings.append(
                f'{team_name} averaged {avg_per_player:.1f} pts/player (unusually high)'
            )

    return warnings


def validate_all_scores(result: AggregateResult) -> tuple[list[str], list[str]]:
    """
    Validate all scored team entries of a match.

    Returns:
        Tuple of (errors, warnings)
        - errors: entries whose players were not all scored
        - warnings: issues to review but not block results
    """
    errors: list[str] = []
    warnings: list[str] = []

    for team in result.teams:
        unscored = [name for name in team.players if name not in team.scores]
        if unscored:
            errors.append(f'{team.name} has unscored players: {", ".join(unscored)}')

        for score in team.scores.values():
            warnings.extend(validate_player_score(score))

        total = team.total_points if team.total_points is not None else 0.0
        warnings.extend(validate_team_score(team.name, total, len(team.players)))

    return errors, warnings
