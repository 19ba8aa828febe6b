"""Fantasy point rules for batting, bowling and fielding."""

from typing import Dict, Iterable, Tuple

from .constants import (
    BOUNDARY_BONUS,
    BOWLER_DISMISSAL_KINDS,
    CAPTAIN_MULTIPLIER,
    CATCH_POINTS,
    DUCK_PENALTY,
    KIND_CAUGHT,
    KIND_RUN_OUT,
    KIND_STUMPED,
    LBW_BOWLED_BONUS,
    MAIDEN_POINTS,
    PLAYER_OUT_RUN_OUT,
    RUN_MILESTONES,
    RUN_OUT_POINTS,
    SIX_BONUS,
    STUMPING_POINTS,
    THREE_CATCH_BONUS,
    VICE_CAPTAIN_MULTIPLIER,
    WICKET_HAUL_BONUSES,
    WICKET_POINTS,
)
from .models import BallEvent


def score_batting(event: BallEvent, player: str) -> Dict[str, float]:
    """
    Batting credit for one delivery.

    Scoring:
        - Runs off the bat: 1 point per run
        - Four: +1 bonus
        - Six: +2 bonus
        - 30/50/100 runs on the delivery: +4/+8/+16, cumulative
        - No runs off the bat: -2

    Returns:
        Breakdown of the points earned (empty if the player did not face the ball)
    """
    breakdown: Dict[str, float] = {}
    if event.batter != player:
        return breakdown

    runs = event.batsman_run or 0
    if runs:
        breakdown['runs'] = runs

    if runs == 4:
        breakdown['boundary_bonus'] = BOUNDARY_BONUS
    if runs == 6:
        breakdown['six_bonus'] = SIX_BONUS

    for threshold, bonus, key in RUN_MILESTONES:
        if runs >= threshold:
            breakdown[key] = bonus

    if runs == 0:
        breakdown['duck'] = DUCK_PENALTY

    return breakdown


def score_bowling(event: BallEvent, player: str) -> Dict[str, float]:
    """
    Bowling credit for one delivery.

    Scoring:
        - Wicket: 25 points
        - LBW / Bowled: +8 bonus (whether or not the wicket flag is set)
        - Wicket by LBW / Bowled that is not a run out: +8 three times
        - No extras and no runs conceded: +12
    """
    breakdown: Dict[str, float] = {}
    if event.bowler != player:
        return breakdown

    if event.is_wicket_delivery:
        breakdown['wickets'] = WICKET_POINTS

    bowler_dismissal = event.kind in BOWLER_DISMISSAL_KINDS
    if bowler_dismissal:
        breakdown['lbw_bowled_bonus'] = LBW_BOWLED_BONUS

    if event.is_wicket_delivery and event.player_out != PLAYER_OUT_RUN_OUT and bowler_dismissal:
        breakdown['wicket_haul_bonus'] = sum(WICKET_HAUL_BONUSES)

    if event.extras_run == 0 and event.total_run == 0:
        breakdown['maiden'] = MAIDEN_POINTS

    return breakdown


def score_fielding(event: BallEvent, player: str) -> Dict[str, float]:
    """
    Fielding credit for one delivery.

    Scoring:
        - Catch: 8 points (+4 when the fielder value is the literal 3)
        - Stumping: 12 points
        - Run out: 6 points
    """
    breakdown: Dict[str, float] = {}
    if event.fielders_involved != player:
        return breakdown

    if event.kind == KIND_CAUGHT:
        breakdown['catches'] = CATCH_POINTS
        if event.fielders_involved == 3:
            breakdown['three_catch_bonus'] = THREE_CATCH_BONUS
    if event.kind == KIND_STUMPED:
        breakdown['stumpings'] = STUMPING_POINTS
    if event.kind == KIND_RUN_OUT:
        breakdown['run_outs'] = RUN_OUT_POINTS

    return breakdown


def captaincy_multiplier(
    player: str,
    captain: str,
    vice_captain: str,
    captain_multiplier: float = CAPTAIN_MULTIPLIER,
    vice_captain_multiplier: float = VICE_CAPTAIN_MULTIPLIER,
) -> float:
    """Multiplier applied to a player's raw total: captain, then vice-captain, else 1."""
    if player == captain:
        return captain_multiplier
    if player == vice_captain:
        return vice_captain_multiplier
    return 1.0


def score_player_events(
    events: Iterable[BallEvent],
    player: str,
    captain: str,
    vice_captain: str,
    captain_multiplier: float = CAPTAIN_MULTIPLIER,
    vice_captain_multiplier: float = VICE_CAPTAIN_MULTIPLIER,
) -> Tuple[float, Dict[str, float]]:
    """
    Score a player over a match's ball-by-ball events.

    Scans the events once in order, accumulating batting, bowling and
    fielding credit, then applies the captaincy multiplier. No state carries
    from one delivery to the next.

    Args:
        events: Ordered ball events for one match
        player: Name of the player to score
        captain: Captain of the player's fantasy team
        vice_captain: Vice-captain of the player's fantasy team
        captain_multiplier: Multiplier for the captain (default: 2)
        vice_captain_multiplier: Multiplier for the vice-captain (default: 1.5)

    Returns:
        Tuple of (points, breakdown). The breakdown sums to points; any
        captaincy uplift is recorded under 'captaincy_bonus'.
    """
    breakdown: Dict[str, float] = {}

    for event in events:
        for credit in (
            score_batting(event, player),
            score_bowling(event, player),
            score_fielding(event, player),
        ):
            for key, pts in credit.items():
                breakdown[key] = breakdown.get(key, 0) + pts

    raw_points = float(sum(breakdown.values()))
    multiplier = captaincy_multiplier(
        player, captain, vice_captain, captain_multiplier, vice_captain_multiplier
    )
    points = raw_points * multiplier

    if points != raw_points:
        breakdown['captaincy_bonus'] = points - raw_points

    return points, breakdown


def calculate_points(
    events: Iterable[BallEvent],
    player: str,
    captain: str,
    vice_captain: str,
) -> float:
    """Fantasy points for a player in one match, captaincy included."""
    points, _ = score_player_events(events, player, captain, vice_captain)
    return points
