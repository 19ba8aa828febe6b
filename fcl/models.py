"""Data models for FCL fantasy cricket scoring."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class BallEvent:
    """One recorded delivery of a match."""
    batter: str
    bowler: str
    batsman_run: int = 0
    extras_run: int = 0
    total_run: int = 0
    is_wicket_delivery: bool = False
    kind: Optional[str] = None
    player_out: Optional[str] = None
    # Compared as a scalar against player names (and the literal 3)
    fielders_involved: Any = None
    match_id: Optional[int] = None
    innings: Optional[int] = None
    over: Optional[int] = None
    ball_number: Optional[int] = None
    non_striker: Optional[str] = None
    extra_type: Optional[str] = None
    batting_team: Optional[str] = None


@dataclass
class PlayerScore:
    """Container for a player's score breakdown."""
    name: str
    role: str
    total_points: float = 0.0
    breakdown: Dict[str, float] = field(default_factory=dict)
    found_in_events: bool = False
    is_captain: bool = False
    is_vice_captain: bool = False
    data_notes: List[str] = field(default_factory=list)


@dataclass
class TeamEntry:
    """A fantasy team entry: 11 players plus captain and vice-captain."""
    name: str
    players: List[str]
    captain: str
    vice_captain: str
    scores: Dict[str, PlayerScore] = field(default_factory=dict)
    total_points: Optional[float] = None
    entry_id: Optional[str] = None
    created_at: Optional[str] = None

    @property
    def player_points(self) -> Dict[str, float]:
        """Points per player; players without an attached score get 0."""
        return {
            name: self.scores[name].total_points if name in self.scores else 0.0
            for name in self.players
        }


@dataclass
class AggregateResult:
    """Team totals for one match and the entries tied for the top total."""
    teams: List[TeamEntry] = field(default_factory=list)
    winners: List[TeamEntry] = field(default_factory=list)
    top_score: Optional[float] = None  # None when no teams were aggregated

    @property
    def has_winner(self) -> bool:
        return bool(self.winners)
