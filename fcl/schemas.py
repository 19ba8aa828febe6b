"""Pydantic schemas for JSON and CSV data validation."""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import MISSING_VALUES, ROLES, TEAM_SIZE


def _none_if_missing(v: Any) -> Any:
    if isinstance(v, str) and v.strip() in MISSING_VALUES:
        return None
    return v


class BallEventRecord(BaseModel):
    """One delivery of the ball-by-ball match feed."""

    match_id: int | None = Field(None, alias='ID')
    innings: int | None = None
    over: int | None = Field(None, alias='overs')
    ball_number: int | None = Field(None, alias='ballnumber')
    batter: str = Field(..., min_length=1)
    bowler: str = Field(..., min_length=1)
    non_striker: str | None = Field(None, alias='non-striker')
    extra_type: str | None = None
    batsman_run: int
    extras_run: int
    total_run: int
    non_boundary: int | None = None
    is_wicket_delivery: bool = Field(..., alias='isWicketDelivery')
    player_out: str | None = None
    kind: str | None = None
    fielders_involved: str | int | None = None
    batting_team: str | None = Field(None, alias='BattingTeam')

    @field_validator(
        'non_striker', 'extra_type', 'player_out', 'kind', 'fielders_involved', 'batting_team',
        mode='before',
    )
    @classmethod
    def normalize_missing(cls, v):
        """Treat the feed's 'NA' placeholder as no value."""
        return _none_if_missing(v)

    class Config:
        extra = 'ignore'
        populate_by_name = True


class PlayerReferenceRecord(BaseModel):
    """Player in the reference catalog."""

    name: str = Field(..., min_length=1, alias='Player')
    role: str = Field(..., alias='Role')

    @field_validator('role')
    @classmethod
    def validate_role(cls, v):
        """Ensure the role is one of the four catalog roles."""
        if v not in ROLES:
            raise ValueError(f'Invalid role: {v}')
        return v

    class Config:
        extra = 'allow'
        populate_by_name = True


class TeamEntryRecord(BaseModel):
    """Team entry as submitted: name, 11 players, captain and vice-captain."""

    team_name: str = Field(..., min_length=1, alias='teamName')
    players: list[str] = Field(..., min_length=TEAM_SIZE, max_length=TEAM_SIZE)
    captain: str = Field(..., min_length=1)
    vice_captain: str = Field(..., min_length=1, alias='viceCaptain')
    entry_id: str | None = Field(None, alias='id')
    created_at: str | None = Field(None, alias='createdAt')

    @field_validator('players', mode='before')
    @classmethod
    def normalize_players(cls, v):
        """Accept either plain names or {'name': ...} records."""
        if isinstance(v, list):
            return [p.get('name') if isinstance(p, dict) else p for p in v]
        return v

    @field_validator('players')
    @classmethod
    def validate_players(cls, v):
        """Ensure player names are non-blank and distinct."""
        for name in v:
            if not name or not name.strip():
                raise ValueError('Player names must not be blank')
        duplicates = sorted({name for name in v if v.count(name) > 1})
        if duplicates:
            raise ValueError(f'Duplicate players: {", ".join(duplicates)}')
        return v

    @model_validator(mode='after')
    def validate_captaincy(self):
        """Ensure captain and vice-captain are distinct members of the team."""
        if self.captain not in self.players:
            raise ValueError('Captain must be one of the selected players')
        if self.vice_captain not in self.players:
            raise ValueError('Vice-captain must be one of the selected players')
        if self.captain == self.vice_captain:
            raise ValueError('Captain and vice-captain cannot be the same player')
        return self

    class Config:
        extra = 'ignore'
        populate_by_name = True


class RoleLimit(BaseModel):
    """Minimum and maximum players of one role per team entry."""

    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)

    class Config:
        extra = 'forbid'


class LeagueConfig(BaseModel):
    """League configuration settings."""

    team_size: int = Field(TEAM_SIZE, ge=1, le=22)
    role_limits: dict[str, RoleLimit]
    captain_multiplier: float = Field(2.0, gt=0)
    vice_captain_multiplier: float = Field(1.5, gt=0)
    match_file: str = 'match.json'
    players_file: str = 'players.json'
    teams_file: str = 'teams.json'

    @field_validator('role_limits')
    @classmethod
    def validate_role_limits(cls, v):
        """Ensure all roles are valid and min <= max."""
        for role, limit in v.items():
            if role not in ROLES:
                raise ValueError(f'Invalid role: {role}')
            if limit.min > limit.max:
                raise ValueError(f'Invalid limits for {role}: min {limit.min} > max {limit.max}')
        return v

    class Config:
        extra = 'forbid'
