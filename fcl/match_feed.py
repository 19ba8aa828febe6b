"""Loading the ball-by-ball match feed and the player reference catalog."""

import logging
from pathlib import Path
from typing import Optional

import polars as pl

from .models import BallEvent
from .schemas import BallEventRecord, PlayerReferenceRecord
from .utils import load_json, unwrap_records, validate_records

logger = logging.getLogger('fcl.match_feed')


def _to_ball_event(record: BallEventRecord) -> BallEvent:
    return BallEvent(
        batter=record.batter,
        bowler=record.bowler,
        batsman_run=record.batsman_run,
        extras_run=record.extras_run,
        total_run=record.total_run,
        is_wicket_delivery=record.is_wicket_delivery,
        kind=record.kind,
        player_out=record.player_out,
        fielders_involved=record.fielders_involved,
        match_id=record.match_id,
        innings=record.innings,
        over=record.over,
        ball_number=record.ball_number,
        non_striker=record.non_striker,
        extra_type=record.extra_type,
        batting_team=record.batting_team,
    )


def read_feed_csv(path: Path, match_id: Optional[int] = None) -> list[dict]:
    """
    Read a ball-by-ball CSV feed into row dicts, in file order.

    Args:
        path: CSV file with the feed's header row
        match_id: Keep only deliveries of this match ID (optional)
    """
    df = pl.read_csv(path, null_values=['NA'], infer_schema_length=10000)

    if match_id is not None:
        if 'ID' not in df.columns:
            raise ValueError(f'Cannot filter by match ID: {path} has no ID column')
        df = df.filter(pl.col('ID') == match_id)

    logger.debug(f'Read {df.height} deliveries from {path}')
    return df.to_dicts()


def load_match_events(path: str | Path, match_id: Optional[int] = None) -> list[BallEvent]:
    """
    Load the ordered ball events of one match.

    JSON files hold a list of delivery records (or {"events": [...]});
    CSV files are read with polars. Every record is validated before any
    event is returned, so a malformed delivery rejects the whole feed.

    Args:
        path: Path to match.json or a ball-by-ball CSV
        match_id: For multi-match feeds, the match to keep

    Returns:
        List of BallEvent in feed order

    Raises:
        FileNotFoundError: If the feed doesn't exist
        ValueError: If any delivery is missing a required field
    """
    path = Path(path)

    if path.suffix.lower() == '.csv':
        if not path.exists():
            raise FileNotFoundError(f'Match feed not found: {path}')
        rows = read_feed_csv(path, match_id)
    else:
        data = load_json(path)
        rows = unwrap_records(data, 'events', source=path)
        if match_id is not None and isinstance(rows, list):
            rows = [r for r in rows if isinstance(r, dict) and r.get('ID') == match_id]

    records = validate_records(rows, BallEventRecord, source=path)
    events = [_to_ball_event(record) for record in records]

    logger.info(f'Loaded {len(events)} deliveries from {path}')
    return events


def load_player_catalog(path: str | Path) -> dict[str, str]:
    """
    Load the player reference catalog.

    Args:
        path: Path to players.json (list of {"Player": ..., "Role": ...})

    Returns:
        Dict mapping player name to role
    """
    path = Path(path)
    data = load_json(path)
    rows = unwrap_records(data, 'players', source=path)

    records = validate_records(rows, PlayerReferenceRecord, source=path)
    catalog = {record.name: record.role for record in records}

    logger.info(f'Loaded {len(catalog)} players from {path}')
    return catalog
