"""League configuration management."""

from functools import lru_cache
from pathlib import Path

from .schemas import LeagueConfig
from .utils import load_json

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'league_config.json'


@lru_cache(maxsize=1)
def get_config() -> LeagueConfig:
    """
    Load league configuration from data/league_config.json.

    Configuration is cached after first load.

    Raises:
        FileNotFoundError: If league_config.json doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from fcl.config import get_config
        print(get_config().role_limits)
    """
    return load_json(CONFIG_PATH, schema=LeagueConfig)


def get_team_size() -> int:
    """Get the number of players in a team entry."""
    return get_config().team_size


def get_role_limits() -> dict[str, tuple[int, int]]:
    """Get (min, max) players per role."""
    return {role: (limit.min, limit.max) for role, limit in get_config().role_limits.items()}


def get_captain_multiplier() -> float:
    return get_config().captain_multiplier


def get_vice_captain_multiplier() -> float:
    return get_config().vice_captain_multiplier


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime.
    """
    get_config.cache_clear()
