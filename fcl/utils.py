"""Utility functions for file I/O."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('fcl.utils')


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load JSON file with optional schema validation.

    Args:
        path: Path to JSON file (str or Path object)
        schema: Optional Pydantic model to validate against

    Returns:
        Parsed JSON (validated if schema provided)

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from fcl.schemas import LeagueConfig
        config = load_json('data/league_config.json', schema=LeagueConfig)
    """
    path = Path(path)

    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema is None:
        return data

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'Schema validation failed for {path}: {e}')
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e


def unwrap_records(data: Any, key: str, source: Path | str = '<records>') -> Any:
    """
    Return the record list of a file that holds either a list or {key: [...]}.

    Raises:
        ValueError: If the file holds an object without the expected key
    """
    if not isinstance(data, dict):
        return data
    if key not in data:
        logger.error(f'Missing "{key}" key in {source}')
        raise ValueError(f'Expected a list or an object with a "{key}" key in {source}')
    return data[key]


def validate_records(
    records: list[Any],
    schema: type[T],
    source: Path | str = '<records>',
) -> list[T]:
    """
    Validate every record of a list against a schema.

    The whole list is rejected on the first invalid record, so callers never
    see a partially loaded file.

    Raises:
        ValueError: If the data is not a list or a record fails validation
    """
    if not isinstance(records, list):
        raise ValueError(f'Expected a list of records in {source}, got {type(records).__name__}')

    validated = []
    for index, record in enumerate(records):
        try:
            validated.append(schema.model_validate(record))
        except ValidationError as e:
            logger.error(f'Record {index} in {source} failed validation: {e}')
            raise ValueError(f'Record {index} in {source} failed validation:\n{e}') from e
    return validated


def save_json(
    path: Path | str,
    data: Any,
    indent: int = 2,
) -> None:
    """
    Save data as JSON, creating parent directories as needed.

    Pydantic models are dumped before serialization.

    Raises:
        TypeError: If data is not JSON-serializable
        OSError: If file cannot be written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    json_data = data.model_dump() if isinstance(data, BaseModel) else data

    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(json_data, f, indent=indent, ensure_ascii=False)
    except TypeError as e:
        logger.error(f'Data is not JSON-serializable: {e}')
        raise TypeError(f'Data is not JSON-serializable: {e}') from e

    logger.debug(f'Saved JSON to: {path}')
