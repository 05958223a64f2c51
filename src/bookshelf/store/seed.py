"""
Seed data loading for the book store.

The store is filled once at startup from a JSON file holding an array of
books. Loading never raises: an unreadable or malformed file leaves the store
empty, and individual invalid records are skipped so the rest still load.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..config import get_seed_data_path, settings
from ..logging import get_logger
from .models import BookRecord
from .records import BookStore

logger = get_logger(__name__)


def parse_seed_records(data: Any) -> list[BookRecord]:
    """
    Validate decoded seed JSON into book records.

    Args:
        data: Decoded JSON; expected to be a list of book objects

    Returns:
        The records that validated; invalid entries are logged and dropped
    """
    if not isinstance(data, list):
        logger.error("Seed data must be a JSON array", got=type(data).__name__)
        return []

    records: list[BookRecord] = []
    for position, item in enumerate(data):
        try:
            records.append(BookRecord.model_validate(item))
        except ValidationError as e:
            logger.warning(
                "Skipping invalid seed book",
                position=position,
                errors=[
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
                ],
            )
    return records


def load_seed_file(store: BookStore, path: str | Path) -> int:
    """
    Load books from a JSON seed file into ``store``.

    Args:
        store: Store to fill
        path: Path to the seed file

    Returns:
        Number of books loaded (0 when the file could not be read or parsed)
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read seed data", path=str(path), error=str(e))
        return 0

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse seed data", path=str(path), error=str(e))
        return 0

    loaded = store.load(parse_seed_records(data))
    logger.info("Seed data loaded", path=str(path), books=loaded, last_id=store.last_id)
    return loaded


def build_store(seed_path: str | Path | None = None, initial_max_id: int | None = None) -> BookStore:
    """
    Create a store and fill it from the seed file.

    Args:
        seed_path: Seed file (defaults to the configured or bundled file)
        initial_max_id: Id counter floor (defaults to ``settings.initial_max_id``)
    """
    if initial_max_id is None:
        initial_max_id = settings.initial_max_id
    if seed_path is None:
        seed_path = get_seed_data_path()

    store = BookStore(initial_max_id=initial_max_id)
    load_seed_file(store, seed_path)
    return store
