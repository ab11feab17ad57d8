# app/db/seed.py
"""
First-run seeding of the users collection from the bundled JSON dataset.

Policy: insert only when the collection is empty, never delete. A restart
against a populated store leaves it untouched.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from app.db.schema import users
from app.models.users import UserIn

logger = logging.getLogger(__name__)


def load_seed_dataset(file_path: Union[str, Path]) -> List[UserIn]:
    """
    Parse the seed file into validated user records.

    Raises OSError if the file cannot be read, ValueError for malformed JSON,
    a non-array document, or a record missing a field (pydantic's
    ValidationError is a ValueError).
    """
    with open(file_path, encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError(f"Seed dataset {file_path} must be a JSON array")

    return [UserIn.model_validate(item) for item in raw]


def count_users(engine: Engine) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(users)).scalar_one()


def seed_users(engine: Engine, records: List[UserIn]) -> int:
    """
    Bulk-insert `records` if the users collection holds no document.

    Returns the number of inserted records (0 when the collection was not empty).
    """
    with engine.begin() as conn:
        existing = conn.execute(select(func.count()).select_from(users)).scalar_one()
        if existing:
            logger.info("Users collection holds %s documents, skipping seed", existing)
            return 0

        if not records:
            logger.warning("Seed dataset is empty, nothing to insert")
            return 0

        conn.execute(users.insert(), [r.model_dump() for r in records])

    logger.info("Seeded %s users", len(records))
    return len(records)
