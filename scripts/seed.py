# scripts/seed.py
"""
Seed the users collection once, outside of the API process.

Usage:
    python -m scripts.seed [path/to/users.json]
"""

import logging
import sys

from app.config import configure_logging, get_settings
from app.db.engine import get_engine, init_db
from app.db.seed import count_users, load_seed_dataset, seed_users

logger = logging.getLogger(__name__)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    seed_file = argv[0] if argv else settings.SEED_FILE
    records = load_seed_dataset(seed_file)

    engine = get_engine(settings.DB_URL, echo=settings.DB_ECHO)
    try:
        init_db(engine)
        inserted = seed_users(engine, records)
        total = count_users(engine)
    finally:
        engine.dispose()

    logger.info("Seed records read:     %s", len(records))
    logger.info("Users inserted:        %s", inserted)
    logger.info("Users in collection:   %s", total)


if __name__ == "__main__":
    main()
