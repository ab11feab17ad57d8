# app/db/engine.py

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.db.schema import metadata

logger = logging.getLogger(__name__)


def get_engine(db_url: str, echo: bool = False) -> Engine:
    # No connection is opened until the first query
    return create_engine(db_url, echo=echo, future=True)


def init_db(engine: Engine) -> None:
    """
    Create the users collection if it does not exist yet. Existing data is kept.
    """
    metadata.create_all(engine)
    logger.info("Store schema ready at %s", engine.url.render_as_string(hide_password=True))
