"""Schema migrations, applied on service startup."""

from pathlib import Path
from alembic import command
from alembic.config import Config
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from shared.core import get_logger
from .db import get_engine

logger = get_logger(__name__)

ALEMBIC_DIR = Path(__file__).resolve().parents[2] / "alembic"

def alembic_config() -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    return cfg

def run_migrations(engine: Engine = None) -> str:
    """
    Bring the schema to head and return what was done.

    A database whose tables were created by ``create_all`` has no alembic
    history; it is stamped at head instead of migrated so startup stays
    idempotent.
    """
    engine = engine or get_engine()
    inspector = inspect(engine)
    cfg = alembic_config()

    with engine.begin() as conn:
        cfg.attributes["connection"] = conn
        if not inspector.has_table("alembic_version") and inspector.has_table("shipments"):
            logger.info("Schema has no migration history, stamping head")
            command.stamp(cfg, "head")
            return "stamped"
        logger.info("Running database migrations")
        command.upgrade(cfg, "head")
    return "upgraded"
