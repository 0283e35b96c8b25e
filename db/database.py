# db/database.py
import logging

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import sessionmaker, scoped_session

from models.base import Base

logger = logging.getLogger(__name__)


def make_engine(database_url: str):
    engine_args = {}
    if database_url.startswith("sqlite"):
        engine_args["connect_args"] = {"check_same_thread": False}
    return create_engine(database_url, echo=False, **engine_args)


def make_session_factory(engine):
    """Build the session handle passed to controllers."""
    return scoped_session(
        sessionmaker(autocommit=False, autoflush=False, bind=engine)
    )


def init_db(engine):
    """Create all tables if not exist (basic version)."""
    import models.user  # noqa: F401
    import models.ad  # noqa: F401
    Base.metadata.create_all(bind=engine)


# -------------------------------------------------------------
#           SAFE AUTO-MIGRATION (CREATE / PATCH)
# -------------------------------------------------------------
REQUIRED_COLUMNS = {
    "users": {
        "id": "INTEGER",
        "name": "VARCHAR(200)",
        "mobile_number": "VARCHAR(20)",
        "password": "VARCHAR(255)",
        "created_at": "DATETIME",
    },
    "ads": {
        "id": "INTEGER",
        "pet_name": "VARCHAR(200)",
        "pet_type": "VARCHAR(100)",
        "location": "VARCHAR(200)",
        "contact_details": "TEXT",
        "image_path": "VARCHAR(255)",
        "user_id": "INTEGER",
        "created_at": "DATETIME",
    },
}


def auto_migrate(engine):
    """
    Auto-creates missing tables AND auto-adds missing columns.
    Does NOT delete data. Safe for local & lightweight usage.
    Returns the list of "table.column" entries that were added.
    """
    # 1) Ensure tables exist
    init_db(engine)

    inspector = inspect(engine)
    added = []

    # 2) Add missing columns inside a transaction (engine.begin ensures commit)
    with engine.begin() as conn:
        for table, columns in REQUIRED_COLUMNS.items():
            existing_cols = [col["name"] for col in inspector.get_columns(table)]
            for col_name, col_type in columns.items():
                if col_name not in existing_cols:
                    logger.info("[AUTO-MIGRATE] Adding missing column: %s.%s", table, col_name)
                    conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {col_name} {col_type}"))
                    added.append(f"{table}.{col_name}")

    logger.info("[AUTO-MIGRATE] Schema verified/updated.")
    return added


def current_session_factory():
    """Session factory of the running Flask app (set up by create_app)."""
    from flask import current_app
    return current_app.extensions["session_factory"]
