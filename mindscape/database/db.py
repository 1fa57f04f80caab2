"""
Database connection and key-value storage.

Notes are persisted as one serialized blob under a single key, so the only
operations the rest of the application needs are a direct get and set.
"""

from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

from mindscape.config import settings
from mindscape.logging import get_logger

logger = get_logger('database')

DATABASE_PATH = Path(settings.DATABASE_PATH)


def _resolve(db_path: str | Path | None) -> Path:
    return Path(db_path) if db_path else DATABASE_PATH


async def init_db(db_path: str | Path | None = None) -> None:
    """
    Initialize database with schema.

    :param db_path: Database file, defaults to the configured path
    :type db_path: str | Path | None
    :return: None
    :rtype: None
    """
    path = _resolve(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    async with aiosqlite.connect(path) as db:
        schema_path = Path(__file__).parent / "init_db.sql"
        with open(schema_path) as f:
            await db.executescript(f.read())
        await db.commit()
        logger.info(f"Database initialized at {path}")


async def kv_get(key: str, db_path: str | Path | None = None) -> str | None:
    """
    Read the raw value stored under a key.

    :param key: Storage key
    :type key: str
    :param db_path: Database file, defaults to the configured path
    :type db_path: str | Path | None
    :return: The stored value, or None when the key is absent
    :rtype: str | None
    """
    async with aiosqlite.connect(_resolve(db_path)) as db:
        cursor = await db.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
        row = await cursor.fetchone()
        return row[0] if row else None


async def kv_set(key: str, value: str, db_path: str | Path | None = None) -> None:
    """
    Write a value under a key, replacing whatever was there.

    :param key: Storage key
    :type key: str
    :param value: Serialized value
    :type value: str
    :param db_path: Database file, defaults to the configured path
    :type db_path: str | Path | None
    :return: None
    :rtype: None
    """
    async with aiosqlite.connect(_resolve(db_path)) as db:
        await db.execute(
            """INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
               ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at""",
            (key, value, datetime.now(timezone.utc).isoformat()),
        )
        await db.commit()
