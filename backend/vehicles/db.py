"""
SQLite database layer for the vehicles service.

Stores:
- cars: condition, details (JSON text), lat/lon and timestamps

Price and street address are never stored; they are fetched from the
pricing and maps services on every read.

Uses aiosqlite for async SQLite access. The database file lives at
settings.database_path (relative to backend/) and is auto-created on first use.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

import aiosqlite

from vehicles.config import settings

logger = logging.getLogger(__name__)


def _resolve_db_path(path: str) -> Path:
    """Relative paths are anchored at the backend directory, not the cwd."""
    resolved = Path(path)
    if not resolved.is_absolute():
        resolved = Path(__file__).parent.parent / resolved
    return resolved


DB_PATH = _resolve_db_path(settings.database_path)

_db: aiosqlite.Connection | None = None


async def get_db() -> aiosqlite.Connection:
    """Get or create the database connection."""
    global _db
    if _db is None:
        DB_PATH.parent.mkdir(parents=True, exist_ok=True)
        _db = await aiosqlite.connect(str(DB_PATH))
        _db.row_factory = aiosqlite.Row
        await _db.execute("PRAGMA journal_mode=WAL")
        await _init_tables(_db)
        logger.info(f"SQLite database initialized at {DB_PATH}")
    return _db


async def close_db():
    """Close the database connection."""
    global _db
    if _db:
        await _db.close()
        _db = None
        logger.info("SQLite database connection closed")


async def _init_tables(db: aiosqlite.Connection):
    """Create tables if they don't exist."""
    await db.executescript("""
        CREATE TABLE IF NOT EXISTS cars (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            condition TEXT NOT NULL,
            details TEXT NOT NULL,
            lat REAL NOT NULL,
            lon REAL NOT NULL,
            created_at TEXT NOT NULL,
            modified_at TEXT NOT NULL
        );
    """)
    await db.commit()


def _row_to_dict(row: aiosqlite.Row) -> dict:
    data = dict(row)
    data["details"] = json.loads(data["details"])
    return data


# ─── Cars ────────────────────────────────────────────────────────────


async def insert_car(condition: str, details: dict, lat: float, lon: float) -> dict:
    """Insert a car. Returns the stored row."""
    db = await get_db()
    now = datetime.now(UTC).isoformat()
    cursor = await db.execute(
        """INSERT INTO cars (condition, details, lat, lon, created_at, modified_at)
           VALUES (?, ?, ?, ?, ?, ?)""",
        (condition, json.dumps(details), lat, lon, now, now),
    )
    await db.commit()
    return await get_car(cursor.lastrowid)


async def update_car(car_id: int, condition: str, details: dict, lat: float, lon: float) -> dict | None:
    """Overwrite a car row. Returns the stored row, or None if the id is unknown."""
    db = await get_db()
    cursor = await db.execute(
        """UPDATE cars
           SET condition = ?, details = ?, lat = ?, lon = ?, modified_at = ?
           WHERE id = ?""",
        (condition, json.dumps(details), lat, lon, datetime.now(UTC).isoformat(), car_id),
    )
    await db.commit()
    if cursor.rowcount == 0:
        return None
    return await get_car(car_id)


async def get_car(car_id: int) -> dict | None:
    """Get a single car row by id."""
    db = await get_db()
    cursor = await db.execute("SELECT * FROM cars WHERE id = ?", (car_id,))
    row = await cursor.fetchone()
    return _row_to_dict(row) if row else None


async def list_cars() -> list[dict]:
    """Get all cars in insertion order."""
    db = await get_db()
    cursor = await db.execute("SELECT * FROM cars ORDER BY id ASC")
    rows = await cursor.fetchall()
    return [_row_to_dict(row) for row in rows]


async def delete_car(car_id: int) -> bool:
    """Delete a car row. Returns True if a row was removed."""
    db = await get_db()
    cursor = await db.execute("DELETE FROM cars WHERE id = ?", (car_id,))
    await db.commit()
    return cursor.rowcount > 0
