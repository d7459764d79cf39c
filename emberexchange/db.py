import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from emberexchange.config import settings

logger = logging.getLogger(__name__)


def get_db_path(db_path: Optional[Path] = None) -> Path:
    path = Path(db_path or settings.database_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


@contextmanager
def get_connection(db_path: Optional[Path] = None):
    conn = sqlite3.connect(get_db_path(db_path))
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: Optional[Path] = None):
    """Create the Stove table if it doesn't exist."""
    with get_connection(db_path) as conn:
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS Stove (
                stoveId INTEGER PRIMARY KEY AUTOINCREMENT,
                typeId INTEGER NOT NULL,
                currentOwnerId INTEGER NOT NULL,
                mintedAt TEXT NOT NULL
            );

            CREATE INDEX IF NOT EXISTS idx_stove_owner ON Stove(currentOwnerId);
        """)


class StoveRepository:
    """Mints stoves and reads them back. Implements the StoveMinter capability."""

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = db_path

    def create_stove(self, type_id: int, owner_id: int) -> tuple[bool, int]:
        with get_connection(self.db_path) as conn:
            cursor = conn.execute(
                """
                INSERT INTO Stove (typeId, currentOwnerId, mintedAt)
                VALUES (?, ?, datetime('now'))
                """,
                (type_id, owner_id),
            )
            if cursor.rowcount != 1:
                return False, -1
            logger.debug("Minted stove %s (type %s) for player %s", cursor.lastrowid, type_id, owner_id)
            return True, cursor.lastrowid

    def get_stove(self, stove_id: int) -> dict | None:
        with get_connection(self.db_path) as conn:
            row = conn.execute("SELECT * FROM Stove WHERE stoveId = ?", (stove_id,)).fetchone()
            return dict(row) if row else None

    def get_stoves_by_owner(self, owner_id: int) -> list[dict]:
        with get_connection(self.db_path) as conn:
            rows = conn.execute(
                "SELECT * FROM Stove WHERE currentOwnerId = ? ORDER BY stoveId",
                (owner_id,),
            ).fetchall()
            return [dict(r) for r in rows]

    def count_stoves_by_owner(self, owner_id: int) -> int:
        with get_connection(self.db_path) as conn:
            row = conn.execute(
                "SELECT COUNT(*) AS count FROM Stove WHERE currentOwnerId = ?",
                (owner_id,),
            ).fetchone()
            return row["count"] if row else 0
