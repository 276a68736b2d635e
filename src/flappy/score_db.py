"""
score_db.py: Persistence layer for the best score.
Every storage failure is logged and swallowed; the game keeps an in-memory best.
"""

import logging
import sqlite3
from typing import Optional

from .constants import DB_FILE, BEST_SCORE_KEY

logger = logging.getLogger(__name__)


class Database:
    """Handles all interaction with the SQLite database."""
    def __init__(self, db_file: str = DB_FILE):
        self.conn = sqlite3.connect(db_file)
        try:
            self.cur = self.conn.cursor()
            self.setup()
        except sqlite3.Error:
            self.conn.close()
            raise

    def setup(self):
        """Creates tables if they don't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Settings (
                key TEXT PRIMARY KEY,
                value INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.conn.commit()

    def get_value(self, key: str) -> Optional[int]:
        """Fetches the stored integer for `key`, or None when absent."""
        self.cur.execute("SELECT value FROM Settings WHERE key=?", (key,))
        row = self.cur.fetchone()
        return None if row is None else int(row[0])

    def set_value(self, key: str, value: int):
        """Inserts or overwrites the integer stored under `key`."""
        self.cur.execute(
            "INSERT INTO Settings (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value", (key, value))
        self.conn.commit()

    def close(self):
        self.conn.close()


class BestScore:
    """
    Best-ever score surviving across runs.

    The stored value is read once; afterwards the in-memory copy is
    authoritative and writes are best effort. With no database at all the
    instance still works, it just forgets on exit.
    """

    def __init__(self, db: Optional[Database] = None, key: str = BEST_SCORE_KEY):
        self.db = db
        self.key = key
        self._best = self._load()

    @classmethod
    def open(cls, db_file: str = DB_FILE, key: str = BEST_SCORE_KEY) -> "BestScore":
        """Opens the database at `db_file`, or falls back to memory only."""
        try:
            db = Database(db_file)
        except (sqlite3.Error, OSError) as e:
            logger.warning("Best score storage unavailable (%s): %s", db_file, e)
            db = None
        return cls(db, key)

    def _load(self) -> int:
        if self.db is None:
            return 0
        try:
            stored = self.db.get_value(self.key)
        except (sqlite3.Error, OSError, ValueError) as e:
            logger.warning("Could not read best score: %s", e)
            return 0
        if stored is None or stored < 0:
            return 0
        return stored

    def get_best(self) -> int:
        return self._best

    def maybe_update_best(self, score: int) -> bool:
        """Records `score` if it beats the best. Returns True when it did."""
        if score <= self._best:
            return False

        self._best = score
        if self.db is not None:
            try:
                self.db.set_value(self.key, score)
            except (sqlite3.Error, OSError) as e:
                logger.warning("Could not persist best score %d: %s", score, e)
        return True

    def close(self):
        if self.db is None:
            return
        try:
            self.db.close()
        except sqlite3.Error as e:
            logger.warning("Error closing score database: %s", e)
        self.db = None
