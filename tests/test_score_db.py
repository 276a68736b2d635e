from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from flappy.score_db import BestScore, Database


def test_missing_value_reads_as_zero() -> None:
    best = BestScore(Database(":memory:"))
    assert best.get_best() == 0


def test_best_only_increases() -> None:
    best = BestScore(Database(":memory:"))
    assert best.maybe_update_best(12) is True
    assert best.maybe_update_best(7) is False
    assert best.maybe_update_best(12) is False
    assert best.get_best() == 12


def test_best_survives_reopen(tmp_path: Path) -> None:
    db_file = str(tmp_path / "scores.db")
    first = BestScore.open(db_file)
    first.maybe_update_best(9)
    first.close()

    second = BestScore.open(db_file)
    assert second.get_best() == 9
    second.close()


def test_keys_are_independent() -> None:
    db = Database(":memory:")
    db.set_value("a", 3)
    db.set_value("a", 5)
    assert db.get_value("a") == 5
    assert db.get_value("b") is None


def test_unopenable_database_falls_back_to_memory(tmp_path: Path) -> None:
    missing_dir = tmp_path / "nope" / "scores.db"
    best = BestScore.open(str(missing_dir))
    assert best.db is None
    assert best.get_best() == 0
    assert best.maybe_update_best(3) is True
    assert best.get_best() == 3
    best.close()


class _BrokenDatabase:
    def get_value(self, key: str) -> int:
        raise sqlite3.OperationalError("disk I/O error")

    def set_value(self, key: str, value: int) -> None:
        raise sqlite3.OperationalError("database is locked")

    def close(self) -> None:
        pass


def test_read_and_write_failures_are_swallowed() -> None:
    best = BestScore(_BrokenDatabase())  # type: ignore[arg-type]
    assert best.get_best() == 0
    assert best.maybe_update_best(5) is True
    assert best.get_best() == 5
    assert best.maybe_update_best(4) is False


def test_negative_stored_value_is_ignored() -> None:
    db = Database(":memory:")
    db.set_value("flappyBirdHighScore", -3)
    assert BestScore(db).get_best() == 0


class _FakeConnection:
    def __init__(self) -> None:
        self.closed = False

    def cursor(self) -> "_FakeConnection":
        return self

    def execute(self, *args) -> None:
        raise sqlite3.OperationalError("attempt to write a readonly database")

    def close(self) -> None:
        self.closed = True


def test_failed_setup_closes_the_connection(monkeypatch: pytest.MonkeyPatch) -> None:
    conn = _FakeConnection()
    monkeypatch.setattr(sqlite3, "connect", lambda *args, **kwargs: conn)

    with pytest.raises(sqlite3.OperationalError):
        Database("scores.db")
    assert conn.closed

    best = BestScore.open("scores.db")
    assert best.db is None
    assert best.maybe_update_best(2) is True
