"""
Tests for the SQLite database manager.
"""

import sqlite3

import pytest

from src.storage.database import DatabaseError, DatabaseManager
from src.storage.seed import DEMO_CREW, seed_demo_crew


class TestDatabaseManager:
    """Tests for DatabaseManager."""

    @pytest.fixture
    def db(self, tmp_path):
        manager = DatabaseManager(tmp_path / "cosmos.db")
        manager.connect()
        yield manager
        manager.disconnect()

    def test_connect_creates_file(self, tmp_path):
        path = tmp_path / "new.db"
        with DatabaseManager(path) as db:
            assert db.is_connected
        assert path.exists()
        assert not db.is_connected

    def test_connect_twice_keeps_open_connection(self, db):
        first = db.connection
        db.connect()
        assert db.connection is first
        db.create_crew_table()

    def test_disconnect_is_idempotent(self, db):
        db.disconnect()
        db.disconnect()
        assert not db.is_connected

    def test_crew_insert_and_query(self, db):
        db.create_crew_table()
        db.insert_crew_member("Spock", "Comandante")
        db.insert_crew_member("Leonard McCoy", "Doctor")

        df = db.query_crew()
        assert list(df.columns) == ["id", "nombre", "graduacion"]
        assert df["nombre"].tolist() == ["Spock", "Leonard McCoy"]
        assert df["graduacion"].tolist() == ["Comandante", "Doctor"]
        assert df["id"].tolist() == [1, 2]

    def test_player_insert_and_query(self, db):
        db.initialize_database()
        db.insert_player("Wesley")

        df = db.query_players()
        assert list(df.columns) == ["id", "nombre"]
        assert df["nombre"].tolist() == ["Wesley"]

    def test_generic_table(self, db):
        db.create_table("planetas")
        db.insert_data("planetas", "Vulcano", "Planeta natal de Spock")
        db.insert_data("planetas", "Qo'noS", None)

        df = db.query_data("planetas")
        assert df["nombre"].tolist() == ["Vulcano", "Qo'noS"]
        assert df["descripcion"].isna().tolist() == [False, True]

    def test_create_table_is_repeatable(self, db):
        db.create_crew_table()
        db.insert_crew_member("Hikaru Sulu", "Teniente")
        db.create_crew_table()
        assert len(db.query_crew()) == 1

    def test_values_are_parameterized(self, db):
        db.create_crew_table()
        hostile = "x'); DROP TABLE tripulantes; --"
        db.insert_crew_member(hostile, "Cadete")
        assert db.query_crew()["nombre"].tolist() == [hostile]

    def test_invalid_table_name_rejected(self, db):
        with pytest.raises(ValueError, match="Invalid table name"):
            db.create_table("crew; DROP TABLE player")

    def test_operations_require_connection(self, tmp_path):
        db = DatabaseManager(tmp_path / "cosmos.db")
        with pytest.raises(DatabaseError, match="Not connected"):
            db.create_crew_table()

    def test_missing_table_propagates_sqlite_error(self, db):
        with pytest.raises(sqlite3.Error):
            db.insert_player("Q")


def test_seed_demo_crew(tmp_path):
    with DatabaseManager(tmp_path / "cosmos.db") as db:
        df = seed_demo_crew(db)

    assert len(df) == len(DEMO_CREW)
    assert list(zip(df["nombre"], df["graduacion"])) == DEMO_CREW
