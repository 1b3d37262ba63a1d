"""
DatabaseManager: SQLite storage for crew members and players.

Straight parameterized SQL. Every write is committed immediately; there
is no pooling, no retry and no migration support.
"""

import logging
import re
import sqlite3
from pathlib import Path
from typing import Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)

CREW_TABLE = "tripulantes"
PLAYER_TABLE = "player"

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class DatabaseError(RuntimeError):
    """Raised when the manager is used without an open connection."""


def _check_table_name(table_name: str) -> str:
    if not _IDENTIFIER.match(table_name):
        raise ValueError(f"Invalid table name: {table_name!r}")
    return table_name


class DatabaseManager:
    """
    Manages one connection to a SQLite database file.

    Usable as a context manager: the connection is opened on enter and
    closed on exit, even when an exception escapes the block.
    """

    def __init__(self, db_path: Union[str, Path]):
        """
        Args:
            db_path: Path to the SQLite file (created on first connect)
        """
        self.db_path = str(db_path)
        self.connection: Optional[sqlite3.Connection] = None

    def __enter__(self) -> "DatabaseManager":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()

    def connect(self) -> None:
        """Open the connection. SQLite creates the file if missing. No-op when already open."""
        if self.connection is not None:
            return
        self.connection = sqlite3.connect(self.db_path)
        logger.info("Connected to SQLite database %s", self.db_path)

    def disconnect(self) -> None:
        """Close the connection if it is open."""
        if self.connection is not None:
            self.connection.close()
            self.connection = None
            logger.info("Closed SQLite database %s", self.db_path)

    @property
    def is_connected(self) -> bool:
        return self.connection is not None

    def _require_connection(self) -> sqlite3.Connection:
        if self.connection is None:
            raise DatabaseError(f"Not connected to {self.db_path}; call connect() first")
        return self.connection

    def _execute(self, sql: str, params: tuple = ()) -> None:
        conn = self._require_connection()
        conn.execute(sql, params)
        conn.commit()

    def initialize_database(self) -> None:
        """Create every application table."""
        self.create_crew_table()
        self.create_player_table()
        logger.info("Database initialized with all tables")

    def create_table(self, table_name: str) -> None:
        """Create a generic (id, nombre, descripcion) table if it does not exist."""
        table_name = _check_table_name(table_name)
        self._execute(
            f"CREATE TABLE IF NOT EXISTS {table_name} ("
            " id INTEGER PRIMARY KEY AUTOINCREMENT,"
            " nombre TEXT NOT NULL,"
            " descripcion TEXT"
            ")"
        )
        logger.info("Table '%s' created or already exists", table_name)

    def create_crew_table(self) -> None:
        self._execute(
            f"CREATE TABLE IF NOT EXISTS {CREW_TABLE} ("
            " id INTEGER PRIMARY KEY AUTOINCREMENT,"
            " nombre TEXT NOT NULL,"
            " graduacion TEXT NOT NULL"
            ")"
        )
        logger.info("Table '%s' created or already exists", CREW_TABLE)

    def create_player_table(self) -> None:
        self._execute(
            f"CREATE TABLE IF NOT EXISTS {PLAYER_TABLE} ("
            " id INTEGER PRIMARY KEY AUTOINCREMENT,"
            " nombre TEXT NOT NULL"
            ")"
        )
        logger.info("Table '%s' created or already exists", PLAYER_TABLE)

    def insert_data(self, table_name: str, nombre: str, descripcion: Optional[str]) -> None:
        """Insert a row into a generic table created by create_table."""
        table_name = _check_table_name(table_name)
        self._execute(
            f"INSERT INTO {table_name} (nombre, descripcion) VALUES (?, ?)",
            (nombre, descripcion),
        )
        logger.info("Row inserted into '%s'", table_name)

    def insert_crew_member(self, nombre: str, graduacion: str) -> None:
        self._execute(
            f"INSERT INTO {CREW_TABLE} (nombre, graduacion) VALUES (?, ?)",
            (nombre, graduacion),
        )
        logger.info("Crew member inserted: %s - %s", nombre, graduacion)

    def insert_player(self, nombre: str) -> None:
        self._execute(f"INSERT INTO {PLAYER_TABLE} (nombre) VALUES (?)", (nombre,))
        logger.info("Player inserted: %s", nombre)

    def query_data(self, table_name: str) -> pd.DataFrame:
        """Read back a whole table."""
        table_name = _check_table_name(table_name)
        df = pd.read_sql_query(
            f"SELECT * FROM {table_name} ORDER BY id",
            self._require_connection(),
        )
        logger.info("Table '%s': %d rows", table_name, len(df))
        for row in df.itertuples(index=False):
            logger.info("  %s", row._asdict())
        return df

    def query_crew(self) -> pd.DataFrame:
        return self.query_data(CREW_TABLE)

    def query_players(self) -> pd.DataFrame:
        return self.query_data(PLAYER_TABLE)
