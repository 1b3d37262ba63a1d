"""SQLite storage for crew members and players."""

from .database import CREW_TABLE, PLAYER_TABLE, DatabaseError, DatabaseManager
from .seed import DEMO_CREW, seed_demo_crew

__all__ = [
    "CREW_TABLE",
    "PLAYER_TABLE",
    "DatabaseError",
    "DatabaseManager",
    "DEMO_CREW",
    "seed_demo_crew",
]
