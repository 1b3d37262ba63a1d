"""Demonstration run: seed the crew table with the classic bridge crew."""

from typing import List, Tuple

import pandas as pd

from .database import DatabaseManager

DEMO_CREW: List[Tuple[str, str]] = [
    ("James T. Kirk", "Capitán"),
    ("Spock", "Comandante"),
    ("Leonard McCoy", "Doctor"),
    ("Montgomery Scott", "Ingeniero Jefe"),
]


def seed_demo_crew(db: DatabaseManager) -> pd.DataFrame:
    """Create the crew table, insert DEMO_CREW and return the full table."""
    db.create_crew_table()
    for nombre, graduacion in DEMO_CREW:
        db.insert_crew_member(nombre, graduacion)
    return db.query_crew()
