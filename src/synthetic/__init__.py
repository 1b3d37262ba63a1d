"""
Synthetic roster generation.

Crew and starship entities are drawn from fixed catalogs, collected into
an XML tree and written once per run.
"""

from .models import (
    CrewMember,
    Faction,
    GenerationRequest,
    RosterKind,
    Starship,
)
from .catalogs import DEFAULT_FACTIONS, FEDERATION, KLINGON, ROMULAN
from .crew_factory import CrewFactory
from .starship_factory import StarshipFactory
from .document import RosterDocument
from .writer import write_document
from .pipeline import build_crew_request, generate_crew, generate_starships

__all__ = [
    # Models
    "CrewMember",
    "Faction",
    "GenerationRequest",
    "RosterKind",
    "Starship",
    # Catalogs
    "DEFAULT_FACTIONS",
    "FEDERATION",
    "KLINGON",
    "ROMULAN",
    # Factories
    "CrewFactory",
    "StarshipFactory",
    # Document
    "RosterDocument",
    "write_document",
    # Pipeline
    "build_crew_request",
    "generate_crew",
    "generate_starships",
]
