"""
Pipeline: synthesize entities, build the roster document, write it once.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from src.utils.config import CosmosConfig

from .catalogs import DEFAULT_CREW_COUNT, DEFAULT_FACTIONS, DEFAULT_SHIPS_PER_FACTION
from .crew_factory import CrewFactory
from .document import RosterDocument
from .models import Faction, GenerationRequest, RosterKind
from .starship_factory import StarshipFactory
from .writer import write_document

logger = logging.getLogger(__name__)


def build_crew_request(
    config: CosmosConfig,
    count: int = DEFAULT_CREW_COUNT,
    ranks: Optional[Sequence[str]] = None,
    output_path: Optional[Path] = None,
) -> GenerationRequest:
    """Build a crew request targeting the configured crew document."""
    catalogs = {}
    if ranks is not None:
        catalogs["ranks"] = tuple(ranks)
    return GenerationRequest(
        entity_label=RosterKind.CREW.entity_tag,
        count=count,
        output_path=Path(output_path) if output_path else config.crew_path,
        catalogs=catalogs,
    )


def generate_crew(request: GenerationRequest, rng: np.random.Generator) -> int:
    """
    Generate the crew roster described by ``request`` and write it.

    Returns:
        Number of crew members written
    """
    logger.info("Generating %d crew members into %s", request.count, request.output_path)

    factory = CrewFactory(
        rng,
        first_names=request.catalogs.get("first_names"),
        surnames=request.catalogs.get("surnames"),
        ranks=request.catalogs.get("ranks"),
    )
    document = RosterDocument(RosterKind.CREW.root_tag, request.entity_label)
    written = document.extend(factory.generate(request.count))

    write_document(document.root, request.output_path)
    logger.info("File %s generated with %d records", request.output_path, written)
    return written


def generate_starships(
    output_path: Path,
    rng: np.random.Generator,
    factions: Sequence[Faction] = DEFAULT_FACTIONS,
    per_faction: int = DEFAULT_SHIPS_PER_FACTION,
) -> int:
    """
    Generate ``per_faction`` ships for each faction, in faction order.

    Returns:
        Number of starships written
    """
    if per_faction < 0:
        raise ValueError(f"per_faction must be >= 0, got {per_faction}")

    logger.info(
        "Generating %d starships for %d factions into %s",
        per_faction,
        len(factions),
        output_path,
    )

    factory = StarshipFactory(rng)
    document = RosterDocument.for_kind(RosterKind.STARSHIPS)
    document.extend(factory.generate(factions, per_faction))

    write_document(document.root, output_path)
    logger.info("File %s generated with %d starships", output_path, len(document))
    return len(document)
