"""
StarshipFactory: Generate starship records per faction.
"""

import string
from typing import Iterator, Sequence

import numpy as np

from .catalogs import DEFAULT_FACTIONS, DEFAULT_SHIPS_PER_FACTION
from .models import Faction, Starship


# Percent chance a ship name gets a letter suffix ("Enterprise-D")
SUFFIX_PERCENT = 30
REGISTRY_MAX = 100_000


class StarshipFactory:
    """Factory for generating starships."""

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def create_starship(self, faction: Faction) -> Starship:
        """Create one starship of ``faction``. Identifiers may repeat."""
        if not faction.names or not faction.prefixes:
            raise ValueError(f"Faction '{faction.label}' needs names and prefixes")
        return Starship(
            id=self._generate_id(faction.prefixes),
            name=self._generate_name(faction.names),
            faction=faction.label,
        )

    def generate_faction(self, faction: Faction, count: int) -> Iterator[Starship]:
        for _ in range(count):
            yield self.create_starship(faction)

    def generate(
        self,
        factions: Sequence[Faction] = DEFAULT_FACTIONS,
        per_faction: int = DEFAULT_SHIPS_PER_FACTION,
    ) -> Iterator[Starship]:
        """Yield ``per_faction`` ships for each faction, one faction block after another."""
        for faction in factions:
            yield from self.generate_faction(faction, per_faction)

    def _generate_id(self, prefixes: Sequence[str]) -> str:
        prefix = str(self.rng.choice(list(prefixes)))
        number = int(self.rng.integers(0, REGISTRY_MAX))
        return f"{prefix}-{number:05d}"

    def _generate_name(self, names: Sequence[str]) -> str:
        base = str(self.rng.choice(list(names)))
        if self.rng.integers(0, 100) < SUFFIX_PERCENT:
            letter = string.ascii_uppercase[int(self.rng.integers(0, 26))]
            return f"{base}-{letter}"
        return base
