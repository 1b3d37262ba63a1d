"""
CrewFactory: Generate crew member records.
"""

from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from src.utils.rng import random_token

from .catalogs import AGE_RANGE, FIRST_NAMES, RANKS, SURNAMES
from .models import CrewMember


class CrewFactory:
    """Factory for generating crew members from fixed catalogs."""

    def __init__(
        self,
        rng: np.random.Generator,
        first_names: Optional[Sequence[str]] = None,
        surnames: Optional[Sequence[str]] = None,
        ranks: Optional[Sequence[str]] = None,
        age_range: Tuple[int, int] = AGE_RANGE,
    ):
        self.rng = rng
        self.first_names = list(first_names if first_names is not None else FIRST_NAMES)
        self.surnames = list(surnames if surnames is not None else SURNAMES)
        self.ranks = list(ranks if ranks is not None else RANKS)
        self.age_min, self.age_max = age_range

        for label, catalog in (
            ("first_names", self.first_names),
            ("surnames", self.surnames),
            ("ranks", self.ranks),
        ):
            if not catalog:
                raise ValueError(f"Catalog '{label}' must not be empty")
        if self.age_min > self.age_max:
            raise ValueError(f"Invalid age range: {age_range}")

    def create_member(self) -> CrewMember:
        """Create one crew member. Identifiers are not checked for uniqueness."""
        return CrewMember(
            id=self._generate_id(),
            name=self._generate_name(),
            rank=self._generate_rank(),
            age=str(self._generate_age()),
        )

    def generate(self, count: int) -> Iterator[CrewMember]:
        """Yield ``count`` crew members in generation order."""
        for _ in range(count):
            yield self.create_member()

    def _generate_id(self) -> str:
        """ID- plus the first 8 characters of a random UUID, uppercased."""
        return "ID-" + random_token(self.rng)[:8].upper()

    def _generate_name(self) -> str:
        first = str(self.rng.choice(self.first_names))
        last = str(self.rng.choice(self.surnames))
        return f"{first} {last}"

    def _generate_rank(self) -> str:
        return str(self.rng.choice(self.ranks))

    def _generate_age(self) -> int:
        return int(self.rng.integers(self.age_min, self.age_max, endpoint=True))
