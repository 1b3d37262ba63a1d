"""
Data models for synthetic roster generation.

Entities are flat, immutable records. Each exposes its attributes as an
ordered list of (tag, text) pairs, which is exactly the order they are
written into the XML document.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Tuple


class RosterKind(Enum):
    """Document shape per entity type: (root tag, entity tag)."""
    CREW = ("crew", "crewmember")
    STARSHIPS = ("starships", "starship")

    @property
    def root_tag(self) -> str:
        return self.value[0]

    @property
    def entity_tag(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class Faction:
    """A starship faction: shared name catalog and identifier prefixes."""
    label: str
    names: Tuple[str, ...]
    prefixes: Tuple[str, ...]


@dataclass(frozen=True)
class CrewMember:
    """A synthesized crew member."""
    id: str
    name: str
    rank: str
    age: str

    def fields(self) -> List[Tuple[str, str]]:
        return [
            ("id", self.id),
            ("nombre", self.name),
            ("graduacion", self.rank),
            ("edad", self.age),
        ]


@dataclass(frozen=True)
class Starship:
    """A synthesized starship."""
    id: str
    name: str
    faction: str

    def fields(self) -> List[Tuple[str, str]]:
        return [
            ("id", self.id),
            ("nombre", self.name),
            ("faccion", self.faction),
        ]


@dataclass(frozen=True)
class GenerationRequest:
    """
    Everything one generation run needs.

    catalogs maps an attribute name ("first_names", "surnames", "ranks")
    to its candidate values. Missing catalogs fall back to the defaults
    in catalogs.py.
    """
    entity_label: str
    count: int
    output_path: Path
    catalogs: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        object.__setattr__(
            self,
            "catalogs",
            MappingProxyType({name: tuple(values) for name, values in self.catalogs.items()}),
        )
