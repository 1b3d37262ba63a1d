"""
RosterDocument: accumulate synthesized entities into an XML element tree.
"""

import xml.etree.ElementTree as ET
from typing import Iterable, List, Protocol, Tuple

from .models import RosterKind


class Entity(Protocol):
    def fields(self) -> List[Tuple[str, str]]:
        ...


class RosterDocument:
    """
    In-memory document tree under a single root.

    Each added entity becomes one child element whose leaves are the
    entity's fields, in order. Children keep insertion order, which is
    also the serialization order.
    """

    def __init__(self, root_tag: str, entity_tag: str):
        self.entity_tag = entity_tag
        self.root = ET.Element(root_tag)

    @classmethod
    def for_kind(cls, kind: RosterKind) -> "RosterDocument":
        return cls(kind.root_tag, kind.entity_tag)

    def add(self, entity: Entity) -> ET.Element:
        """Append one entity and return its element."""
        node = ET.SubElement(self.root, self.entity_tag)
        for tag, text in entity.fields():
            ET.SubElement(node, tag).text = text
        return node

    def extend(self, entities: Iterable[Entity]) -> int:
        """Append entities in iteration order. Returns how many were added."""
        added = 0
        for entity in entities:
            self.add(entity)
            added += 1
        return added

    def __len__(self) -> int:
        return len(self.root)
