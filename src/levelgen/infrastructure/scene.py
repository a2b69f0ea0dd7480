"""Scene document builder.

Stands in for an engine's scene graph: one container holding one named
entity per placement, ready to be serialized and handed to a tool that
instantiates the real objects.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from levelgen.domain import Placement, Vector3


@dataclass(frozen=True)
class SceneEntity:
    """One instantiated object."""

    name: str
    object_key: str
    position: Vector3
    rotation: Vector3

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "object": self.object_key,
            "position": list(self.position.as_tuple()),
            "rotation": list(self.rotation.as_tuple()),
        }


@dataclass(frozen=True)
class SceneDocument:
    """A container and its child entities, in placement order."""

    container: str
    entities: tuple[SceneEntity, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entities)

    def to_dict(self) -> dict[str, Any]:
        return {
            "container": self.container,
            "entity_count": len(self.entities),
            "entities": [entity.to_dict() for entity in self.entities],
        }


class SceneDocumentBuilder:
    """Builds a SceneDocument from compiled placements.

    Entities are named ``{object_key}_{n}`` where ``n`` counts from 0 per
    object key, so names are unique within the document.
    """

    def build(self, container_name: str, placements: list[Placement]) -> SceneDocument:
        counts: Counter[str] = Counter()
        entities = []
        for placement in placements:
            n = counts[placement.object_key]
            counts[placement.object_key] += 1
            entities.append(
                SceneEntity(
                    name=f"{placement.object_key}_{n}",
                    object_key=placement.object_key,
                    position=placement.position,
                    rotation=placement.rotation,
                )
            )
        return SceneDocument(container=container_name, entities=tuple(entities))
