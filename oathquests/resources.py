"""Resource and loot definitions and a catalogue of known resources."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


class ResourceRarity(IntEnum):
    """Rarity tiers, ordered from most common to rarest."""

    COMMON = 0
    UNCOMMON = 1
    RARE = 2
    LEGENDARY = 3
    ARTIFACT = 4


@dataclass(eq=False)
class ResourceData:
    """A crafting or building material. Identity is its name."""

    name: str = ""
    rarity: ResourceRarity = ResourceRarity.COMMON
    icon: Any = None
    description: str = ""
    base_value: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceData):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(eq=False)
class LootItem:
    """An item that can be carried, dropped or equipped. Identity is its name."""

    name: str = ""
    rarity: ResourceRarity = ResourceRarity.COMMON
    icon: Any = None
    description: str = ""
    value: int = 0
    stats: dict[str, float] = field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LootItem):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


_DEFAULT_RESOURCES = (
    ("Wood", ResourceRarity.COMMON, "Common lumber used for basic construction.", 1),
    ("Stone", ResourceRarity.COMMON, "Common stone used for basic construction.", 1),
    ("Clay", ResourceRarity.COMMON, "Moldable clay used for pottery and basic construction.", 1),
    ("Iron", ResourceRarity.UNCOMMON,
     "Durable metal used for tools, weapons, and advanced construction.", 5),
    ("Silver", ResourceRarity.UNCOMMON,
     "Precious metal used for decoration and certain magical items.", 10),
    ("Medicinal Herbs", ResourceRarity.UNCOMMON,
     "Various useful plants with medicinal properties.", 8),
    ("Gold Ore", ResourceRarity.RARE, "Valuable metal prized for its luster and rarity.", 25),
    ("Magic Crystals", ResourceRarity.RARE,
     "Crystallized magical energy with various applications.", 30),
    ("Dragon Scale", ResourceRarity.LEGENDARY,
     "Nearly indestructible scales from a dragon's hide.", 100),
    ("Ancient Heartwood", ResourceRarity.LEGENDARY,
     "Wood from the core of thousand-year-old trees, imbued with natural magic.", 100),
    ("Starfall Metal", ResourceRarity.ARTIFACT,
     "Metal from a fallen star, containing otherworldly properties.", 500),
)


def _as_rarity(value: Any) -> ResourceRarity:
    if isinstance(value, str):
        return ResourceRarity[value.upper()]
    return ResourceRarity(value)


class ResourceManager:
    """Catalogue of resources, looked up by name or rarity."""

    def __init__(self) -> None:
        self.available_resources: list[ResourceData] = []
        self._index: dict[str, int] = {}
        for name, rarity, description, base_value in _DEFAULT_RESOURCES:
            self._append(ResourceData(name, rarity, None, description, base_value))

    def _append(self, resource: ResourceData) -> None:
        self.available_resources.append(resource)
        self._index[resource.name] = len(self.available_resources) - 1

    def get_resource(self, name: str) -> Optional[ResourceData]:
        """Return a copy of the named resource, or None if it is unknown."""
        index = self._index.get(name)
        if index is None:
            return None
        return dataclasses.replace(self.available_resources[index])

    def get_resources_by_rarity(self, rarity: ResourceRarity) -> list[ResourceData]:
        """All resources of exactly the given rarity, in catalogue order."""
        return [resource for resource in self.available_resources if resource.rarity == rarity]

    def get_base_value(self, name: str) -> int:
        """Base value of the named resource, or 0 if it is unknown."""
        resource = self.get_resource(name)
        return resource.base_value if resource is not None else 0

    def add_resource(self, resource: ResourceData) -> bool:
        """Add a resource unless one of that name exists; return whether it was added."""
        if resource.name in self._index:
            logger.warning("Resource %s already exists, not adding duplicate", resource.name)
            return False
        self._append(resource)
        logger.info(
            "Added new resource: %s (Rarity: %s, Value: %d)",
            resource.name,
            resource.rarity.name,
            resource.base_value,
        )
        return True

    def load_resources(self, rows: Optional[Iterable[Mapping[str, Any]]]) -> None:
        """Replace the catalogue with resources built from table rows.

        Each row maps ``name``, ``rarity``, ``description``, ``base_value`` and
        optionally ``icon``. Duplicate names are all kept; lookups find the last.
        """
        if rows is None:
            raise ValueError("invalid resource table")
        loaded = [
            ResourceData(
                name=row["name"],
                rarity=_as_rarity(row.get("rarity", ResourceRarity.COMMON)),
                icon=row.get("icon"),
                description=row.get("description", ""),
                base_value=row.get("base_value", 0),
            )
            for row in rows
        ]
        self.available_resources = []
        self._index = {}
        for resource in loaded:
            self._append(resource)
        logger.info("Loaded %d resources from data table", len(self.available_resources))