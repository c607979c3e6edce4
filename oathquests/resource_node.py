"""Harvestable resource nodes that deplete and respawn over time."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .events import Signal
from .resources import ResourceData, ResourceRarity


class ResourceType(Enum):
    """Kinds of harvestable node."""

    NONE = 0
    WOOD = 1
    STONE = 2
    HERB = 3
    ORE = 4
    CRYSTAL = 5
    ANIMAL = 6


_DEFAULTS = {
    ResourceType.WOOD: ("Wood", ResourceRarity.COMMON, 1),
    ResourceType.STONE: ("Stone", ResourceRarity.COMMON, 1),
    ResourceType.HERB: ("Herb", ResourceRarity.COMMON, 2),
    ResourceType.ORE: ("Iron Ore", ResourceRarity.UNCOMMON, 5),
    ResourceType.CRYSTAL: ("Mana Crystal", ResourceRarity.RARE, 15),
    ResourceType.ANIMAL: ("Hide", ResourceRarity.COMMON, 3),
}
_UNKNOWN = ("Unknown Resource", ResourceRarity.COMMON, 1)


def default_resource_for(resource_type: ResourceType) -> ResourceData:
    """The resource a node of the given type yields when none is configured."""
    name, rarity, base_value = _DEFAULTS.get(resource_type, _UNKNOWN)
    return ResourceData(name=name, rarity=rarity, base_value=base_value)


class ResourceNode:
    """A node in the world that can be harvested a limited number of times."""

    def __init__(
        self,
        resource_type: ResourceType = ResourceType.NONE,
        resource_data: Optional[ResourceData] = None,
        harvest_amount: int = 1,
        max_harvests: int = 3,
        respawn_time: float = 300.0,
    ) -> None:
        self.resource_type = resource_type
        self.resource_data = resource_data if resource_data is not None else ResourceData()
        self.harvest_amount = harvest_amount
        self.max_harvests = max_harvests
        self.respawn_time = respawn_time
        self.visible = True
        self.harvested = Signal()
        self.depleted_signal = Signal()
        self.respawned = Signal()
        self._current_harvests = 0
        self._depleted = False
        self._respawn_remaining: Optional[float] = None

    @property
    def current_harvests(self) -> int:
        return self._current_harvests

    @property
    def depleted(self) -> bool:
        return self._depleted

    @property
    def respawn_remaining(self) -> Optional[float]:
        """Seconds until respawn, or None if no respawn is pending."""
        return self._respawn_remaining

    def begin_play(self) -> None:
        """Fill in the resource from the node type if no name was configured."""
        if not self.resource_data.name:
            default = default_resource_for(self.resource_type)
            self.resource_data.name = default.name
            self.resource_data.rarity = default.rarity
            self.resource_data.base_value = default.base_value

    def harvest(self) -> None:
        """Record one harvest; deplete the node and start the respawn timer at the limit."""
        self._current_harvests += 1
        self.harvested.emit(self)
        if self._current_harvests >= self.max_harvests:
            self._depleted = True
            self.visible = False
            self.depleted_signal.emit(self)
            # A non-positive delay means the timer is never armed.
            self._respawn_remaining = self.respawn_time if self.respawn_time > 0 else None

    def respawn(self) -> None:
        """Restore the node to its fresh, harvestable state."""
        self._current_harvests = 0
        self._depleted = False
        self.visible = True
        self._respawn_remaining = None
        self.respawned.emit(self)

    def tick(self, delta_time: float) -> None:
        """Advance the respawn timer by ``delta_time`` seconds."""
        if self._respawn_remaining is None:
            return
        self._respawn_remaining -= delta_time
        if self._respawn_remaining <= 0:
            self.respawn()