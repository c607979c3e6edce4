"""Quests, their objectives, and the rewards they grant to a player."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .resources import LootItem, ResourceData


class QuestType(Enum):
    """The kind of task a quest asks for."""

    FETCH = 0
    KILL = 1
    ESCORT = 2
    EXPLORE = 3
    BUILD = 4
    DIPLOMATIC = 5
    MYSTERY = 6


class QuestStatus(Enum):
    """Where a quest stands in its life cycle."""

    AVAILABLE = 0
    IN_PROGRESS = 1
    COMPLETED = 2
    FAILED = 3


@dataclass
class QuestObjective:
    """One countable goal within a quest."""

    description: str = ""
    current_progress: int = 0
    required_progress: int = 0
    completed: bool = False


@dataclass
class Player:
    """The recipient of quest rewards: renown, faction standing and inventory."""

    quest_renown: float = 0.0
    faction_reputation: dict[str, float] = field(default_factory=dict)
    gold: int = 0
    materials: dict[ResourceData, int] = field(default_factory=dict)
    items: list[LootItem] = field(default_factory=list)


@dataclass(eq=False)
class Quest:
    """A quest. Quests are compared by identity."""

    quest_name: str = ""
    description: str = ""
    type: QuestType = QuestType.FETCH
    status: QuestStatus = QuestStatus.AVAILABLE
    difficulty_level: int = 1
    quest_renown_reward: float = 10.0
    gold_reward: int = 50
    material_rewards: dict[ResourceData, int] = field(default_factory=dict)
    item_rewards: list[LootItem] = field(default_factory=list)
    objectives: list[QuestObjective] = field(default_factory=list)
    quest_giver: str = ""
    faction_name: str = ""
    faction_reputation_reward: float = 0.0
    can_be_assigned_to_follower: bool = False

    def update_objective(self, index: int, progress: int) -> None:
        """Add progress to one objective; indexes outside the list are ignored.

        When every objective is done the quest becomes COMPLETED, ready to be
        turned in.
        """
        if not 0 <= index < len(self.objectives):
            return
        objective = self.objectives[index]
        objective.current_progress = min(
            objective.current_progress + progress, objective.required_progress
        )
        if objective.current_progress >= objective.required_progress:
            objective.completed = True
            objective.current_progress = objective.required_progress
            if self.all_objectives_complete():
                self.status = QuestStatus.COMPLETED

    def all_objectives_complete(self) -> bool:
        """Whether every objective is completed (true when there are none)."""
        return all(objective.completed for objective in self.objectives)

    def complete(self, player: Optional[Player] = None) -> bool:
        """Mark the quest completed and grant its rewards to ``player``.

        Only quests in progress or already completed can be completed; returns
        whether the quest was.
        """
        if self.status not in (QuestStatus.IN_PROGRESS, QuestStatus.COMPLETED):
            return False
        self.status = QuestStatus.COMPLETED
        if player is not None:
            player.quest_renown += self.quest_renown_reward * self.difficulty_level
            if self.faction_name:
                player.faction_reputation[self.faction_name] = (
                    player.faction_reputation.get(self.faction_name, 0.0)
                    + self.faction_reputation_reward
                )
            player.gold += self.gold_reward
            for resource, amount in self.material_rewards.items():
                player.materials[resource] = player.materials.get(resource, 0) + amount
            player.items.extend(self.item_rewards)
        return True

    def fail(self, player: Optional[Player] = None) -> bool:
        """Mark an in-progress quest failed, costing half its faction reward.

        Returns whether the quest was failed.
        """
        if self.status is not QuestStatus.IN_PROGRESS:
            return False
        self.status = QuestStatus.FAILED
        if player is not None and self.faction_name:
            player.faction_reputation[self.faction_name] = (
                player.faction_reputation.get(self.faction_name, 0.0)
                - self.faction_reputation_reward * 0.5
            )
        return True