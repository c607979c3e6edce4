"""Plain save records for quests and their conversion to and from JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .quest import Quest, QuestObjective, QuestStatus, QuestType
from .resources import ResourceData


@dataclass
class QuestObjectiveSaveData:
    """The saved state of one quest objective."""

    description: str = ""
    current_progress: int = 0
    required_progress: int = 0
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "current_progress": self.current_progress,
            "required_progress": self.required_progress,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QuestObjectiveSaveData":
        return cls(
            description=data.get("description", ""),
            current_progress=int(data.get("current_progress", 0)),
            required_progress=int(data.get("required_progress", 0)),
            completed=bool(data.get("completed", False)),
        )


@dataclass
class QuestSaveData:
    """The saved state of a quest. Material rewards are keyed by resource name."""

    quest_name: str = ""
    description: str = ""
    type: QuestType = QuestType.FETCH
    status: QuestStatus = QuestStatus.AVAILABLE
    difficulty_level: int = 0
    quest_renown_reward: float = 0.0
    gold_reward: int = 0
    material_rewards: dict[str, int] = field(default_factory=dict)
    objectives: list[QuestObjectiveSaveData] = field(default_factory=list)
    quest_giver: str = ""
    faction_name: str = ""
    faction_reputation_reward: float = 0.0
    can_be_assigned_to_follower: bool = False

    def to_dict(self) -> dict[str, Any]:
        """A JSON-ready dictionary; enums are stored by name."""
        return {
            "quest_name": self.quest_name,
            "description": self.description,
            "type": self.type.name,
            "status": self.status.name,
            "difficulty_level": self.difficulty_level,
            "quest_renown_reward": self.quest_renown_reward,
            "gold_reward": self.gold_reward,
            "material_rewards": dict(self.material_rewards),
            "objectives": [objective.to_dict() for objective in self.objectives],
            "quest_giver": self.quest_giver,
            "faction_name": self.faction_name,
            "faction_reputation_reward": self.faction_reputation_reward,
            "can_be_assigned_to_follower": self.can_be_assigned_to_follower,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QuestSaveData":
        """Rebuild a record from :meth:`to_dict` output; missing keys take defaults."""
        return cls(
            quest_name=data.get("quest_name", ""),
            description=data.get("description", ""),
            type=QuestType[data.get("type", QuestType.FETCH.name)],
            status=QuestStatus[data.get("status", QuestStatus.AVAILABLE.name)],
            difficulty_level=int(data.get("difficulty_level", 0)),
            quest_renown_reward=float(data.get("quest_renown_reward", 0.0)),
            gold_reward=int(data.get("gold_reward", 0)),
            material_rewards={
                str(name): int(amount)
                for name, amount in data.get("material_rewards", {}).items()
            },
            objectives=[
                QuestObjectiveSaveData.from_dict(entry) for entry in data.get("objectives", [])
            ],
            quest_giver=data.get("quest_giver", ""),
            faction_name=data.get("faction_name", ""),
            faction_reputation_reward=float(data.get("faction_reputation_reward", 0.0)),
            can_be_assigned_to_follower=bool(data.get("can_be_assigned_to_follower", False)),
        )


def objective_to_save_data(objective: QuestObjective) -> QuestObjectiveSaveData:
    """Capture an objective's state."""
    return QuestObjectiveSaveData(
        description=objective.description,
        current_progress=objective.current_progress,
        required_progress=objective.required_progress,
        completed=objective.completed,
    )


def save_data_to_objective(data: QuestObjectiveSaveData) -> QuestObjective:
    """Rebuild an objective from its saved state."""
    return QuestObjective(
        description=data.description,
        current_progress=data.current_progress,
        required_progress=data.required_progress,
        completed=data.completed,
    )


def quest_to_save_data(quest: Optional[Quest]) -> QuestSaveData:
    """Capture a quest's state; None gives an empty record."""
    if quest is None:
        return QuestSaveData()
    return QuestSaveData(
        quest_name=quest.quest_name,
        description=quest.description,
        type=quest.type,
        status=quest.status,
        difficulty_level=quest.difficulty_level,
        quest_renown_reward=quest.quest_renown_reward,
        gold_reward=quest.gold_reward,
        material_rewards={
            resource.name: amount for resource, amount in quest.material_rewards.items()
        },
        objectives=[objective_to_save_data(objective) for objective in quest.objectives],
        quest_giver=quest.quest_giver,
        faction_name=quest.faction_name,
        faction_reputation_reward=quest.faction_reputation_reward,
        can_be_assigned_to_follower=quest.can_be_assigned_to_follower,
    )


def save_data_to_quest(data: QuestSaveData) -> Quest:
    """Rebuild a quest. Material rewards come back as resources carrying only a name."""
    return Quest(
        quest_name=data.quest_name,
        description=data.description,
        type=data.type,
        status=data.status,
        difficulty_level=data.difficulty_level,
        quest_renown_reward=data.quest_renown_reward,
        gold_reward=data.gold_reward,
        material_rewards={
            ResourceData(name=name): amount for name, amount in data.material_rewards.items()
        },
        objectives=[save_data_to_objective(entry) for entry in data.objectives],
        quest_giver=data.quest_giver,
        faction_name=data.faction_name,
        faction_reputation_reward=data.faction_reputation_reward,
        can_be_assigned_to_follower=data.can_be_assigned_to_follower,
    )


_QUEST_LISTS = ("available_quests", "active_quests", "completed_quests", "failed_quests")


@dataclass
class QuestSaveGame:
    """A full snapshot of quest progress, storable as JSON."""

    available_quests: list[QuestSaveData] = field(default_factory=list)
    active_quests: list[QuestSaveData] = field(default_factory=list)
    completed_quests: list[QuestSaveData] = field(default_factory=list)
    failed_quests: list[QuestSaveData] = field(default_factory=list)
    follower_assigned_quests: dict[str, str] = field(default_factory=dict)
    follower_quest_progress: dict[str, float] = field(default_factory=dict)

    def to_json(self) -> str:
        """Serialise the snapshot to a JSON string."""
        document: dict[str, Any] = {
            name: [entry.to_dict() for entry in getattr(self, name)] for name in _QUEST_LISTS
        }
        document["follower_assigned_quests"] = dict(self.follower_assigned_quests)
        document["follower_quest_progress"] = dict(self.follower_quest_progress)
        return json.dumps(document, indent=2)

    @classmethod
    def from_json(cls, text: str) -> "QuestSaveGame":
        """Parse a snapshot; raises ValueError on malformed input."""
        document = json.loads(text)
        if not isinstance(document, dict):
            raise ValueError("quest save must be a JSON object")
        lists = {
            name: [QuestSaveData.from_dict(entry) for entry in document.get(name, [])]
            for name in _QUEST_LISTS
        }
        return cls(
            **lists,
            follower_assigned_quests={
                str(k): str(v) for k, v in document.get("follower_assigned_quests", {}).items()
            },
            follower_quest_progress={
                str(k): float(v)
                for k, v in document.get("follower_quest_progress", {}).items()
            },
        )