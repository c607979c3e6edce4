"""Tracks quests through their life cycle and follower-run quests."""

from __future__ import annotations

import math
import random
from typing import Optional, Protocol

from .events import Signal
from .quest import Player, Quest, QuestStatus, QuestType


class QuestGenerator(Protocol):
    """Anything that can build a quest for a difficulty, faction and type."""

    def generate_quest(
        self, difficulty: int, faction_name: str, quest_type: QuestType
    ) -> Optional[Quest]:
        """Return a new quest, or None if none could be made."""


def _move(quest: Quest, source: list[Quest], destination: list[Quest]) -> None:
    source[:] = [entry for entry in source if entry is not quest]
    destination.append(quest)


class QuestManager:
    """Holds available, active, completed and failed quests."""

    def __init__(self, player: Optional[Player] = None) -> None:
        self.player = player
        self.available_quests: list[Quest] = []
        self.active_quests: list[Quest] = []
        self.completed_quests: list[Quest] = []
        self.failed_quests: list[Quest] = []
        self.on_quest_accepted = Signal()
        self.on_quest_completed = Signal()
        self.on_quest_failed = Signal()
        self._follower_quests: dict[str, Quest] = {}
        self._follower_progress: dict[str, float] = {}

    @property
    def follower_assignments(self) -> dict[str, Quest]:
        """A copy of the follower-to-quest assignments."""
        return dict(self._follower_quests)

    @property
    def follower_progress(self) -> dict[str, float]:
        """A copy of each assigned follower's progress, from 0 to 1."""
        return dict(self._follower_progress)

    def add_available_quest(self, quest: Optional[Quest]) -> None:
        """Offer a quest, if it is still available."""
        if quest is not None and quest.status is QuestStatus.AVAILABLE:
            self.available_quests.append(quest)

    def accept_quest(self, quest: Optional[Quest]) -> bool:
        """Start an available quest; returns whether it was accepted."""
        if quest is None or quest.status is not QuestStatus.AVAILABLE:
            return False
        quest.status = QuestStatus.IN_PROGRESS
        _move(quest, self.available_quests, self.active_quests)
        self.on_quest_accepted.emit(quest)
        return True

    def _release_follower(self, quest: Quest) -> None:
        for follower, assigned in self._follower_quests.items():
            if assigned is quest:
                del self._follower_quests[follower]
                self._follower_progress.pop(follower, None)
                break

    def complete_quest(self, quest: Optional[Quest]) -> None:
        """Complete a quest in progress or ready to turn in, granting its rewards."""
        if quest is None or quest.status not in (QuestStatus.IN_PROGRESS, QuestStatus.COMPLETED):
            return
        quest.complete(self.player)
        _move(quest, self.active_quests, self.completed_quests)
        self._release_follower(quest)
        self.on_quest_completed.emit(quest)

    def fail_quest(self, quest: Optional[Quest]) -> None:
        """Fail a quest in progress, applying its penalty."""
        if quest is None or quest.status is not QuestStatus.IN_PROGRESS:
            return
        quest.fail(self.player)
        _move(quest, self.active_quests, self.failed_quests)
        self._release_follower(quest)
        self.on_quest_failed.emit(quest)

    def generate_random_quests(
        self,
        count: int,
        min_difficulty: int,
        max_difficulty: int,
        generator: Optional[QuestGenerator],
        rng: Optional[random.Random] = None,
    ) -> None:
        """Ask ``generator`` for ``count`` quests of random difficulty and type."""
        if generator is None:
            return
        rng = rng if rng is not None else random.Random()
        types = list(QuestType)
        for _ in range(count):
            difficulty = rng.randint(min_difficulty, max_difficulty)
            quest_type = types[rng.randint(0, len(types) - 1)]
            quest = generator.generate_quest(difficulty, "", quest_type)
            if quest is not None:
                self.add_available_quest(quest)

    def quests_by_faction(self, faction_name: str) -> list[Quest]:
        """Available then active quests of the given faction."""
        return [
            quest
            for quest in (*self.available_quests, *self.active_quests)
            if quest.faction_name == faction_name
        ]

    def quests_by_type(self, quest_type: QuestType) -> list[Quest]:
        """Available then active quests of the given type."""
        return [
            quest
            for quest in (*self.available_quests, *self.active_quests)
            if quest.type is quest_type
        ]

    def assign_quest_to_follower(self, quest: Optional[Quest], follower_name: str) -> bool:
        """Hand a delegable quest in progress to a free follower."""
        if (
            quest is None
            or not follower_name
            or not quest.can_be_assigned_to_follower
            or quest.status is not QuestStatus.IN_PROGRESS
            or follower_name in self._follower_quests
        ):
            return False
        self._follower_quests[follower_name] = quest
        self._follower_progress[follower_name] = 0.0
        return True

    def update_assigned_quests(self, delta_time: float) -> None:
        """Advance follower-run quests, completing those that reach full progress."""
        for follower, quest in list(self._follower_quests.items()):
            if quest.status is not QuestStatus.IN_PROGRESS:
                continue
            difficulty = quest.difficulty_level
            speed = 0.1 / difficulty if difficulty else math.inf
            progress = self._follower_progress.get(follower, 0.0) + speed * delta_time
            self._follower_progress[follower] = progress
            if progress >= 1.0:
                for objective in quest.objectives:
                    objective.current_progress = objective.required_progress
                    objective.completed = True
                quest.status = QuestStatus.COMPLETED
                self.complete_quest(quest)