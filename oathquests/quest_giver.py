"""A character who offers quests and takes them back when they are done."""

from __future__ import annotations

import random
from typing import Any, Optional

from .quest import Quest, QuestStatus, QuestType
from .quest_manager import QuestGenerator, QuestManager


class QuestGiver:
    """Offers quests on behalf of a faction and accepts their turn-in."""

    def __init__(
        self,
        giver_name: str = "",
        faction_name: str = "",
        quest_manager: Optional[QuestManager] = None,
        generator: Optional[QuestGenerator] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.giver_name = giver_name
        self.faction_name = faction_name
        self.portrait: Any = None
        self.offered_quests: list[Quest] = []
        self.use_random_quests = True
        self.num_random_quests = 3
        self.min_difficulty = 1
        self.max_difficulty = 3
        self.preferred_quest_types: list[QuestType] = list(QuestType)
        self.quest_manager = quest_manager
        self.generator = generator
        self._rng = rng if rng is not None else random.Random()

    def begin_play(self) -> None:
        """Make sure a quest manager exists, generate quests, and stamp them with this giver."""
        if self.quest_manager is None:
            self.quest_manager = QuestManager()
        if self.use_random_quests:
            self.generate_quests()
        for quest in self.offered_quests:
            quest.quest_giver = self.giver_name
            quest.faction_name = self.faction_name

    def available_quests(self) -> list[Quest]:
        """Offered quests that have not been taken yet."""
        return [quest for quest in self.offered_quests if quest.status is QuestStatus.AVAILABLE]

    def accept_quest(self, quest: Optional[Quest]) -> bool:
        """Hand an available quest to the quest manager; returns whether it was accepted."""
        if (
            self.quest_manager is None
            or quest is None
            or quest.status is not QuestStatus.AVAILABLE
        ):
            return False
        return self.quest_manager.accept_quest(quest)

    def turn_in_quest(self, quest: Optional[Quest]) -> bool:
        """Complete a finished quest that this giver handed out."""
        if (
            self.quest_manager is None
            or quest is None
            or quest.status is not QuestStatus.COMPLETED
            or quest.quest_giver != self.giver_name
        ):
            return False
        self.quest_manager.complete_quest(quest)
        return True

    def generate_quests(self) -> None:
        """Replace the offered quests with freshly generated ones.

        Raises IndexError if there are no preferred quest types to choose from.
        """
        if self.generator is None or not self.use_random_quests:
            return
        self.offered_quests = []
        for _ in range(self.num_random_quests):
            difficulty = self._rng.randint(self.min_difficulty, self.max_difficulty)
            quest_type = self._rng.choice(self.preferred_quest_types)
            quest = self.generator.generate_quest(difficulty, self.faction_name, quest_type)
            if quest is not None:
                quest.quest_giver = self.giver_name
                self.offered_quests.append(quest)

    def has_quests_available(self) -> bool:
        """Whether any offered quest is still available."""
        return any(quest.status is QuestStatus.AVAILABLE for quest in self.offered_quests)

    def has_quests_ready_to_turn_in(self) -> bool:
        """Whether an active quest from this giver has all its objectives done."""
        if self.quest_manager is None:
            return False
        return any(
            quest.status is QuestStatus.COMPLETED and quest.quest_giver == self.giver_name
            for quest in self.quest_manager.active_quests
        )