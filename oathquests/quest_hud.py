"""Tracks active quests and the selected quest for on-screen display."""

from __future__ import annotations

from typing import Optional

from .events import Signal
from .quest import Quest, QuestStatus
from .quest_manager import QuestManager

_STATUS_MESSAGES = {
    QuestStatus.IN_PROGRESS: "Quest accepted",
    QuestStatus.COMPLETED: "Quest objective completed",
    QuestStatus.FAILED: "Quest failed",
}


class QuestHUD:
    """Follows a quest manager's events and publishes what the quest HUD shows."""

    def __init__(self, quest_manager: Optional[QuestManager] = None) -> None:
        self.quest_manager = quest_manager
        self.active_quests: list[Quest] = []
        self.selected_quest: Optional[Quest] = None
        self.on_active_quests_updated = Signal()
        self.on_selected_quest_changed = Signal()
        self.on_quest_objectives_updated = Signal()
        self.on_quest_notification_received = Signal()
        self.on_quest_rewards_displayed = Signal()
        if quest_manager is not None:
            quest_manager.on_quest_accepted.connect(self.on_quest_status_changed)
            quest_manager.on_quest_completed.connect(self.on_quest_status_changed)
            quest_manager.on_quest_failed.connect(self.on_quest_status_changed)

    def update_active_quests(self, quests: list[Quest]) -> None:
        """Replace the active list, selecting the first quest or dropping a stale selection."""
        self.active_quests = list(quests)
        if self.active_quests and self.selected_quest is None:
            self.set_selected_quest(self.active_quests[0])
        elif self.selected_quest is not None and self.selected_quest not in self.active_quests:
            self.selected_quest = None
            self.on_selected_quest_changed.emit()
        self.on_active_quests_updated.emit()

    def set_selected_quest(self, quest: Optional[Quest]) -> None:
        """Select an active or still-available quest; others are ignored."""
        if quest is None:
            return
        if quest in self.active_quests or quest.status is QuestStatus.AVAILABLE:
            self.selected_quest = quest
            self.update_quest_objectives(quest)
            self.on_selected_quest_changed.emit()

    def update_quest_objectives(self, quest: Optional[Quest]) -> None:
        if quest is not None:
            self.on_quest_objectives_updated.emit()

    def display_quest_notification(self, quest_name: str, message: str) -> None:
        self.on_quest_notification_received.emit(quest_name, message)

    def display_quest_rewards(self, quest: Optional[Quest]) -> None:
        if quest is not None:
            self.on_quest_rewards_displayed.emit(quest)

    def on_quest_status_changed(self, quest: Optional[Quest]) -> None:
        """Refresh from the manager and announce the quest's new status."""
        if self.quest_manager is not None:
            self.update_active_quests(self.quest_manager.active_quests)
        if quest is not None and self.selected_quest is quest:
            self.update_quest_objectives(quest)
        if quest is None:
            return
        message = _STATUS_MESSAGES.get(quest.status)
        if message:
            self.display_quest_notification(quest.quest_name, message)