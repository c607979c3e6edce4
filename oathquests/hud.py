"""The main heads-up display: player stats, notifications and menu toggling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .events import Signal

MINIMAP_CENTER = (50.0, 50.0)
MINIMAP_SCALE = 1000.0
DEFAULT_NOTIFICATION_DURATION = 5.0


class Menu(Enum):
    """Full-screen menus; at most one is open at a time."""

    INVENTORY = "inventory"
    QUEST_LOG = "quest_log"
    KINGDOM = "kingdom"
    MAP = "map"
    CHARACTER = "character"


@dataclass
class Notification:
    """A queued on-screen notification and the time it has left."""

    title: str
    message: str
    duration: float
    remaining_time: float


class MainHUD:
    """Publishes HUD updates as signals and keeps the menu and notification state."""

    def __init__(self) -> None:
        self.on_health_updated = Signal()
        self.on_mana_updated = Signal()
        self.on_stamina_updated = Signal()
        self.on_experience_updated = Signal()
        self.on_compass_updated = Signal()
        self.on_time_display_updated = Signal()
        self.on_weather_display_updated = Signal()
        self.on_interaction_prompt_shown = Signal()
        self.on_interaction_prompt_hidden = Signal()
        self.on_enemy_health_bar_shown = Signal()
        self.on_enemy_health_bar_hidden = Signal()
        self.on_notification_added = Signal()
        self.on_menu_toggled = Signal()
        self._menus: dict[Menu, bool] = {menu: False for menu in Menu}
        self._notifications: list[Notification] = []

    @property
    def notifications(self) -> tuple[Notification, ...]:
        """The queued notifications; the first is the one on screen."""
        return tuple(self._notifications)

    @property
    def open_menu(self) -> Optional[Menu]:
        """The menu currently open, or None."""
        return next((menu for menu, visible in self._menus.items() if visible), None)

    def construct(self, has_player: bool = True) -> None:
        """Fill the HUD with its starting values."""
        if has_player:
            self.update_health_display(100.0, 100.0)
            self.update_mana_display(100.0, 100.0)
            self.update_stamina_display(100.0, 100.0)
            self.update_experience_display(0.0, 1000.0, 1)
        self.update_compass_display(0.0)
        self.update_time_display(0.5, 1, 0)
        self.update_weather_display("Clear", 0.0)

    def tick(self, delta_time: float, heading: Optional[float] = None) -> None:
        """Advance notifications and, when the player's heading is known, the compass."""
        self.process_notifications(delta_time)
        if heading is not None:
            self.update_compass_display(heading)

    def update_health_display(self, current_health: float, max_health: float) -> None:
        self.on_health_updated.emit(current_health, max_health)

    def update_mana_display(self, current_mana: float, max_mana: float) -> None:
        self.on_mana_updated.emit(current_mana, max_mana)

    def update_stamina_display(self, current_stamina: float, max_stamina: float) -> None:
        self.on_stamina_updated.emit(current_stamina, max_stamina)

    def update_experience_display(
        self, current_xp: float, next_level_xp: float, level: int
    ) -> None:
        self.on_experience_updated.emit(current_xp, next_level_xp, level)

    def update_compass_display(self, heading: float) -> None:
        self.on_compass_updated.emit(heading)

    def update_time_display(self, time_of_day: float, day: int, season: int) -> None:
        self.on_time_display_updated.emit(time_of_day, day, season)

    def update_weather_display(self, weather_type: str, intensity: float) -> None:
        self.on_weather_display_updated.emit(weather_type, intensity)

    def show_interaction_prompt(self, prompt_text: str, input_key: str) -> None:
        self.on_interaction_prompt_shown.emit(prompt_text, input_key)

    def hide_interaction_prompt(self) -> None:
        self.on_interaction_prompt_hidden.emit()

    def show_enemy_health_bar(
        self, enemy_name: str, current_health: float, max_health: float
    ) -> None:
        self.on_enemy_health_bar_shown.emit(enemy_name, current_health, max_health)

    def hide_enemy_health_bar(self) -> None:
        self.on_enemy_health_bar_hidden.emit()

    def add_notification(
        self, title: str, message: str, duration: float = DEFAULT_NOTIFICATION_DURATION
    ) -> None:
        """Queue a notification; it is shown at once if nothing else is showing."""
        self._notifications.append(Notification(title, message, duration, duration))
        if len(self._notifications) == 1:
            self.on_notification_added.emit(title, message)

    def process_notifications(self, delta_time: float) -> None:
        """Run down the shown notification and move to the next when it expires."""
        if not self._notifications:
            return
        current = self._notifications[0]
        current.remaining_time -= delta_time
        if current.remaining_time <= 0.0:
            self._notifications.pop(0)
            if self._notifications:
                following = self._notifications[0]
                self.on_notification_added.emit(following.title, following.message)

    def toggle_menu(self, menu: Menu) -> bool:
        """Open or close a menu, closing every other one when opening; returns its state."""
        visible = not self._menus[menu]
        self._menus[menu] = visible
        if visible:
            others = [other for other in Menu if other is not menu]
            for other in others:
                self._menus[other] = False
            for other in others:
                self.on_menu_toggled.emit(other, False)
        self.on_menu_toggled.emit(menu, visible)
        return visible

    def toggle_inventory_menu(self) -> bool:
        return self.toggle_menu(Menu.INVENTORY)

    def toggle_quest_log(self) -> bool:
        return self.toggle_menu(Menu.QUEST_LOG)

    def toggle_kingdom_menu(self) -> bool:
        return self.toggle_menu(Menu.KINGDOM)

    def toggle_map(self) -> bool:
        return self.toggle_menu(Menu.MAP)

    def toggle_character_menu(self) -> bool:
        return self.toggle_menu(Menu.CHARACTER)

    def world_to_minimap(
        self,
        world_location: Sequence[float],
        player_location: Optional[Sequence[float]] = None,
    ) -> tuple[float, float]:
        """Minimap position of a world point, centred on the player.

        Without a player the origin is returned. The y axis is flipped for screen space.
        """
        if player_location is None:
            return (0.0, 0.0)
        relative_x = (world_location[0] - player_location[0]) / MINIMAP_SCALE
        relative_y = (world_location[1] - player_location[1]) / MINIMAP_SCALE
        center_x, center_y = MINIMAP_CENTER
        return (center_x + relative_x, center_y - relative_y)