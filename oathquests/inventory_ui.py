"""A view model over a player's inventory: filtering, sorting and selection."""

from __future__ import annotations

from typing import Any, Optional

from .events import Signal
from .resources import LootItem, ResourceRarity

_SORT_KEYS = {
    "Name": lambda item: item.name,
    "Value": lambda item: item.value,
    "Rarity": lambda item: int(item.rarity),
}


class InventoryView:
    """Presents an inventory (anything with ``gold``, ``materials`` and ``items``)."""

    def __init__(self, inventory: Optional[Any] = None) -> None:
        self.inventory = inventory
        self.selected_item: Optional[LootItem] = None
        self.category_filter = "All"
        self.rarity_filter = ResourceRarity.COMMON
        self.sort_criterion = "Name"
        self.sort_ascending = True
        self.on_gold_updated = Signal()
        self.on_materials_updated = Signal()
        self.on_items_updated = Signal()
        self.on_item_selected = Signal()
        self.on_item_details_requested = Signal()

    def refresh(self) -> None:
        """Publish gold, materials and the filtered, sorted items."""
        if self.inventory is None:
            return
        self.on_gold_updated.emit(self.inventory.gold)
        self.on_materials_updated.emit(self.inventory.materials)
        self.on_items_updated.emit(self.filtered_and_sorted_items())

    def select_item(self, item: LootItem) -> None:
        self.selected_item = item
        self.on_item_selected.emit(item)

    def _has_selection(self) -> bool:
        return (
            self.selected_item is not None
            and bool(self.selected_item.name)
            and self.inventory is not None
        )

    def use_selected_item(self) -> bool:
        """Use the selected item; returns whether there was one to use."""
        if not self._has_selection():
            return False
        self.refresh()
        return True

    def drop_selected_item(self) -> bool:
        """Remove the selected item from the inventory and clear the selection."""
        if not self._has_selection():
            return False
        if self.selected_item in self.inventory.items:
            self.inventory.items.remove(self.selected_item)
        self.selected_item = None
        self.refresh()
        return True

    def equip_selected_item(self) -> bool:
        """Equip the selected item; returns whether there was one to equip."""
        if not self._has_selection():
            return False
        self.refresh()
        return True

    def view_item_details(self, item: LootItem) -> None:
        self.on_item_details_requested.emit(item)

    def set_category_filter(self, category: str) -> None:
        """Record a category filter. Items carry no category, so none are excluded."""
        self.category_filter = category
        self.refresh()

    def set_rarity_filter(self, min_rarity: ResourceRarity) -> None:
        """Show only items of at least this rarity."""
        self.rarity_filter = min_rarity
        self.refresh()

    def sort_by(self, criterion: str, ascending: bool = True) -> None:
        """Sort by "Name", "Value" or "Rarity"; other criteria leave inventory order."""
        self.sort_criterion = criterion
        self.sort_ascending = ascending
        self.refresh()

    def filtered_and_sorted_items(self) -> list[LootItem]:
        """Items passing the filters, in the current sort order."""
        if self.inventory is None:
            return []
        items = [item for item in self.inventory.items if item.rarity >= self.rarity_filter]
        key = _SORT_KEYS.get(self.sort_criterion)
        if key is not None:
            items.sort(key=key, reverse=not self.sort_ascending)
        return items