"""Quests, resources, inventory view and HUD state for a kingdom-building RPG."""

__version__ = "0.1.0"