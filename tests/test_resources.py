import pytest

from oathquests.resources import LootItem, ResourceData, ResourceManager, ResourceRarity

DEFAULT_NAMES = [
    "Wood",
    "Stone",
    "Clay",
    "Iron",
    "Silver",
    "Medicinal Herbs",
    "Gold Ore",
    "Magic Crystals",
    "Dragon Scale",
    "Ancient Heartwood",
    "Starfall Metal",
]


def test_default_catalogue_order():
    manager = ResourceManager()
    assert [r.name for r in manager.available_resources] == DEFAULT_NAMES


def test_get_resource_known():
    manager = ResourceManager()
    iron = manager.get_resource("Iron")
    assert iron.rarity is ResourceRarity.UNCOMMON
    assert iron.base_value == 5


def test_get_resource_unknown_returns_none():
    assert ResourceManager().get_resource("Mithril") is None


def test_get_resource_returns_copy():
    manager = ResourceManager()
    wood = manager.get_resource("Wood")
    wood.base_value = 999
    assert manager.get_base_value("Wood") == 1


def test_base_values():
    manager = ResourceManager()
    assert manager.get_base_value("Starfall Metal") == 500
    assert manager.get_base_value("Nothing") == 0


def test_resources_by_rarity():
    manager = ResourceManager()
    legendary = manager.get_resources_by_rarity(ResourceRarity.LEGENDARY)
    assert [r.name for r in legendary] == ["Dragon Scale", "Ancient Heartwood"]
    for rarity in ResourceRarity:
        assert all(r.rarity == rarity for r in manager.get_resources_by_rarity(rarity))
    total = sum(len(manager.get_resources_by_rarity(r)) for r in ResourceRarity)
    assert total == len(manager.available_resources)


def test_add_resource_and_duplicate():
    manager = ResourceManager()
    before = len(manager.available_resources)
    mithril = ResourceData("Mithril", ResourceRarity.RARE, None, "Shiny", 40)
    assert manager.add_resource(mithril) is True
    assert manager.get_resource("Mithril").base_value == 40
    assert manager.add_resource(ResourceData("Mithril", base_value=1)) is False
    assert len(manager.available_resources) == before + 1
    assert manager.get_base_value("Mithril") == 40


def test_load_resources_replaces_catalogue():
    manager = ResourceManager()
    manager.load_resources(
        [
            {"name": "Salt", "rarity": "uncommon", "description": "d", "base_value": 3},
            {"name": "Peat", "rarity": ResourceRarity.COMMON, "base_value": 2},
        ]
    )
    assert [r.name for r in manager.available_resources] == ["Salt", "Peat"]
    assert manager.get_resource("Wood") is None
    assert manager.get_resource("Salt").rarity is ResourceRarity.UNCOMMON
    assert manager.get_base_value("Peat") == 2


def test_load_resources_duplicate_name_finds_last():
    manager = ResourceManager()
    manager.load_resources([{"name": "Salt", "base_value": 3}, {"name": "Salt", "base_value": 7}])
    assert len(manager.available_resources) == 2
    assert manager.get_base_value("Salt") == 7


def test_load_resources_none_raises_and_keeps_catalogue():
    manager = ResourceManager()
    with pytest.raises(ValueError):
        manager.load_resources(None)
    assert [r.name for r in manager.available_resources] == DEFAULT_NAMES


def test_equality_and_hash_by_name():
    a = ResourceData("Wood", ResourceRarity.COMMON, None, "x", 1)
    b = ResourceData("Wood", ResourceRarity.RARE, None, "y", 9)
    assert a == b
    assert {a: 1}[b] == 1
    assert LootItem("Sword", value=1) == LootItem("Sword", value=2)
    assert LootItem("Sword") != LootItem("Axe")


def test_rarity_ordering():
    manager = ResourceManager()
    wood = manager.get_resource("Wood").rarity
    iron = manager.get_resource("Iron").rarity
    gold = manager.get_resource("Gold Ore").rarity
    scale = manager.get_resource("Dragon Scale").rarity
    starfall = manager.get_resource("Starfall Metal").rarity
    assert wood < iron < gold < scale < starfall