# oathquests

Game-logic building blocks for a fantasy role-playing game about founding a
kingdom. The package covers quests and their objectives, quest givers,
follower-run quests, harvestable resource nodes and a resource catalogue. It
also has JSON save data for quests and the view state behind the inventory
screen, the quest tracker and the main HUD.

Everything is plain Python with no engine behind it. Your game loop moves time
forward by calling `ResourceNode.tick`, `MainHUD.tick` or
`QuestManager.update_assigned_quests` with a time step. Other code receives
events by connecting callbacks to `Signal` objects.

## Installation

```
pip install oathquests
```

To run the test suite:

```
pip install "oathquests[test]"
pytest
```

## Modules

### `oathquests.events`

`Signal` is a multicast callback list.

- `connect(callback)` returns the callback, so it also works as a decorator.
- `disconnect(callback)` raises `ValueError` if the callback is not connected.
- `emit(*args)` calls every callback in the order they were connected.

### `oathquests.resources`

- `ResourceRarity` is an ordered `IntEnum` running from `COMMON` to `ARTIFACT`.
- `ResourceData` and `LootItem` are dataclasses. Two of them are equal when
  their names are equal, and they hash by name.
- `ResourceManager` is a catalogue that starts filled with eleven default
  resources, among them Wood, Stone, Iron, Gold Ore, Dragon Scale and
  Starfall Metal.
  - `get_resource(name)` returns a copy of the resource, or `None`.
  - `get_resources_by_rarity(rarity)` returns the resources of that rarity.
  - `get_base_value(name)` returns the base value, or 0 for an unknown name.
  - `add_resource(resource)` refuses a duplicate name and returns `False`.
  - `load_resources(rows)` replaces the catalogue with one built from
    mappings with the keys `name`, `rarity`, `description`, `base_value` and
    an optional `icon`. It raises `ValueError` when given `None`.

### `oathquests.resource_node`

- `ResourceType` lists the kinds of node.
- `default_resource_for(resource_type)` gives the resource a node of that
  type yields when none is configured.
- `ResourceNode` is a node in the world.
  - `begin_play()` fills in the node's resource from its type if the
    resource has no name.
  - `harvest()` counts one harvest. When the count reaches `max_harvests`,
    the node becomes depleted and hidden, and a respawn timer starts.
  - `tick(delta_time)` runs the timer down. When it runs out, `respawn()` is
    called.
  - The signals `harvested`, `depleted_signal` and `respawned` report each of
    these steps.

### `oathquests.quest`

- `QuestType` and `QuestStatus` are enums.
- `QuestObjective` is one countable goal within a quest.
- `Player` receives renown, faction reputation, gold, materials and items.
- `Quest` is a single quest.
  - `update_objective(index, progress)` adds progress, capped at the
    objective's requirement. Once every objective is done the quest's status
    becomes `COMPLETED`.
  - `complete(player)` grants the rewards. Renown is multiplied by the
    difficulty.
  - `fail(player)` takes away half of the faction reward.

### `oathquests.quest_manager`

- `QuestGenerator` is the protocol that a quest source implements, with
  `generate_quest(difficulty, faction_name, quest_type)`.
- `QuestManager` keeps four lists: available, active, completed and failed
  quests.
  - It announces changes through the signals `on_quest_accepted`,
    `on_quest_completed` and `on_quest_failed`.
  - `assign_quest_to_follower` hands a quest to a follower. The quest must be
    in progress and delegable.
  - `update_assigned_quests(delta_time)` moves each assigned quest forward at
    `0.1 / difficulty` per second and completes it when it reaches 1.
  - `generate_random_quests` asks a `QuestGenerator` for quests.
  - `quests_by_faction` and `quests_by_type` search the available and active
    quests.

### `oathquests.quest_giver`

`QuestGiver` offers quests for a faction, generating them from a
`QuestGenerator`. It passes accepted quests to its `QuestManager`, and takes
back completed quests through `turn_in_quest` only if it gave them out.

### `oathquests.quest_save`

- `QuestObjectiveSaveData` and `QuestSaveData` are plain save records.
  `QuestSaveData` has `to_dict` and `from_dict`.
- `quest_to_save_data` and `save_data_to_quest` convert between quests and
  save records. Material rewards come back as resources that carry only a
  name.
- `QuestSaveGame` snapshots all quest lists and the follower assignments.
  `to_json()` writes the snapshot and `from_json(text)` reads it back.

### `oathquests.inventory_ui`

`InventoryView` works over any object that has `gold`, `materials` and
`items`.

- It filters items by a minimum rarity.
- `sort_by` orders items by `"Name"`, `"Value"` or `"Rarity"`, either
  ascending or descending.
- It tracks the selected item. `drop_selected_item()` removes that item from
  the inventory.
- Results are published through signals such as `on_items_updated`.

### `oathquests.quest_hud`

`QuestHUD` follows a `QuestManager`'s signals.

- It keeps the list of active quests and a selected quest.
- It emits a notification ("Quest accepted", "Quest objective completed",
  "Quest failed") when a quest's status changes.

### `oathquests.hud`

`MainHUD` sends stat, compass, time, weather, prompt and enemy-health updates
out as signals. It also keeps the following state:

- **Notifications:** a queue in which one notification shows at a time, for
  its duration (5 seconds by default). The queue is in `notifications`.
- **Menus:** the `Menu` values are mutually exclusive. `toggle_menu` and its
  shortcuts such as `toggle_inventory_menu()` open or close a menu, and
  `open_menu` gives the one currently open.
- **Minimap:** `world_to_minimap(world_location, player_location)` projects a
  world point onto the minimap.

## Example

```python
from oathquests.quest import Player, Quest, QuestObjective, QuestStatus
from oathquests.quest_manager import QuestManager

player = Player()
manager = QuestManager(player)
quest = Quest(
    quest_name="Clear the Wolf Den",
    objectives=[QuestObjective(description="Slay wolves", required_progress=5)],
)
manager.add_available_quest(quest)
manager.accept_quest(quest)

quest.update_objective(0, 5)
assert quest.status is QuestStatus.COMPLETED

manager.complete_quest(quest)
assert quest in manager.completed_quests
assert player.gold == 50
```

A resource node can be harvested a fixed number of times. It is then
depleted, and it returns once its respawn time has passed:

```python
from oathquests.resource_node import ResourceNode, ResourceType

node = ResourceNode(ResourceType.ORE, max_harvests=2, respawn_time=10.0)
node.begin_play()
node.harvest()
node.harvest()
assert node.depleted
node.tick(10.0)
assert not node.depleted
```

## What the package does not do

- It holds state and sends events. It draws nothing: there are no screens,
  widgets or rendering.
- It has no procedural quest generator. Quests come from a `QuestGenerator`
  that you supply.
- It has no kingdom management: buildings, followers and kingdom events are
  not included. A follower is known only by the name given to
  `assign_quest_to_follower`.
- Save data becomes a JSON string and nothing more. Where the string is
  stored is up to you.
- There is no command-line program.