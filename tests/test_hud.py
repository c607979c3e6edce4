import pytest

from oathquests.hud import MainHUD, Menu, Notification


def record(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


@pytest.fixture
def hud():
    return MainHUD()


def test_construct_with_player_sets_starting_values(hud):
    health = record(hud.on_health_updated)
    xp = record(hud.on_experience_updated)
    weather = record(hud.on_weather_display_updated)
    time = record(hud.on_time_display_updated)
    hud.construct(True)
    assert health == [(100.0, 100.0)]
    assert xp == [(0.0, 1000.0, 1)]
    assert weather == [("Clear", 0.0)]
    assert time == [(0.5, 1, 0)]


def test_construct_without_player_skips_stats(hud):
    health = record(hud.on_health_updated)
    compass = record(hud.on_compass_updated)
    hud.construct(False)
    assert health == []
    assert compass == [(0.0,)]


def test_tick_updates_compass_only_with_heading(hud):
    compass = record(hud.on_compass_updated)
    hud.tick(0.1)
    assert compass == []
    hud.tick(0.1, 90.0)
    assert compass == [(90.0,)]


def test_display_updates_forward_arguments(hud):
    mana = record(hud.on_mana_updated)
    stamina = record(hud.on_stamina_updated)
    prompt = record(hud.on_interaction_prompt_shown)
    hidden = record(hud.on_interaction_prompt_hidden)
    enemy = record(hud.on_enemy_health_bar_shown)
    enemy_hidden = record(hud.on_enemy_health_bar_hidden)
    hud.update_mana_display(20.0, 50.0)
    hud.update_stamina_display(7.0, 9.0)
    hud.show_interaction_prompt("Open", "E")
    hud.hide_interaction_prompt()
    hud.show_enemy_health_bar("Wolf", 3.0, 10.0)
    hud.hide_enemy_health_bar()
    assert mana == [(20.0, 50.0)]
    assert stamina == [(7.0, 9.0)]
    assert prompt == [("Open", "E")]
    assert hidden == [()]
    assert enemy == [("Wolf", 3.0, 10.0)]
    assert enemy_hidden == [()]


def test_first_notification_is_shown_immediately(hud):
    shown = record(hud.on_notification_added)
    hud.add_notification("A", "first")
    hud.add_notification("B", "second")
    assert shown == [("A", "first")]
    assert [n.title for n in hud.notifications] == ["A", "B"]


def test_default_notification_duration(hud):
    hud.add_notification("A", "msg")
    assert hud.notifications[0] == Notification("A", "msg", 5.0, 5.0)


def test_notification_expires_and_next_is_shown(hud):
    shown = record(hud.on_notification_added)
    hud.add_notification("A", "first", 2.0)
    hud.add_notification("B", "second", 2.0)
    hud.process_notifications(1.0)
    assert len(hud.notifications) == 2
    hud.process_notifications(1.0)
    assert [n.title for n in hud.notifications] == ["B"]
    assert shown == [("A", "first"), ("B", "second")]


def test_only_first_notification_counts_down(hud):
    hud.add_notification("A", "first", 3.0)
    hud.add_notification("B", "second", 3.0)
    hud.tick(1.0)
    assert hud.notifications[1].remaining_time == hud.notifications[1].duration
    assert hud.notifications[0].remaining_time < hud.notifications[0].duration


def test_process_empty_queue_does_nothing(hud):
    shown = record(hud.on_notification_added)
    hud.process_notifications(10.0)
    assert shown == []
    assert hud.notifications == ()


def test_toggle_opens_and_closes(hud):
    assert hud.toggle_inventory_menu() is True
    assert hud.open_menu is Menu.INVENTORY
    assert hud.toggle_inventory_menu() is False
    assert hud.open_menu is None


def test_opening_a_menu_closes_the_others(hud):
    hud.toggle_map()
    events = record(hud.on_menu_toggled)
    assert hud.toggle_quest_log() is True
    assert hud.open_menu is Menu.QUEST_LOG
    assert events[-1] == (Menu.QUEST_LOG, True)
    closed = [menu for menu, visible in events[:-1] if visible is False]
    assert set(closed) == set(Menu) - {Menu.QUEST_LOG}


def test_closing_a_menu_emits_only_itself(hud):
    hud.toggle_kingdom_menu()
    events = record(hud.on_menu_toggled)
    assert hud.toggle_kingdom_menu() is False
    assert events == [(Menu.KINGDOM, False)]


@pytest.mark.parametrize(
    "toggle, menu",
    [
        ("toggle_inventory_menu", Menu.INVENTORY),
        ("toggle_quest_log", Menu.QUEST_LOG),
        ("toggle_kingdom_menu", Menu.KINGDOM),
        ("toggle_map", Menu.MAP),
        ("toggle_character_menu", Menu.CHARACTER),
    ],
)
def test_each_toggle_targets_its_menu(hud, toggle, menu):
    assert getattr(hud, toggle)() is True
    assert hud.open_menu is menu


def test_minimap_without_player_is_origin(hud):
    assert hud.world_to_minimap((500.0, 500.0, 0.0)) == (0.0, 0.0)


def test_minimap_player_is_at_centre(hud):
    assert hud.world_to_minimap((10.0, 20.0, 0.0), (10.0, 20.0, 0.0)) == (50.0, 50.0)


def test_minimap_axes(hud):
    east = hud.world_to_minimap((1000.0, 0.0), (0.0, 0.0))
    north = hud.world_to_minimap((0.0, 1000.0), (0.0, 0.0))
    assert east[0] > 50.0 and east[1] == 50.0
    assert north[0] == 50.0 and north[1] < 50.0