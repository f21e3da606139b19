from __future__ import annotations

import pytest

from shooter.configs.game_config import MENU_CONFIG
from shooter.engine.events import Events, Key
from shooter.engine.geometry import Rectangle
from shooter.engine.view import ActionKind, View, ViewAction, ViewMachine
from shooter.errors import AssetLoadError
from shooter.game.entities import ASTEROID_SIDE, Asteroid
from shooter.game.game_view import GameView
from shooter.game.main_menu import MainMenuView


def press(ctx, *keys: Key, quit_requested: bool = False) -> None:
    ctx.events = Events(pressed=keys, quit_requested=quit_requested)


# ----------------------------
# Input snapshot
# ----------------------------

def test_key_down_is_an_edge_until_the_next_frame() -> None:
    events = Events()
    events.key_down(Key.SPACE)

    assert events.pressed(Key.SPACE)
    assert events.held(Key.SPACE)

    events.begin_frame()
    events.key_down(Key.SPACE)  # key repeat while held

    assert not events.pressed(Key.SPACE)
    assert events.held(Key.SPACE)

    events.key_up(Key.SPACE)
    assert not events.held(Key.SPACE)


def test_quit_survives_begin_frame() -> None:
    events = Events()
    events.request_quit()
    events.begin_frame()
    assert events.quit


# ----------------------------
# Main menu
# ----------------------------

@pytest.fixture
def menu(ctx) -> MainMenuView:
    return MainMenuView(ctx)


def test_menu_labels_are_rendered_idle_and_hovered(ctx, menu: MainMenuView) -> None:
    sizes = sorted({(text, size) for text, _, size, _ in ctx.text.rendered})
    assert sizes == [
        ("New Game", MENU_CONFIG["idle_size"]),
        ("New Game", MENU_CONFIG["hover_size"]),
        ("Quit", MENU_CONFIG["idle_size"]),
        ("Quit", MENU_CONFIG["hover_size"]),
    ]


def test_selection_cycles_with_wraparound(ctx, menu: MainMenuView) -> None:
    assert menu.selected == 0

    press(ctx, Key.UP)
    menu.update(ctx, 0.01)
    assert menu.selected == 1

    press(ctx, Key.DOWN)
    menu.update(ctx, 0.01)
    assert menu.selected == 0

    press(ctx, Key.DOWN)
    menu.update(ctx, 0.01)
    press(ctx, Key.DOWN)
    menu.update(ctx, 0.01)
    assert menu.selected == 0


@pytest.mark.parametrize("confirm", [Key.SPACE, Key.ENTER])
def test_confirm_new_game(ctx, menu: MainMenuView, confirm: Key) -> None:
    press(ctx, confirm)
    action = menu.update(ctx, 0.01)
    assert action.kind is ActionKind.CHANGE_VIEW
    assert action.factory is GameView


def test_confirm_quit(ctx, menu: MainMenuView) -> None:
    menu.selected = 1
    press(ctx, Key.ENTER)
    assert menu.update(ctx, 0.01).kind is ActionKind.QUIT


@pytest.mark.parametrize("keys, quit_requested", [((Key.ESCAPE,), False), ((), True)])
def test_menu_escape_or_close_quits(ctx, menu: MainMenuView, keys, quit_requested) -> None:
    press(ctx, *keys, quit_requested=quit_requested)
    assert menu.update(ctx, 0.01).kind is ActionKind.QUIT


def test_menu_render_highlights_selection(ctx, renderer, menu: MainMenuView) -> None:
    menu.selected = 1
    menu.render(renderer)

    assert renderer.calls[0][0] == "clear"

    fills = [c for c in renderer.calls if c[0] == "fill"]
    assert [c[2] for c in fills] == [MENU_CONFIG["border_color"], MENU_CONFIG["box_color"]]

    labels = [c[1].image.path for c in renderer.calls if c[0] == "draw" and c[1].image.path in ("New Game", "Quit")]
    heights = [c[1].size()[1] for c in renderer.calls if c[0] == "draw" and c[1].image.path in ("New Game", "Quit")]
    assert labels == ["New Game", "Quit"]
    assert heights == [MENU_CONFIG["idle_size"], MENU_CONFIG["hover_size"]]


def test_menu_needs_its_backgrounds(ctx, loader) -> None:
    del loader.sizes["assets/starMG.png"]
    with pytest.raises(AssetLoadError):
        MainMenuView(ctx)


# ----------------------------
# View machine
# ----------------------------

def test_machine_starts_a_game_from_the_menu(ctx) -> None:
    machine = ViewMachine(ctx, MainMenuView)

    press(ctx, Key.SPACE)
    machine.update(0.01)

    assert isinstance(machine.view, GameView)
    assert not machine.terminated


def test_machine_quit_from_menu_terminates(ctx, renderer) -> None:
    machine = ViewMachine(ctx, MainMenuView)
    press(ctx, Key.DOWN)
    machine.tick(0.01)
    press(ctx, Key.ENTER)
    renderer.reset()

    action = machine.tick(0.01)

    assert action.kind is ActionKind.QUIT
    assert machine.terminated
    assert renderer.calls == []

    machine.render()
    assert renderer.calls == []


def test_machine_game_over_returns_to_menu(ctx) -> None:
    machine = ViewMachine(ctx, GameView)
    game = machine.view
    game.asteroid_spawn_chance = 0.0

    for _ in range(3):
        assert machine.view is game
        x, y = game.player.rect.center()
        game.asteroids = [Asteroid(
            game.asteroid_factory.sprite.clone(),
            Rectangle.with_size(ASTEROID_SIDE, ASTEROID_SIDE).center_at((x, y)),
            vel=0.0,
        )]
        machine.update(0.0)

    assert isinstance(machine.view, MainMenuView)


def test_machine_escape_from_game_then_quit(ctx) -> None:
    machine = ViewMachine(ctx, GameView)

    press(ctx, Key.ESCAPE)
    machine.update(0.01)
    assert isinstance(machine.view, MainMenuView)

    press(ctx, Key.ESCAPE)
    machine.update(0.01)
    assert machine.terminated


def test_machine_close_signal_terminates_any_view(ctx) -> None:
    machine = ViewMachine(ctx, GameView)
    press(ctx, quit_requested=True)
    machine.update(0.01)
    assert machine.terminated
    assert machine.update(0.01).kind is ActionKind.QUIT


class _Counting(View):
    def __init__(self, ctx):
        self.updates = 0
        self.renders = 0

    def update(self, ctx, elapsed):
        self.updates += 1
        return ViewAction.none()

    def render(self, renderer):
        self.renders += 1


def test_tick_updates_then_renders(ctx) -> None:
    machine = ViewMachine(ctx, _Counting)
    machine.tick(0.01)
    machine.tick(0.01)
    assert (machine.view.updates, machine.view.renders) == (2, 2)


def test_view_contract_is_abstract(ctx) -> None:
    class NoRender(View):
        def update(self, ctx, elapsed):
            return ViewAction.none()

    with pytest.raises(TypeError):
        View()
    with pytest.raises(TypeError):
        NoRender()
