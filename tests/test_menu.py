import pytest

from pingpong.geometry import from_rgb
from pingpong.menu import (
    BACKGROUND_COLOR,
    BUTTON_COLOR,
    HOVER_BUTTON_COLOR,
    PLAY_LABEL,
    GameState,
    Interaction,
    Menu,
    MenuButtonAction,
    MenuState,
    button_color,
)
from pingpong.model import WINDOW_SIZE


@pytest.fixture
def menu():
    m = Menu()
    m.enter()
    return m


def test_initial_states():
    m = Menu()
    assert m.game_state is GameState.MENU
    assert m.menu_state is MenuState.DISABLED
    assert m.buttons == []


def test_enter_opens_main_menu(menu):
    assert menu.menu_state is MenuState.MAIN
    assert [b.action for b in menu.buttons] == [MenuButtonAction.PLAY]
    assert menu.buttons[0].label == PLAY_LABEL == "Play"


def test_button_is_centered_and_sized(menu):
    button = menu.buttons[0]
    assert button.width == 350.0
    assert button.height == 95.0
    assert button.left + button.width / 2.0 == pytest.approx(WINDOW_SIZE.x / 2.0)


def test_button_below_title(menu):
    assert menu.buttons[0].top > menu.title_center[1]


def test_button_color_by_interaction():
    assert button_color(Interaction.NONE) == BUTTON_COLOR
    assert button_color(Interaction.HOVERED) == HOVER_BUTTON_COLOR
    assert button_color(Interaction.PRESSED) == HOVER_BUTTON_COLOR


def test_background_color_from_rgb():
    computed = tuple(from_rgb(163.0, 149.0, 148.0))
    assert computed == pytest.approx((163 / 255, 149 / 255, 148 / 255))
    assert tuple(BACKGROUND_COLOR) == pytest.approx(computed)


def test_hover_changes_color_only(menu):
    button = menu.buttons[0]
    menu.set_interaction(button, Interaction.HOVERED)
    assert button.color == HOVER_BUTTON_COLOR
    assert menu.game_state is GameState.MENU
    assert menu.menu_state is MenuState.MAIN


def test_hover_then_leave_restores_color(menu):
    button = menu.buttons[0]
    menu.set_interaction(button, Interaction.HOVERED)
    menu.set_interaction(button, Interaction.NONE)
    assert button.color == BUTTON_COLOR


def test_press_play_starts_game(menu):
    button = menu.buttons[0]
    menu.set_interaction(button, Interaction.PRESSED)
    assert menu.game_state is GameState.GAME
    assert menu.menu_state is MenuState.DISABLED
    assert menu.buttons == []


def test_enter_does_nothing_during_game(menu):
    menu.set_interaction(menu.buttons[0], Interaction.PRESSED)
    menu.enter()
    assert menu.menu_state is MenuState.DISABLED
    assert menu.buttons == []


def test_button_at_finds_button(menu):
    button = menu.buttons[0]
    inside = (button.left + 1.0, button.top + 1.0)
    assert menu.button_at(inside) is button
    assert menu.button_at((0.0, 0.0)) is None


def test_contains_excludes_right_edge(menu):
    button = menu.buttons[0]
    assert not button.contains((button.left + button.width, button.top))
    assert button.contains((button.left, button.top))


def test_exit_clears_buttons(menu):
    menu.exit()
    assert menu.buttons == []
    assert menu.menu_state is MenuState.DISABLED