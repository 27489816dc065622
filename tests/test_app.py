from collections import defaultdict

import pygame
import pytest

from pingpong.app import MENU_BACKGROUND_RGB, WORLD_RGB, PongApp
from pingpong.menu import GameState, Interaction, MenuState


@pytest.fixture
def app():
    return PongApp(pygame.Surface((1000, 700)))


def _button_center(app):
    button = app.menu.buttons[0]
    return (button.left + button.width / 2.0, button.top + button.height / 2.0)


def _click(app, pos):
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1))
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1))


def _no_keys():
    return defaultdict(bool)


def test_starts_in_menu(app):
    assert app.game_state is GameState.MENU
    assert app.menu.menu_state is MenuState.MAIN
    assert app.world is None


def test_quit_event_stops(app):
    assert app.handle_event(pygame.event.Event(pygame.QUIT)) is False


def test_other_events_keep_running(app):
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 0), rel=(0, 0), buttons=(0, 0, 0))
    assert app.handle_event(event) is True


def test_hover_over_button(app):
    pos = _button_center(app)
    app.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(0, 0, 0)))
    assert app.menu.buttons[0].interaction is Interaction.HOVERED
    assert app.game_state is GameState.MENU


def test_click_outside_button_stays_in_menu(app):
    _click(app, (1, 1))
    assert app.game_state is GameState.MENU
    assert app.world is None


def test_click_play_starts_game(app):
    _click(app, _button_center(app))
    assert app.game_state is GameState.GAME
    assert app.world is not None
    assert app.menu.buttons == []


def test_step_in_menu_does_nothing(app):
    assert app.step(0.1, _no_keys()) == 0
    assert app.world is None


def test_step_moves_ball(app):
    _click(app, _button_center(app))
    velocity = app.world.ball.velocity
    app.step(0.1, _no_keys())
    assert app.world.ball.position.x == pytest.approx(velocity.x * 0.1)
    assert app.world.ball.position.y == pytest.approx(velocity.y * 0.1)


def test_k_key_moves_player_up(app):
    _click(app, _button_center(app))
    keys = _no_keys()
    keys[pygame.K_k] = True
    app.step(0.1, keys)
    assert app.world.player.position.y > 0.0


def test_j_key_moves_player_down(app):
    _click(app, _button_center(app))
    keys = _no_keys()
    keys[pygame.K_j] = True
    app.step(0.1, keys)
    assert app.world.player.position.y < 0.0


def test_draw_menu_background(app):
    app.draw()
    assert tuple(app.screen.get_at((5, 5)))[:3] == MENU_BACKGROUND_RGB


def test_draw_game_background(app):
    _click(app, _button_center(app))
    app.draw()
    assert tuple(app.screen.get_at((5, 5)))[:3] == WORLD_RGB


def test_drawn_world_is_bluish_grey(app):
    _click(app, _button_center(app))
    app.draw()
    red, green, blue = tuple(app.screen.get_at((5, 5)))[:3]
    assert red == green
    assert blue > red