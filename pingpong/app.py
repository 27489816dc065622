"""The window, input handling and drawing of the game."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from pathlib import Path

import pygame

from pingpong.menu import (
    BACKGROUND_COLOR,
    BUTTON_FONT_SIZE,
    TEXT_COLOR,
    TITLE,
    TITLE_FONT_SIZE,
    GameState,
    Interaction,
    Menu,
)
from pingpong.model import WINDOW_SIZE, Body, GameConfig, Vec2
from pingpong.world import (
    BALL_COLOR,
    ENEMY_COLOR,
    INSTRUCTIONS,
    PLAYER_COLOR,
    WORLD_COLOR,
    World,
    setup_scene,
)

HIT_SOUND = Path("assets") / "sounds" / "hit.ogg"
TEXT_FONT_SIZE = 24
TEXT_PADDING = 12
FRAME_RATE = 60


def _rgb255(color: tuple[float, float, float]) -> tuple[int, int, int]:
    r, g, b = (round(min(max(c, 0.0), 1.0) * 255) for c in color)
    return (r, g, b)


MENU_BACKGROUND_RGB = _rgb255(BACKGROUND_COLOR)
WORLD_RGB = _rgb255(WORLD_COLOR)


def _load_hit_sound() -> pygame.mixer.Sound | None:
    if not pygame.mixer.get_init():
        return None
    try:
        return pygame.mixer.Sound(str(HIT_SOUND))
    except (pygame.error, FileNotFoundError):
        return None


class PongApp:
    """Ties the menu and the world to a pygame surface."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.menu = Menu(window_size=Vec2(*map(float, screen.get_size())))
        self.menu.enter()
        self.world: World | None = None
        self.rng = random.Random()
        pygame.font.init()
        self._title_font = pygame.font.Font(None, TITLE_FONT_SIZE)
        self._button_font = pygame.font.Font(None, BUTTON_FONT_SIZE)
        self._text_font = pygame.font.Font(None, TEXT_FONT_SIZE)
        self._hit_sound = _load_hit_sound()

    @property
    def game_state(self) -> GameState:
        return self.menu.game_state

    def _sync_state(self) -> None:
        if self.game_state is GameState.GAME and self.world is None:
            self.world = setup_scene(GameConfig(), self.rng)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """React to one event; return False when the application should stop."""
        if event.type == pygame.QUIT:
            return False
        if self.game_state is not GameState.MENU:
            return True

        if event.type == pygame.MOUSEMOTION:
            for button in list(self.menu.buttons):
                if not button.contains(event.pos):
                    self.menu.set_interaction(button, Interaction.NONE)
                elif button.interaction is not Interaction.PRESSED:
                    self.menu.set_interaction(button, Interaction.HOVERED)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            button = self.menu.button_at(event.pos)
            if button is not None:
                self.menu.set_interaction(button, Interaction.PRESSED)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            for button in list(self.menu.buttons):
                inside = button.contains(event.pos)
                self.menu.set_interaction(
                    button, Interaction.HOVERED if inside else Interaction.NONE
                )

        self._sync_state()
        return True

    def step(self, dt: float, keys: Sequence[bool]) -> int:
        """Advance play by ``dt`` seconds; return the collision events raised."""
        self._sync_state()
        if self.game_state is not GameState.GAME or self.world is None:
            return 0
        score_before = self.world.score
        collisions = self.world.update(
            dt, bool(keys[pygame.K_k]), bool(keys[pygame.K_j])
        )
        if self.world.score > score_before and self._hit_sound is not None:
            self._hit_sound.play()
        return collisions

    def _to_screen(self, point: Vec2) -> tuple[float, float]:
        width, height = self.screen.get_size()
        return (width / 2.0 + point.x, height / 2.0 - point.y)

    def _body_rect(self, body: Body) -> pygame.Rect:
        cx, cy = self._to_screen(body.position)
        rect = pygame.Rect(0, 0, round(body.scale.x), round(body.scale.y))
        rect.center = (round(cx), round(cy))
        return rect

    def _blit_text(self, font: pygame.font.Font, text: str, **anchor: object) -> None:
        surface = font.render(text, True, _rgb255(TEXT_COLOR))
        self.screen.blit(surface, surface.get_rect(**anchor))

    def _draw_menu(self) -> None:
        self.screen.fill(MENU_BACKGROUND_RGB)
        tx, ty = self.menu.title_center
        self._blit_text(self._title_font, TITLE, center=(round(tx), round(ty)))
        for button in self.menu.buttons:
            rect = pygame.Rect(
                round(button.left), round(button.top), round(button.width), round(button.height)
            )
            pygame.draw.rect(self.screen, _rgb255(button.color), rect)
            self._blit_text(self._button_font, button.label, center=rect.center)

    def _draw_game(self, world: World) -> None:
        self.screen.fill((0, 0, 0))
        field_rect = pygame.Rect(0, 0, round(world.config.window_size.x), round(world.config.window_size.y))
        field_rect.center = tuple(round(c) for c in self._to_screen(Vec2(0.0, 0.0)))
        pygame.draw.rect(self.screen, WORLD_RGB, field_rect)
        pygame.draw.rect(self.screen, _rgb255(PLAYER_COLOR), self._body_rect(world.player))
        pygame.draw.rect(self.screen, _rgb255(ENEMY_COLOR), self._body_rect(world.enemy))
        cx, cy = self._to_screen(world.ball.position)
        pygame.draw.circle(
            self.screen,
            _rgb255(BALL_COLOR),
            (round(cx), round(cy)),
            round(world.ball.scale.x / 2.0),
        )
        width, height = self.screen.get_size()
        self._blit_text(
            self._text_font,
            INSTRUCTIONS,
            bottomleft=(TEXT_PADDING, height - TEXT_PADDING),
        )
        self._blit_text(
            self._text_font,
            world.scoreboard_text(),
            topright=(width - TEXT_PADDING, TEXT_PADDING),
        )

    def draw(self) -> None:
        """Render the current screen onto the surface."""
        if self.game_state is GameState.GAME and self.world is not None:
            self._draw_game(self.world)
        else:
            self._draw_menu()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="pingpong", description="Play ping pong.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((round(WINDOW_SIZE.x), round(WINDOW_SIZE.y)))
        pygame.display.set_caption(TITLE)
        app = PongApp(screen)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if not app.handle_event(event):
                    running = False
            dt = clock.tick(FRAME_RATE) / 1000.0
            app.step(dt, pygame.key.get_pressed())
            app.draw()
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0