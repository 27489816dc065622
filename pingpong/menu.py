"""Game and menu states, and the main menu with its Play button."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from pingpong.geometry import from_rgb
from pingpong.model import WINDOW_SIZE, Vec2

TITLE = "Ping & Pong"
PLAY_LABEL = "Play"
TITLE_FONT_SIZE = 70
BUTTON_FONT_SIZE = 32
TITLE_MARGIN = 100.0
BUTTON_SIZE = Vec2(350.0, 95.0)

BUTTON_COLOR = (0.43, 0.40, 0.37)
HOVER_BUTTON_COLOR = (0.34, 0.33, 0.37)
BACKGROUND_COLOR = from_rgb(163.0, 149.0, 148.0)
TEXT_COLOR = (1.0, 1.0, 1.0)


class GameState(Enum):
    """Which screen the application shows."""

    MENU = auto()
    GAME = auto()


class MenuState(Enum):
    """Which menu page is open, if any."""

    MAIN = auto()
    DISABLED = auto()


class Interaction(Enum):
    """How the pointer relates to a button."""

    PRESSED = auto()
    HOVERED = auto()
    NONE = auto()


class MenuButtonAction(Enum):
    """What a menu button does when pressed."""

    PLAY = auto()


def button_color(interaction: Interaction) -> tuple[float, float, float]:
    """Return the background colour of a button in the given interaction."""
    if interaction is Interaction.NONE:
        return BUTTON_COLOR
    return HOVER_BUTTON_COLOR


@dataclass
class MenuButton:
    """A button on the menu screen, placed in screen pixels."""

    action: MenuButtonAction
    label: str
    left: float
    top: float
    width: float
    height: float
    interaction: Interaction = Interaction.NONE
    color: tuple[float, float, float] = BUTTON_COLOR

    def contains(self, point: tuple[float, float]) -> bool:
        """Return whether a screen point lies on the button."""
        x, y = point
        return (
            self.left <= x < self.left + self.width
            and self.top <= y < self.top + self.height
        )


@dataclass
class Menu:
    """The menu screen and the game and menu states it drives."""

    window_size: Vec2 = WINDOW_SIZE
    game_state: GameState = GameState.MENU
    menu_state: MenuState = MenuState.DISABLED
    buttons: list[MenuButton] = field(default_factory=list)

    @property
    def title_center(self) -> tuple[float, float]:
        """Screen point at the centre of the title."""
        return (self.window_size.x / 2.0, self._column_top() + TITLE_FONT_SIZE / 2.0)

    def _column_top(self) -> float:
        column_height = TITLE_FONT_SIZE + TITLE_MARGIN + BUTTON_SIZE.y
        return (self.window_size.y - column_height) / 2.0

    def enter(self) -> None:
        """Open the main menu if the game is showing the menu."""
        if self.game_state is not GameState.MENU:
            return
        self.menu_state = MenuState.MAIN
        self.buttons = [
            MenuButton(
                action=MenuButtonAction.PLAY,
                label=PLAY_LABEL,
                left=(self.window_size.x - BUTTON_SIZE.x) / 2.0,
                top=self._column_top() + TITLE_FONT_SIZE + TITLE_MARGIN,
                width=BUTTON_SIZE.x,
                height=BUTTON_SIZE.y,
            )
        ]

    def exit(self) -> None:
        """Close the menu and remove its buttons."""
        self.menu_state = MenuState.DISABLED
        self.buttons = []

    def button_at(self, point: tuple[float, float]) -> MenuButton | None:
        """Return the button under a screen point, if any."""
        return next((b for b in self.buttons if b.contains(point)), None)

    def set_interaction(self, button: MenuButton, interaction: Interaction) -> None:
        """Apply a change of interaction to a button and act on presses."""
        if button.interaction is interaction:
            return
        button.interaction = interaction
        button.color = button_color(interaction)
        if self.game_state is not GameState.MENU:
            return
        if interaction is Interaction.PRESSED and button.action is MenuButtonAction.PLAY:
            self.game_state = GameState.GAME
            self.exit()