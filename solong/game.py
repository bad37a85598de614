"""Game rules: moving the player, collecting, winning, losing and scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from solong.mapfile import GameMap, Position, Token
from solong.printf import format_printf

BEER = "🍺"
SOBER = "Sobriety :("
ANIMATION_PERIOD = 20000
COLLECTIBLE_IMAGES = 3


class Direction(Enum):
    """A step of one cell in one of the four directions."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Outcome(Enum):
    """What a player action led to."""

    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"

    @property
    def message(self) -> str | None:
        """The message printed when this outcome ends the game with a verdict."""
        if self is Outcome.WON:
            return "You won! 🎉\n"
        if self is Outcome.LOST:
            return "You lost! 😔\n"
        return None

    @property
    def ends_game(self) -> bool:
        return self in (Outcome.WON, Outcome.LOST, Outcome.QUIT)


_KEYS: dict[str, Direction | Outcome] = {
    "escape": Outcome.QUIT,
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "up": Direction.UP,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
}


def key_action(key_name: str) -> Direction | Outcome | None:
    """Map a key name to a direction, to Outcome.QUIT for escape, or to None."""
    return _KEYS.get(key_name.lower())


@dataclass
class Game:
    """The state of a game in progress on a validated map."""

    map: GameMap
    moves: int = 0
    collected: int = 0
    facing: Direction = Direction.RIGHT

    @property
    def player(self) -> Position:
        return self.map.player

    def move(self, direction: Direction) -> Outcome:
        """Try to step the player one cell in ``direction``."""
        target = self.map.player.offset(direction.dx, direction.dy)
        token = self.map.tile(target)
        outcome = Outcome.MOVED
        if token is Token.WALL:
            return Outcome.BLOCKED
        if token is Token.COLLECTIBLE:
            self.map.set_tile(target, Token.FLOOR)
            self.collected += 1
            outcome = Outcome.COLLECTED
        elif token is Token.ENEMY:
            return Outcome.LOST
        elif token is Token.EXIT and self.collected == self.map.collectible_count:
            return Outcome.WON
        if direction is Direction.LEFT:
            self.facing = Direction.LEFT
        elif direction is Direction.RIGHT:
            self.facing = Direction.RIGHT
        self.map.player = target
        self.moves += 1
        return outcome

    def score_report(self) -> str:
        """The closing text: move total and one beer per collectible taken."""
        report = format_printf("You made %d moves in total\n", self.moves + 1)
        report += format_printf("Your end score: ")
        report += BEER * self.collected if self.collected else SOBER
        return report + "\n"


@dataclass
class FrameAnimator:
    """Counts frames and, every ``period`` frames, names the next image to show."""

    period: int = ANIMATION_PERIOD
    images: int = COLLECTIBLE_IMAGES
    _frame: int = field(default=0, init=False)
    _image: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.period <= 0 or self.images <= 0:
            raise ValueError("period and images must be positive")

    def tick(self) -> int | None:
        """Advance one frame; return an image index when it is time to redraw."""
        self._frame += 1
        if self._frame % self.period != 0:
            return None
        current = self._image
        self._image = (self._image + 1) % self.images
        return current