"""Loading and validating ``.ber`` map files.

A map is a rectangle of tokens enclosed by walls. It holds exactly one
player and one exit and at least one collectible, and the exit and every
collectible must be reachable from the player without crossing walls or
enemies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from typing import Iterable, Sequence, Union

from solong.linereader import LineReader

MAP_EXTENSION = ".ber"
MAX_WIDTH = 30
MAX_HEIGHT = 15

StrPath = Union[str, "PathLike[str]"]


class Token(str, Enum):
    """The characters a map is made of."""

    FLOOR = "0"
    WALL = "1"
    PLAYER = "P"
    COLLECTIBLE = "C"
    EXIT = "E"
    ENEMY = "T"
    OCCUPIED = "-"


_ALLOWED = frozenset(
    token.value
    for token in (
        Token.FLOOR,
        Token.WALL,
        Token.COLLECTIBLE,
        Token.EXIT,
        Token.PLAYER,
        Token.ENEMY,
    )
)
_BLOCKING = frozenset((Token.WALL.value, Token.ENEMY.value))


class MapError(Exception):
    """Raised when a map file cannot be read or is not a valid map."""


@dataclass(frozen=True)
class Position:
    """A cell of the map: ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        """Return the position ``dx`` columns and ``dy`` rows away."""
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class TokenCount:
    """How many players, exits and collectibles a map holds."""

    player: int
    exit: int
    collectible: int
    player_pos: Position | None


@dataclass
class GameMap:
    """A validated map whose cells may change as the game goes on."""

    rows: list[list[str]]
    player: Position
    collectibles: tuple[Position, ...] = field(default_factory=tuple)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def collectible_count(self) -> int:
        """Number of collectibles the map started with."""
        return len(self.collectibles)

    def _check_bounds(self, pos: Position) -> None:
        if not (0 <= pos.x < self.width and 0 <= pos.y < self.height):
            raise IndexError(f"position {pos} is outside the map")

    def tile(self, pos: Position) -> Token:
        """Return the token at ``pos``."""
        self._check_bounds(pos)
        return Token(self.rows[pos.y][pos.x])

    def set_tile(self, pos: Position, token: Token) -> None:
        """Replace the token at ``pos``."""
        self._check_bounds(pos)
        self.rows[pos.y][pos.x] = Token(token).value


def check_filename_extension(path: StrPath) -> None:
    """Raise MapError unless the file name ends in ``.ber``."""
    name = str(path)
    if len(name) < len(MAP_EXTENSION):
        raise MapError("Bad filename")
    if not name.endswith(MAP_EXTENSION):
        raise MapError("Bad extension")


def read_rows(path: StrPath) -> list[str]:
    """Read the lines of a map file, each cut at its newline."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            lines = list(LineReader(stream))
    except OSError as exc:
        raise MapError("fd error") from exc
    if not lines:
        raise MapError("Empty map")
    return [line.split("\n", 1)[0] for line in lines]


def check_dimensions(rows: Sequence[str]) -> tuple[int, int]:
    """Check the map is rectangular and not too big; return (width, height)."""
    if not rows:
        raise MapError("Empty map")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("Map is not rectangular")
    height = len(rows)
    if height > MAX_HEIGHT or width > MAX_WIDTH:
        raise MapError("Map is too big")
    return width, height


def check_allowed_tokens(rows: Iterable[str]) -> None:
    """Raise MapError if any cell holds a character that is not a map token."""
    if any(char not in _ALLOWED for row in rows for char in row):
        raise MapError("Bad token")


def check_walls(rows: Sequence[str]) -> None:
    """Raise MapError unless the outer border consists only of walls."""
    wall = Token.WALL.value
    if not rows:
        raise MapError("Bad walls")
    if any(char != wall for char in rows[0]) or any(char != wall for char in rows[-1]):
        raise MapError("Bad walls")
    for row in rows:
        if not row or row[0] != wall or row[-1] != wall:
            raise MapError("Bad walls")


def count_tokens(rows: Iterable[str]) -> TokenCount:
    """Count players, exits and collectibles; record the last player seen."""
    players = exits = collectibles = 0
    player_pos: Position | None = None
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == Token.PLAYER.value:
                players += 1
                player_pos = Position(x, y)
            elif char == Token.EXIT.value:
                exits += 1
            elif char == Token.COLLECTIBLE.value:
                collectibles += 1
    return TokenCount(players, exits, collectibles, player_pos)


def check_reachability(rows: Sequence[str], start: Position) -> None:
    """Raise MapError if the exit or a collectible cannot be reached from ``start``."""
    height = len(rows)
    seen: set[Position] = set()
    stack = [start]
    while stack:
        pos = stack.pop()
        if pos in seen or not (0 <= pos.y < height and 0 <= pos.x < len(rows[pos.y])):
            continue
        if rows[pos.y][pos.x] in _BLOCKING:
            continue
        seen.add(pos)
        stack.extend(
            (pos.offset(-1, 0), pos.offset(1, 0), pos.offset(0, -1), pos.offset(0, 1))
        )
    targets = (Token.EXIT.value, Token.COLLECTIBLE.value)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in targets and Position(x, y) not in seen:
                raise MapError("Inaccessible exit or collectible")


def _collectible_positions(rows: Iterable[str]) -> tuple[Position, ...]:
    return tuple(
        Position(x, y)
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
        if char == Token.COLLECTIBLE.value
    )


def parse_rows(rows: Sequence[str]) -> GameMap:
    """Validate map rows and build a GameMap from them."""
    rows = list(rows)
    check_dimensions(rows)
    check_allowed_tokens(rows)
    check_walls(rows)
    counts = count_tokens(rows)
    if counts.player != 1 or counts.exit != 1 or counts.collectible == 0:
        raise MapError("Bad map")
    assert counts.player_pos is not None
    check_reachability(rows, counts.player_pos)
    return GameMap(
        rows=[list(row) for row in rows],
        player=counts.player_pos,
        collectibles=_collectible_positions(rows),
    )


def load_map(path: StrPath) -> GameMap:
    """Read, validate and return the map stored in ``path``."""
    check_filename_extension(path)
    return parse_rows(read_rows(path))