"""Drawing the game with pygame and running the main loop."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Sequence, Union

import pygame

from solong.game import Direction, FrameAnimator, Game, Outcome, key_action
from solong.mapfile import MapError, Position, Token, load_map

TILE_SIZE = 64
TEXT_COLOR = (0xAD, 0xD8, 0xE6)
FONT_SIZE = 24
FRAMES_PER_SECOND = 60
ANIMATION_PERIOD_FRAMES = 20
DEFAULT_ASSETS_DIR = "./assets"
WINDOW_TITLE = "so_long"

StrPath = Union[str, "PathLike[str]"]


@dataclass
class Tiles:
    """The images the map is drawn with."""

    floor: pygame.Surface
    wall: pygame.Surface
    player_left: pygame.Surface
    player_right: pygame.Surface
    collectibles: tuple[pygame.Surface, ...]
    enemy: pygame.Surface
    exit: pygame.Surface


def _load(directory: Path, name: str) -> pygame.Surface:
    path = directory / name
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise OSError(f"cannot load tile {path}") from exc


def load_tiles(directory: StrPath) -> Tiles:
    """Load every tile image from ``directory``; raise OSError if one is missing."""
    base = Path(directory)
    return Tiles(
        floor=_load(base, "floor.xpm"),
        wall=_load(base, "wall.xpm"),
        player_left=_load(base, "player_left.xpm"),
        player_right=_load(base, "player_right.xpm"),
        collectibles=tuple(
            _load(base, f"collectible_{number}.xpm") for number in (1, 2, 3)
        ),
        enemy=_load(base, "enemy.xpm"),
        exit=_load(base, "exit.xpm"),
    )


class Window:
    """Draws tiles and text on a pygame surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        tiles: Tiles,
        font: pygame.font.Font | None = None,
    ) -> None:
        self.surface = surface
        self.tiles = tiles
        self.font = font

    def put_tile(self, tile: pygame.Surface, pos: Position) -> None:
        """Draw ``tile`` over the cell at ``pos``."""
        self.surface.blit(tile, (pos.x * TILE_SIZE, pos.y * TILE_SIZE))

    def _draw_text(self, text: str) -> None:
        if self.font is None:
            return
        rendered = self.font.render(text, True, TEXT_COLOR)
        self.surface.blit(rendered, (TILE_SIZE // 2, TILE_SIZE // 2))

    def _player_tile(self, facing: Direction) -> pygame.Surface:
        if facing is Direction.LEFT:
            return self.tiles.player_left
        return self.tiles.player_right

    def draw_map(self, game: Game) -> None:
        """Draw every cell of the map and a zero move counter."""
        images = {
            Token.WALL: self.tiles.wall,
            Token.FLOOR: self.tiles.floor,
            Token.COLLECTIBLE: self.tiles.collectibles[0],
            Token.ENEMY: self.tiles.enemy,
            Token.EXIT: self.tiles.exit,
            Token.PLAYER: self.tiles.player_right,
        }
        for y, row in enumerate(game.map.rows):
            for x, char in enumerate(row):
                image = images.get(Token(char))
                if image is not None:
                    self.put_tile(image, Position(x, y))
        self._draw_text("0")

    def draw_player_move(self, game: Game, old_pos: Position) -> None:
        """Restore the cell the player left and draw the player where it is now."""
        if game.map.tile(old_pos) is Token.EXIT:
            self.put_tile(self.tiles.exit, old_pos)
        else:
            self.put_tile(self.tiles.floor, old_pos)
        self.put_tile(self._player_tile(game.facing), game.player)

    def draw_move_count(self, count: int) -> None:
        """Show ``count`` in the top-left corner over freshly drawn walls."""
        self.put_tile(self.tiles.wall, Position(0, 0))
        self.put_tile(self.tiles.wall, Position(1, 0))
        self._draw_text(str(count))

    def animate(self, game: Game, image_index: int) -> None:
        """Redraw every collectible still on the map with the given image."""
        image = self.tiles.collectibles[image_index]
        for pos in game.map.collectibles:
            if game.map.tile(pos) is Token.COLLECTIBLE:
                self.put_tile(image, pos)


def _finish(game: Game, message: str | None) -> int:
    if message:
        sys.stdout.write(message)
    sys.stdout.write(game.score_report())
    sys.stdout.flush()
    return 0


def _play(window: Window, game: Game) -> int:
    animator = FrameAnimator(period=ANIMATION_PERIOD_FRAMES)
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return _finish(game, None)
            if event.type != pygame.KEYDOWN:
                continue
            action = key_action(pygame.key.name(event.key))
            if action is Outcome.QUIT:
                return _finish(game, None)
            if not isinstance(action, Direction):
                continue
            old_pos = game.player
            outcome = game.move(action)
            if outcome.ends_game:
                return _finish(game, outcome.message)
            if outcome in (Outcome.MOVED, Outcome.COLLECTED):
                window.draw_player_move(game, old_pos)
                window.draw_move_count(game.moves)
        index = animator.tick()
        if index is not None:
            window.animate(game, index)
        pygame.display.flip()
        clock.tick(FRAMES_PER_SECOND)


def run(map_path: StrPath, assets_dir: StrPath = DEFAULT_ASSETS_DIR) -> int:
    """Load the map, open a window and play until the game ends; return an exit code."""
    try:
        game = Game(load_map(map_path))
    except MapError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    pygame.init()
    try:
        surface = pygame.display.set_mode(
            (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            tiles = load_tiles(assets_dir)
        except OSError:
            sys.stderr.write("Memory error\n")
            return 1
        window = Window(surface, tiles, pygame.font.Font(None, FONT_SIZE))
        window.draw_map(game)
        pygame.display.flip()
        return _play(window, game)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: expects exactly one map file argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    return run(args[0])


if __name__ == "__main__":
    sys.exit(main())