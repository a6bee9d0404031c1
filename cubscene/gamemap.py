"""Reading the map grid of a scene and checking that it is closed by walls."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .textutil import count_blank

_MAP_START = "102"
_ALLOWED = set("012 NWES")
_UNVISITED = {"0": "9", "2": "s"}
_VISITED = {"9": "0", "s": "2"}
_WALKABLE_NEIGHBOURS = set("012P9s")
_PLAYER = "P"


class MapError(ValueError):
    """Raised when the map grid is not valid."""


@dataclass
class Player:
    """Starting position, facing direction and camera plane of the player."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float


def _player(direction: str, column: int, row: int) -> Player:
    return Player(
        x=column + 0.5,
        y=row + 0.5,
        dir_x={"E": 1, "W": -1}.get(direction, 0),
        dir_y={"S": 1, "N": -1}.get(direction, 0),
        plane_x={"S": 0.75, "N": -0.75}.get(direction, 0),
        plane_y={"W": 0.75, "E": -0.75}.get(direction, 0),
    )


@dataclass
class GameMap:
    """A rectangular grid of map cells, rows padded with spaces.

    Floor cells read ``'9'`` and sprite cells ``'s'`` until
    :func:`check_closed` has visited them, after which they read ``'0'``
    and ``'2'`` again. The player's cell reads ``'P'``.
    """

    grid: list[list[str]]
    player: Player | None = None
    player_count: int = 0
    width: int = field(init=False)
    height: int = field(init=False)

    def __post_init__(self) -> None:
        self.height = len(self.grid)
        self.width = len(self.grid[0]) if self.grid else 0

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> str:
        """Return the cell at column ``x``, row ``y``."""
        if not self.contains(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} map")
        return self.grid[y][x]


def _starts_map(line: str) -> bool:
    index = count_blank(line)
    return index < len(line) and line[index] in _MAP_START


def _map_rows(lines: Iterable[str]) -> list[str]:
    rows: list[str] = []
    for raw in lines:
        line = raw.removesuffix("\n")
        if not rows:
            if _starts_map(line):
                rows.append(line)
        elif not line:
            break
        else:
            rows.append(line)
    return rows


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a map from scene lines.

    Lines before the first one whose first non-blank character is ``0``,
    ``1`` or ``2`` are skipped; the map ends at the first empty line.
    """
    rows = _map_rows(lines)
    if not rows:
        raise MapError("Missing Map")
    width = max(1, max(len(row) for row in rows))
    grid: list[list[str]] = []
    player: Player | None = None
    count = 0
    for row_index, line in enumerate(rows):
        cells: list[str] = []
        for column, char in enumerate(line):
            if char not in _ALLOWED:
                raise MapError("Map contain wrong character")
            if char in "NSEW":
                player = _player(char, column, row_index)
                count += 1
                cells.append(_PLAYER)
            else:
                cells.append(_UNVISITED.get(char, char))
        cells.extend(" " * (width - len(cells)))
        grid.append(cells)
    return GameMap(grid, player, count)


def _check_around(game_map: GameMap, x: int, y: int) -> None:
    if y in (0, game_map.height - 1) or x in (0, game_map.width - 1):
        raise MapError("Map is not surrounded/closed by walls")
    grid = game_map.grid
    for nx, ny in ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)):
        if grid[ny][nx] not in _WALKABLE_NEIGHBOURS:
            raise MapError("Map is not surrounded/closed by walls")


def _flood(game_map: GameMap, x: int, y: int) -> None:
    grid = game_map.grid
    pending = [(x, y)]
    while pending:
        x, y = pending.pop()
        if not game_map.contains(x, y) or grid[y][x] not in _VISITED:
            continue
        _check_around(game_map, x, y)
        grid[y][x] = _VISITED[grid[y][x]]
        pending.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))


def check_closed(game_map: GameMap) -> None:
    """Check that the area reachable from the player is enclosed by walls.

    Reachable floor and sprite cells are marked as visited in place.
    """
    if game_map.player_count == 0 or game_map.player is None:
        raise MapError("Missing player on the map")
    if game_map.player_count > 1:
        raise MapError("Multiplayer mode isn't available")
    column = int(game_map.player.x)
    row = int(game_map.player.y)
    for x, y in ((column + 1, row), (column - 1, row), (column, row + 1), (column - 1, row)):
        _flood(game_map, x, y)