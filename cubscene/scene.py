"""Reading scene description files: resolution, textures, colours and map."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from .gamemap import GameMap, MapError, check_closed, parse_map
from .textutil import atoi, count_blank, is_end, rgb_to_int, search_comma

_ELEMENT_COUNT = 8
_MAP_START = "120"
_EXTENSION = ".cub"

# Two-letter texture keys and the attribute each one fills.
_WALL_TEXTURES = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}

# Names used in error messages: (range message, comma message).
_SURFACES = {"F": ("Floor", "Floor"), "C": ("Ceiling", "Celling")}


class SceneError(ValueError):
    """Raised when a scene file is not valid."""


@dataclass
class Scene:
    """Everything a scene file describes."""

    resolution: tuple[int, int]
    north: str
    south: str
    west: str
    east: str
    sprite: str
    floor: tuple[int, int, int]
    ceiling: tuple[int, int, int]
    game_map: GameMap

    @property
    def floor_color(self) -> int:
        """Floor colour packed as 0xRRGGBB."""
        return rgb_to_int(*self.floor)

    @property
    def ceiling_color(self) -> int:
        """Ceiling colour packed as 0xRRGGBB."""
        return rgb_to_int(*self.ceiling)


def _char_at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else "\0"


def _can_open(path: str) -> bool:
    try:
        descriptor = os.open(path, os.O_RDONLY)
    except (OSError, ValueError):
        return False
    os.close(descriptor)
    return True


def parse_resolution(text: str) -> tuple[int, int]:
    """Read the ``width height`` pair that follows the ``R`` identifier."""
    start = count_blank(text)
    if start < 1:
        raise SceneError("Wrong argument syntax for Resolution")
    width = atoi(text[1:])
    if width == 0:
        raise SceneError("Invalid first argument for Resolution")
    length = 0
    while start + length < len(text) and text[start + length] != " ":
        length += 1
    if length < 1:
        raise SceneError("Wrong argument syntax for Resolution")
    height = atoi(text[start + length:])
    if height == 0:
        raise SceneError("Invalid second argument for Resolution")
    return width, height


def parse_color(text: str, surface: str) -> tuple[int, int, int]:
    """Read the ``r,g,b`` triple that follows an ``F`` or ``C`` identifier."""
    try:
        name, comma_name = _SURFACES[surface]
    except KeyError:
        raise ValueError(f"surface must be 'F' or 'C', not {surface!r}") from None

    def component(position: int) -> int:
        value = atoi(text[position:])
        if value > 255:
            raise SceneError(f"Color of {name} must be under 255 (RGB)")
        return value

    index = count_blank(text)
    red = component(0)
    index += count_blank(text[index:])
    comma = search_comma(text[index:])
    if comma == -1:
        raise SceneError(f"Missing first comma into Color of {comma_name}")
    index += comma
    green = component(index)
    index += 1
    index += count_blank(text[index:])
    comma = search_comma(text[index:])
    if comma == -1:
        raise SceneError(f"Missing second comma into Color of {comma_name}")
    index += comma
    blue = component(index)
    return red, green, blue


def _texture_path(text: str, label: str) -> str:
    start = count_blank(text)
    if not _can_open(text[start:]):
        raise SceneError(f"Texture {label} not existing")
    length = 0
    while start + length < len(text) and not is_end(text[start + length:]):
        length += 1
    return text[start:start + length]


def _read_map(lines: list[str]) -> GameMap:
    try:
        game_map = parse_map(lines)
        check_closed(game_map)
    except MapError as exc:
        raise SceneError(str(exc)) from exc
    return game_map


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from the lines of a scene file.

    Texture files must exist. The map starts at the first line whose first
    non-blank character is ``0``, ``1`` or ``2``, and all eight other
    elements must come before it.
    """
    lines = [line.removesuffix("\n") for line in lines]
    count = 0
    textures: dict[str, str] = {}
    resolution: tuple[int, int] | None = None
    floor: tuple[int, int, int] | None = None
    ceiling: tuple[int, int, int] | None = None
    game_map: GameMap | None = None

    for line in lines:
        index = count_blank(line)
        first, second = _char_at(line, index), _char_at(line, index + 1)
        key = first + second
        if first == "R":
            resolution = parse_resolution(line[index + 1:])
        elif key in _WALL_TEXTURES:
            attribute = _WALL_TEXTURES[key]
            if attribute in textures:
                raise SceneError(f"Texture {key} is duplicated")
            textures[attribute] = _texture_path(line[index + 2:], key)
        elif key == "S ":
            if "sprite" in textures:
                raise SceneError("Texture S is duplicated")
            textures["sprite"] = _texture_path(line[index + 1:], "Sprite")
        elif key == "F ":
            floor = parse_color(line[index + 1:], "F")
        elif key == "C ":
            ceiling = parse_color(line[index + 1:], "C")
        elif first in _MAP_START:
            if count != _ELEMENT_COUNT:
                raise SceneError("Elements Missing")
            game_map = _read_map(lines)
            break
        else:
            if first not in ("\n", "\0"):
                raise SceneError("One or more elements in .cub are not correct")
            continue
        count += 1

    if count < _ELEMENT_COUNT:
        raise SceneError("Elements Missing")
    if count > _ELEMENT_COUNT:
        raise SceneError("Duplicate Element")
    if game_map is None:
        raise SceneError("Missing Map")
    assert resolution is not None and floor is not None and ceiling is not None
    return Scene(
        resolution=resolution,
        north=textures["north"],
        south=textures["south"],
        west=textures["west"],
        east=textures["east"],
        sprite=textures["sprite"],
        floor=floor,
        ceiling=ceiling,
        game_map=game_map,
    )


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read the scene file at ``path``, which must end in ``.cub``."""
    name = os.fspath(path)
    if not name.endswith(_EXTENSION):
        raise SceneError("Files without .cub extension is not accepted ")
    try:
        with open(name, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise SceneError("File Name is not correct") from exc
    return parse_scene(text.split("\n"))