import pytest

from cubscene.scene import (
    Scene,
    SceneError,
    load_scene,
    parse_color,
    parse_resolution,
    parse_scene,
)

MAP_LINES = ["111111", "100001", "10N001", "111111"]


@pytest.fixture
def textures(tmp_path):
    paths = {}
    for name in ("north", "south", "west", "east", "sprite"):
        path = tmp_path / f"{name}.xpm"
        path.write_text("/* XPM */\n")
        paths[name] = str(path)
    return paths


def _elements(textures, *, skip=(), extra=()):
    lines = {
        "R": "R 640 480",
        "NO": f"NO {textures['north']}",
        "SO": f"SO {textures['south']}",
        "WE": f"WE {textures['west']}",
        "EA": f"EA {textures['east']}",
        "S": f"S {textures['sprite']}",
        "F": "F 220,100,0",
        "C": "C 225,30,0",
    }
    return [line for key, line in lines.items() if key not in skip] + list(extra)


def test_parse_resolution_reads_both_values():
    assert parse_resolution(" 1920 1080") == (1920, 1080)


def test_parse_resolution_needs_leading_blank():
    with pytest.raises(SceneError, match="Wrong argument syntax for Resolution"):
        parse_resolution("1920 1080")


def test_parse_resolution_rejects_zero_width():
    with pytest.raises(SceneError, match="Invalid first argument for Resolution"):
        parse_resolution(" 0 1080")


def test_parse_resolution_rejects_missing_height():
    with pytest.raises(SceneError, match="Invalid second argument for Resolution"):
        parse_resolution(" 1920")


def test_parse_color_floor():
    assert parse_color(" 220,100,0", "F") == (220, 100, 0)


def test_parse_color_full_range():
    assert parse_color(" 255,255,255", "C") == (255, 255, 255)


def test_parse_color_out_of_range():
    with pytest.raises(SceneError, match="Color of Floor must be under 255"):
        parse_color(" 256,0,0", "F")


def test_parse_color_missing_comma():
    with pytest.raises(SceneError, match="Missing first comma into Color of Celling"):
        parse_color(" 1 2 3", "C")


def test_parse_color_unknown_surface():
    with pytest.raises(ValueError):
        parse_color(" 1,2,3", "X")


def test_parse_scene_reads_everything(textures):
    scene = parse_scene(_elements(textures, extra=["", *MAP_LINES]))
    assert isinstance(scene, Scene)
    assert scene.resolution == (640, 480)
    assert scene.north == textures["north"]
    assert scene.sprite == textures["sprite"]
    assert scene.floor == (220, 100, 0)
    assert scene.ceiling == (225, 30, 0)
    assert scene.game_map.player.dir_y == -1
    assert scene.game_map.cell(1, 1) == "0"


def test_packed_colors(textures):
    scene = parse_scene(_elements(textures, extra=MAP_LINES))
    assert scene.floor_color == (220 << 16) | (100 << 8)


def test_lines_with_newlines_are_accepted(textures):
    lines = [line + "\n" for line in _elements(textures, extra=MAP_LINES)]
    scene = parse_scene(lines)
    assert scene.east == textures["east"]


def test_missing_element_before_map(textures):
    with pytest.raises(SceneError, match="Elements Missing"):
        parse_scene(_elements(textures, skip=("C",), extra=MAP_LINES))


def test_duplicate_texture(textures):
    lines = _elements(textures, extra=[f"NO {textures['north']}", *MAP_LINES])
    with pytest.raises(SceneError, match="Texture NO is duplicated"):
        parse_scene(lines)


def test_duplicate_resolution_without_map(textures):
    with pytest.raises(SceneError, match="Duplicate Element"):
        parse_scene(_elements(textures, extra=["R 10 10"]))


def test_missing_texture_file(textures, tmp_path):
    lines = _elements(textures, skip=("NO",), extra=[f"NO {tmp_path / 'absent.xpm'}"])
    with pytest.raises(SceneError, match="Texture NO not existing"):
        parse_scene(lines)


def test_unknown_identifier(textures):
    with pytest.raises(SceneError, match="One or more elements in .cub are not correct"):
        parse_scene(["X something", *_elements(textures)])


def test_missing_map(textures):
    with pytest.raises(SceneError, match="Missing Map"):
        parse_scene(_elements(textures))


def test_open_map(textures):
    lines = _elements(textures, extra=["111111", "100001", "10N00", "111111"])
    with pytest.raises(SceneError, match="surrounded"):
        parse_scene(lines)


def test_load_scene_reads_file(textures, tmp_path):
    path = tmp_path / "level.cub"
    path.write_text("\n".join(_elements(textures, extra=["", *MAP_LINES])) + "\n")
    scene = load_scene(path)
    assert scene.resolution == (640, 480)
    assert scene.game_map.height == len(MAP_LINES)


def test_load_scene_rejects_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text("R 1 1\n")
    with pytest.raises(SceneError, match="without .cub extension"):
        load_scene(path)


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(SceneError, match="File Name is not correct"):
        load_scene(tmp_path / "absent.cub")