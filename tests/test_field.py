import json

import pygame
import pytest

from remedy.data import ActorType, Direction, GameState, LoadMapEvent, Vector2
from remedy.entity import Actor, Entity
from remedy.field import FieldScene
from remedy.field_events import FieldEventHandler
from remedy.field_map import COLL_LINE_COLOR, FieldMap, MapNotFoundError
from remedy.entity import DEBUG_BOUNDS_COLOR
from remedy.input import InputState
from remedy.map_trans import MapTransition
from remedy.player import PlayerActor
from remedy.runtime import Runtime

DB_01_LAYERS = [
    {
        "name": "Collisions",
        "objects": [
            {"id": 1, "x": 0, "y": 0, "polyline": [{"x": 0, "y": 0}, {"x": 100, "y": 0}]}
        ],
    },
    {
        "name": "Spawnpoints",
        "objects": [{"x": 50, "y": 60}, {"x": 10, "y": 20, "type": "from_db_02"}],
    },
    {
        "name": "MapTransitions",
        "objects": [
            {
                "x": 40,
                "y": 50,
                "width": 20,
                "height": 20,
                "properties": [
                    {"name": "map_dest", "value": "db_02"},
                    {"name": "spawn_dest", "value": "from_db_01"},
                    {"name": "direction", "value": 2},
                ],
            }
        ],
    },
]

DB_02_LAYERS = [
    {
        "name": "Spawnpoints",
        "objects": [{"x": 5, "y": 5}, {"x": 30, "y": 40, "type": "from_db_01"}],
    },
]


def write_map(root, name, layers):
    (root / "graphics" / "maps").mkdir(parents=True, exist_ok=True)
    (root / "data" / "maps").mkdir(parents=True, exist_ok=True)
    base = pygame.Surface((4, 4))
    base.fill((40, 40, 40))
    pygame.image.save(base, str(root / "graphics" / "maps" / f"{name}.png"))
    (root / "data" / "maps" / f"{name}.tmj").write_text(json.dumps({"layers": layers}))


@pytest.fixture(autouse=True)
def clean_state():
    yield
    FieldEventHandler.clear()
    PlayerActor.set_controllable(True)
    FieldMap.collision_lines.clear()


@pytest.fixture
def maps(tmp_path):
    write_map(tmp_path, "db_01", DB_01_LAYERS)
    write_map(tmp_path, "db_02", DB_02_LAYERS)
    return tmp_path


@pytest.fixture
def runtime():
    return Runtime()


@pytest.fixture
def inputs():
    return InputState()


@pytest.fixture
def scene(maps, runtime, inputs):
    field_scene = FieldScene(maps, runtime=runtime, input_state=inputs)
    yield field_scene
    field_scene.close()


def test_start_map_spawns_player_and_transition(scene):
    player = Actor.get_actor(ActorType.PLAYER)
    assert player.position == Vector2(50, 60)
    assert player.direction is Direction.DOWN
    assert sum(isinstance(e, MapTransition) for e in scene.entities) == 1
    assert len(scene.entities) == 2
    assert scene.camera.target == player.position
    assert scene.map_ready is True


def test_close_releases_all_entities(maps, runtime, inputs):
    field_scene = FieldScene(maps, runtime=runtime, input_state=inputs)
    field_scene.close()
    assert Entity.existing_entities == set()
    assert Actor.existing_actors == {}
    assert field_scene.entities == []


def test_context_manager_closes(maps, runtime, inputs):
    with FieldScene(maps, runtime=runtime, input_state=inputs) as field_scene:
        assert len(Entity.existing_entities) == len(field_scene.entities)
    assert Entity.existing_entities == set()


def test_missing_start_map_raises(tmp_path, runtime):
    with pytest.raises(MapNotFoundError):
        FieldScene(tmp_path, runtime=runtime)
    assert Entity.existing_entities == set()


def test_load_map_event_starts_fadeout(scene, runtime):
    event = LoadMapEvent(map_name="db_02", spawn_point="from_db_01")
    scene.field_event_handling(event)
    assert scene.map_ready is False
    assert scene.next_map is event
    assert runtime.game_state is GameState.FADING_OUT


def test_update_loads_pending_map_at_spawn(scene, runtime):
    scene.field_event_handling(LoadMapEvent(map_name="db_02", spawn_point="from_db_01"))
    runtime.tick(1.0)
    runtime.fade_screen()
    assert runtime.game_state is GameState.READY

    scene.update()
    player = Actor.get_actor(ActorType.PLAYER)
    assert player.position == Vector2(30, 40)
    assert len(scene.entities) == 1
    assert scene.map_ready is True
    assert runtime.game_state is GameState.FADING_IN


def test_unknown_spawn_falls_back_to_initial(scene, runtime):
    scene.field_event_handling(LoadMapEvent(map_name="db_02", spawn_point=" "))
    runtime.tick(1.0)
    runtime.fade_screen()
    scene.update()
    assert Actor.get_actor(ActorType.PLAYER).position == Vector2(5, 5)


def test_walking_into_transition_requests_map(scene, runtime, inputs):
    runtime.tick(1 / 60)
    inputs.update({pygame.K_DOWN}, ())
    scene.update()
    assert scene.map_ready is False
    assert scene.next_map.map_name == "db_02"
    assert scene.next_map.spawn_point == "from_db_01"
    assert FieldEventHandler.get() == []
    assert runtime.game_state is GameState.FADING_OUT


def test_standing_still_raises_nothing(scene, runtime, inputs):
    runtime.tick(1 / 60)
    inputs.update((), ())
    scene.update()
    assert scene.map_ready is True
    assert Actor.get_actor(ActorType.PLAYER).position == Vector2(50, 60)


def test_draw_shows_debug_bounds(scene):
    surface = pygame.Surface((426, 240))
    scene.draw(surface)
    offset = scene.camera.offset - scene.camera.target
    rect = Actor.get_actor(ActorType.PLAYER).bounding_box.rect
    pixel = surface.get_at((round(rect.x + offset.x), round(rect.y + offset.y)))
    assert tuple(pixel)[:3] == DEBUG_BOUNDS_COLOR


def test_draw_collision_lines_only_with_debug_info(scene, runtime):
    offset = scene.camera.offset - scene.camera.target
    line = FieldMap.collision_lines[0]
    point = (round(line.start.x + offset.x) + 10, round(line.start.y + offset.y))

    hidden = pygame.Surface((426, 240))
    scene.draw(hidden)
    assert tuple(hidden.get_at(point))[:3] != COLL_LINE_COLOR

    runtime.toggle_debug_info()
    shown = pygame.Surface((426, 240))
    scene.draw(shown)
    assert tuple(shown.get_at(point))[:3] == COLL_LINE_COLOR


def test_devmode_scene_runs_command_system(maps, inputs):
    dev_runtime = Runtime(devmode=True)
    with FieldScene(maps, runtime=dev_runtime, input_state=inputs) as field_scene:
        field_scene.frame_events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SLASH)]
        field_scene.update()
        assert field_scene.command_system.command_mode is True
        assert PlayerActor.controllable is False


def test_release_mode_has_no_command_system(scene):
    assert scene.command_system is None