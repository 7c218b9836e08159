import pygame
import pytest

from remedy.data import ActorType, Direction, Line, Rectangle, Vector2
from remedy.entity import Actor, Entity
from remedy.field_map import FieldMap
from remedy.input import InputState
from remedy.player import PlayerActor
from remedy.runtime import Runtime


@pytest.fixture(autouse=True)
def _clean_state():
    yield
    for actor in list(Actor.existing_actors):
        actor.destroy()
    Entity.existing_entities.clear()
    FieldMap.collision_lines.clear()
    PlayerActor.set_controllable(True)


def make_player(keys=(), buttons=(), position=Vector2(100, 100)):
    state = InputState()
    state.update(keys, buttons)
    clock = Runtime()
    clock.tick(1 / 60)
    player = PlayerActor(position, Direction.DOWN, input_state=state, runtime=clock)
    return player


def test_boxes_follow_position():
    player = make_player()
    for box in (player.bounding_box, player.collis_box):
        expected = player.position + box.offset
        assert box.rect == Rectangle(expected.x, expected.y, box.scale.x, box.scale.y)


def test_registered_as_player():
    player = make_player()
    assert Actor.get_actor(ActorType.PLAYER) is player
    assert player.name == "Mary"


def test_movement_input_reads_keys():
    player = make_player(keys={pygame.K_RIGHT, pygame.K_UP})
    player.movement_input(False)
    assert (player.moving_x, player.moving_y) == (1, -1)
    assert player.is_moving()


def test_movement_input_opposing_keys_cancel():
    player = make_player(keys={pygame.K_RIGHT, pygame.K_LEFT})
    player.movement_input(False)
    assert player.moving_x == 0
    assert not player.is_moving()


def test_gamepad_buttons_only_count_with_gamepad():
    player = make_player(buttons={pygame.CONTROLLER_BUTTON_DPAD_LEFT})
    player.movement_input(False)
    assert player.moving_x == 0
    player.movement_input(True)
    assert player.moving_x == -1


def test_behavior_sets_moving():
    player = make_player(keys={pygame.K_DOWN})
    player.behavior()
    assert player.moving is True


def test_behavior_ignored_when_not_controllable():
    player = make_player(keys={pygame.K_DOWN})
    PlayerActor.set_controllable(False)
    player.behavior()
    assert player.moving is False
    assert PlayerActor.controllable is False


def test_update_moves_right():
    player = make_player(keys={pygame.K_RIGHT})
    player.behavior()
    player.update()
    assert player.position.x > 100
    assert player.position.y == 100
    assert player.direction is Direction.RIGHT
    assert player.collis_box.position == player.position + player.collis_box.offset


def test_update_moves_up():
    player = make_player(keys={pygame.K_UP})
    player.behavior()
    player.update()
    assert player.position.y < 100
    assert player.position.x == 100
    assert player.direction is Direction.UP


def test_diagonal_is_slower_per_axis():
    straight = make_player(keys={pygame.K_RIGHT})
    diagonal = make_player(keys={pygame.K_RIGHT, pygame.K_DOWN})
    for player in (straight, diagonal):
        player.behavior()
        player.update()
    assert 100 < diagonal.position.x - 0 < straight.position.x
    assert diagonal.position.y > 100
    assert diagonal.direction is Direction.DOWN


def test_wall_stops_player():
    FieldMap.collision_lines.append(Line(Vector2(105, 0), Vector2(105, 200)))
    player = make_player(keys={pygame.K_RIGHT})
    player.behavior()
    player.update()
    rect = player.collis_box.rect
    assert rect.x + rect.width == pytest.approx(105)
    assert player.direction is Direction.RIGHT


def test_idle_player_stays_put():
    player = make_player()
    player.behavior()
    player.update()
    assert player.position == Vector2(100, 100)
    assert player.moving is False