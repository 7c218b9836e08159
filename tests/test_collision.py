from dataclasses import dataclass, field

import pytest

from remedy.collision import check_collision_lines, check_x, check_y, snap_x, snap_y
from remedy.data import Line, Rectangle, RectEx, Vector2

SCALE = Vector2(8, 16)
OFFSET = Vector2(-4, -12)


@dataclass
class Body:
    position: Vector2
    collis_box: RectEx = field(default_factory=RectEx)

    def __post_init__(self):
        self.correct()

    def correct(self):
        pos = self.position + OFFSET
        self.collis_box = RectEx(SCALE, OFFSET, pos, Rectangle(pos.x, pos.y, SCALE.x, SCALE.y))


def vertical(x, y0=-100, y1=100):
    return Line(Vector2(x, y0), Vector2(x, y1))


def horizontal(y, x0=-100, x1=100):
    return Line(Vector2(x0, y), Vector2(x1, y))


def test_crossing_segments_meet():
    point = check_collision_lines(Vector2(0, 0), Vector2(10, 10), Vector2(0, 10), Vector2(10, 0))
    assert point.x == pytest.approx(5)
    assert point.y == pytest.approx(5)


def test_parallel_segments_do_not_meet():
    assert check_collision_lines(Vector2(0, 0), Vector2(10, 0), Vector2(0, 1), Vector2(10, 1)) is None


def test_separate_segments_do_not_meet():
    assert check_collision_lines(Vector2(0, 0), Vector2(1, 0), Vector2(5, -1), Vector2(5, 1)) is None


def test_check_x_hits_wall_to_the_right():
    body = Body(Vector2(4, 12))
    assert check_x(body, 10, 1, [vertical(10)]) == pytest.approx(10)


def test_check_x_clear_when_out_of_reach():
    body = Body(Vector2(4, 12))
    assert check_x(body, 1, 1, [vertical(10)]) is None


def test_check_x_hits_wall_to_the_left():
    body = Body(Vector2(4, 12))
    assert check_x(body, 10, -1, [vertical(-5)]) == pytest.approx(-5)


def test_check_x_rightward_takes_largest_hit():
    body = Body(Vector2(4, 12))
    lines = [vertical(10, 0, 5), vertical(12, 6, 20)]
    assert check_x(body, 20, 1, lines) == pytest.approx(12)
    assert check_x(body, 20, -1, [vertical(-3, 0, 5), vertical(-6, 6, 20)]) == pytest.approx(-6)


def test_check_y_hits_floor_and_ceiling():
    body = Body(Vector2(4, 12))
    assert check_y(body, 10, 1, [horizontal(20)]) == pytest.approx(20)
    assert check_y(body, 10, -1, [horizontal(-4)]) == pytest.approx(-4)
    assert check_y(body, 1, 1, [horizontal(20)]) is None


def test_zero_direction_rejected():
    body = Body(Vector2(4, 12))
    with pytest.raises(ValueError):
        check_x(body, 1, 0, [])
    with pytest.raises(ValueError):
        check_y(body, 1, 0, [])


def test_snap_x_right_aligns_right_edge():
    body = Body(Vector2(4, 12))
    snap_x(body, 10, 1)
    body.correct()
    assert body.collis_box.rect.x + body.collis_box.rect.width == pytest.approx(10)
    assert body.position.y == 12


def test_snap_x_left_aligns_left_edge():
    body = Body(Vector2(4, 12))
    snap_x(body, -5, -1)
    body.correct()
    assert body.collis_box.rect.x == pytest.approx(-5)


def test_snap_y_aligns_edges():
    body = Body(Vector2(4, 12))
    snap_y(body, 30, 1)
    body.correct()
    assert body.collis_box.rect.y + body.collis_box.rect.height == pytest.approx(30)
    snap_y(body, -7, -1)
    body.correct()
    assert body.collis_box.rect.y == pytest.approx(-7)
    assert body.position.x == 4