"""Ray checks of an actor's collision box against map collision lines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from remedy.data import Line, RectEx, Vector2

_EPSILON = 1.1920929e-07


class _Collider(Protocol):
    position: Vector2
    collis_box: RectEx


def check_collision_lines(
    start1: Vector2, end1: Vector2, start2: Vector2, end2: Vector2
) -> Vector2 | None:
    """Return the intersection point of two segments, or None."""
    div = (end2.y - start2.y) * (end1.x - start1.x) - (end2.x - start2.x) * (
        end1.y - start1.y
    )
    if abs(div) < _EPSILON:
        return None

    cross1 = start1.x * end1.y - start1.y * end1.x
    cross2 = start2.x * end2.y - start2.y * end2.x
    xi = ((start2.x - end2.x) * cross1 - (start1.x - end1.x) * cross2) / div
    yi = ((start2.y - end2.y) * cross1 - (start1.y - end1.y) * cross2) / div

    def outside(value: float, a: float, b: float) -> bool:
        return abs(a - b) > _EPSILON and not min(a, b) <= value <= max(a, b)

    if (
        outside(xi, start1.x, end1.x)
        or outside(xi, start2.x, end2.x)
        or outside(yi, start1.y, end1.y)
        or outside(yi, start2.y, end2.y)
    ):
        return None
    return Vector2(xi, yi)


def _first_hit(start: Vector2, end: Vector2, lines: Iterable[Line]) -> Vector2 | None:
    for line in lines:
        point = check_collision_lines(start, end, line.start, line.end)
        if point is not None:
            return point
    return None


def _check_direction(direction: int) -> None:
    if direction not in (-1, 1):
        raise ValueError(f"direction must be -1 or 1, not {direction}")


def check_x(
    actor: _Collider, magnitude: float, x_direction: int, lines: Sequence[Line]
) -> float | None:
    """The x of a wall hit by moving magnitude along x, or None if the way is clear."""
    _check_direction(x_direction)
    box = actor.collis_box
    half_x = box.scale.x / 2
    half_y = box.scale.y / 2
    center_x = box.position.x + half_x
    center_y = box.position.y + half_y
    end_x = center_x + (half_x + magnitude) * x_direction
    offset_y = half_y - 1

    points = []
    for side in (-1, 0, 1):
        y = center_y + offset_y * side
        hit = _first_hit(Vector2(center_x, y), Vector2(end_x, y), lines)
        if hit is not None:
            points.append(hit)

    if not points:
        return None
    xs = [point.x for point in points]
    return max(xs) if x_direction == 1 else min(xs)


def check_y(
    actor: _Collider, magnitude: float, y_direction: int, lines: Sequence[Line]
) -> float | None:
    """The y of a wall hit by moving magnitude along y, or None if the way is clear."""
    _check_direction(y_direction)
    box = actor.collis_box
    half_x = box.scale.x / 2
    half_y = box.scale.y / 2
    center_x = box.position.x + half_x
    center_y = box.position.y + half_y
    offset_x = half_x - 1
    end_y = center_y + (half_y + magnitude) * y_direction

    points = []
    for side in (-1, 0, 1):
        x = center_x + offset_x * side
        hit = _first_hit(Vector2(x, center_y), Vector2(x, end_y), lines)
        if hit is not None:
            points.append(hit)

    if not points:
        return None
    # Points keep the order in which the rays found them.
    return points[0].y if y_direction == 1 else points[-1].y


def snap_x(actor: _Collider, x: float, x_direction: int) -> None:
    """Move the actor so the leading x edge of its collision box sits at x."""
    box = actor.collis_box
    half_x = box.scale.x / 2
    edge_x = box.position.x + half_x + half_x * x_direction
    difference = actor.position.x - edge_x
    actor.position = Vector2(x + difference, actor.position.y)


def snap_y(actor: _Collider, y: float, y_direction: int) -> None:
    """Move the actor so the leading y edge of its collision box sits at y."""
    box = actor.collis_box
    half_y = box.scale.y / 2
    edge_y = box.position.y + half_y + half_y * y_direction
    difference = actor.position.y - edge_y
    actor.position = Vector2(actor.position.x, y + difference)