"""Field camera setup and smooth entity following."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol

from remedy.data import Vector2

_MIN_LENGTH = 1.0
_MIN_SPEED = 0.75
_FRACTION_SPEED = 0.05


class _Positioned(Protocol):
    position: Vector2


@dataclass
class Camera2D:
    """A 2D camera: the world point it looks at and where that lands on screen."""

    target: Vector2 = field(default_factory=Vector2)
    offset: Vector2 = field(default_factory=Vector2)
    zoom: float = 1.0
    rotation: float = 0.0


def setup_field(canvas_res: Vector2) -> Camera2D:
    """A camera centred on a canvas of the given resolution."""
    return Camera2D(
        target=Vector2(0, 0),
        offset=Vector2(canvas_res.x / 2, canvas_res.y / 2),
        zoom=1.0,
        rotation=0.0,
    )


def follow_field_entity(
    camera: Camera2D, entity: _Positioned | None, delta: float
) -> None:
    """Ease the camera target towards the entity's position."""
    if entity is None:
        return

    difference = entity.position - camera.target
    length = math.hypot(difference.x, difference.y)
    if length > _MIN_LENGTH:
        speed = max(_FRACTION_SPEED * length, _MIN_SPEED)
        camera.target = camera.target + difference * (speed * delta / length)