"""The player-controlled actor."""

from __future__ import annotations

import logging
from typing import ClassVar

import pygame

from remedy.collision import check_x, check_y, snap_x, snap_y
from remedy.data import ActorType, Direction, FieldKeybinds, Vector2
from remedy.entity import Actor
from remedy.field_map import FieldMap
from remedy.input import InputState
from remedy.runtime import Runtime
from remedy.runtime import runtime as default_runtime

logger = logging.getLogger(__name__)

DEFAULT_SPEED = 1.1
_DIAGONAL_RANGE = 1.4
_BODY_COLOR = (230, 230, 230)


def _gamepad_available() -> bool:
    return pygame.joystick.get_init() and pygame.joystick.get_count() > 0


class PlayerActor(Actor):
    """The character the player moves around the field."""

    controllable: ClassVar[bool] = True
    key_bind: ClassVar[FieldKeybinds] = FieldKeybinds()
    input_state: ClassVar[InputState] = InputState()

    def __init__(
        self,
        position: Vector2,
        direction: Direction,
        *,
        input_state: InputState | None = None,
        runtime: Runtime | None = None,
    ) -> None:
        super().__init__("Mary", ActorType.PLAYER, position, direction)
        self._input = input_state if input_state is not None else PlayerActor.input_state
        self._runtime = runtime if runtime is not None else default_runtime
        self.moving = False
        self.moving_x = 0
        self.moving_y = 0

        self.bounding_box.scale = Vector2(32, 32)
        self.bounding_box.offset = Vector2(-16, -28)
        self.collis_box.scale = Vector2(8, 16)
        self.collis_box.offset = Vector2(-4, -12)
        self.rect_ex_correction(self.bounding_box, self.collis_box)

    @classmethod
    def set_controllable(cls, value: bool) -> None:
        cls.controllable = value
        if value:
            logger.info("Control has been given to the player.")
        else:
            logger.info("Control has been revoked from the player.")

    def behavior(self) -> None:
        if not PlayerActor.controllable:
            return
        self.movement_input(_gamepad_available())
        self.moving = self.is_moving()

    def movement_input(self, gamepad: bool) -> None:
        """Read the movement axes from the bound keys and buttons."""
        binds = self.key_bind
        right = self._input.down(binds.move_right, gamepad)
        left = self._input.down(binds.move_left, gamepad)
        self.moving_x = int(right) - int(left)
        down = self._input.down(binds.move_down, gamepad)
        up = self._input.down(binds.move_up, gamepad)
        self.moving_y = int(down) - int(up)

    def is_moving(self) -> bool:
        return self.moving_x != 0 or self.moving_y != 0

    def update(self) -> None:
        self.move_x()
        self.move_y()
        self.rect_ex_correction(self.bounding_box, self.collis_box)

    def _speed(self, other_axis: int) -> float:
        if other_axis != 0:
            return DEFAULT_SPEED / _DIAGONAL_RANGE
        return DEFAULT_SPEED

    def move_x(self) -> None:
        if self.moving_x == 0:
            return
        self.direction = Direction(self.moving_x)
        magnitude = self._speed(self.moving_y) * self._runtime.delta_time()

        collision_x = check_x(self, magnitude, self.moving_x, FieldMap.collision_lines)
        if collision_x is not None:
            snap_x(self, collision_x, self.moving_x)
            return
        self.position = Vector2(self.position.x + magnitude * self.moving_x, self.position.y)

    def move_y(self) -> None:
        if self.moving_y == 0:
            return
        self.direction = Direction(self.moving_y * 2)
        magnitude = self._speed(self.moving_x) * self._runtime.delta_time()

        collision_y = check_y(self, magnitude, self.moving_y, FieldMap.collision_lines)
        if collision_y is not None:
            snap_y(self, collision_y, self.moving_y)
            return
        self.position = Vector2(self.position.x, self.position.y + magnitude * self.moving_y)

    def draw(self, surface: pygame.Surface, offset: Vector2) -> None:
        """Draw a plain stand-in body over the collision box."""
        rect = self.collis_box.rect
        body = pygame.Rect(
            round(rect.x + offset.x),
            round(rect.y + offset.y),
            round(rect.width),
            round(rect.height),
        )
        pygame.draw.rect(surface, _BODY_COLOR, body)