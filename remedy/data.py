"""Enumerations and plain data records shared by the field systems."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto

import pygame


class GameState(Enum):
    """What the main loop is doing with the screen."""

    READY = auto()
    FADING_OUT = auto()
    FADING_IN = auto()


class EntityType(Enum):
    """Broad category of a game object."""

    ACTOR = auto()
    COMBATANT = auto()
    MAP_TRANSITION = auto()


class ActorType(Enum):
    """Role an actor plays in the field."""

    PLAYER = auto()
    COMPANION = auto()
    ENEMY = auto()


class Direction(IntEnum):
    """Facing direction; horizontal axes are +-1, vertical axes +-2."""

    UP = -2
    LEFT = -1
    RIGHT = 1
    DOWN = 2


class FieldEventType(Enum):
    """Kinds of events raised towards the field scene."""

    LOAD_MAP = auto()


class CommandType(Enum):
    """Kinds of debug commands."""

    CHANGE_MAP = auto()


@dataclass(frozen=True)
class Vector2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains_point(self, point: Vector2) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )


@dataclass(frozen=True)
class Line:
    """A line segment."""

    start: Vector2
    end: Vector2


@dataclass
class RectEx:
    """A rectangle that follows a position through an offset."""

    scale: Vector2 = field(default_factory=Vector2)
    offset: Vector2 = field(default_factory=Vector2)
    position: Vector2 = field(default_factory=Vector2)
    rect: Rectangle = field(default_factory=Rectangle)


@dataclass(frozen=True)
class ActorData:
    """Where and how an actor should be spawned."""

    position: Vector2
    direction: Direction
    type: ActorType


@dataclass(frozen=True)
class MapTransData:
    """Description of a map transition trigger."""

    map_dest: str
    spawn_dest: str
    rect: Rectangle
    direction: Direction


@dataclass
class FieldEvent:
    """Base record for events raised towards the field scene."""

    event_type: FieldEventType


@dataclass
class LoadMapEvent(FieldEvent):
    """Request to load a map at a named spawn point."""

    event_type: FieldEventType = field(default=FieldEventType.LOAD_MAP, init=False)
    map_name: str = ""
    spawn_point: str = ""


@dataclass(frozen=True)
class KeyBind:
    """A keyboard key paired with a gamepad button."""

    key: int
    button: int


@dataclass(frozen=True)
class FieldKeybinds:
    """Movement bindings used in the field."""

    move_right: KeyBind = KeyBind(pygame.K_RIGHT, pygame.CONTROLLER_BUTTON_DPAD_RIGHT)
    move_left: KeyBind = KeyBind(pygame.K_LEFT, pygame.CONTROLLER_BUTTON_DPAD_LEFT)
    move_down: KeyBind = KeyBind(pygame.K_DOWN, pygame.CONTROLLER_BUTTON_DPAD_DOWN)
    move_up: KeyBind = KeyBind(pygame.K_UP, pygame.CONTROLLER_BUTTON_DPAD_UP)


@dataclass
class FieldCommand:
    """Base record for debug commands."""

    type: CommandType


@dataclass
class ChangeMapCommand(FieldCommand):
    """Debug command that switches to another map."""

    type: CommandType = field(default=CommandType.CHANGE_MAP, init=False)
    map_name: str = ""