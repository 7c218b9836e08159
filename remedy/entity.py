"""Base game objects: entities with unique ids and actors registered by type."""

from __future__ import annotations

import itertools
import logging
from abc import ABC, abstractmethod
from typing import ClassVar

import pygame

from remedy.data import ActorType, Direction, EntityType, Rectangle, RectEx, Vector2

logger = logging.getLogger(__name__)

DEBUG_BOUNDS_COLOR = (0, 121, 241)
DEBUG_COLLISION_COLOR = (230, 41, 55)


def _screen_rect(rect: Rectangle, offset: Vector2) -> pygame.Rect:
    return pygame.Rect(
        round(rect.x + offset.x),
        round(rect.y + offset.y),
        round(rect.width),
        round(rect.height),
    )


class Entity(ABC):
    """Root of every game object; each live entity holds a unique id."""

    existing_entities: ClassVar[set[int]] = set()

    def __init__(self) -> None:
        self.entity_id = -1
        self.entity_type: EntityType | None = None
        self.position = Vector2()
        self.bounding_box = RectEx()
        self.assign_id()
        logger.info("Entity [ID: %d] has been created.", self.entity_id)

    @staticmethod
    def clear(entity_list: list[Entity]) -> None:
        """Destroy every entity in the list and empty it."""
        logger.info("Clearing all entities from memory.")
        for entity in entity_list:
            entity.destroy()
        entity_list.clear()

    def assign_id(self) -> None:
        """Take the lowest id not held by another live entity."""
        if self.entity_id in self.existing_entities:
            raise RuntimeError(f"entity already holds id {self.entity_id}")
        new_id = next(i for i in itertools.count() if i not in self.existing_entities)
        self.existing_entities.add(new_id)
        self.entity_id = new_id

    def rect_ex_correction(self, *args: RectEx) -> None:
        """Move each given rect so it follows the entity's position."""
        for rect_ex in args:
            rect_ex.position = self.position + rect_ex.offset
            rect_ex.rect = Rectangle(
                rect_ex.position.x,
                rect_ex.position.y,
                rect_ex.scale.x,
                rect_ex.scale.y,
            )

    @abstractmethod
    def update(self) -> None:
        """Advance the entity by one frame."""

    @abstractmethod
    def draw(self, surface: pygame.Surface, offset: Vector2) -> None:
        """Draw the entity, translated by offset."""

    def draw_debug(self, surface: pygame.Surface, offset: Vector2) -> None:
        pygame.draw.rect(
            surface, DEBUG_BOUNDS_COLOR, _screen_rect(self.bounding_box.rect, offset), 1
        )
        center = self.position + offset
        pygame.draw.circle(surface, DEBUG_BOUNDS_COLOR, (center.x, center.y), 1)

    def destroy(self) -> None:
        """Release the entity's id."""
        logger.info("Clearing Entity [ID: %d] from memory.", self.entity_id)
        try:
            self.existing_entities.remove(self.entity_id)
        except KeyError:
            raise RuntimeError(
                f"entity id {self.entity_id} is not registered"
            ) from None


class Actor(Entity):
    """A character in the field, tracked in a registry of live actors."""

    existing_actors: ClassVar[dict[Actor, None]] = {}

    def __init__(
        self,
        name: str,
        actor_type: ActorType,
        position: Vector2,
        direction: Direction,
    ) -> None:
        super().__init__()
        self.name = name
        self.position = position
        self.direction = direction
        self.entity_type = EntityType.ACTOR
        self.actor_type = actor_type
        self.collis_box = RectEx()

        if self in self.existing_actors:
            raise RuntimeError(f"actor '{name}' is already registered")
        self.existing_actors[self] = None
        logger.info("ACTOR: '%s' [ID: %d]", name, self.entity_id)

    @classmethod
    def get_actor(cls, actor_type: ActorType) -> Actor | None:
        """Return the first live actor of the given type, or None."""
        logger.debug("Attempting to retrieve first actor of type: %s", actor_type)
        for actor in cls.existing_actors:
            if actor.actor_type is actor_type:
                logger.debug("Actor Found: '%s' [ID: %d]", actor.name, actor.entity_id)
                return actor
        return None

    @abstractmethod
    def behavior(self) -> None:
        """Decide what the actor intends to do this frame."""

    def draw_debug(self, surface: pygame.Surface, offset: Vector2) -> None:
        super().draw_debug(surface, offset)
        pygame.draw.rect(
            surface, DEBUG_COLLISION_COLOR, _screen_rect(self.collis_box.rect, offset), 1
        )

    def destroy(self) -> None:
        try:
            del self.existing_actors[self]
        except KeyError:
            raise RuntimeError(f"actor '{self.name}' is not registered") from None
        logger.info("Removed actor: '%s'", self.name)
        super().destroy()