"""Trigger areas that send the player to another map."""

from __future__ import annotations

import logging

import pygame

from remedy.data import ActorType, EntityType, LoadMapEvent, MapTransData, Vector2
from remedy.entity import Actor, Entity
from remedy.field_events import FieldEventHandler

logger = logging.getLogger(__name__)

_TRIGGER_TINT = (0, 0, 0, 0)


class MapTransition(Entity):
    """Raises a map load when the player walks into it facing its direction."""

    def __init__(self, data: MapTransData) -> None:
        super().__init__()
        self.entity_type = EntityType.MAP_TRANSITION
        self.map_dest = data.map_dest
        self.spawn_dest = data.spawn_dest
        self.direction = data.direction

        self.position = Vector2(data.rect.x, data.rect.y)
        self.bounding_box.scale = Vector2(data.rect.width, data.rect.height)
        self.bounding_box.offset = Vector2(0, 0)
        self.rect_ex_correction(self.bounding_box)

        player = Actor.get_actor(ActorType.PLAYER)
        if player is None:
            self.destroy()
            raise RuntimeError("a map transition needs a player actor")
        self.plr = player
        logger.info("Entity Created: Transition Trigger [ID: %d]", self.entity_id)

    def update(self) -> None:
        if not getattr(self.plr, "moving", False):
            return
        if self.plr.direction != self.direction:
            return
        if self.bounding_box.rect.contains_point(self.plr.position):
            logger.info("Player has triggered Map Transition [ID: %d]", self.entity_id)
            FieldEventHandler.raise_event(
                LoadMapEvent(map_name=self.map_dest, spawn_point=self.spawn_dest)
            )

    def draw(self, surface: pygame.Surface, offset: Vector2) -> None:
        """Blit a fully transparent overlay, so the trigger stays invisible."""
        rect = self.bounding_box.rect
        width = max(0, round(rect.width))
        height = max(0, round(rect.height))
        if width == 0 or height == 0:
            return
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill(_TRIGGER_TINT)
        surface.blit(overlay, (round(rect.x + offset.x), round(rect.y + offset.y)))