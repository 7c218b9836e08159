"""Scenes, and the field scene where actors walk around a loaded map."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path

import pygame

from remedy.camera import Camera2D, follow_field_entity, setup_field
from remedy.data import ActorType, FieldEvent, FieldEventType, LoadMapEvent
from remedy.entity import Actor, Entity
from remedy.field_commands import CommandSystem
from remedy.field_events import FieldEventHandler
from remedy.field_map import FieldMap
from remedy.input import InputState
from remedy.map_trans import MapTransition
from remedy.player import PlayerActor
from remedy.runtime import CANVAS_RES, Runtime
from remedy.runtime import runtime as default_runtime

logger = logging.getLogger(__name__)

START_MAP = "db_01"
MAP_FADE_TIME = 0.10


class Scene(ABC):
    """Something the main loop updates and draws once per frame."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the scene onto the canvas."""


class FieldScene(Scene):
    """Exploration of a map: the player, its triggers and the camera."""

    def __init__(
        self,
        root: str | Path = ".",
        *,
        runtime: Runtime | None = None,
        input_state: InputState | None = None,
        font: pygame.font.Font | None = None,
        start_map: str = START_MAP,
    ) -> None:
        self.runtime = runtime if runtime is not None else default_runtime
        self.input_state = input_state
        self.font = font
        self.field = FieldMap(root)
        self.camera: Camera2D = setup_field(CANVAS_RES)
        self.camera_target: Actor | None = None
        self.entities: list[Entity] = []
        self.next_map = LoadMapEvent()
        self.map_ready = False
        self.frame_events: list[pygame.event.Event] = []
        self.command_system: CommandSystem | None = None

        self.map_load_procedure(start_map)
        if self.runtime.devmode:
            self.command_system = CommandSystem(self)
        logger.info("Initialized the Field Scene.")

    def __enter__(self) -> FieldScene:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def map_load_procedure(self, map_name: str, spawn_name: str | None = None) -> None:
        """Replace every entity with those of the given map."""
        logger.info("Running map load procedure")
        start_time = time.perf_counter()

        if self.entities:
            Entity.clear(self.entities)

        self.field.load_map(map_name, spawn_name)
        self.setup_actors()
        self.setup_map_transitions()

        target = Actor.get_actor(ActorType.PLAYER)
        if target is None:
            raise RuntimeError(f"map '{map_name}' spawned no player")
        self.camera_target = target
        self.camera.target = target.position

        logger.info("Procedure complete.")
        logger.info("Loading Time: %f", time.perf_counter() - start_time)
        self.map_ready = True

    def setup_actors(self) -> None:
        """Create the actors the map queued."""
        logger.info("Setting up field actors...")
        for data in self.field.actor_queue:
            if data.type is ActorType.PLAYER:
                self.entities.append(
                    PlayerActor(
                        data.position,
                        data.direction,
                        input_state=self.input_state,
                        runtime=self.runtime,
                    )
                )
        self.field.actor_queue.clear()

    def setup_map_transitions(self) -> None:
        """Create the transition triggers the map queued."""
        logger.info("Setting up map transition triggers...")
        self.entities.extend(MapTransition(data) for data in self.field.map_trans_queue)
        self.field.map_trans_queue.clear()

    def update(self) -> None:
        if not self.map_ready:
            self.map_load_procedure(self.next_map.map_name, self.next_map.spawn_point)
            self.runtime.fadein(MAP_FADE_TIME)
            return

        if self.command_system is not None:
            self.command_system.process(self.frame_events)

        for actor in list(Actor.existing_actors):
            actor.behavior()
        for entity in list(self.entities):
            entity.update()

        follow_field_entity(self.camera, self.camera_target, self.runtime.delta_time())

        event_pool = FieldEventHandler.get()
        if event_pool:
            logger.info("Field Events raised: %d", len(event_pool))
            for event in list(event_pool):
                self.field_event_handling(event)
            FieldEventHandler.clear()

    def field_event_handling(self, event: FieldEvent) -> None:
        """React to one event raised during the frame."""
        if event.event_type is FieldEventType.LOAD_MAP:
            logger.debug("Event detected: LoadMapEvent")
            logger.info(
                "Preparing to load map: '%s' at spawnpoint: '%s'",
                event.map_name,
                event.spawn_point,
            )
            self.next_map = event
            self.runtime.fadeout(MAP_FADE_TIME)
            self.map_ready = False

    def draw(self, surface: pygame.Surface) -> None:
        offset = self.camera.offset - self.camera.target
        self.field.draw(surface, offset)

        for entity in self.entities:
            entity.draw(surface, offset)
            entity.draw_debug(surface, offset)

        if self.runtime.debug_info:
            self.field.draw_coll_lines(surface, offset)

        if self.command_system is not None and self.font is not None:
            self.command_system.draw_buffer(surface, self.font)

    def close(self) -> None:
        """Destroy every entity and forget the loaded map."""
        Entity.clear(self.entities)
        self.camera_target = None
        FieldEventHandler.clear()
        self.field.collision_lines.clear()
        self.field.actor_queue.clear()
        self.field.map_trans_queue.clear()

        if Actor.existing_actors or Entity.existing_entities:
            raise RuntimeError("entities outlived the field scene")
        logger.info("Unloaded the Field scene.")