"""Loading of field maps: base texture, collision lines, spawn points and transitions."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, ClassVar

import pygame

from remedy.data import ActorData, ActorType, Direction, Line, MapTransData, Rectangle, Vector2

logger = logging.getLogger(__name__)

COLL_LINE_COLOR = (255, 161, 0)


class MapNotFoundError(FileNotFoundError):
    """Raised when a map's texture or data file does not exist."""


class FieldMap:
    """The currently loaded map and the entities it asks the scene to create."""

    collision_lines: ClassVar[list[Line]] = []

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)
        self.actor_queue: list[ActorData] = []
        self.map_trans_queue: list[MapTransData] = []
        self.base: pygame.Surface | None = None

    def load_map(self, map_name: str, spawn_name: str | None = None) -> None:
        """Load the texture and data of a map, optionally spawning at a named point."""
        logger.info("Loading map: '%s'", map_name)
        base_path = self.root / "graphics" / "maps" / f"{map_name}.png"
        json_path = self.root / "data" / "maps" / f"{map_name}.tmj"
        logger.debug("Base Texture Path: '%s'", base_path)
        logger.debug("Map Data Path: '%s'", json_path)

        if not base_path.is_file():
            logger.error("'%s.png' not found!", map_name)
            raise MapNotFoundError(f"'{map_name}.png' not found")
        if not json_path.is_file():
            logger.error("'%s.tmj' not found!", map_name)
            raise MapNotFoundError(f"'{map_name}.tmj' not found")

        self.base = pygame.image.load(str(base_path))
        self.parse_map_data(json_path, spawn_name)
        logger.info("Map: '%s' has been loaded successfully.", map_name)

    def parse_map_data(self, json_path: str | Path, spawn_name: str | None) -> None:
        """Read the map's layers and fill the collision lines and entity queues."""
        logger.info("Parsing map data...")
        with open(json_path, encoding="utf-8") as file:
            map_data = json.load(file)

        for layer in map_data["layers"]:
            layer_name = layer["name"]
            if layer_name == "Collisions":
                self.retrieve_coll_lines(layer["objects"])
            elif layer_name == "Spawnpoints":
                self.find_spawnpoints(layer["objects"], spawn_name)
            elif layer_name == "MapTransitions":
                self.find_map_transitions(layer["objects"])

    def retrieve_coll_lines(self, layer_objects: Iterable[dict[str, Any]]) -> None:
        """Replace the collision lines with the segments of each polyline object."""
        logger.info("Loading collision lines...")
        self.collision_lines.clear()

        for obj in layer_objects:
            logger.debug("Object ID: %s", obj.get("id"))
            base = Vector2(float(obj["x"]), float(obj["y"]))
            vertices = [
                base + Vector2(float(point["x"]), float(point["y"]))
                for point in obj.get("polyline", [])
            ]
            logger.debug("Constructing lines | Vertex Count: %d", len(vertices))
            if len(vertices) <= 1:
                logger.error("Vertex count is too low!")
                continue

            self.collision_lines.extend(
                Line(start, end) for start, end in zip(vertices, vertices[1:])
            )

        logger.info("Finished. Lines created: %d", len(self.collision_lines))

    def find_spawnpoints(
        self, layer_objects: list[dict[str, Any]], spawn_name: str | None = None
    ) -> None:
        """Queue the player at the named spawn point, or at the initial one."""
        if spawn_name is not None:
            logger.info(
                "Searching for transition spawn points with the same class as: '%s'",
                spawn_name,
            )
            for obj in layer_objects:
                if "type" in obj and obj["type"] == spawn_name:
                    self._queue_player(obj)
                    return
            logger.error("Failed to find transition spawn points!")
            logger.debug("Resorting to search for initial spawnpoints.")

        logger.info("Searching for initial spawn points.")
        for obj in layer_objects:
            if "type" not in obj:
                self._queue_player(obj)
                return
        raise ValueError("no initial spawn point found")

    def _queue_player(self, obj: dict[str, Any]) -> None:
        position = Vector2(float(obj["x"]), float(obj["y"]))
        logger.debug("Found spawn point for the player at %s", position)
        self.actor_queue.append(ActorData(position, Direction.DOWN, ActorType.PLAYER))

    def find_map_transitions(self, layer_objects: Iterable[dict[str, Any]]) -> None:
        """Queue a transition trigger for each object that carries properties."""
        logger.info("Searching for map transition triggers...")
        for obj in layer_objects:
            if "properties" not in obj:
                continue
            rect = Rectangle(
                float(obj["x"]), float(obj["y"]), float(obj["width"]), float(obj["height"])
            )
            map_dest = ""
            spawn_dest = ""
            direction = Direction.DOWN
            for prop in obj["properties"]:
                name = prop["name"]
                if name == "map_dest":
                    map_dest = prop["value"]
                elif name == "spawn_dest":
                    spawn_dest = prop["value"]
                elif name == "direction":
                    direction = Direction(int(prop["value"]))

            logger.debug(
                "Trigger Data: {Map Destination: '%s' Spawnpoint: '%s' Direction: %s}",
                map_dest,
                spawn_dest,
                direction,
            )
            self.map_trans_queue.append(MapTransData(map_dest, spawn_dest, rect, direction))

    def draw(self, surface: pygame.Surface, offset: Vector2) -> None:
        """Draw the map's base texture."""
        if self.base is not None:
            surface.blit(self.base, (round(offset.x), round(offset.y)))

    def draw_coll_lines(self, surface: pygame.Surface, offset: Vector2) -> None:
        """Draw every collision line with a dot at its start."""
        for line in self.collision_lines:
            start = line.start + offset
            end = line.end + offset
            pygame.draw.circle(surface, COLL_LINE_COLOR, (start.x, start.y), 2)
            pygame.draw.line(surface, COLL_LINE_COLOR, (start.x, start.y), (end.x, end.y))