"""Debug command line for raising field events by hand."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, ClassVar

import pygame

from remedy.data import CommandType, LoadMapEvent
from remedy.field_events import FieldEventHandler
from remedy.player import PlayerActor
from remedy.runtime import CANVAS_RES

logger = logging.getLogger(__name__)

BUFFER_Y = 220
BUFFER_TEXT_X = 32
BUFFER_BACKGROUND = (0, 0, 0, 128)
BUFFER_TEXT_COLOR = (230, 41, 55)


def find_next_word(words: str, uppercase: bool = False) -> tuple[str, str]:
    """Split the next space-delimited word off the text.

    Returns the word and the text after it. Text that is already used up
    yields a single space as its word.
    """
    logger.debug("Searching for next word in buffer: '%s'", words)
    if not words:
        logger.debug("Iterator has reached end of buffer.")
        return " ", ""

    remainder = words.lstrip(" ")
    word = remainder.split(" ", 1)[0]
    rest = remainder[len(word):]
    if uppercase:
        word = word.upper()
    logger.debug("Word returned: '%s'", word)
    return word, rest


def load_map_command(map_name: str, spawn_name: str) -> None:
    """Raise a map load, unless no map was named."""
    if not map_name:
        logger.error("Expecting 1 or more arguments, but found none!")
        return
    logger.debug("Now executing command.")
    FieldEventHandler.raise_event(LoadMapEvent(map_name=map_name, spawn_point=spawn_name))


class CommandSystem:
    """A text buffer typed into while command mode is on, run on enter."""

    command_table: ClassVar[dict[str, CommandType]] = {"MAP": CommandType.CHANGE_MAP}

    def __init__(self, scene: Any = None) -> None:
        self.scene = scene
        self.buffer = ""
        self.command_mode = False
        logger.debug("Initialized debug command system.")

    def process(self, events: Iterable[pygame.event.Event]) -> None:
        """Handle one frame of keyboard events."""
        keys: set[int] = set()
        typed: list[str] = []
        for event in events:
            if event.type == pygame.KEYDOWN:
                keys.add(event.key)
            elif event.type == pygame.TEXTINPUT:
                typed.append(event.text)

        if pygame.K_SLASH in keys:
            self.toggle_command_mode()
            return
        if not self.command_mode:
            return

        if pygame.K_BACKSPACE in keys:
            self.buffer = self.buffer[:-1]
            return
        if pygame.K_RETURN in keys:
            self.parse_buffer()
            self.toggle_command_mode()
            return

        self.buffer += "".join(typed)

    def toggle_command_mode(self) -> None:
        """Enter or leave command mode; the player cannot move while it is on."""
        self.command_mode = not self.command_mode
        if self.command_mode:
            logger.debug("Entering command mode.")
        else:
            logger.debug("Exiting command mode.")
        self.buffer = ""
        PlayerActor.set_controllable(not self.command_mode)

    def parse_buffer(self) -> None:
        """Look up the buffer's first word as a command and run it."""
        logger.debug("Command sent: '%s'", self.buffer)
        first_word, rest = find_next_word(self.buffer, True)
        command_type = self.command_table.get(first_word)
        if command_type is None:
            logger.error("Invalid Command!")
            return
        self.interpret_command(command_type, rest)

    def interpret_command(self, command_type: CommandType, words: str) -> None:
        """Run a command with the text that follows its name."""
        logger.debug("Interpreting command type.")
        if command_type is CommandType.CHANGE_MAP:
            map_name, rest = find_next_word(words)
            spawn_name, _ = find_next_word(rest)
            load_map_command(map_name, spawn_name)

    def draw_buffer(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Draw the buffer on a dimmed band while command mode is on."""
        if not self.command_mode:
            return
        height = font.get_height()
        band = pygame.Surface((int(CANVAS_RES.x), height), pygame.SRCALPHA)
        band.fill(BUFFER_BACKGROUND)
        surface.blit(band, (0, BUFFER_Y))
        if self.buffer:
            text = font.render(self.buffer, False, BUFFER_TEXT_COLOR)
            surface.blit(text, (BUFFER_TEXT_X, BUFFER_Y))