"""Frame timing, time scale, debug toggle and screen fading state."""

from __future__ import annotations

import logging
import math

from remedy.data import GameState, Vector2

logger = logging.getLogger(__name__)

CANVAS_RES = Vector2(426, 240)
WINDOW_RES = Vector2(1280, 720)
TARGET_FRAMERATE = 60


class Runtime:
    """Process-wide game state that the scenes and entities consult."""

    def __init__(self, devmode: bool = False) -> None:
        self.devmode = devmode
        self.game_state = GameState.READY
        self.debug_info = False
        self.time_scale = 1.0
        self.fade_time = 0.0
        self.fade_percentage = 0.0
        self.screen_tint: tuple[int, int, int] = (255, 255, 255)
        self.frame_time = 0.0

    def tick(self, frame_time: float) -> None:
        """Record the duration of the last frame in seconds."""
        self.frame_time = frame_time

    def delta_time(self) -> float:
        """Frame time normalised to the target framerate, scaled by the time scale."""
        return self.frame_time * TARGET_FRAMERATE * self.time_scale

    def toggle_debug_info(self) -> bool:
        self.debug_info = not self.debug_info
        logger.info("Debug info has been toggled: %s", self.debug_info)
        return self.debug_info

    def set_time_scale(self, new_scale: float) -> None:
        self.time_scale = new_scale
        logger.info("Time scale has been changed: %s", self.time_scale)

    def fadeout(self, fade_time: float) -> None:
        """Start fading the screen to black, unless a fade is under way."""
        if self.game_state is not GameState.READY:
            return
        logger.info("Fading out the screen.")
        self.fade_percentage = 1.0
        self.fade_time = fade_time
        self.game_state = GameState.FADING_OUT

    def fadein(self, fade_time: float) -> None:
        """Start fading the screen back in, unless a fade is under way."""
        if self.game_state is not GameState.READY:
            return
        logger.info("Fading in the screen.")
        self.fade_percentage = 0.0
        self.fade_time = fade_time
        self.game_state = GameState.FADING_IN

    def fade_screen(self) -> None:
        """Advance the current fade by the last frame's duration."""
        if self.frame_time == 0:
            return
        magnitude = self.frame_time / self.fade_time if self.fade_time else math.inf

        if self.game_state is GameState.FADING_OUT:
            self.fade_percentage -= magnitude
        elif self.game_state is GameState.FADING_IN:
            self.fade_percentage += magnitude

        self.fade_percentage = min(max(self.fade_percentage, 0.0), 1.0)
        value = 255 * self.fade_percentage
        level = int(value)
        self.screen_tint = (level, level, level)

        if value in (0, 255):
            logger.info("Screen fade complete.")
            self.game_state = GameState.READY


runtime = Runtime()