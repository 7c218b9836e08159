"""The game window, main loop and command-line entry point."""

from __future__ import annotations

import argparse
import itertools
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pygame

from remedy.data import GameState
from remedy.field import FieldScene
from remedy.input import InputState
from remedy.runtime import CANVAS_RES, TARGET_FRAMERATE, WINDOW_RES, Runtime
from remedy.runtime import runtime as default_runtime

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
STAGE = "Pre-Alpha"
DEV_STAGE = "Pre-Alpha | Devmode"
PALETTE_SIZE = 56
SMALL_FONT_SIZE = 12
FPS_FONT_SIZE = 20
FPS_POSITION = (24, 16)
FPS_COLOR = (0, 158, 47)
LOG_FILE = "log.csv"


def _stage(devmode: bool) -> str:
    return DEV_STAGE if devmode else STAGE


def setup_logger(devmode: bool = False) -> logging.Logger:
    """Log to a rotating CSV file and to the console."""
    package_logger = logging.getLogger("remedy")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(logging.DEBUG if devmode else logging.INFO)

    file_handler = RotatingFileHandler(
        LOG_FILE, maxBytes=1_000_000, backupCount=5, encoding="utf-8"
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s;%(levelname)s;%(name)s;%(message)s")
    )
    console = logging.StreamHandler()
    console.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-5s [%(name)s] %(message)s")
    )
    package_logger.addHandler(file_handler)
    package_logger.addHandler(console)

    package_logger.info("Remedy %s - %s", VERSION, _stage(devmode))
    return package_logger


class Game:
    """Owns the window, the low-resolution canvas and the current scene."""

    def __init__(self, root: str | Path = ".", runtime: Runtime | None = None) -> None:
        self.root = Path(root)
        self.runtime = runtime if runtime is not None else default_runtime
        self.input_state = InputState()
        self.canvas: pygame.Surface | None = None
        self.canvas_dest = (int(WINDOW_RES.x), int(WINDOW_RES.y))
        self.window: pygame.Surface | None = None
        self.sm_font: pygame.font.Font | None = None
        self.palette: list[tuple[int, int, int, int]] = []
        self.scene: FieldScene | None = None
        self._held_keys: set[int] = set()
        self._held_buttons: set[int] = set()

    def setup_canvas(self) -> None:
        """Create the canvas that is drawn on and scaled up to the window."""
        logger.info("Setting up the canvas...")
        self.canvas = pygame.Surface((int(CANVAS_RES.x), int(CANVAS_RES.y)))
        self.canvas_dest = (int(WINDOW_RES.x), int(WINDOW_RES.y))

    def define_color_palette(self) -> list[tuple[int, int, int, int]]:
        """Collect the distinct visible colours of the palette image, in pixel order."""
        logger.info("Loading the game's color palette...")
        path = self.root / "graphics" / "palette.png"
        if not path.is_file():
            raise FileNotFoundError(f"palette image '{path}' not found")
        image = pygame.image.load(str(path))
        width, height = image.get_size()

        palette: list[tuple[int, int, int, int]] = []
        for y, x in itertools.product(range(height), range(width)):
            color = tuple(image.get_at((x, y)))
            if color[3] == 0 or color in palette:
                continue
            palette.append(color)
            if len(palette) >= PALETTE_SIZE:
                break

        self.palette = palette
        logger.info("Successfully loaded palette!")
        logger.info("Color Count: %d", len(palette))
        return palette

    def _init(self) -> None:
        pygame.init()
        self.window = pygame.display.set_mode(self.canvas_dest)
        pygame.display.set_caption(
            f"Project Remedy - {_stage(self.runtime.devmode)} - v{VERSION}"
        )
        self.setup_canvas()
        self.sm_font = pygame.font.Font(None, SMALL_FONT_SIZE)
        self.define_color_palette()
        if self.runtime.devmode:
            pygame.key.start_text_input()
        self.scene = FieldScene(
            self.root,
            runtime=self.runtime,
            input_state=self.input_state,
            font=self.sm_font,
        )
        logger.info("Time Scale: %s", self.runtime.time_scale)
        logger.info("Everything should be good to go!")

    def _track_input(self, events: list[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.KEYDOWN:
                self._held_keys.add(event.key)
            elif event.type == pygame.KEYUP:
                self._held_keys.discard(event.key)
            elif event.type == pygame.CONTROLLERBUTTONDOWN:
                self._held_buttons.add(event.button)
            elif event.type == pygame.CONTROLLERBUTTONUP:
                self._held_buttons.discard(event.button)
        self.input_state.update(self._held_keys, self._held_buttons)

    @staticmethod
    def _should_close(events: list[pygame.event.Event]) -> bool:
        return any(
            event.type == pygame.QUIT
            or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE)
            for event in events
        )

    def start(self) -> None:
        """Open the window and run the main loop until it is closed."""
        self._init()
        clock = pygame.time.Clock()
        fps_font = pygame.font.Font(None, FPS_FONT_SIZE)
        try:
            while True:
                events = pygame.event.get()
                if self._should_close(events):
                    break
                self._track_input(events)

                if self.runtime.devmode and any(
                    e.type == pygame.KEYDOWN and e.key == pygame.K_F3 for e in events
                ):
                    self.runtime.toggle_debug_info()

                self.scene.frame_events = events
                if self.runtime.game_state is GameState.READY:
                    self.scene.update()
                else:
                    self.runtime.fade_screen()

                self.canvas.fill((0, 0, 0))
                self.scene.draw(self.canvas)

                frame = pygame.transform.scale(self.canvas, self.canvas_dest)
                frame.fill(self.runtime.screen_tint, special_flags=pygame.BLEND_RGB_MULT)
                self.window.blit(frame, (0, 0))
                if self.runtime.debug_info:
                    fps = fps_font.render(f"{clock.get_fps():.0f} FPS", True, FPS_COLOR)
                    self.window.blit(fps, FPS_POSITION)
                pygame.display.flip()

                self.runtime.tick(clock.tick(TARGET_FRAMERATE) / 1000)
        finally:
            self.close()

    def close(self) -> None:
        """Unload the scene and shut the window."""
        if self.scene is not None:
            self.scene.close()
            self.scene = None
        if self.window is not None:
            pygame.quit()
            self.window = None
        logger.info("Thanks for playing!")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="remedy", description="Run the field game.")
    parser.add_argument(
        "--dev", action="store_true", help="enable debug info and the command line"
    )
    parser.add_argument(
        "--root", default=".", help="directory that holds graphics/ and data/"
    )
    args = parser.parse_args(argv)

    setup_logger(args.dev)
    default_runtime.devmode = args.dev
    game = Game(args.root, default_runtime)

    logger.info("Initializing the game...")
    logger.info("Starting the game loop.")
    game.start()
    return 0