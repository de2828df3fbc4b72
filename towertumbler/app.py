"""The game: state, per-frame systems and the window loop."""

from __future__ import annotations

import argparse
import enum
import logging
import time
from dataclasses import dataclass

from towertumbler.bridge import BridgeState, EventBridge, process_bridge_events
from towertumbler.controls import (
    Key,
    KeyboardState,
    handle_calibration_input,
    handle_keyboard_input,
    handle_keyboard_tilt_input,
    handle_virtual_tilt_input,
)
from towertumbler.physics import PhysicsWorld
from towertumbler.tilt import TiltInput
from towertumbler.ui import Hud, MainMenu

logger = logging.getLogger(__name__)

TITLE = "Tower Tumbler"
CLEAR_COLOR = (43, 44, 47)


class GameState(enum.Enum):
    MAIN_MENU = "MainMenu"
    PLAYING = "Playing"
    GAME_OVER = "GameOver"


@dataclass
class GameScore:
    current: int = 0
    best: int = 0


class TowerTumbler:
    """All game state, advanced one frame at a time by `step`."""

    def __init__(
        self, *, width: float = 800, height: float = 600, bridge: EventBridge | None = None
    ) -> None:
        self.state = GameState.MAIN_MENU
        self.tilt = TiltInput()
        self.bridge = BridgeState(bridge)
        self.keys = KeyboardState()
        self.physics = PhysicsWorld()
        self.score = GameScore()
        self.hud = Hud()
        self.menu = MainMenu(width, height)
        logger.info("Tower Tumbler initialized successfully")

    def step(self, elapsed: float, delta: float) -> None:
        """Run one frame; `elapsed` and `delta` are in seconds."""
        next_state: GameState | None = None
        if self.state is GameState.PLAYING:
            if self.keys.just_pressed(Key.ESCAPE):
                next_state = GameState.MAIN_MENU
            handle_keyboard_input(self.keys, self.tilt)
            process_bridge_events(self.bridge, self.tilt)
            handle_calibration_input(self.keys, self.tilt)
            handle_keyboard_tilt_input(self.keys, self.tilt, elapsed, delta)
            handle_virtual_tilt_input(self.tilt)
        self.physics.update_gravity(self.tilt, elapsed * 1000.0)
        self.hud.update(self.score.current)
        self.keys.end_frame()
        if next_state is not None:
            self.state = next_state


def _rgb(color: tuple[float, ...]) -> tuple[int, ...]:
    return tuple(round(c * 255) for c in color)


def _run(width: int, height: int) -> None:
    import pygame

    key_map = {
        pygame.K_LEFT: Key.ARROW_LEFT,
        pygame.K_RIGHT: Key.ARROW_RIGHT,
        pygame.K_UP: Key.ARROW_UP,
        pygame.K_DOWN: Key.ARROW_DOWN,
        pygame.K_a: Key.KEY_A,
        pygame.K_c: Key.KEY_C,
        pygame.K_d: Key.KEY_D,
        pygame.K_i: Key.KEY_I,
        pygame.K_1: Key.DIGIT1,
        pygame.K_2: Key.DIGIT2,
        pygame.K_3: Key.DIGIT3,
        pygame.K_4: Key.DIGIT4,
        pygame.K_EQUALS: Key.EQUAL,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_ESCAPE: Key.ESCAPE,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        game = TowerTumbler(width=width, height=height)
        hud_font = pygame.font.Font(None, int(Hud.font_size))
        title_font = pygame.font.Font(None, int(MainMenu.title_font_size))
        button_font = pygame.font.Font(None, int(MainMenu.button_font_size))
        clock = pygame.time.Clock()
        start = last = time.perf_counter()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in key_map:
                    game.keys.press(key_map[event.key])
                elif event.type == pygame.KEYUP and event.key in key_map:
                    game.keys.release(key_map[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if game.state is GameState.MAIN_MENU and game.menu.handle_click(event.pos):
                        game.state = GameState.PLAYING
                elif event.type == pygame.VIDEORESIZE:
                    game.menu = MainMenu(event.w, event.h)

            now = time.perf_counter()
            game.step(now - start, now - last)
            last = now

            w, h = screen.get_size()
            screen.fill(CLEAR_COLOR)
            for body in game.physics.bodies.values():
                rect = pygame.Rect(
                    round(w / 2 + body.position.x - body.half_extents.x),
                    round(h / 2 - body.position.y - body.half_extents.y),
                    round(body.size.x),
                    round(body.size.y),
                )
                pygame.draw.rect(screen, _rgb(body.color), rect)

            if game.state is GameState.MAIN_MENU:
                menu = game.menu
                overlay = pygame.Surface((w, h), pygame.SRCALPHA)
                overlay.fill(_rgb(menu.background))
                screen.blit(overlay, (0, 0))
                title = title_font.render(menu.title, True, _rgb(menu.text_color))
                screen.blit(title, title.get_rect(center=menu.title_center))
                button = pygame.Rect(*(round(v) for v in menu.button_rect))
                pygame.draw.rect(screen, _rgb(menu.button_color), button)
                label = button_font.render(menu.button_label, True, _rgb(menu.text_color))
                screen.blit(label, label.get_rect(center=button.center))
            else:
                text = hud_font.render(game.hud.text, True, _rgb(game.hud.color))
                screen.blit(text, game.hud.position)

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="tower-tumbler", description="A physics-based stacking game with tilt controls."
    )
    parser.add_argument("--width", type=int, default=800, help="window width in pixels")
    parser.add_argument("--height", type=int, default=600, help="window height in pixels")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")
    logging.basicConfig(level=logging.INFO)
    _run(args.width, args.height)
    return 0