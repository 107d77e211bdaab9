"""
Arcade window for playing the dodge game by hand.

The window is the only place that knows about keys and drawing. Each frame
it samples the keyboard once into a FrameInput, ticks the game and draws the
returned snapshot.
"""

from __future__ import annotations

from typing import Optional, Set

import arcade

from .config import DodgeConfig
from .game_state import DodgeGame, FrameInput, GameSnapshot, Mode

UP_KEYS = {arcade.key.W, arcade.key.UP}
DOWN_KEYS = {arcade.key.S, arcade.key.DOWN}
LEFT_KEYS = {arcade.key.A, arcade.key.LEFT}
RIGHT_KEYS = {arcade.key.D, arcade.key.RIGHT}
START_KEYS = {arcade.key.ENTER, arcade.key.RETURN, arcade.key.SPACE}
RESTART_KEYS = START_KEYS | {arcade.key.R}


class DodgeWindow(arcade.Window):
    """Arcade window rendering a DodgeGame.

    With interactive=False the window only draws; something else (the gym
    environment) is responsible for ticking the game.
    """

    def __init__(self, game: DodgeGame, interactive: bool = True, fps: int = 60):
        cfg = game.config
        super().__init__(cfg.width, cfg.height, "Axe Dodge - Arcade")
        self.game = game
        self.interactive = interactive
        self.set_update_rate(1 / fps)

        # Colors
        self.BG = arcade.color.WHITE
        self.TEXT_C = (30, 30, 30)
        self.ALERT_C = arcade.color.RED

        self._held: Set[int] = set()
        self._pressed: Set[int] = set()

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        self._held.add(symbol)
        self._pressed.add(symbol)

    def on_key_release(self, symbol: int, modifiers: int):
        self._held.discard(symbol)

    def sample_input(self, dt: float) -> FrameInput:
        """Read the keyboard once for this frame and clear the edge triggers"""
        held, pressed = self._held, self._pressed
        frame = FrameInput(
            dt=dt,
            up=bool(held & UP_KEYS),
            down=bool(held & DOWN_KEYS),
            left=bool(held & LEFT_KEYS),
            right=bool(held & RIGHT_KEYS),
            start=bool(pressed & START_KEYS),
            restart=bool(pressed & RESTART_KEYS),
        )
        self._pressed = set()
        return frame

    def on_update(self, delta_time: float):
        if not self.interactive:
            return
        self.game.tick(self.sample_input(delta_time))

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        self.clear()
        arcade.set_background_color(self.BG)
        self.draw_snapshot(self.game.snapshot())

    def draw_snapshot(self, snap: GameSnapshot):
        h = self.height

        if snap.mode is Mode.MENU:
            arcade.draw_text("AXE DODGE", self.width / 2, h / 2 + 30, self.TEXT_C, 32,
                             anchor_x="center")
            arcade.draw_text("Press ENTER to start", self.width / 2, h / 2 - 20, self.TEXT_C, 16,
                             anchor_x="center")
            return

        # Core uses screen coordinates (y down), arcade draws with y up
        arcade.draw_circle_filled(
            snap.player_x, h - snap.player_y, snap.player_radius, self.game.player.color
        )
        top = h - snap.obstacle_y
        arcade.draw_lrbt_rectangle_filled(
            snap.obstacle_x, snap.obstacle_x + snap.obstacle_size,
            top - snap.obstacle_size, top,
            self.game.obstacle.color,
        )

        txt = f"Score: {snap.score}  High: {snap.high_score}"
        arcade.draw_text(txt, 12, h - 28, self.TEXT_C, 14)

        if snap.mode is Mode.GAME_OVER:
            arcade.draw_text("Game Over", self.width / 2, h / 2, self.ALERT_C, 28,
                             anchor_x="center")
            arcade.draw_text("Press ENTER or R to play again", self.width / 2, h / 2 - 36,
                             self.TEXT_C, 14, anchor_x="center")


def play(config: Optional[DodgeConfig] = None, fps: int = 60):
    """Open a window and play until it is closed"""
    game = DodgeGame(config)
    DodgeWindow(game, interactive=True, fps=fps)
    arcade.run()
    return game
