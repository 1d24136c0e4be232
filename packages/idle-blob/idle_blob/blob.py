"""Blob - one on-screen organism: its animation state and click entry points."""
from __future__ import annotations

import math

from idle_blob.animation import (
    apply_click,
    approach_size,
    create_animation_state,
    press,
    release,
    spin,
    update_animation,
)
from idle_blob.appearance import BlobAppearance, blob_appearance, clicks_per_minute, cpm_color
from idle_blob.config import BlobAnimationConfig, BlobColors
from idle_blob.path import amoeba_contour, nominal_radius
from idle_blob.state import BlobAnimationState
from idle_frame.types import FloatingNumberEvent, RandomSource, Vec2

# Clickable area edge, as a multiple of the drawn radius.
HIT_BOX_FACTOR = 2.4


class Blob:
    """Single writer of one BlobAnimationState.

    Pointer input arrives as ``click_down`` / ``click_up`` (screen
    coordinates) or ``key_click`` for a keyboard press; the frame system calls
    :meth:`tick`. A click with positive ``click_power`` yields a floating
    number at the pointer, colored by the current clicks-per-minute.
    """

    def __init__(
        self,
        rng: RandomSource,
        size: float,
        center: Vec2 = (0.0, 0.0),
        config: BlobAnimationConfig | None = None,
        colors: BlobColors | None = None,
        click_power: float = 1.0,
    ) -> None:
        self._rng = rng
        self._config = config if config is not None else BlobAnimationConfig()
        self._colors = colors if colors is not None else BlobColors()
        self._state = create_animation_state(self._config, rng, size)
        self._target_size = size
        self.center = center
        self.click_power = click_power
        self.disabled = False
        self.active = True
        self.last_click_offset: Vec2 | None = None

    @property
    def state(self) -> BlobAnimationState:
        return self._state

    @property
    def config(self) -> BlobAnimationConfig:
        return self._config

    @property
    def target_size(self) -> float:
        return self._target_size

    @property
    def visual_size(self) -> float:
        return self._state.visual_size

    @property
    def interactive(self) -> bool:
        return self.active and not self.disabled

    def resize(self, size: float) -> None:
        """Set the size the blob grows (or shrinks) toward."""
        self._target_size = size

    def hit_radius(self) -> float:
        return nominal_radius(self._state.visual_size) * HIT_BOX_FACTOR / 2

    def contains(self, x: float, y: float) -> bool:
        return math.hypot(x - self.center[0], y - self.center[1]) <= self.hit_radius()

    def click_down(self) -> bool:
        if not self.interactive:
            return False
        press(self._state)
        return True

    def click_up(self, x: float, y: float, now_ms: float) -> FloatingNumberEvent | None:
        if not self.interactive:
            return None
        self.last_click_offset = (x - self.center[0], y - self.center[1])
        return self._click(x, y, now_ms)

    def key_click(self, now_ms: float) -> FloatingNumberEvent | None:
        """Keyboard click, landing on the blob's center."""
        if not self.interactive:
            return None
        self.last_click_offset = (0.0, 0.0)
        return self._click(self.center[0], self.center[1], now_ms)

    def cancel_press(self) -> None:
        """Pointer left the blob while held: stop pressing without clicking."""
        release(self._state)

    def _click(self, x: float, y: float, now_ms: float) -> FloatingNumberEvent | None:
        # Color reflects the pace before this click lands.
        color = cpm_color(self.clicks_per_minute(now_ms))
        release(self._state)
        apply_click(self._state, now_ms, self._config)
        if self.click_power <= 0:
            return None
        return FloatingNumberEvent(x=x, y=y, value=self.click_power, color=color)

    def clicks_per_minute(self, now_ms: float) -> float:
        return clicks_per_minute(self._state.recent_clicks, now_ms, self._config.click_window_ms)

    def tick(self, dt: float, now_ms: float) -> None:
        approach_size(self._state, self._target_size, self._config)
        update_animation(self._state, dt, now_ms, self._config, self._rng)
        spin(self._state, self._config)

    def contour(self) -> list[Vec2]:
        return amoeba_contour(
            self._state.visual_size,
            self._state,
            self._config,
            center=self.center,
            rotation_deg=self._state.rotation_deg,
        )

    def appearance(self) -> BlobAppearance:
        return blob_appearance(
            self._state, self._colors, self._config.click_heat_peak, disabled=self.disabled,
        )
