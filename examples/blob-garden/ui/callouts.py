"""Floating-number callouts that rise and fade."""
from __future__ import annotations

import pygame

from game.callouts import CALLOUT_LIFETIME_MS, Callout
from ui.constants import CALLOUT_RISE_PX


def format_value(value: float) -> str:
    if value >= 1_000_000:
        return f"+{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"+{value / 1_000:.1f}K"
    if value >= 10 or value == int(value):
        return f"+{value:.0f}"
    return f"+{value:.1f}"


def draw_callouts(
    surface: pygame.Surface,
    font: pygame.font.Font,
    callouts: list[Callout],
    now_ms: float,
) -> None:
    for callout in callouts:
        age = min((now_ms - callout.born_ms) / CALLOUT_LIFETIME_MS, 1.0)
        event = callout.event
        label = format_value(event.value)
        if event.icon:
            label = f"{event.icon} {label}"
        text = font.render(label, True, event.color)
        text.set_alpha(int(255 * (1.0 - age)))
        x = event.x - text.get_width() / 2
        y = event.y - CALLOUT_RISE_PX * age
        surface.blit(text, (x, y))
