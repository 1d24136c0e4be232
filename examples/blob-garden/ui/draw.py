"""Blob silhouette, generator tokens, and status bar renderers."""
from __future__ import annotations

import pygame

from idle_blob import Blob
from idle_swarm import GeneratorVisual, VisualKind
from ui.constants import SCREEN_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM, TOKEN_BG


def draw_blob(surface: pygame.Surface, blob: Blob) -> None:
    """Fill the amoeba contour with the heat-blended color, glow underneath."""
    look = blob.appearance()
    points = blob.contour()
    if look.scale != 1.0:
        cx, cy = blob.center
        points = [(cx + (x - cx) * look.scale, cy + (y - cy) * look.scale) for x, y in points]

    glow = pygame.Surface((SCREEN_W, SCREEN_H - STATUS_H), pygame.SRCALPHA)
    spread = int(look.glow_deviation)
    for ring in range(spread, 0, -2):
        alpha = int(60 * (1 - ring / (spread + 1)))
        pygame.draw.polygon(glow, (*look.glow, alpha), points, ring)
    surface.blit(glow, (0, 0))

    pygame.draw.polygon(surface, look.fill, points)
    pygame.draw.polygon(surface, look.stroke, points, 2)


def draw_tokens(
    surface: pygame.Surface,
    font: pygame.font.Font,
    visuals: tuple[GeneratorVisual, ...],
    center: tuple[float, float],
) -> None:
    for visual in visuals:
        x = int(center[0] + visual.position[0])
        y = int(center[1] + visual.position[1])
        radius = 14 if visual.kind is VisualKind.STACKED else 10
        pygame.draw.circle(surface, TOKEN_BG, (x, y), radius)
        icon = font.render(visual.icon, True, TEXT_COLOR)
        surface.blit(icon, (x - icon.get_width() / 2, y - icon.get_height() / 2))
        if visual.kind is VisualKind.STACKED or visual.count > 1:
            count = font.render(f"x{visual.count}", True, TEXT_DIM)
            surface.blit(count, (x + radius, y - radius))


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    biomass: float,
    per_second: float,
    level_id: str,
    cpm: float,
    shop: list[tuple[str, float, int]],
) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    head = f"Biomass {biomass:,.0f}   +{per_second:,.1f}/s   Level: {level_id}   CPM {cpm:.0f}"
    surface.blit(font.render(head, True, TEXT_COLOR), (10, y + 6))
    items = "   ".join(f"[{i + 1}] {gid} {cost:,.0f} (x{owned})" for i, (gid, cost, owned) in enumerate(shop))
    surface.blit(font.render(items, True, TEXT_DIM), (10, y + 30))
