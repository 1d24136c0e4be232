"""Blob Garden - Idle clicker visual-feedback demo.

Exercises idle-frame, idle-swarm, and idle-blob.

Controls:
  Click   Squeeze the blob (press) and release to click
  Space   Click at the blob's center
  1-6     Buy a generator
  P       Pause / Resume
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from game.callouts import expire
from game.economy import GENERATORS
from game.setup import build_garden
from ui.callouts import draw_callouts
from ui.constants import BG_COLOR, BLOB_CENTER, FPS, SCREEN_H, SCREEN_W
from ui.draw import draw_blob, draw_status_bar, draw_tokens

logger = logging.getLogger("blob_garden")

BUY_KEYS = [pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5, pygame.K_6]


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Blob Garden - idle visuals demo")
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--config", type=Path, default=None,
                   metavar="FILE", help="JSON file with swarm/blob tuning overrides")
    p.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Blob Garden - idle visuals demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)
    icon_font = pygame.font.SysFont("segoeuiemoji,notocoloremoji,symbola", 16)

    state = build_garden(seed=args.seed, fps=args.fps, center=BLOB_CENTER, config_path=args.config)
    logger.info("garden ready (seed=%d)", state.loop.seed)
    blob = state.blob
    economy = state.economy

    running = True
    while running:
        clock.tick(args.fps)
        now_ms = state.loop.clock.now_ms

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key == pygame.K_p:
                    state.toggle_pause()

                elif event.key == pygame.K_SPACE:
                    state.key_click(now_ms)

                elif event.key in BUY_KEYS:
                    gid = GENERATORS[BUY_KEYS.index(event.key)][0]
                    if economy.buy(gid):
                        logger.debug("bought %s", gid)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                state.pointer_down(*event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                state.pointer_up(event.pos[0], event.pos[1], now_ms)

        # --- Frame ---
        if not state.paused:
            state.loop.step()
        now_ms = state.loop.clock.now_ms
        state.callouts = expire(state.callouts, now_ms)

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_blob(screen, blob)
        draw_tokens(screen, icon_font, state.swarm.visuals, blob.center)
        draw_callouts(screen, font, state.callouts, now_ms)

        shop = [(gid, economy.cost(gid), economy.generators[gid].level) for gid in economy.unlocked()]
        draw_status_bar(
            screen,
            font,
            biomass=economy.biomass,
            per_second=economy.total_output(),
            level_id=economy.current_level_id,
            cpm=blob.clicks_per_minute(now_ms),
            shop=shop,
        )

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
