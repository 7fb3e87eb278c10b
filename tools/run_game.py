#!/usr/bin/env python3
# tools/run_game.py
# Interactive driver: pygame window, fixed 20 FPS loop, arrow-key movement.
# - Arrows: move the player
# - Alt+Enter: toggle fullscreen
# - R: throw the level away and generate a new one
# - Esc / window close: quit

from __future__ import annotations

import argparse
import logging

import pygame

from tombcrawl.config import DEFAULT_CONFIG, LIMIT_FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from tombcrawl.engine.state import GameState
from tombcrawl.render.frame import build_frame
from tombcrawl.render.tileset import GlyphSet

MOVES = {
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
}


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=None, help="Level seed (random if omitted)")
    ap.add_argument("--tile", type=int, default=10, help="Cell size in pixels")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    pygame.display.set_caption("tombcrawl")
    clock = pygame.time.Clock()
    size = (SCREEN_WIDTH * args.tile, SCREEN_HEIGHT * args.tile)
    screen = pygame.display.set_mode(size)
    fullscreen = False

    glyphs = GlyphSet(args.tile)
    state = GameState(DEFAULT_CONFIG, seed=args.seed)

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RETURN and ev.mod & pygame.KMOD_ALT:
                    fullscreen = not fullscreen
                    flags = pygame.FULLSCREEN if fullscreen else 0
                    screen = pygame.display.set_mode(size, flags)
                elif ev.key == pygame.K_r:
                    state.new_level()
                elif ev.key in MOVES:
                    state.move_player(*MOVES[ev.key])

        state.tick()

        screen.fill((0, 0, 0))
        for y, row in enumerate(build_frame(state)):
            for x, cell in enumerate(row):
                if cell.bg is None and not cell.glyph.strip():
                    continue
                screen.blit(glyphs.view(cell), (x * args.tile, y * args.tile))

        px, py = state.player.pos
        pygame.display.set_caption(
            f"tombcrawl - level {state.level_index}  rooms {state.room_count}  @({px},{py})"
        )
        pygame.display.flip()
        clock.tick(LIMIT_FPS)

    pygame.quit()


if __name__ == "__main__":
    main()
