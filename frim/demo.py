from __future__ import annotations

import logging
import time
from typing import Dict, List, Tuple

import numpy as np
import pygame

from frim.config import (
    WINDOW_WIDTH, WINDOW_HEIGHT, FPS_CAP, MAX_DT,
    MODE_HALF_LIFE, MODE_FACTOR, MODE_LAMBDA, MODES,
)
from frim.smoothing import (
    VEC3_SMOOTHERS,
    lambda_to_half_life,
    lambda_to_smoothing,
    to_lambda,
)
from frim.util.math import vec3

log = logging.getLogger("frim.demo")

COLORS = {
    MODE_HALF_LIFE: (240, 90, 70),
    MODE_FACTOR: (80, 200, 120),
    MODE_LAMBDA: (90, 140, 250),
}


def equivalent_params(mode: str, param: float) -> Dict[str, float]:
    """Control parameters for every mode describing the same decay as (mode, param)."""
    lam = to_lambda(mode, param)
    return {
        MODE_HALF_LIFE: lambda_to_half_life(lam),
        MODE_FACTOR: lambda_to_smoothing(lam),
        MODE_LAMBDA: lam,
    }


# Positions beyond this many pixels are off any screen and unsafe to hand to pygame.
MAX_PIXEL = 1e6


def drawable(pos: np.ndarray) -> bool:
    xy = pos[:2]
    return bool(np.all(np.isfinite(xy)) and np.all(np.abs(xy) < MAX_PIXEL))


def _draw_hud(surf: pygame.Surface, font: pygame.font.Font, lines: List[str]) -> None:
    y = 8
    for line in lines:
        img = font.render(line, True, (235, 235, 235))
        surf.blit(img, (8, y))
        y += font.get_linesize()


def run_demo(*, mode: str, param: float, debug: bool, max_frames: int = 0) -> None:
    """Dots chase the mouse, one per parameterization, all tuned to the same decay.

    The dots stay on top of each other at any frame rate. Hold SPACE to
    throttle the loop to ~15 fps and see that the motion does not change.

    Degenerate parameters make dots run off to inf or nan; such a dot is put
    back on the mouse and counted on the HUD. max_frames > 0 stops the loop
    after that many frames.
    """
    params = equivalent_params(mode, param)
    log.debug("demo params: %s", ", ".join(f"{m}={params[m]:.4g}" for m in MODES))

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
    except pygame.error as e:
        pygame.quit()
        raise RuntimeError("Failed to open demo window (need a display)") from e
    pygame.display.set_caption(f"frim demo ({mode}={param:g})")

    pygame.font.init()
    font = pygame.font.SysFont("Menlo", 16)

    center = vec3(WINDOW_WIDTH * 0.5, WINDOW_HEIGHT * 0.5, 0.0)
    positions: Dict[str, np.ndarray] = {m: center.copy() for m in MODES}
    radii: Tuple[int, ...] = (14, 10, 6)
    resets: Dict[str, int] = {m: 0 for m in MODES}
    frames = 0

    clock = pygame.time.Clock()
    running = True
    last_t = time.perf_counter()
    last_log = last_t
    fps_est = 0.0

    try:
        while running:
            now = time.perf_counter()
            dt = min(now - last_t, MAX_DT)
            last_t = now

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.set_mode((max(64, event.w), max(64, event.h)), pygame.RESIZABLE)

            mx, my = pygame.mouse.get_pos()
            target = vec3(mx, my, 0.0)
            for m in MODES:
                positions[m] = VEC3_SMOOTHERS[m](positions[m], target, params[m], dt)
                if not drawable(positions[m]):
                    log.debug("%s dot left the screen (%s), reset to mouse", m, positions[m])
                    positions[m] = target.copy()
                    resets[m] += 1

            if dt > 0:
                inst_fps = 1.0 / dt
                fps_est = (0.9 * fps_est + 0.1 * inst_fps) if fps_est > 0 else inst_fps

            screen.fill((18, 20, 26))
            pygame.draw.circle(screen, (90, 90, 90), (mx, my), 3)
            for m, r in zip(MODES, radii):
                pos = positions[m]
                pygame.draw.circle(screen, COLORS[m], (int(pos[0]), int(pos[1])), r)
            _draw_hud(screen, font, [
                f"fps~{fps_est:.0f}  (hold SPACE for ~15 fps)",
                *(f"{m}: {params[m]:.4g}" + (f"  (reset x{resets[m]})" if resets[m] else "") for m in MODES),
            ])
            pygame.display.flip()

            if debug and now - last_log >= 1.0:
                last_log = now
                gap = float(np.linalg.norm(target - positions[MODE_LAMBDA]))
                log.debug("fps~%.0f gap=%.2f", fps_est, gap)

            frames += 1
            if max_frames and frames >= max_frames:
                running = False

            if pygame.key.get_pressed()[pygame.K_SPACE]:
                clock.tick(15)
            elif FPS_CAP and FPS_CAP > 0:
                clock.tick(FPS_CAP)
            else:
                clock.tick()
    finally:
        pygame.quit()
