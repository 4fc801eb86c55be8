"""Window with a drawing grid for hand-written digits."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from digitnet.button_grid import ButtonGrid

WINDOW_SIZE = (1920, 1080)
FRAME_RATE = 144
GRID_ROWS = 28
GRID_COLUMNS = 28
CELL_SIZE = 25.0
GRID_POSITION = (25.0, 25.0)
BACKGROUND = (100, 100, 100)

_LEFT = 1
_RIGHT = 3


def handle_event(event, grid: ButtonGrid, left_down: bool, right_down: bool) -> bool:
    """Let ``grid`` react to one pygame event; returns whether it acted on it."""
    if event.type == pygame.MOUSEBUTTONDOWN:
        if event.button == _LEFT:
            grid.draw_at(event.pos)
            return True
        if event.button == _RIGHT:
            grid.erase_at(event.pos)
            return True
    elif event.type == pygame.MOUSEMOTION:
        if left_down:
            grid.draw_at(event.pos)
            return True
        if right_down:
            grid.erase_at(event.pos)
            return True
    elif event.type == pygame.KEYUP and event.key == pygame.K_r:
        grid.reset()
        return True
    return False


def _draw_grid(surface, grid: ButtonGrid) -> None:
    triangles = grid.positions.reshape(-1, 3, 2)
    colors = grid.colors[::3]
    for triangle, color in zip(triangles, colors):
        pygame.draw.polygon(surface, tuple(int(c) for c in color[:3]), triangle.tolist())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Draw digits with the left mouse button, erase with the right, R to clear."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption("digitnet")
        clock = pygame.time.Clock()

        grid = ButtonGrid(GRID_ROWS, GRID_COLUMNS)
        grid.set_cell_size(CELL_SIZE)
        grid.set_position(GRID_POSITION)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    continue
                left, _middle, right = pygame.mouse.get_pressed()
                handle_event(event, grid, left, right)
            screen.fill(BACKGROUND)
            _draw_grid(screen, grid)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())