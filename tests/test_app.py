import numpy as np
import pygame

from digitnet.app import handle_event
from digitnet.button_grid import BLACK, WHITE, ButtonGrid


def cell_color(grid, row, col):
    return tuple(int(v) for v in grid.colors[grid.vertex_index(row, col)])


def make_grid():
    return ButtonGrid(3, 3)


def test_left_click_draws():
    grid = make_grid()
    pos = grid.cell_center(1, 1)
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)
    assert handle_event(event, grid, False, False) is True
    assert cell_color(grid, 1, 1) == WHITE


def test_right_click_erases():
    grid = make_grid()
    pos = grid.cell_center(1, 1)
    grid.draw_at(pos)
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=pos)
    assert handle_event(event, grid, False, False) is True
    assert cell_color(grid, 1, 1) == BLACK


def test_motion_with_left_held_draws():
    grid = make_grid()
    pos = grid.cell_center(2, 0)
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(1, 0), buttons=(1, 0, 0))
    assert handle_event(event, grid, True, False) is True
    assert cell_color(grid, 2, 0) == WHITE


def test_motion_with_right_held_erases():
    grid = make_grid()
    pos = grid.cell_center(0, 2)
    grid.draw_at(pos)
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(1, 0), buttons=(0, 0, 1))
    assert handle_event(event, grid, False, True) is True
    assert cell_color(grid, 0, 2) == BLACK


def test_motion_without_buttons_does_nothing():
    grid = make_grid()
    event = pygame.event.Event(
        pygame.MOUSEMOTION, pos=grid.cell_center(1, 1), rel=(1, 0), buttons=(0, 0, 0)
    )
    assert handle_event(event, grid, False, False) is False
    assert np.all(grid.colors == np.array(BLACK, dtype=np.uint8))


def test_r_key_release_resets():
    grid = make_grid()
    grid.draw_at(grid.cell_center(1, 1))
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_r)
    assert handle_event(event, grid, False, False) is True
    assert np.all(grid.colors == np.array(BLACK, dtype=np.uint8))


def test_other_key_is_ignored():
    grid = make_grid()
    grid.draw_at(grid.cell_center(1, 1))
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_a)
    assert handle_event(event, grid, False, False) is False
    assert cell_color(grid, 1, 1) == WHITE


def test_middle_click_is_ignored():
    grid = make_grid()
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=2, pos=grid.cell_center(1, 1))
    assert handle_event(event, grid, False, False) is False
    assert cell_color(grid, 1, 1) == BLACK