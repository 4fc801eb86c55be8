"""A grid of square cells made of coloured triangles, used as a drawing pad."""

from __future__ import annotations

import itertools
import math
from collections.abc import Sequence

import numpy as np

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
DEFAULT_CELL_SIZE = 50.0
VERTICES_PER_CELL = 6

# Two triangles per cell, as unit offsets from the cell's top-left corner.
_CORNERS = np.array(
    [[0, 0], [1, 0], [1, 1], [0, 0], [1, 1], [0, 1]], dtype=np.float32
)


class ButtonGrid:
    """Rows by columns of cells; each cell is two triangles with one colour."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("rows and columns cannot be negative")
        self.rows = rows
        self.columns = columns
        self.cell_size = DEFAULT_CELL_SIZE
        self.position = (0.0, 0.0)
        count = rows * columns * VERTICES_PER_CELL
        self.positions = np.zeros((count, 2), dtype=np.float32)
        self.colors = np.zeros((count, 4), dtype=np.uint8)
        self.quad_colored = np.zeros((rows, columns), dtype=np.float32)
        self.init_vertices()

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    def _check_cell(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.columns} grid")

    def init_vertices(self) -> None:
        """Lay the cells out from ``position`` and colour them all black."""
        rr, cc = np.meshgrid(np.arange(self.rows), np.arange(self.columns), indexing="ij")
        origins = np.stack([cc.ravel(), rr.ravel()], axis=1).astype(np.float32)
        origins = origins * self.cell_size + np.asarray(self.position, dtype=np.float32)
        corners = _CORNERS * np.float32(self.cell_size)
        self.positions[:] = (origins[:, None, :] + corners[None, :, :]).reshape(-1, 2)
        self.colors[:] = BLACK

    def reset(self) -> None:
        """Clear the grid back to black."""
        self.init_vertices()

    def set_cell_size(self, size: float) -> None:
        """Change the cell size and rebuild the grid."""
        self.cell_size = float(size)
        self.init_vertices()

    def set_position(self, target: Sequence[float]) -> None:
        """Record ``target`` as the position and move every vertex by it."""
        self.position = (float(target[0]), float(target[1]))
        self.positions += np.asarray(self.position, dtype=np.float32)

    def vertex_index(self, row: int, col: int) -> int:
        """Index of the first vertex of cell (row, col)."""
        return (row * self.columns + col) * VERTICES_PER_CELL

    def _color_flat(self, cell: int, color: Sequence[int]) -> None:
        start = cell * VERTICES_PER_CELL
        self.colors[start:start + VERTICES_PER_CELL] = tuple(color)

    def _flat_center(self, cell: int) -> tuple[float, float]:
        x, y = self.positions[cell * VERTICES_PER_CELL]
        half = self.cell_size / 2.0
        return float(x) + half, float(y) + half

    def color_cell(self, row: int, col: int, color: Sequence[int]) -> None:
        """Give every vertex of cell (row, col) the RGBA ``color``."""
        self._check_cell(row, col)
        self._color_flat(row * self.columns + col, color)

    def cell_center(self, row: int, col: int) -> tuple[float, float]:
        """Centre point of cell (row, col)."""
        self._check_cell(row, col)
        return self._flat_center(row * self.columns + col)

    def interpolate_surrounding_cells(
        self, row: int, col: int, mouse_pos: Sequence[float]
    ) -> None:
        """Shade the eight neighbours of a cell by their distance to it."""
        origin = self.cell_center(row, col)
        cell_count = self.rows * self.columns
        for dr, dc in itertools.product((-1, 0, 1), repeat=2):
            if dr == 0 and dc == 0:
                continue
            cell = (row + dr) * self.columns + (col + dc)
            if not 0 <= cell < cell_count:
                continue
            distance = math.dist(origin, self._flat_center(cell))
            blue = min(int(distance * 2.0), 255)
            self._color_flat(cell, (100, 100, blue, 255))

    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box of all vertices as (left, top, width, height)."""
        if self.vertex_count == 0:
            return (0.0, 0.0, 0.0, 0.0)
        left, top = self.positions.min(axis=0)
        right, bottom = self.positions.max(axis=0)
        return (float(left), float(top), float(right - left), float(bottom - top))

    def cell_at(self, point: Sequence[float]) -> tuple[int, int] | None:
        """The (row, col) of the cell under ``point``, or None outside the grid."""
        left, top, width, height = self.bounds()
        x, y = float(point[0]), float(point[1])
        if not (left <= x < left + width and top <= y < top + height):
            return None
        row = min(int((y - top) / self.cell_size), self.rows - 1)
        col = min(int((x - left) / self.cell_size), self.columns - 1)
        return row, col

    def draw_at(self, point: Sequence[float]) -> bool:
        """Paint the cell under ``point`` white and shade its neighbours."""
        cell = self.cell_at(point)
        if cell is None:
            return False
        row, col = cell
        self.color_cell(row, col, WHITE)
        self.interpolate_surrounding_cells(row, col, point)
        return True

    def erase_at(self, point: Sequence[float]) -> bool:
        """Paint the cell under ``point`` black."""
        cell = self.cell_at(point)
        if cell is None:
            return False
        self.color_cell(*cell, BLACK)
        return True