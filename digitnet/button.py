"""A clickable rectangle that toggles between white and black."""

from __future__ import annotations

from collections.abc import Sequence

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
HOVER_COLOR = (100, 100, 100, 255)
OUTLINE_COLOR = BLACK
OUTLINE_THICKNESS = 2.0


class Button:
    """Rectangle that shows a hover shade and toggles its colour when clicked."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0),
        size: Sequence[float] = (0.0, 0.0),
    ) -> None:
        self.position = (float(position[0]), float(position[1]))
        self.size = (float(size[0]), float(size[1]))
        self.color = WHITE
        self.fill_color = self.color
        self.outline_color = OUTLINE_COLOR
        self.outline_thickness = OUTLINE_THICKNESS
        self.hovered = False
        self.activated = False

    def contains(self, point: Sequence[float]) -> bool:
        """Whether ``point`` lies on the button, outline included."""
        x, y = float(point[0]), float(point[1])
        t = self.outline_thickness
        left = self.position[0] - t
        top = self.position[1] - t
        right = self.position[0] + self.size[0] + t
        bottom = self.position[1] + self.size[1] + t
        return left <= x < right and top <= y < bottom

    def update_status(self, mouse_pos: Sequence[float], left_pressed: bool) -> None:
        """Update hover state and toggle the colour on a left click over the button."""
        if not self.contains(mouse_pos):
            self.fill_color = self.color
            self.hovered = False
            return
        self.fill_color = HOVER_COLOR
        self.hovered = True
        if left_pressed:
            self.activated = not self.activated
            self.color = BLACK if self.activated else WHITE
            self.fill_color = self.color