"""Screen viewports laid out in a four-way split, and the client that draws them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional


class ViewScreenLocation(Enum):
    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3


@dataclass(frozen=True)
class Rect:
    """A screen rectangle given by its top-left corner and size."""

    left_top_x: float = 0.0
    left_top_y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class ViewportRect:
    """Placement and depth range of a rendering viewport."""

    top_left_x: float = 0.0
    top_left_y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    min_depth: float = 0.0
    max_depth: float = 0.0


class Viewport:
    """One pane of the screen, positioned by its place in the split."""

    def __init__(self, location: Optional[ViewScreenLocation] = None) -> None:
        self.location = location
        self.viewport = ViewportRect()

    def resize_to_swap_chain(self, width: float, height: float) -> None:
        """Take this pane's quarter of a back buffer of the given size."""
        half_width = float(width) * 0.5
        half_height = float(height) * 0.5
        origins = {
            ViewScreenLocation.TOP_LEFT: (0.0, 0.0),
            ViewScreenLocation.TOP_RIGHT: (half_width, 0.0),
            ViewScreenLocation.BOTTOM_LEFT: (0.0, half_height),
            ViewScreenLocation.BOTTOM_RIGHT: (half_width, half_height),
        }
        origin = origins.get(self.location)
        if origin is not None:
            self.viewport = replace(
                self.viewport,
                top_left_x=origin[0],
                top_left_y=origin[1],
                width=half_width,
                height=half_height,
            )
        self.viewport = replace(self.viewport, min_depth=0.0, max_depth=1.0)

    def resize_to_splits(self, top: Rect, bottom: Rect, left: Rect, right: Rect) -> None:
        """Take the column from ``left``/``right`` and the row from ``top``/``bottom``."""
        layout = {
            ViewScreenLocation.TOP_LEFT: (left, top),
            ViewScreenLocation.TOP_RIGHT: (right, top),
            ViewScreenLocation.BOTTOM_LEFT: (left, bottom),
            ViewScreenLocation.BOTTOM_RIGHT: (right, bottom),
        }
        chosen = layout.get(self.location)
        if chosen is None:
            return
        column, row = chosen
        self.viewport = replace(
            self.viewport,
            top_left_x=column.left_top_x,
            top_left_y=row.left_top_y,
            width=column.width,
            height=row.height,
        )

    def resize_to_rect(self, rect: Rect) -> None:
        """Fill exactly the given rectangle."""
        self.viewport = replace(
            self.viewport,
            top_left_x=rect.left_top_x,
            top_left_y=rect.left_top_y,
            width=rect.width,
            height=rect.height,
        )


class ViewportClient(ABC):
    """Handles drawing for a viewport."""

    def __init__(self, world: Any = None) -> None:
        self._world = world

    @abstractmethod
    def draw(self, viewport: Viewport) -> None:
        """Render into the viewport."""

    @property
    def world(self) -> Any:
        """The world this client shows, if it was given one."""
        return self._world