"""
Canvas State (Data Model)
=========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the canvas size, the placed shapes and the
   current selection in one place.
2. Decoupling: Views read from this object; Controllers write to this object.
3. Change detection: Every operation replaces only the shape it touches, so an
   untouched shape stays the very same object and `is`/`==` comparisons stay
   meaningful across edits.

Classes:
    ShapeInstance: One placed shape and its parameter values.
    CanvasState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from typing import Optional, Tuple

from paramdraw.config import DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT
from paramdraw.model.shape_types import ShapeTypeDefinition, POSITION_PARAMS
from paramdraw.utils import round2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeInstance:
    """
    A placed shape.

    `param_values` is laid out as [x, y, *schema values] in schema order, so
    its length is always 2 + len(shape_type.param_schema).
    """
    shape_type: ShapeTypeDefinition
    param_values: Tuple[float, ...]

    def __post_init__(self) -> None:
        expected = len(POSITION_PARAMS) + len(self.shape_type.param_schema)
        if len(self.param_values) != expected:
            raise ValueError(
                f"{self.shape_type.name} expects {expected} parameter values, got {len(self.param_values)}"
            )

    @property
    def x(self) -> float:
        return self.param_values[0]

    @property
    def y(self) -> float:
        return self.param_values[1]

    @property
    def shape_params(self) -> Tuple[float, ...]:
        return self.param_values[len(POSITION_PARAMS):]

    def with_param(self, param_index: int, value: float) -> ShapeInstance:
        if not 0 <= param_index < len(self.param_values):
            raise IndexError(f"Parameter index {param_index} out of range for {self.shape_type.name}")
        values = list(self.param_values)
        values[param_index] = value
        return replace(self, param_values=tuple(values))


@dataclass
class CanvasState:
    """
    Holds the entire drawing: physical size, shapes in z-order (later ones are
    drawn on top) and at most one selected shape.
    """
    width: float = DEFAULT_CANVAS_WIDTH
    height: float = DEFAULT_CANVAS_HEIGHT
    shapes: Tuple[ShapeInstance, ...] = field(default_factory=tuple)
    selected_index: Optional[int] = None

    @property
    def shape_count(self) -> int:
        return len(self.shapes)

    @property
    def selected_shape(self) -> Optional[ShapeInstance]:
        if self.selected_index is None:
            return None
        return self.shapes[self.selected_index]

    def add_shape(self, shape_type: ShapeTypeDefinition, x: float, y: float) -> int:
        """
        Append a shape with default parameters at (x, y) and select it.

        The anchor is rounded to 2 decimals like every pointer-driven position.
        """
        x, y = round2(x), round2(y)
        shape = ShapeInstance(shape_type, (x, y, *shape_type.default_params()))
        self.shapes = self.shapes + (shape,)
        self.selected_index = len(self.shapes) - 1
        logger.info(f"Placed {shape_type.name} #{self.selected_index} at ({x}, {y})")
        return self.selected_index

    def set_param(self, shape_index: int, param_index: int, value: float) -> None:
        """Replace one parameter value. Bounds are the caller's responsibility."""
        self._check_shape_index(shape_index)
        updated = self.shapes[shape_index].with_param(param_index, value)
        self.shapes = self.shapes[:shape_index] + (updated,) + self.shapes[shape_index + 1:]

    def select_shape(self, index: Optional[int]) -> None:
        if index is not None:
            self._check_shape_index(index)
        self.selected_index = index

    def resize_canvas(self, width: float, height: float) -> None:
        """Change the canvas size. Existing shapes are left where they are."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width} x {height}")
        self.width = width
        self.height = height
        logger.info(f"Canvas resized to {width} x {height} in")

    def remove_shape(self, index: int) -> ShapeInstance:
        """Remove a shape and keep the selection pointing at the same shape (if any)."""
        self._check_shape_index(index)
        removed = self.shapes[index]
        self.shapes = self.shapes[:index] + self.shapes[index + 1:]
        if self.selected_index == index:
            self.selected_index = None
        elif self.selected_index is not None and self.selected_index > index:
            self.selected_index -= 1
        logger.info(f"Removed {removed.shape_type.name} #{index}")
        return removed

    def reset(self) -> None:
        """Clear all data for a new drawing"""
        self.width = DEFAULT_CANVAS_WIDTH
        self.height = DEFAULT_CANVAS_HEIGHT
        self.shapes = ()
        self.selected_index = None
        logger.info("Canvas state has been reset.")

    def _check_shape_index(self, index: int) -> None:
        if not 0 <= index < len(self.shapes):
            raise IndexError(f"Shape index {index} out of range (0..{len(self.shapes) - 1})")
