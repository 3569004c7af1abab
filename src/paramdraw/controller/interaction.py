"""
Pointer Interaction Controller
==============================
State machine that places, selects and drags shapes in response to pointer
events.

States:
    IDLE          nothing pending; a shape may be selected but is not moving
    TYPE_PENDING  a shape type was chosen and waits for a click on the canvas
    DRAGGING      the selected shape follows the pointer until release

Events arrive in host pixel coordinates and are converted to drawing units
here. Any event that has no transition from the current state is ignored.

Note: This module should be pure Python and should NOT import PySide6.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Callable, Optional, Protocol

from paramdraw.config import DPI
from paramdraw.model.shape_types import ShapeTypeDefinition, shape_type_at
from paramdraw.model.state import CanvasState
from paramdraw.utils import pixels_to_units, round2, clamp

logger = logging.getLogger(__name__)


class InteractionMode(StrEnum):
    IDLE = "idle"
    TYPE_PENDING = "type pending"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class PointerEvent:
    """A pointer press or move in canvas pixels, with what it landed on."""
    x: float
    y: float
    target: Optional[int] = None  # shape index, or None for the canvas background
    primary: bool = True


@dataclass(frozen=True)
class DragOffset:
    """Pointer position relative to the grabbed shape's anchor."""
    dx: float
    dy: float


ReleaseCallback = Callable[[], None]


class ReleaseSource(Protocol):
    """An input scope wider than the canvas that reports pointer releases."""
    def add_release_listener(self, callback: ReleaseCallback) -> None: ...
    def remove_release_listener(self, callback: ReleaseCallback) -> None: ...


class InteractionController:
    def __init__(self, canvas: CanvasState, dpi: float = DPI) -> None:
        self.canvas = canvas
        self.dpi = dpi
        self.pending_shape_type: Optional[ShapeTypeDefinition] = None
        self.drag_offset: Optional[DragOffset] = None
        self._release_source: Optional[ReleaseSource] = None

    @property
    def mode(self) -> InteractionMode:
        if self.drag_offset is not None:
            return InteractionMode.DRAGGING
        if self.pending_shape_type is not None:
            return InteractionMode.TYPE_PENDING
        return InteractionMode.IDLE

    # ------------------------------------------------------------------------------
    # Release listener lifecycle
    # ------------------------------------------------------------------------------

    def mount(self, source: ReleaseSource) -> None:
        """Start listening for releases anywhere in `source`. Call once."""
        if self._release_source is not None:
            raise RuntimeError("InteractionController is already mounted")
        source.add_release_listener(self.on_pointer_release)
        self._release_source = source
        logger.debug("Release listener registered.")

    def unmount(self) -> None:
        """Stop listening for releases. Safe to call more than once."""
        if self._release_source is None:
            return
        self._release_source.remove_release_listener(self.on_pointer_release)
        self._release_source = None
        self.drag_offset = None
        logger.debug("Release listener removed.")

    @property
    def is_mounted(self) -> bool:
        return self._release_source is not None

    def __enter__(self) -> InteractionController:
        return self

    def __exit__(self, *exc_info) -> None:
        self.unmount()

    # ------------------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------------------

    def choose_shape_type(self, index: int) -> None:
        """The selector picked a shape type; the next background click places it."""
        shape_type = shape_type_at(index)
        if self.mode == InteractionMode.DRAGGING:
            logger.debug(f"Ignoring shape type choice '{shape_type.name}' while dragging.")
            return
        self.pending_shape_type = shape_type
        logger.debug(f"Pending shape type: {shape_type.name}")

    def on_pointer_press(self, event: PointerEvent) -> None:
        if not event.primary:
            return

        match self.mode:
            case InteractionMode.TYPE_PENDING if event.target is None:
                x, y = self._to_units(event)
                self.canvas.add_shape(self.pending_shape_type, round2(x), round2(y))
                self.pending_shape_type = None
            case InteractionMode.IDLE if event.target is None:
                self.canvas.select_shape(None)
            case InteractionMode.IDLE:
                # The press belongs to the shape, not to the background under it
                self.canvas.select_shape(event.target)
                shape = self.canvas.shapes[event.target]
                x, y = self._to_units(event)
                self.drag_offset = DragOffset(x - shape.x, y - shape.y)
                logger.debug(f"Drag started on shape #{event.target}, offset {self.drag_offset}")
            case _:
                logger.debug(f"Ignoring press on {event.target} in mode '{self.mode}'.")

    def on_pointer_move(self, event: PointerEvent) -> None:
        if self.mode != InteractionMode.DRAGGING or self.canvas.selected_index is None:
            return
        w, h = self.canvas.width, self.canvas.height
        x, y = self._to_units(event)
        x = round2(clamp(x - self.drag_offset.dx, 0.0, w))
        y = round2(clamp(y - self.drag_offset.dy, 0.0, h))
        # Rounding can step past an edge typed with more than 2 decimals
        x, y = clamp(x, 0.0, w), clamp(y, 0.0, h)
        index = self.canvas.selected_index
        self.canvas.set_param(index, 0, x)
        self.canvas.set_param(index, 1, y)

    def on_pointer_release(self) -> None:
        if self.mode != InteractionMode.DRAGGING:
            return
        self.drag_offset = None
        logger.debug("Drag finished.")

    def _to_units(self, event: PointerEvent) -> tuple[float, float]:
        return pixels_to_units(event.x, self.dpi), pixels_to_units(event.y, self.dpi)
