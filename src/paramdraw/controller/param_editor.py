"""
Parameter Editor
================
Two-way binding between numeric text inputs and the canvas model.

With a shape selected, the editor exposes X and Y followed by the shape
type's own schema, one field per entry of `param_values`. With nothing
selected it exposes the canvas width and height instead.

Each field keeps the raw text being typed apart from the committed value, so
half-typed input such as "1." never fights the model while the input has
focus. Every keystroke that parses to a finite number is clamped into the
field's bounds and written to the model straight away.

Note: This module should be pure Python and should NOT import PySide6.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Hashable, Optional

from paramdraw.config import MIN_CANVAS_SIZE, PARAM_STEP
from paramdraw.model.shape_types import POSITION_PARAMS, ParamSpec, resolve_bound
from paramdraw.model.state import CanvasState
from paramdraw.utils import clamp, format_number, round2

logger = logging.getLogger(__name__)

BoundFn = Callable[[], Optional[float]]


def parse_number(text: str) -> Optional[float]:
    """Parse user text into a finite float, or None if it is not one."""
    # float() also takes digit separators like "1_0"
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class NumericField:
    """
    One validated numeric input bound to a getter/setter pair.

    Bounds are callables so that limits tied to the canvas size are read at
    edit time rather than when the field was built.
    """

    def __init__(
        self,
        label: str,
        getter: Callable[[], float],
        setter: Callable[[float], None],
        *,
        min_fn: BoundFn = lambda: None,
        max_fn: BoundFn = lambda: None,
        step: float = PARAM_STEP,
    ) -> None:
        self.label = label
        self._getter = getter
        self._setter = setter
        self._min_fn = min_fn
        self._max_fn = max_fn
        self.step_size = step
        self._echo: Optional[str] = None

    @property
    def minimum(self) -> Optional[float]:
        return self._min_fn()

    @property
    def maximum(self) -> Optional[float]:
        return self._max_fn()

    @property
    def value(self) -> float:
        return self._getter()

    @property
    def has_focus(self) -> bool:
        return self._echo is not None

    @property
    def display_text(self) -> str:
        if self._echo is not None:
            return self._echo
        return format_number(self.value)

    def focus(self) -> None:
        self._echo = format_number(self.value)

    def blur(self) -> None:
        self._echo = None

    def edit(self, text: str) -> bool:
        """Record typed text; commit it if it is a number. Returns True on commit."""
        self._echo = text
        parsed = parse_number(text)
        if parsed is None:
            return False
        self._commit(parsed)
        return True

    def step(self, direction: int) -> None:
        """Nudge the committed value by whole steps (arrow keys)."""
        self._commit(round2(self.value + direction * self.step_size))
        if self._echo is not None:
            self._echo = format_number(self.value)

    def _commit(self, value: float) -> None:
        clamped = clamp(value, self.minimum, self.maximum)
        if clamped != value:
            logger.debug(f"{self.label}: {value} clamped to {clamped}")
        self._setter(clamped)


class ParameterEditor:
    def __init__(self, canvas: CanvasState) -> None:
        self.canvas = canvas

    def binding_key(self) -> Hashable:
        """What the current fields are bound to; changes when they must be rebuilt."""
        shape = self.canvas.selected_shape
        if shape is None:
            return ("canvas",)
        return ("shape", self.canvas.selected_index, shape.shape_type.key)

    def fields(self) -> list[NumericField]:
        shape = self.canvas.selected_shape
        if shape is None:
            return self._canvas_fields()

        index = self.canvas.selected_index
        schema = POSITION_PARAMS + shape.shape_type.param_schema
        return [self._shape_field(index, i, spec) for i, spec in enumerate(schema)]

    def _shape_field(self, shape_index: int, param_index: int, spec: ParamSpec) -> NumericField:
        canvas = self.canvas
        return NumericField(
            spec.name,
            getter=lambda: canvas.shapes[shape_index].param_values[param_index],
            setter=lambda v: canvas.set_param(shape_index, param_index, v),
            min_fn=lambda: resolve_bound(spec.min, canvas),
            max_fn=lambda: resolve_bound(spec.max, canvas),
        )

    def _canvas_fields(self) -> list[NumericField]:
        canvas = self.canvas
        return [
            NumericField(
                "Canvas Width",
                getter=lambda: canvas.width,
                setter=lambda v: canvas.resize_canvas(v, canvas.height),
                min_fn=lambda: MIN_CANVAS_SIZE,
            ),
            NumericField(
                "Canvas Height",
                getter=lambda: canvas.height,
                setter=lambda v: canvas.resize_canvas(canvas.width, v),
                min_fn=lambda: MIN_CANVAS_SIZE,
            ),
        ]
