"""
Shape Type Registry (Catalog)
=============================
Static catalog of the shape types a user can place on the canvas.

Each entry pairs a parameter schema (data) with a pure geometry function, so
the interaction and editing code never branch on the shape name. Adding a new
shape type means registering one more `ShapeTypeDefinition` here.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Optional, Tuple, Union, TYPE_CHECKING

from paramdraw.model.geometry import render_circle, render_rounded_rect
from paramdraw.model.geometry_primitives import Geometry

if TYPE_CHECKING:
    from paramdraw.model.state import CanvasState


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class ParamKind(StrEnum):
    DIMENSION = "dimension"

class CanvasBound(StrEnum):
    """Bounds that follow the live canvas size instead of a fixed number."""
    CANVAS_WIDTH = "canvas width"
    CANVAS_HEIGHT = "canvas height"

# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
ParamBound = Union[float, CanvasBound, None]
GeometryFn = Callable[..., Geometry]


@dataclass(frozen=True)
class ParamSpec:
    """One editable numeric field of a shape."""
    name: str
    default: float
    min: ParamBound = 0.0
    max: ParamBound = None
    kind: ParamKind = ParamKind.DIMENSION


@dataclass(frozen=True)
class ShapeTypeDefinition:
    key: str  # stable identifier, also names the icon file
    name: str  # user-displayed label
    param_schema: Tuple[ParamSpec, ...]
    geometry_fn: GeometryFn

    @property
    def icon_ref(self) -> str:
        return f"{self.key}.svg"

    def default_params(self) -> list[float]:
        return [p.default for p in self.param_schema]


def resolve_bound(bound: ParamBound, canvas: CanvasState) -> Optional[float]:
    """Turn a schema bound into a number (or None) against the current canvas."""
    if bound == CanvasBound.CANVAS_WIDTH:
        return canvas.width
    if bound == CanvasBound.CANVAS_HEIGHT:
        return canvas.height
    return bound


# Positional parameters every shape carries ahead of its own schema
POSITION_PARAMS: Tuple[ParamSpec, ...] = (
    ParamSpec("X", default=1.0, min=0.0, max=CanvasBound.CANVAS_WIDTH),
    ParamSpec("Y", default=1.0, min=0.0, max=CanvasBound.CANVAS_HEIGHT),
)

# ------------------------------------------------------------------------------
# Registry
# ------------------------------------------------------------------------------
_REGISTRY: dict[str, ShapeTypeDefinition] = {}


def register_shape_type(definition: ShapeTypeDefinition) -> ShapeTypeDefinition:
    """Add a definition to the catalog. Keys and names must be unique."""
    if not definition.key or not definition.name:
        raise ValueError("Shape type must define both a key and a name")
    if definition.key in _REGISTRY:
        raise ValueError(f"Shape type '{definition.key}' is already registered")
    if any(d.name == definition.name for d in _REGISTRY.values()):
        raise ValueError(f"Shape type name '{definition.name}' is already used")
    _REGISTRY[definition.key] = definition
    return definition


def get_shape_type(key: str) -> ShapeTypeDefinition:
    definition = _REGISTRY.get(key)
    if not definition:
        raise KeyError(f"No shape type registered for key '{key}'")
    return definition


def list_keys() -> list[str]:
    return list(_REGISTRY.keys())


def list_shape_types() -> list[ShapeTypeDefinition]:
    """All registered shape types in selector order."""
    return list(_REGISTRY.values())


def shape_type_at(index: int) -> ShapeTypeDefinition:
    """Look up a shape type by its position in the selector."""
    types = list_shape_types()
    if not 0 <= index < len(types):
        raise IndexError(f"Shape type index {index} out of range (0..{len(types) - 1})")
    return types[index]


# ------------------------------------------------------------------------------
# Built-in catalog
# ------------------------------------------------------------------------------
SQUARE = register_shape_type(ShapeTypeDefinition(
    key="square",
    name="Square",
    param_schema=(
        ParamSpec("Width", default=1.0),
        ParamSpec("Height", default=1.0),
        ParamSpec("Fillet Radius", default=0.1),
    ),
    geometry_fn=render_rounded_rect,
))

CIRCLE = register_shape_type(ShapeTypeDefinition(
    key="circle",
    name="Circle",
    param_schema=(
        ParamSpec("Radius", default=0.5),
    ),
    geometry_fn=render_circle,
))
