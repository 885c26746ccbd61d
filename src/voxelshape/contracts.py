"""Value types shared by the loader, geometry core, pipeline and emitter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from voxelshape.errors import InvalidAxisError, MalformedVectorError

BoxTuple = Tuple[float, float, float, float, float, float]


def to_f32(value: float) -> float:
    """Round a number to the nearest float32 value."""
    return float(np.float32(value))


@dataclass(frozen=True)
class Vector3:
    """Immutable float32 triple in block-local units."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", to_f32(self.x))
        object.__setattr__(self, "y", to_f32(self.y))
        object.__setattr__(self, "z", to_f32(self.z))

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float32)

    @classmethod
    def from_sequence(cls, values: Sequence[float], field_name: str = "vector") -> "Vector3":
        """Build from a JSON-style list; anything but 3 components is fatal."""
        if len(values) != 3:
            raise MalformedVectorError(field_name, len(values))
        return cls(float(values[0]), float(values[1]), float(values[2]))


class Axis(Enum):
    """Rotation axis; selects the plane the rotation happens in."""
    X = "x"
    Y = "y"
    Z = "z"

    @classmethod
    def parse(cls, value: object) -> "Axis":
        if isinstance(value, Axis):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidAxisError(value)


@dataclass(frozen=True)
class ElementRotation:
    """Element-local rotation about an arbitrary origin."""

    origin: Vector3
    axis: Axis
    angle: float  # degrees


@dataclass(frozen=True)
class CuboidElement:
    """One cuboid of a block model, corners in 0-16 block-local units."""

    from_corner: Vector3
    to_corner: Vector3
    rotation: Optional[ElementRotation] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class ModelRotation:
    """Whole-model rotation in degrees, applied about the cell centre."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def is_identity(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0


def _intervals_touch(a0: float, a1: float, b0: float, b1: float) -> bool:
    return (
        a0 <= b0 <= a1
        or a0 <= b1 <= a1
        or b0 <= a0 <= b1
        or b0 <= a1 <= b1
    )


@dataclass(frozen=True)
class AABox:
    """Axis-aligned box: minimum corner then maximum corner."""

    min_x: float
    min_y: float
    min_z: float
    max_x: float
    max_y: float
    max_z: float

    @classmethod
    def from_corners(cls, from_corner: Vector3, to_corner: Vector3) -> "AABox":
        """Box spanned by two corners exactly as given (not normalised)."""
        return cls(
            from_corner.x, from_corner.y, from_corner.z,
            to_corner.x, to_corner.y, to_corner.z,
        )

    @property
    def volume(self) -> float:
        return (
            max(0.0, self.max_x - self.min_x)
            * max(0.0, self.max_y - self.min_y)
            * max(0.0, self.max_z - self.min_z)
        )

    def as_tuple(self) -> BoxTuple:
        return (self.min_x, self.min_y, self.min_z, self.max_x, self.max_y, self.max_z)

    def touches(self, other: "AABox") -> bool:
        """Closed-interval overlap on all three axes; a shared face counts."""
        return (
            _intervals_touch(self.min_x, self.max_x, other.min_x, other.max_x)
            and _intervals_touch(self.min_y, self.max_y, other.min_y, other.max_y)
            and _intervals_touch(self.min_z, self.max_z, other.min_z, other.max_z)
        )

    def union(self, other: "AABox") -> "AABox":
        """Bounding box of both boxes."""
        return AABox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            min(self.min_z, other.min_z),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
            max(self.max_z, other.max_z),
        )


# ---------------------------------------------------------------------------
# Loader records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BlockVariant:
    """A blockstate variant: model reference plus optional rotation."""

    key: str
    model: str
    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None
    uvlock: bool = False

    @property
    def model_rotation(self) -> ModelRotation:
        return ModelRotation(
            x=self.x if self.x is not None else 0.0,
            y=self.y if self.y is not None else 0.0,
            z=self.z if self.z is not None else 0.0,
        )


@dataclass
class Blockstate:
    name: str
    variants: List[BlockVariant] = field(default_factory=list)


@dataclass
class BlockModel:
    model_id: str
    elements: List[CuboidElement] = field(default_factory=list)
    textures: Dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Pipeline results
# ---------------------------------------------------------------------------

@dataclass
class VariantShape:
    """Final boxes for one blockstate variant."""

    variant: BlockVariant
    model_id: str
    boxes: List[AABox]
    element_count: int
    volume_before_merge: float = 0.0
    volume_after_merge: float = 0.0


@dataclass
class ConversionResult:
    blockstate_name: str
    shapes: List[VariantShape] = field(default_factory=list)

    @property
    def box_count(self) -> int:
        return sum(len(shape.boxes) for shape in self.shapes)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConversionConfig:
    """Knobs for the per-variant conversion pass."""

    pivot: Tuple[float, float, float] = (8.0, 8.0, 8.0)  # centre of the 16-unit cell
    merge: bool = True

    @property
    def pivot_vector(self) -> Vector3:
        return Vector3(*self.pivot)


@dataclass(frozen=True)
class JavaStyle:
    """Layout of the generated Java class."""

    package: str = "com.example.examplemod.block"
    class_name: str = "GeneratedBlockBB"
    indent_width: int = 4
    expand_tab: bool = True

    def indent(self, level: int) -> str:
        if self.expand_tab:
            return " " * (level * self.indent_width)
        return "\t" * level
