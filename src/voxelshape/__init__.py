"""Public API: block model elements -> merged axis-aligned collision boxes."""

from voxelshape.contracts import (
    AABox,
    Axis,
    BlockModel,
    BlockVariant,
    Blockstate,
    ConversionConfig,
    ConversionResult,
    CuboidElement,
    ElementRotation,
    JavaStyle,
    ModelRotation,
    VariantShape,
    Vector3,
)
from voxelshape.emitter import FieldNameRegistry, render_java_class
from voxelshape.geometry import approximate, into_verts, rotate
from voxelshape.merging import merge_touching, union_volume
from voxelshape.pipeline import convert_blockstate, convert_variant

__all__ = [
    "AABox",
    "Axis",
    "BlockModel",
    "BlockVariant",
    "Blockstate",
    "ConversionConfig",
    "ConversionResult",
    "CuboidElement",
    "ElementRotation",
    "FieldNameRegistry",
    "JavaStyle",
    "ModelRotation",
    "VariantShape",
    "Vector3",
    "approximate",
    "convert_blockstate",
    "convert_variant",
    "into_verts",
    "merge_touching",
    "rotate",
    "render_java_class",
    "union_volume",
]
