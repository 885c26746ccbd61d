"""Render converted shapes as a Java class of ``VoxelShape`` constants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from voxelshape.contracts import AABox, BlockVariant, BoxTuple, ConversionResult, JavaStyle

IMPORTS = (
    "net.minecraft.block.Block",
    "net.minecraft.util.math.shapes.VoxelShape",
    "net.minecraft.util.math.shapes.VoxelShapes",
)


class FieldNameRegistry:
    """Field names handed out during one rendering pass.

    Claiming a name again with the same boxes returns the existing field;
    with different boxes the name gets a numeric suffix.
    """

    def __init__(self) -> None:
        self._claimed: Dict[str, Tuple[BoxTuple, ...]] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._claimed

    def claim(self, base: str, boxes: Sequence[AABox]) -> Tuple[str, bool]:
        """Return ``(name, is_new)`` for a field holding *boxes*."""
        signature = tuple(box.as_tuple() for box in boxes)
        candidate = base
        suffix = 1
        while candidate in self._claimed:
            if self._claimed[candidate] == signature:
                return candidate, False
            suffix += 1
            candidate = f"{base}_{suffix}"
        self._claimed[candidate] = signature
        return candidate, True


@dataclass
class _Field:
    name: str
    boxes: List[AABox]
    variant_keys: List[str] = field(default_factory=list)


def _angle_token(angle: float) -> str:
    # Java identifiers cannot hold '-'; negative angles read as N<deg>.
    degrees = int(angle)
    return f"N{-degrees}" if degrees < 0 else str(degrees)


def field_base_name(variant: BlockVariant) -> str:
    """``BB`` plus ``_X<deg>``/``_Y<deg>``/``_Z<deg>`` for declared rotations."""
    name = "BB"
    if variant.x is not None:
        name += f"_X{_angle_token(variant.x)}"
    if variant.y is not None:
        name += f"_Y{_angle_token(variant.y)}"
    if variant.z is not None:
        name += f"_Z{_angle_token(variant.z)}"
    return name


def format_number(value: float) -> str:
    """Shortest float32 text for *value*; ``-0`` prints as ``0``."""
    if value == 0.0:
        value = 0.0
    return np.format_float_positional(np.float32(value), trim="-")


def format_cuboid_expr(box: AABox) -> str:
    args = ", ".join(format_number(v) for v in box.as_tuple())
    return f"Block.makeCuboidShape({args})"


def _shape_expr(boxes: Sequence[AABox], style: JavaStyle) -> str:
    if not boxes:
        return "VoxelShapes.empty()"
    if len(boxes) == 1:
        return format_cuboid_expr(boxes[0])
    inner = style.indent(3)
    parts = [f"\n{inner}{format_cuboid_expr(box)}" for box in boxes]
    return "VoxelShapes.or(" + ",".join(parts) + ")"


def collect_fields(
    result: ConversionResult,
    names: FieldNameRegistry,
) -> List[_Field]:
    fields: List[_Field] = []
    by_name: Dict[str, _Field] = {}
    for shape in result.shapes:
        name, is_new = names.claim(field_base_name(shape.variant), shape.boxes)
        if is_new:
            by_name[name] = _Field(name=name, boxes=list(shape.boxes))
            fields.append(by_name[name])
        if name in by_name:
            by_name[name].variant_keys.append(shape.variant.key or "<default>")
    return fields


def render_java_class(
    result: ConversionResult,
    style: Optional[JavaStyle] = None,
    names: Optional[FieldNameRegistry] = None,
) -> str:
    """Render *result* as Java source.

    *names* lets several renders share one field namespace; a fresh registry
    is used when omitted.  Fields already claimed by an earlier render with
    the same boxes are not emitted again.
    """
    style = style or JavaStyle()
    names = names if names is not None else FieldNameRegistry()
    member = style.indent(1)

    lines: List[str] = [
        f"package {style.package};",
        "",
        f"// File generated by voxelshape from blockstate '{result.blockstate_name}'",
        "",
    ]
    lines.extend(f"import {imp};" for imp in IMPORTS)
    lines.extend(["", f"public class {style.class_name} {{"])

    for fld in collect_fields(result, names):
        lines.append(f"{member}// {', '.join(fld.variant_keys)}")
        lines.append(
            f"{member}protected static final VoxelShape {fld.name} = "
            f"{_shape_expr(fld.boxes, style)};"
        )
        lines.append("")

    if lines[-1] == "":
        lines.pop()
    lines.append("}")
    return "\n".join(lines) + "\n"
