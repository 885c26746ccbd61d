"""Exceptions raised while loading and converting block models."""

from __future__ import annotations

from typing import Optional


class VoxelShapeError(Exception):
    """Base exception for voxelshape errors."""
    pass


class MalformedVectorError(VoxelShapeError, ValueError):
    """A from/to/origin vector does not have exactly 3 components."""

    def __init__(self, field_name: str, length: int):
        super().__init__(
            f"'{field_name}' must have exactly 3 components, got {length}"
        )
        self.field_name = field_name
        self.length = length


class InvalidAxisError(VoxelShapeError, ValueError):
    """A rotation axis outside x/y/z."""

    def __init__(self, axis: object):
        super().__init__(f"Invalid rotation axis: {axis!r} (expected x, y or z)")
        self.axis = axis


class EmptyVertexSetError(VoxelShapeError, RuntimeError):
    """Bounds were requested for zero vertices."""
    pass


class LoaderError(VoxelShapeError):
    """A blockstate or model file could not be read or parsed."""
    pass


class ModelConversionError(VoxelShapeError):
    """Converting one variant's model failed."""

    def __init__(self, model_id: str, variant_key: Optional[str], reason: str):
        where = f"model '{model_id}'"
        if variant_key is not None:
            where += f" (variant '{variant_key}')"
        super().__init__(f"Failed to convert {where}: {reason}")
        self.model_id = model_id
        self.variant_key = variant_key
        self.reason = reason


class PreviewError(VoxelShapeError):
    """No preview mesh could be built from the converted boxes."""
    pass
