"""Per-variant conversion: approximate every element, then merge."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from voxelshape.contracts import (
    AABox,
    Blockstate,
    BlockModel,
    BlockVariant,
    ConversionConfig,
    ConversionResult,
    CuboidElement,
    ModelRotation,
    VariantShape,
)
from voxelshape.errors import (
    EmptyVertexSetError,
    InvalidAxisError,
    MalformedVectorError,
    ModelConversionError,
)
from voxelshape.geometry import approximate
from voxelshape.loader import ModelResolver
from voxelshape.merging import merge_touching, union_volume

logger = logging.getLogger(__name__)


def approximate_elements(
    elements: Sequence[CuboidElement],
    rotation: ModelRotation,
    config: Optional[ConversionConfig] = None,
) -> List[AABox]:
    config = config or ConversionConfig()
    pivot = config.pivot_vector
    return [approximate(el, rotation, pivot) for el in elements]


def convert_variant(
    variant: BlockVariant,
    model: BlockModel,
    config: Optional[ConversionConfig] = None,
) -> VariantShape:
    """Convert one variant; geometry errors are re-raised with the model id."""
    config = config or ConversionConfig()
    try:
        boxes = approximate_elements(model.elements, variant.model_rotation, config)
    except (MalformedVectorError, InvalidAxisError, EmptyVertexSetError) as exc:
        raise ModelConversionError(model.model_id, variant.key, str(exc)) from exc

    volume_before = union_volume(boxes)
    if config.merge:
        merged = merge_touching(boxes)
    else:
        merged = list(boxes)
    volume_after = union_volume(merged)

    logger.info(
        "Variant '%s' (%s): %d element(s) -> %d box(es), volume %.3f -> %.3f",
        variant.key,
        model.model_id,
        len(model.elements),
        len(merged),
        volume_before,
        volume_after,
    )
    return VariantShape(
        variant=variant,
        model_id=model.model_id,
        boxes=merged,
        element_count=len(model.elements),
        volume_before_merge=volume_before,
        volume_after_merge=volume_after,
    )


def convert_blockstate(
    blockstate: Blockstate,
    resolve_model: ModelResolver,
    config: Optional[ConversionConfig] = None,
) -> ConversionResult:
    """Convert every variant of *blockstate*, in declaration order.

    Variants are independent of each other; the first failure aborts the
    whole blockstate with a ModelConversionError naming the model.
    """
    config = config or ConversionConfig()
    result = ConversionResult(blockstate_name=blockstate.name)
    for variant in blockstate.variants:
        try:
            model = resolve_model(variant.model)
        except ModelConversionError as exc:
            raise ModelConversionError(exc.model_id, variant.key, exc.reason) from exc
        result.shapes.append(convert_variant(variant, model, config))

    logger.info(
        "Converted blockstate %s: %d variant(s), %d box(es)",
        blockstate.name,
        len(result.shapes),
        result.box_count,
    )
    return result
