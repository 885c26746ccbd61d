"""Triangle-mesh preview of converted shapes (for eyeballing in a viewer)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import numpy as np
import trimesh

from voxelshape.contracts import AABox, ConversionResult
from voxelshape.errors import PreviewError

logger = logging.getLogger(__name__)

CELL_SIZE = 16.0


def box_to_mesh(box: AABox) -> trimesh.Trimesh:
    lo = np.array(box.as_tuple()[:3], dtype=float)
    hi = np.array(box.as_tuple()[3:], dtype=float)
    mesh = trimesh.creation.box(extents=hi - lo)
    mesh.apply_translation((lo + hi) / 2.0)
    return mesh


def boxes_to_mesh(boxes: Iterable[AABox]) -> trimesh.Trimesh:
    """One cuboid per box; zero-volume boxes are skipped."""
    meshes: List[trimesh.Trimesh] = []
    for box in boxes:
        if box.volume <= 0.0:
            logger.debug("Skipping degenerate box %s in preview", box.as_tuple())
            continue
        meshes.append(box_to_mesh(box))
    if not meshes:
        return trimesh.Trimesh()
    return trimesh.util.concatenate(meshes)


def build_preview(result: ConversionResult, spacing: float = 4.0) -> trimesh.Trimesh:
    """All variants side by side along +X, one cell plus *spacing* apart."""
    meshes: List[trimesh.Trimesh] = []
    for index, shape in enumerate(result.shapes):
        mesh = boxes_to_mesh(shape.boxes)
        if mesh.is_empty:
            continue
        mesh.apply_translation([index * (CELL_SIZE + spacing), 0.0, 0.0])
        meshes.append(mesh)
    if not meshes:
        return trimesh.Trimesh()
    return trimesh.util.concatenate(meshes)


def export_preview(result: ConversionResult, path: str | Path, spacing: float = 4.0) -> Path:
    path = Path(path)
    mesh = build_preview(result, spacing=spacing)
    if mesh.is_empty:
        raise PreviewError(f"Nothing to preview for blockstate '{result.blockstate_name}'")
    path.parent.mkdir(parents=True, exist_ok=True)
    mesh.export(str(path))
    logger.info("Exported preview: %s (%d faces)", path, len(mesh.faces))
    return path
