"""Tests for the trimesh preview of converted shapes."""
from pathlib import Path

import numpy as np
import pytest
import trimesh

from conftest import box
from voxelshape.contracts import BlockVariant, ConversionResult, VariantShape
from voxelshape.errors import PreviewError
from voxelshape.preview import CELL_SIZE, boxes_to_mesh, build_preview, export_preview


def _result(*box_lists):
    shapes = [
        VariantShape(
            variant=BlockVariant(key=f"v{i}", model="m"),
            model_id="m",
            boxes=list(boxes),
            element_count=len(boxes),
        )
        for i, boxes in enumerate(box_lists)
    ]
    return ConversionResult(blockstate_name="preview", shapes=shapes)


def test_boxes_to_mesh_bounds_and_volume():
    mesh = boxes_to_mesh([box(0, 0, 0, 16, 2, 16), box(7, 2, 7, 9, 10, 9)])
    np.testing.assert_allclose(mesh.bounds, [[0, 0, 0], [16, 10, 16]], atol=1e-9)
    assert mesh.volume == pytest.approx(16 * 2 * 16 + 2 * 8 * 2)


def test_degenerate_boxes_skipped():
    mesh = boxes_to_mesh([box(4, 4, 4, 4, 4, 4), box(0, 0, 0, 1, 1, 1)])
    assert len(mesh.faces) == 12


def test_empty_boxes_give_empty_mesh():
    assert boxes_to_mesh([]).is_empty


def test_build_preview_lays_variants_along_x():
    result = _result([box(0, 0, 0, 16, 16, 16)], [box(0, 0, 0, 16, 16, 16)])
    mesh = build_preview(result, spacing=4.0)
    assert mesh.bounds[1][0] == pytest.approx(CELL_SIZE + 4.0 + 16.0)
    assert mesh.volume == pytest.approx(2 * 16 ** 3)


def test_export_preview_writes_stl(tmp_path: Path):
    out = export_preview(_result([box(0, 0, 0, 8, 8, 8)]), tmp_path / "prev" / "shape.stl")
    assert out.exists()
    loaded = trimesh.load(str(out))
    assert loaded.volume == pytest.approx(512.0)


def test_export_preview_nothing_to_show(tmp_path: Path):
    with pytest.raises(PreviewError, match="preview"):
        export_preview(_result([]), tmp_path / "empty.stl")
    assert not (tmp_path / "empty.stl").exists()
