"""
Shared test fixtures for block model conversion tests.
"""
import json
import sys
from pathlib import Path

import pytest

# Add src/ to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxelshape.contracts import (
    AABox,
    Axis,
    BlockModel,
    BlockVariant,
    CuboidElement,
    ElementRotation,
    Vector3,
)


def make_element(from_xyz, to_xyz, rotation=None, name=None) -> CuboidElement:
    return CuboidElement(
        from_corner=Vector3(*from_xyz),
        to_corner=Vector3(*to_xyz),
        rotation=rotation,
        name=name,
    )


def make_rotation(origin, axis, angle) -> ElementRotation:
    return ElementRotation(origin=Vector3(*origin), axis=Axis.parse(axis), angle=float(angle))


def box(*values) -> AABox:
    return AABox(*(float(v) for v in values))


@pytest.fixture
def full_cube():
    """A full 16x16x16 cube element."""
    return make_element((0, 0, 0), (16, 16, 16), name="cube")


@pytest.fixture
def post_element():
    """A 4x16x4 post in the middle of the cell."""
    return make_element((6, 0, 6), (10, 16, 10), name="post")


@pytest.fixture
def lamp_model():
    """Base slab + post + shade: the slab and post touch, the shade floats."""
    return BlockModel(
        model_id="examplemod:block/lamp",
        elements=[
            make_element((0, 0, 0), (16, 2, 16), name="base"),
            make_element((7, 2, 7), (9, 10, 9), name="post"),
            make_element((3, 12, 3), (13, 16, 13), name="shade"),
        ],
    )


@pytest.fixture
def default_variant():
    return BlockVariant(key="", model="examplemod:block/lamp")


@pytest.fixture
def lamp_blockstate_payload():
    return {
        "variants": {
            "facing=north": {"model": "examplemod:block/lamp"},
            "facing=east": {"model": "examplemod:block/lamp", "y": 90},
            "facing=south": {"model": "examplemod:block/lamp", "y": 180},
            "facing=west": {"model": "examplemod:block/lamp", "y": 270},
        }
    }


@pytest.fixture
def lamp_model_payload():
    return {
        "textures": {"all": "examplemod:block/lamp"},
        "elements": [
            {
                "from": [0, 0, 0],
                "to": [16, 2, 16],
                "faces": {"up": {"uv": [0, 0, 16, 16], "texture": "#all"}},
            },
            {"from": [7, 2, 7], "to": [9, 10, 9]},
            {
                "from": [12, 2, 6],
                "to": [16, 6, 10],
                "rotation": {"origin": [8, 8, 8], "axis": "Y", "angle": 45},
            },
        ],
    }


@pytest.fixture
def assets_dir(tmp_path: Path, lamp_blockstate_payload, lamp_model_payload) -> Path:
    """A minimal assets tree with one blockstate and its model."""
    root = tmp_path / "assets"
    (root / "examplemod" / "blockstates").mkdir(parents=True)
    (root / "examplemod" / "models" / "block").mkdir(parents=True)
    (root / "examplemod" / "blockstates" / "lamp.json").write_text(
        json.dumps(lamp_blockstate_payload), encoding="utf-8"
    )
    (root / "examplemod" / "models" / "block" / "lamp.json").write_text(
        json.dumps(lamp_model_payload), encoding="utf-8"
    )
    return root
