"""Tests for the shared value types."""
import numpy as np
import pytest

from voxelshape.contracts import AABox, Axis, BlockVariant, JavaStyle, ModelRotation, Vector3
from voxelshape.errors import InvalidAxisError, MalformedVectorError


class TestVector3:

    def test_add_and_sub(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(0.5, 0.5, 0.5)
        assert a + b == Vector3(1.5, 2.5, 3.5)
        assert a - b == Vector3(0.5, 1.5, 2.5)

    def test_values_are_float32(self):
        v = Vector3(0.1, 0.2, 0.3)
        assert v.x == float(np.float32(0.1))
        assert v.as_array().dtype == np.float32

    def test_immutable(self):
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_from_sequence(self):
        assert Vector3.from_sequence([1, 2, 3]) == Vector3(1.0, 2.0, 3.0)

    @pytest.mark.parametrize("values", [[], [1, 2], [1, 2, 3, 4]])
    def test_from_sequence_wrong_length(self, values):
        with pytest.raises(MalformedVectorError) as info:
            Vector3.from_sequence(values, "from")
        assert info.value.field_name == "from"
        assert info.value.length == len(values)

    def test_malformed_vector_is_value_error(self):
        with pytest.raises(ValueError):
            Vector3.from_sequence([1.0, 2.0])


class TestAxis:

    @pytest.mark.parametrize("text,expected", [
        ("x", Axis.X), ("X", Axis.X), ("y", Axis.Y), ("Y", Axis.Y), ("z", Axis.Z), ("Z", Axis.Z),
    ])
    def test_parse_case_insensitive(self, text, expected):
        assert Axis.parse(text) is expected

    @pytest.mark.parametrize("bad", ["w", "", "xy", None, 1])
    def test_parse_invalid(self, bad):
        with pytest.raises(InvalidAxisError):
            Axis.parse(bad)


class TestAABox:

    def test_volume(self):
        assert AABox(0, 0, 0, 2, 3, 4).volume == pytest.approx(24.0)

    def test_degenerate_volume_is_zero(self):
        assert AABox(1, 1, 1, 1, 5, 5).volume == 0.0

    def test_touches_shared_face(self):
        a = AABox(0, 0, 0, 8, 16, 16)
        b = AABox(8, 0, 0, 16, 16, 16)
        assert a.touches(b)
        assert b.touches(a)

    def test_touches_shared_edge_and_corner(self):
        a = AABox(0, 0, 0, 4, 4, 4)
        assert a.touches(AABox(4, 4, 0, 8, 8, 4))
        assert a.touches(AABox(4, 4, 4, 8, 8, 8))

    def test_containment_touches(self):
        outer = AABox(0, 0, 0, 16, 16, 16)
        inner = AABox(4, 4, 4, 6, 6, 6)
        assert outer.touches(inner)
        assert inner.touches(outer)

    def test_separated_on_one_axis(self):
        a = AABox(0, 0, 0, 4, 4, 4)
        b = AABox(0, 0, 4.5, 4, 4, 8)
        assert not a.touches(b)

    def test_union(self):
        a = AABox(0, 2, 0, 4, 4, 4)
        b = AABox(2, 0, 6, 8, 3, 9)
        assert a.union(b) == AABox(0, 0, 0, 8, 4, 9)


def test_variant_model_rotation_defaults():
    variant = BlockVariant(key="facing=east", model="m", y=90.0)
    assert variant.model_rotation == ModelRotation(x=0.0, y=90.0, z=0.0)
    assert BlockVariant(key="", model="m").model_rotation.is_identity()


def test_java_style_indent():
    assert JavaStyle(indent_width=2).indent(2) == "    "
    assert JavaStyle(expand_tab=False).indent(2) == "\t\t"
