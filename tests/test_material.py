import pytest

from softy.color import Color
from softy.material import Material
from softy.shader import unlit_color_shader


def test_shader_is_kept():
    shader = unlit_color_shader()
    assert Material(shader).shader is shader


def test_set_property_stores_and_overwrites():
    material = Material(unlit_color_shader())
    material.set_property("Color_", Color.red())
    assert material.properties["Color_"] == Color.red()
    material.set_property("Color_", Color.blue())
    assert dict(material.properties) == {"Color_": Color.blue()}


def test_properties_view_is_read_only():
    material = Material(unlit_color_shader())
    with pytest.raises(TypeError):
        material.properties["Color_"] = Color.red()  # type: ignore[index]
    assert len(material.properties) == 0


def test_properties_view_is_live():
    material = Material(unlit_color_shader())
    view = material.properties
    material.set_property("Color_", Color.green())
    assert view["Color_"] == Color.green()