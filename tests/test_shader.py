import pytest

from softy.buffer import ConstantBuffer
from softy.color import Color
from softy.matrix import Mat
from softy.shader import (
    Shader,
    default_vertex_shader,
    unlit_color_fragment_shader,
    unlit_color_shader,
)
from softy.transform import translate_matrix
from softy.vector import Vec
from softy.vertex import Vertex, VertexOutput


def test_identity_matrices_keep_positions():
    vertices = [Vertex(Vec(1.0, 2.0, 3.0, 1.0)), Vertex(Vec(-1.0, 0.5, 0.0, 1.0))]
    outputs = default_vertex_shader(ConstantBuffer(), vertices)
    assert len(outputs) == len(vertices)
    for out, vertex in zip(outputs, vertices):
        assert isinstance(out, VertexOutput)
        assert out.position.equals(vertex.position)
        assert out.normal == Vec.zero(3)


def test_world_matrix_is_applied():
    cb = ConstantBuffer(world_matrix=translate_matrix(Vec(1.0, 2.0, 3.0)))
    (out,) = default_vertex_shader(cb, [Vertex(Vec(0.0, 0.0, 0.0, 1.0))])
    assert out.position.equals(Vec(1.0, 2.0, 3.0, 1.0))


def test_projection_scales_after_world():
    cb = ConstantBuffer(projection_matrix=Mat.identity(4) * 2.0)
    (out,) = default_vertex_shader(cb, [Vertex(Vec(1.0, 1.0, 1.0, 1.0))])
    assert out.position.equals(Vec(1.0, 1.0, 1.0, 1.0) * 2.0)


def test_unlit_fragment_returns_color_property():
    cb = ConstantBuffer(properties={"Color_": Color.red()})
    assert unlit_color_fragment_shader(cb, VertexOutput()) == Color.red()


def test_unlit_fragment_missing_property():
    with pytest.raises(KeyError):
        unlit_color_fragment_shader(ConstantBuffer(properties={}), VertexOutput())
    with pytest.raises(KeyError):
        unlit_color_fragment_shader(ConstantBuffer(), VertexOutput())


def test_unlit_fragment_wrong_type():
    cb = ConstantBuffer(properties={"Color_": 0xFFFF0000})
    with pytest.raises(TypeError):
        unlit_color_fragment_shader(cb, VertexOutput())


def test_shader_defaults_to_default_vertex_shader():
    shader = Shader(unlit_color_fragment_shader)
    assert shader.vs is default_vertex_shader
    assert unlit_color_shader() == shader