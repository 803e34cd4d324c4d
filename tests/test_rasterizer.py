import pytest

from softy.buffer import ColorBuffer
from softy.color import Color
from softy.rasterizer import (
    HomogeneousPlane,
    frustum_culling,
    homogeneous_clipping,
    is_inside_plane,
    is_visible,
    plane_clipping,
    plane_fraction,
    rasterize,
)
from softy.shader import unlit_color_fragment_shader
from softy.vector import Vec
from softy.vertex import VertexOutput


def out(x, y, z=0.0, w=1.0):
    return VertexOutput(position=Vec(float(x), float(y), float(z), float(w)))


def inside_all(position, tol=1e-6):
    x, y, z, w = position
    return abs(x) <= w + tol and abs(y) <= w + tol and abs(z) <= w + tol and w > 0


def test_is_visible():
    assert is_visible(Vec(0.0, 0.0, 0.0, 1.0))
    assert is_visible(Vec(1.0, -1.0, 1.0, 1.0))
    assert not is_visible(Vec(2.0, 0.0, 0.0, 1.0))


def test_is_inside_plane_sides():
    p = Vec(2.0, 0.0, 0.0, 1.0)
    assert not is_inside_plane(p, HomogeneousPlane.POSITIVE_X)
    assert is_inside_plane(p, HomogeneousPlane.NEGATIVE_X)
    assert is_inside_plane(p, HomogeneousPlane.POSITIVE_W)
    assert not is_inside_plane(Vec(0.0, 0.0, 0.0, 0.0), HomogeneousPlane.POSITIVE_W)
    assert not is_inside_plane(Vec(0.0, -3.0, 0.0, 1.0), HomogeneousPlane.NEGATIVE_Y)


def test_origin_inside_every_plane():
    planes = list(HomogeneousPlane)
    assert len(planes) == 7
    assert planes[0] is HomogeneousPlane.POSITIVE_W
    assert all(is_inside_plane(Vec(0.0, 0.0, 0.0, 1.0), plane) for plane in planes)


@pytest.mark.parametrize(
    "plane, cur",
    [
        (HomogeneousPlane.POSITIVE_X, Vec(3.0, 0.0, 0.0, 1.0)),
        (HomogeneousPlane.NEGATIVE_X, Vec(-3.0, 0.0, 0.0, 1.0)),
        (HomogeneousPlane.POSITIVE_Y, Vec(0.0, 3.0, 0.0, 1.0)),
        (HomogeneousPlane.NEGATIVE_Z, Vec(0.0, 0.0, -3.0, 1.0)),
    ],
)
def test_plane_fraction_lands_on_plane(plane, cur):
    prev = Vec(0.0, 0.0, 0.0, 1.0)
    t = plane_fraction(prev, cur, plane)
    assert 0.0 < t < 1.0
    point = prev + t * (cur - prev)
    boundary = [c for c in point[:3] if c != 0.0]
    assert abs(boundary[0]) == pytest.approx(point[3])


def test_plane_clipping_too_few_inputs():
    assert plane_clipping(HomogeneousPlane.POSITIVE_X, [out(0, 0), out(0.5, 0)]) == []


def test_plane_clipping_inside_keeps_vertices():
    tri = [out(0, 0), out(0.5, 0), out(0, 0.5)]
    assert plane_clipping(HomogeneousPlane.POSITIVE_X, tri) == tri


def test_plane_clipping_outside_is_empty():
    tri = [out(2, 0), out(3, 0), out(2, 1)]
    assert plane_clipping(HomogeneousPlane.POSITIVE_X, tri) == []


def test_frustum_culling():
    assert frustum_culling(out(2, 0), out(3, 0), out(-4, 0))
    assert frustum_culling(out(0, 5), out(0, -5), out(0, 2))
    assert frustum_culling(out(0, 0, 2), out(0, 0, 3), out(0, 0, 4))
    assert not frustum_culling(out(2, 0), out(0, 0), out(3, 0))


def test_homogeneous_clipping_visible_unchanged():
    tri = [out(0, 0), out(0.5, 0), out(0, 0.5)]
    assert homogeneous_clipping(tri) == tri


def test_homogeneous_clipping_partial():
    tri = [out(0, 0), out(3, 0), out(0, 0.5)]
    result = homogeneous_clipping(tri)
    assert result
    assert len(result) % 3 == 0
    assert all(inside_all(v.position) for v in result)


def test_homogeneous_clipping_rejects_bad_length():
    with pytest.raises(ValueError):
        homogeneous_clipping([out(0, 0), out(1, 0)])


def test_rasterize_draws_red_edges():
    target = ColorBuffer(10, 10)
    verts = [out(-0.5, -0.5), out(0.5, -0.5), out(0.0, 0.5)]
    rasterize(target, verts, [0, 1, 2], unlit_color_fragment_shader)
    assert target.pixel(2, 2) == Color.red()
    assert target.pixel(7, 2) == Color.red()
    assert target.pixel(0, 0) == Color()
    assert set(target.pixels) <= {Color(), Color.red()}


def test_rasterize_culled_triangle_draws_nothing():
    target = ColorBuffer(10, 10)
    verts = [out(2, 0), out(3, 0), out(4, 0.5)]
    rasterize(target, verts, [0, 1, 2], unlit_color_fragment_shader)
    assert set(target.pixels) == {Color()}


def test_rasterize_bad_index_count():
    target = ColorBuffer(4, 4)
    with pytest.raises(ValueError):
        rasterize(target, [out(0, 0), out(0.5, 0)], [0, 1], unlit_color_fragment_shader)


def test_rasterize_negative_index():
    target = ColorBuffer(4, 4)
    verts = [out(0, 0), out(0.5, 0), out(0, 0.5)]
    with pytest.raises(IndexError):
        rasterize(target, verts, [0, 1, -1], unlit_color_fragment_shader)