"""Position, rotation and scale of an object in a parent/child hierarchy."""

from __future__ import annotations

import math
from typing import Optional

from softy.mathutil import DEG2RAD, RAD2DEG, clamp, clamp_degree_360
from softy.matrix import Mat
from softy.vector import Vec, cross, normalize


def _vec3(value) -> Vec:
    v = value if isinstance(value, Vec) else Vec(value)
    if len(v) != 3:
        raise ValueError(f"expected a 3-component vector, got {len(v)} components")
    return Vec(*(float(c) for c in v))


def _transform_point(point: Vec, matrix: Mat) -> Vec:
    return (point.extend(1.0) * matrix).resized(3)


def translate_matrix(position) -> Mat:
    """Row-vector translation matrix."""
    p = _vec3(position)
    return Mat(Vec.basis(4, 0), Vec.basis(4, 1), Vec.basis(4, 2), p.extend(1.0))


def rotation_matrix(rotation) -> Mat:
    """Rotation matrix from (pitch, yaw, roll) angles in degrees."""
    pitch, yaw, roll = (DEG2RAD * angle for angle in _vec3(rotation))
    cp, sp = math.cos(pitch), math.sin(pitch)
    cy, sy = math.cos(yaw), math.sin(yaw)
    cr, sr = math.cos(roll), math.sin(roll)
    return Mat(
        Vec(cr * cy + sr * sp * sy, -sr * cy + cr * sp * sy, cp * sy, 0.0),
        Vec(sr * cp, cr * cp, -sp, 0.0),
        Vec(-sy * cr + sr * sp * cy, sr * sy + cr * sp * cy, cp * cy, 0.0),
        Vec.basis(4, 3),
    )


def scale_matrix(scale) -> Mat:
    s = _vec3(scale)
    return Mat(Vec.basis(4, 0) * s[0], Vec.basis(4, 1) * s[1], Vec.basis(4, 2) * s[2], Vec.basis(4, 3))


def inverse_scale_matrix(scale) -> Mat:
    s = _vec3(scale)
    return Mat(Vec.basis(4, 0) / s[0], Vec.basis(4, 1) / s[1], Vec.basis(4, 2) / s[2], Vec.basis(4, 3))


class Transform:
    """A node with local position, rotation (degrees) and scale.

    Setting ``position``, ``rotation`` or ``scale`` recomputes the world
    values and matrices of this node and all of its descendants.
    """

    def __init__(self) -> None:
        self._world_trs = Mat.identity(4)
        self._inv_world_trs = Mat.identity(4)
        self._world_position = Vec.zero(3)
        self._world_rotation = Vec.zero(3)
        self._world_scale = Vec.one(3)
        self._local_position = Vec.zero(3)
        self._local_rotation = Vec.zero(3)
        self._local_scale = Vec.one(3)
        self._right = Vec.basis(3, 0)
        self._up = Vec.basis(3, 1)
        self._forward = Vec.basis(3, 2)
        self._children: list[Transform] = []
        self._parent: Optional[Transform] = None

    @property
    def position(self) -> Vec:
        return self._local_position

    @position.setter
    def position(self, value) -> None:
        self._local_position = _vec3(value)
        self._update()

    @property
    def rotation(self) -> Vec:
        return self._local_rotation

    @rotation.setter
    def rotation(self, value) -> None:
        self._local_rotation = _vec3(value)
        self._update()

    @property
    def scale(self) -> Vec:
        return self._local_scale

    @scale.setter
    def scale(self, value) -> None:
        self._local_scale = _vec3(value)
        self._update()

    @property
    def right(self) -> Vec:
        return self._right

    @property
    def up(self) -> Vec:
        return self._up

    @property
    def forward(self) -> Vec:
        return self._forward

    @property
    def world_position(self) -> Vec:
        return self._world_position

    @property
    def world_rotation(self) -> Vec:
        return self._world_rotation

    @property
    def world_scale(self) -> Vec:
        return self._world_scale

    @property
    def trs(self) -> Mat:
        """World transform matrix."""
        return self._world_trs

    @property
    def inverse_trs(self) -> Mat:
        return self._inv_world_trs

    @property
    def parent(self) -> Optional[Transform]:
        return self._parent

    @property
    def children(self) -> tuple[Transform, ...]:
        return tuple(self._children)

    def local_trs(self) -> Mat:
        return (
            scale_matrix(self._local_scale)
            * rotation_matrix(self._local_rotation)
            * translate_matrix(self._local_position)
        )

    def local_inverse_trs(self) -> Mat:
        return (
            inverse_scale_matrix(self._local_scale)
            * rotation_matrix(self._local_rotation).transpose()
            * translate_matrix(-self._local_position)
        )

    def child(self, i: int) -> Transform:
        return self._children[i]

    def set_parent(self, parent: Optional[Transform]) -> None:
        """Attach to ``parent`` (or detach with None); cycles are ignored."""
        ancestor = parent
        while ancestor is not None:
            if ancestor is self:
                return
            ancestor = ancestor._parent

        if self._parent is not None:
            self._parent._children.remove(self)
            self._parent = None

        if parent is None:
            self._local_position = self._world_position
            self._local_rotation = self._world_rotation
            self._local_scale = self._world_scale
            self._update()
            return

        self._parent = parent
        parent._children.append(self)
        self._local_position = _transform_point(self._local_position, parent.inverse_trs)
        self._local_rotation = self._local_rotation - parent._world_rotation
        self._local_scale = self._local_scale / parent._world_scale
        self._update()

    def set_local_position_rotation(self, position, rotation) -> None:
        self._local_position = _vec3(position)
        self._local_rotation = _vec3(rotation)
        self._update()

    def set_world_position_rotation(self, position, rotation) -> None:
        position = _vec3(position)
        rotation = _vec3(rotation)
        self._world_position = position
        self._world_rotation = rotation
        if self._parent is None:
            self._local_position = position
            self._local_rotation = rotation
        else:
            self._local_position = _transform_point(position, self._parent.inverse_trs)
            self._local_rotation = rotation - self._parent._world_rotation
        self._update()

    def look_at(self, target, inverse: bool = False) -> None:
        """Rotate so that the forward axis points at ``target`` (or away from it)."""
        target = _vec3(target)
        position = self._local_position
        forward = normalize(position - target if inverse else target - position)
        unit_y = Vec.basis(3, 1)
        if unit_y.equals(forward) or (-unit_y).equals(forward):
            right = Vec.basis(3, 0)
        else:
            right = cross(forward, unit_y)

        pitch = clamp_degree_360(RAD2DEG * math.asin(clamp(-forward[1], -1.0, 1.0)))
        cp = math.cos(DEG2RAD * pitch)
        yaw = clamp_degree_360(RAD2DEG * math.acos(clamp(forward[2] / cp, -1.0, 1.0)))
        roll = clamp_degree_360(RAD2DEG * math.asin(clamp(right[1] / cp, -1.0, 1.0)))
        self.rotation = Vec(pitch, yaw, roll)

    def _calculate_axes(self) -> None:
        rot = rotation_matrix(self._world_rotation)
        self._right = _transform_point(Vec.basis(3, 0), rot)
        self._up = _transform_point(Vec.basis(3, 1), rot)
        self._forward = _transform_point(Vec.basis(3, 2), rot)

    def _calculate_matrices(self) -> None:
        trs = self.local_trs()
        inv_trs = self.local_inverse_trs()
        parent = self._parent
        if parent is None:
            self._world_position = self._local_position
            self._world_rotation = self._local_rotation
            self._world_scale = self._local_scale
            self._world_trs = trs
            self._inv_world_trs = inv_trs
        else:
            self._world_position = _transform_point(self._local_position, parent._world_trs)
            self._world_rotation = self._local_rotation + parent._local_rotation
            self._world_scale = self._local_scale * parent._world_scale
            self._world_trs = trs * parent._world_trs
            self._inv_world_trs = inv_trs * parent._inv_world_trs

    def _update(self) -> None:
        # Axes are derived from the world rotation as it stood before this update.
        self._calculate_axes()
        self._calculate_matrices()
        for child in self._children:
            child._update()