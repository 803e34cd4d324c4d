"""A perspective camera rendering into a colour buffer."""

from __future__ import annotations

import math

from softy.buffer import ColorBuffer
from softy.mathutil import DEG2RAD
from softy.matrix import Mat
from softy.transform import Transform, translate_matrix
from softy.vector import Vec


class Camera:
    """Camera with a transform, a field of view in degrees and clip planes."""

    def __init__(self, render_target: ColorBuffer) -> None:
        self.render_target = render_target
        self.transform = Transform()
        self.far = 1000.0
        self.near = 1.0
        self.fov = 60.0

    def aspect(self) -> float:
        return self.render_target.width / float(self.render_target.height)

    def view_matrix(self) -> Mat:
        t = translate_matrix(-self.transform.position)
        r = Mat(
            self.transform.right.extend(0.0),
            self.transform.up.extend(0.0),
            self.transform.forward.extend(0.0),
            Vec.basis(4, 3),
        ).transpose()
        return t * r

    def projection_matrix(self) -> Mat:
        inverse_aspect = self.render_target.height / float(self.render_target.width)
        d = 1.0 / math.tan(DEG2RAD * self.fov * 0.5)
        near, far = self.near, self.far
        return Mat(
            Vec(d * inverse_aspect, 0.0, 0.0, 0.0),
            Vec(0.0, d, 0.0, 0.0),
            Vec(0.0, 0.0, -(near + far) / (far - near), -1.0),
            Vec(0.0, 0.0, -(2.0 * near * far) / (far - near), 0.0),
        )