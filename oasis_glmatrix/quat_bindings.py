################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Quaternion operations delegated to GLM

Returned buffers are ordered xyzw.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from pyglm import glm

from oasis_glmatrix.glm_marshal import quat_to_buffer
from oasis_glmatrix.glm_marshal import to_vec3
from oasis_glmatrix.glmatrix_config import GlMatrixConfig
from oasis_glmatrix.glmatrix_config import resolve_config
from oasis_glmatrix.glmatrix_types import VEC3_SIZE
from oasis_glmatrix.glmatrix_types import HostBuffer
from oasis_glmatrix.glmatrix_types import Quat as QuatBuffer
from oasis_glmatrix.math_utils.validation import as_buffer


class Quat:
    """Quaternion bindings."""

    @staticmethod
    def create(config: GlMatrixConfig | None = None) -> QuatBuffer:
        """Return a new identity quaternion."""
        cfg: GlMatrixConfig = resolve_config(config)
        return quat_to_buffer(glm.quat(), cfg.array_type)

    @staticmethod
    def rotation_to(
        a: HostBuffer, b: HostBuffer, config: GlMatrixConfig | None = None
    ) -> QuatBuffer:
        """
        Return the shortest-arc rotation taking direction ``a`` onto ``b``.

        Both inputs are expected to be unit length and are not normalized.
        For antiparallel inputs the rotation is a half turn about the axis
        perpendicular to ``a`` chosen by GLM: ``(-a.y, a.x, 0)`` when
        ``|a.x| > |a.z|``, otherwise ``(0, -a.z, a.y)``.
        """
        cfg: GlMatrixConfig = resolve_config(config)
        va: NDArray[np.float64] = as_buffer(a, VEC3_SIZE, "a", cfg.check_lengths)
        vb: NDArray[np.float64] = as_buffer(b, VEC3_SIZE, "b", cfg.check_lengths)
        q: glm.quat = glm.quat(to_vec3(va), to_vec3(vb))
        return quat_to_buffer(q, cfg.array_type)

    @staticmethod
    def set_axes(
        view: HostBuffer,
        right: HostBuffer,
        up: HostBuffer,
        config: GlMatrixConfig | None = None,
    ) -> QuatBuffer:
        """
        Return the orientation described by a view/right/up basis.

        The basis is assumed orthonormal. The rotation matrix has rows
        ``right``, ``up`` and ``-view``, so the canonical camera basis
        ``view=(0, 0, -1)``, ``right=(1, 0, 0)``, ``up=(0, 1, 0)`` maps to the
        identity.
        """
        cfg: GlMatrixConfig = resolve_config(config)
        v: NDArray[np.float64] = as_buffer(view, VEC3_SIZE, "view", cfg.check_lengths)
        r: NDArray[np.float64] = as_buffer(
            right, VEC3_SIZE, "right", cfg.check_lengths
        )
        u: NDArray[np.float64] = as_buffer(up, VEC3_SIZE, "up", cfg.check_lengths)

        # Columns of the column-major matrix
        basis: glm.mat3 = glm.mat3(
            glm.vec3(float(r[0]), float(u[0]), float(-v[0])),
            glm.vec3(float(r[1]), float(u[1]), float(-v[1])),
            glm.vec3(float(r[2]), float(u[2]), float(-v[2])),
        )
        q: glm.quat = glm.normalize(glm.quat_cast(basis))
        diag: NDArray[np.float64] = np.array([r[0], u[1], -v[2]], dtype=float)
        return quat_to_buffer(_gl_matrix_sign(q, diag), cfg.array_type)


def _gl_matrix_sign(q: glm.quat, diag: NDArray[np.float64]) -> glm.quat:
    """
    Choose the sign of a rotation quaternion the way gl-matrix does.

    With a positive matrix trace w is non-negative. Otherwise the component
    of the largest diagonal entry is non-negative. GLM instead makes the
    largest component positive, which disagrees for some rotations of more
    than a quarter turn.
    """
    lead: float
    if float(np.sum(diag)) > 0.0:
        lead = q.w
    else:
        lead = (q.x, q.y, q.z)[int(np.argmax(diag))]
    if lead < 0.0:
        return -q
    return q
