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
Conversion between host buffers and GLM values

GLM matrices are column-major: indexing a matrix yields a column vector.
Quaternion buffers are stored xyzw, independent of GLM's wxyz constructor
order.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from pyglm import glm

from oasis_glmatrix.glmatrix_types import Mat3
from oasis_glmatrix.glmatrix_types import Quat


def to_vec2(values: NDArray[np.float64]) -> glm.vec2:
    """Create a GLM 2-vector from the first two buffer components."""
    return glm.vec2(float(values[0]), float(values[1]))


def to_vec3(values: NDArray[np.float64]) -> glm.vec3:
    """Create a GLM 3-vector from the first three buffer components."""
    return glm.vec3(float(values[0]), float(values[1]), float(values[2]))


def to_mat4(values: NDArray[np.float64]) -> glm.mat4:
    """Create a GLM 4x4 matrix from a flattened column-major buffer."""
    columns: list[glm.vec4] = [
        glm.vec4(
            float(values[4 * col]),
            float(values[4 * col + 1]),
            float(values[4 * col + 2]),
            float(values[4 * col + 3]),
        )
        for col in range(4)
    ]
    return glm.mat4(*columns)


def mat3_to_buffer(m: glm.mat3, array_type: type) -> Mat3:
    """Flatten a GLM 3x3 matrix to a new column-major buffer."""
    return np.array(
        [m[col][row] for col in range(3) for row in range(3)],
        dtype=array_type,
    )


def quat_to_buffer(q: glm.quat, array_type: type) -> Quat:
    """Copy a GLM quaternion to a new xyzw buffer."""
    return np.array([q.x, q.y, q.z, q.w], dtype=array_type)
