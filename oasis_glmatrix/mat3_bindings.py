################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""3x3 matrix operations delegated to GLM."""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray
from pyglm import glm

from oasis_glmatrix.glm_marshal import mat3_to_buffer
from oasis_glmatrix.glm_marshal import to_mat4
from oasis_glmatrix.glm_marshal import to_vec2
from oasis_glmatrix.glm_marshal import to_vec3
from oasis_glmatrix.glmatrix_config import GlMatrixConfig
from oasis_glmatrix.glmatrix_config import resolve_config
from oasis_glmatrix.glmatrix_types import MAT4_SIZE
from oasis_glmatrix.glmatrix_types import VEC2_SIZE
from oasis_glmatrix.glmatrix_types import VEC3_SIZE
from oasis_glmatrix.glmatrix_types import HostBuffer
from oasis_glmatrix.glmatrix_types import Mat3 as Mat3Buffer
from oasis_glmatrix.math_utils.validation import as_buffer


_LOG: logging.Logger = logging.getLogger(__name__)


class Mat3:
    """
    3x3 matrix bindings

    Each operation allocates a new flattened column-major buffer of nine
    elements.
    """

    @staticmethod
    def create(config: GlMatrixConfig | None = None) -> Mat3Buffer:
        """Return a new identity matrix."""
        cfg: GlMatrixConfig = resolve_config(config)
        return mat3_to_buffer(glm.mat3(1.0), cfg.array_type)

    @staticmethod
    def from_scaling(v: HostBuffer, config: GlMatrixConfig | None = None) -> Mat3Buffer:
        """Return the matrix scaling each axis by the components of ``v``."""
        cfg: GlMatrixConfig = resolve_config(config)
        scale: NDArray[np.float64] = as_buffer(v, VEC3_SIZE, "v", cfg.check_lengths)
        m4: glm.mat4 = glm.scale(glm.mat4(1.0), to_vec3(scale))
        return mat3_to_buffer(glm.mat3(m4), cfg.array_type)

    @staticmethod
    def from_translation(
        v: HostBuffer, config: GlMatrixConfig | None = None
    ) -> Mat3Buffer:
        """
        Return the 2D affine matrix translating by ``v``.

        A third component, when given, is the homogeneous coordinate and is
        ignored.
        """
        cfg: GlMatrixConfig = resolve_config(config)
        offset: NDArray[np.float64] = as_buffer(
            v,
            VEC2_SIZE,
            "v",
            cfg.check_lengths,
            accepted_sizes=(VEC3_SIZE,),
        )
        m: glm.mat3 = glm.translate(glm.mat3(1.0), to_vec2(offset))
        return mat3_to_buffer(m, cfg.array_type)

    @staticmethod
    def normal_from_mat4(
        m4: HostBuffer, config: GlMatrixConfig | None = None
    ) -> Mat3Buffer:
        """
        Return the normal matrix of a 4x4 transform.

        The normal matrix is the inverse transpose of the upper-left 3x3
        block. A singular block has no inverse and yields the identity.
        """
        cfg: GlMatrixConfig = resolve_config(config)
        values: NDArray[np.float64] = as_buffer(
            m4, MAT4_SIZE, "m4", cfg.check_lengths
        )
        upper: glm.mat3 = glm.mat3(to_mat4(values))

        det: float = float(glm.determinant(upper))
        if det == 0.0 or math.isnan(det):
            _LOG.debug("Singular matrix (det=%s), returning identity", det)
            return mat3_to_buffer(glm.mat3(1.0), cfg.array_type)

        return mat3_to_buffer(glm.inverseTranspose(upper), cfg.array_type)
