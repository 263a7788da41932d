################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""gl-matrix style matrix and quaternion bindings backed by GLM."""

from __future__ import annotations

from oasis_glmatrix.exports import EXPORTS
from oasis_glmatrix.exports import UnknownExportError
from oasis_glmatrix.exports import export_names
from oasis_glmatrix.exports import invoke
from oasis_glmatrix.glmatrix_config import GlMatrixConfig
from oasis_glmatrix.glmatrix_config import GlMatrixConfigError
from oasis_glmatrix.mat3_bindings import Mat3
from oasis_glmatrix.math_utils.validation import GlMatrixArgumentError
from oasis_glmatrix.quat_bindings import Quat


__all__ = [
    "EXPORTS",
    "GlMatrixArgumentError",
    "GlMatrixConfig",
    "GlMatrixConfigError",
    "Mat3",
    "Quat",
    "UnknownExportError",
    "export_names",
    "invoke",
]
