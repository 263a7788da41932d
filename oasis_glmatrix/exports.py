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
Host-facing export table

Operations are exported under the camelCase names the host calls them by.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from oasis_glmatrix.glmatrix_config import GlMatrixConfig
from oasis_glmatrix.mat3_bindings import Mat3
from oasis_glmatrix.quat_bindings import Quat


_LOG: logging.Logger = logging.getLogger(__name__)


class UnknownExportError(KeyError):
    """Raised when the host requests an operation that is not exported."""


EXPORTS: dict[str, Callable[..., NDArray[np.floating]]] = {
    "fromScaling": Mat3.from_scaling,
    "fromTranslation": Mat3.from_translation,
    "normalFromMat4": Mat3.normal_from_mat4,
    "rotationTo": Quat.rotation_to,
    "setAxes": Quat.set_axes,
}


def export_names() -> list[str]:
    """Return the exported host names in sorted order."""
    return sorted(EXPORTS)


def invoke(
    name: str, *args: Any, config: GlMatrixConfig | None = None
) -> NDArray[np.floating]:
    """Call the operation exported under ``name`` with the given buffers."""
    try:
        func: Callable[..., NDArray[np.floating]] = EXPORTS[name]
    except KeyError:
        raise UnknownExportError(name) from None

    _LOG.debug("Invoking %s with %d arguments", name, len(args))
    return func(*args, config=config)
