################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for host-side numeric buffers."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from oasis_glmatrix.glmatrix_types import HostBuffer


_LOG: logging.Logger = logging.getLogger(__name__)


class GlMatrixArgumentError(ValueError):
    """Raised when an input buffer has the wrong shape for its type."""


def as_buffer(
    values: HostBuffer,
    size: int,
    name: str,
    check_lengths: bool = True,
    accepted_sizes: tuple[int, ...] = (),
) -> NDArray[np.float64]:
    """
    Return a float64 vector of exactly ``size`` elements.

    Buffers whose length is in ``accepted_sizes`` are truncated to ``size``.
    When ``check_lengths`` is False, other lengths are tolerated the way a
    dynamically typed host reads them: missing components become NaN and
    surplus components are ignored. Non-finite values are never rejected.
    """
    array: NDArray[np.float64] = np.asarray(values, dtype=np.float64)
    if array.ndim != 1:
        raise GlMatrixArgumentError(f"{name} must be one-dimensional")

    if array.size == size:
        return array
    if array.size in accepted_sizes and array.size > size:
        return array[:size]

    if check_lengths:
        raise GlMatrixArgumentError(f"{name} must have {size} elements")

    _LOG.debug("%s has %d elements, expected %d", name, array.size, size)
    padded: NDArray[np.float64] = np.full(size, np.nan, dtype=np.float64)
    count: int = min(size, array.size)
    padded[:count] = array[:count]
    return padded
