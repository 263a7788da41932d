################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Fixed-length buffer types exchanged with the host."""

from __future__ import annotations

from typing import Sequence
from typing import Union

import numpy as np
from numpy.typing import NDArray


# Number of components in a 2-vector
VEC2_SIZE: int = 2
# Number of components in a 3-vector
VEC3_SIZE: int = 3
# Number of components in a quaternion, stored xyzw
QUAT_SIZE: int = 4
# Number of components in a flattened column-major 3x3 matrix
MAT3_SIZE: int = 9
# Number of components in a flattened column-major 4x4 matrix
MAT4_SIZE: int = 16

# Any host-side sequence of numbers accepted as input
HostBuffer = Union[Sequence[float], NDArray[np.floating]]

# Output buffers are freshly allocated 1-D arrays
Quat = NDArray[np.floating]
Mat3 = NDArray[np.floating]
