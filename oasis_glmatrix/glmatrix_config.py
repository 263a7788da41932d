################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for the gl-matrix bindings."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace
from typing import Any

import numpy as np


# Reject input buffers whose length does not match their type
CHECK_LENGTHS: bool = True

# Element type of output buffers, matching gl-matrix's Float32Array default
ARRAY_TYPE: type = np.float32

# Element types accepted for output buffers
SUPPORTED_ARRAY_TYPES: tuple[type, ...] = (np.float32, np.float64)


class GlMatrixConfigError(Exception):
    """Raised when binding configuration validation fails."""


@dataclass(frozen=True)
class GlMatrixConfig:
    """
    Binding configuration values

    Fields:
        check_lengths: Raise on wrong-length inputs instead of reading missing
            components as NaN
        array_type: numpy scalar type of returned buffers
    """

    # Reject wrong-length input buffers
    check_lengths: bool = CHECK_LENGTHS
    # Output buffer element type
    array_type: type = ARRAY_TYPE

    @classmethod
    def defaults(cls) -> GlMatrixConfig:
        """Return the default binding configuration."""
        return cls()

    def validate(self) -> None:
        """Validate configuration invariants."""
        if not isinstance(self.check_lengths, bool):
            raise GlMatrixConfigError("check_lengths must be a bool")
        if self.array_type not in SUPPORTED_ARRAY_TYPES:
            raise GlMatrixConfigError(
                f"array_type must be one of {[t.__name__ for t in SUPPORTED_ARRAY_TYPES]}"
            )

    def replace(self, **overrides: Any) -> GlMatrixConfig:
        """Return a modified copy of the configuration."""
        return replace(self, **overrides)


# Shared immutable default configuration
DEFAULT_CONFIG: GlMatrixConfig = GlMatrixConfig.defaults()


def resolve_config(config: GlMatrixConfig | None) -> GlMatrixConfig:
    """Return the given configuration, or the defaults when None."""
    if config is None:
        return DEFAULT_CONFIG
    config.validate()
    return config
