################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for binding configuration."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from oasis_glmatrix.glmatrix_config import DEFAULT_CONFIG
from oasis_glmatrix.glmatrix_config import GlMatrixConfig
from oasis_glmatrix.glmatrix_config import GlMatrixConfigError
from oasis_glmatrix.glmatrix_config import resolve_config
from oasis_glmatrix.mat3_bindings import Mat3


def test_defaults_validate() -> None:
    """Defaults should validate successfully."""
    config: GlMatrixConfig = GlMatrixConfig.defaults()
    config.validate()
    assert config.check_lengths is True
    assert config.array_type is np.float32


def test_replace_returns_copy() -> None:
    """replace leaves the original configuration untouched."""
    config: GlMatrixConfig = GlMatrixConfig.defaults()
    changed: GlMatrixConfig = config.replace(check_lengths=False)
    assert changed.check_lengths is False
    assert config.check_lengths is True


def test_frozen() -> None:
    """Configuration is immutable."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.check_lengths = False  # type: ignore[misc]


def test_resolve_none_uses_defaults() -> None:
    """A missing configuration resolves to the shared defaults."""
    assert resolve_config(None) is DEFAULT_CONFIG


def test_invalid_array_type_rejected() -> None:
    """Unsupported output element types are rejected."""
    config: GlMatrixConfig = GlMatrixConfig(array_type=np.int32)
    with pytest.raises(GlMatrixConfigError, match="array_type"):
        config.validate()
    with pytest.raises(GlMatrixConfigError):
        Mat3.create(config=config)


def test_invalid_check_lengths_rejected() -> None:
    """check_lengths must be a bool."""
    config: GlMatrixConfig = GlMatrixConfig(check_lengths=1)  # type: ignore[arg-type]
    with pytest.raises(GlMatrixConfigError, match="check_lengths"):
        config.validate()
