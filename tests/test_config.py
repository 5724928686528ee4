# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Tests for environment-driven configuration.
"""

import os
import warnings
from unittest.mock import patch

import pytest

from lazyseq import (
    ArraySequence,
    Config,
    JitOp,
    PythonOp,
    get_config,
    make_op_adapter,
    reload_config,
)


@pytest.fixture(autouse=True)
def restore_config():
    yield
    reload_config()


class TestConfig:
    """Test reading configuration from the environment."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        assert reload_config() == Config(warn_unreleased=False, jit=False)

    @patch.dict(os.environ, {"LAZYSEQ_WARN_UNRELEASED": "1", "LAZYSEQ_JIT": "off"})
    def test_flags(self):
        config = reload_config()
        assert config.warn_unreleased is True
        assert config.jit is False

    @patch.dict(os.environ, {"LAZYSEQ_JIT": "maybe"})
    def test_invalid_value(self):
        with pytest.raises(ValueError, match="Invalid value for LAZYSEQ_JIT"):
            reload_config()

    @patch.dict(os.environ, {"LAZYSEQ_JIT": "yes"})
    def test_jit_default_for_operators(self):
        reload_config()
        assert isinstance(make_op_adapter(abs), JitOp)
        assert isinstance(make_op_adapter(abs, jit=False), PythonOp)


class TestUnreleasedWarning:
    """Test the ResourceWarning for cursors dropped without release."""

    @patch.dict(os.environ, {"LAZYSEQ_WARN_UNRELEASED": "1"})
    def test_warns_when_enabled(self):
        reload_config()
        cursor = ArraySequence([1]).iterate()
        cursor.advance()
        with pytest.warns(ResourceWarning, match="without being released"):
            del cursor

    @patch.dict(os.environ, {"LAZYSEQ_WARN_UNRELEASED": "1"})
    def test_released_cursor_does_not_warn(self):
        reload_config()
        cursor = ArraySequence([1]).iterate()
        cursor.release()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            del cursor
        assert not [w for w in caught if issubclass(w.category, ResourceWarning)]

    @patch.dict(os.environ, {}, clear=True)
    def test_silent_by_default(self):
        reload_config()
        cursor = ArraySequence([1]).iterate()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            del cursor
        assert not [w for w in caught if issubclass(w.category, ResourceWarning)]

    @patch.dict(os.environ, {"LAZYSEQ_WARN_UNRELEASED": "maybe"})
    def test_invalid_setting_does_not_raise_from_finalizer(self):
        get_config.cache_clear()
        cursor = ArraySequence([1]).iterate()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            cursor.__del__()
        assert not caught
        cursor.release()
        with pytest.raises(ValueError, match="Invalid value for LAZYSEQ_WARN_UNRELEASED"):
            get_config()
