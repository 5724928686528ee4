# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Runtime configuration read from environment variables.

Recognized variables:
    LAZYSEQ_WARN_UNRELEASED: emit a ResourceWarning when a cursor is
        garbage-collected without being released (default: 0)
    LAZYSEQ_JIT: default for the ``jit`` flag of ``filter``/``transform``
        when it is left as None (default: 0)
"""

from __future__ import annotations

import functools
import os
from typing import NamedTuple

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


class Config(NamedTuple):
    warn_unreleased: bool
    jit: bool


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid value for {name}: {raw!r} (expected 0 or 1)")


@functools.lru_cache(maxsize=1)
def get_config() -> Config:
    """Return the configuration, reading the environment on first use."""
    return Config(
        warn_unreleased=_env_flag("LAZYSEQ_WARN_UNRELEASED"),
        jit=_env_flag("LAZYSEQ_JIT"),
    )


def reload_config() -> Config:
    """Drop the cached configuration and read the environment again."""
    get_config.cache_clear()
    return get_config()
