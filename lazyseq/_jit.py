# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
JIT compilation support for lazyseq.

This module handles compiling Python callables with Numba. It is imported
lazily only when an operator is created with ``jit=True``.
"""

from __future__ import annotations

import functools
from typing import Callable

import numba
from numba.extending import is_jitted


# Keyed on the callable: one dispatcher per Python function.
@functools.lru_cache(maxsize=None)
def compile_jit_op(func: Callable) -> Callable:
    """
    Compile a Python callable in Numba's nopython mode.

    Compilation is specialized on the argument types of the first call, so
    typing errors surface when the first element reaches the operator.

    Args:
        func: Python callable to compile

    Returns:
        Numba dispatcher wrapping ``func``
    """
    if is_jitted(func):
        return func
    return numba.njit(func)
