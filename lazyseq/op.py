# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Operator adapters for pipeline combinators.

Predicates and transforms reach the combinators through an adapter, which
decides whether the callable is used as is or compiled with Numba. Compiling
happens when a cursor is created, never when a combinator is constructed.
"""

from __future__ import annotations

from typing import Callable, Union

from ._config import get_config


class PythonOp:
    """Plain Python callable, called as is."""

    __slots__ = ["_func"]

    def __init__(self, func: Callable):
        self._func = func

    @property
    def func(self) -> Callable:
        return self._func

    def compile(self) -> Callable:
        return self._func

    def __repr__(self) -> str:
        return f"PythonOp({_op_name(self._func)})"


class JitOp:
    """
    Python callable compiled with Numba on first use.

    The compiled dispatcher is shared by every JitOp wrapping the same
    callable.
    """

    __slots__ = ["_func"]

    def __init__(self, func: Callable):
        self._func = func

    @property
    def func(self) -> Callable:
        return self._func

    def compile(self) -> Callable:
        from ._jit import compile_jit_op

        return compile_jit_op(self._func)

    def __repr__(self) -> str:
        return f"JitOp({_op_name(self._func)})"


class CompiledOp:
    """
    Operator that was compiled elsewhere (for example a ``numba.njit``
    dispatcher). It is passed through without further compilation.
    """

    __slots__ = ["_func", "_name"]

    def __init__(self, func: Callable, name: str | None = None):
        if not callable(func):
            raise TypeError(f"CompiledOp requires a callable, got {type(func).__name__}")
        self._func = func
        self._name = name or _op_name(func)

    @property
    def name(self) -> str:
        return self._name

    def compile(self) -> Callable:
        return self._func

    def __repr__(self) -> str:
        return f"CompiledOp({self._name})"


OpAdapter = Union[PythonOp, JitOp, CompiledOp]


def _op_name(func) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def make_op_adapter(op, jit: bool | None = None) -> OpAdapter:
    """
    Create an adapter for an operator.

    Args:
        op: Python callable or an existing adapter
        jit: Compile the callable with Numba. None uses the ``LAZYSEQ_JIT``
            setting. Ignored when ``op`` is already an adapter.

    Returns:
        An adapter whose ``compile()`` returns the callable to invoke
    """
    if isinstance(op, (PythonOp, JitOp, CompiledOp)):
        return op
    if not callable(op):
        raise TypeError(f"Operator must be callable, got {type(op).__name__}")
    if jit is None:
        jit = get_config().jit
    return JitOp(op) if jit else PythonOp(op)
