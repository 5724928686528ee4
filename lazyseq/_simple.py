# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Computed sequence implementations.

These sequences produce their elements from a rule rather than a stored
collection.
"""

from __future__ import annotations

import operator

import numpy as np

from ._base import _END, CursorBase, SequenceBase


def _as_scalar(value) -> np.generic:
    """Normalize a Python number or numpy value to a numpy scalar."""
    if not isinstance(value, np.generic):
        value = np.array(value).flatten()[0]
    return value


def _convert(value, dtype: np.dtype, name: str) -> np.generic:
    """Convert `value` to `dtype`, refusing conversions that change it."""
    converted = dtype.type(value)
    if converted != value:
        raise ValueError(
            f"CountingSequence {name}={value!r} is not representable as {dtype}"
        )
    return converted


class CountingCursor(CursorBase[np.generic]):
    __slots__ = ["_next", "_stop", "_step_by"]

    def __init__(self, start: np.generic, stop: np.generic | None, step: np.generic):
        super().__init__()
        self._next = start
        self._stop = stop
        self._step_by = step

    def _step(self) -> np.generic:
        value = self._next
        if self._stop is not None:
            if self._step_by > 0 and value >= self._stop:
                return _END
            if self._step_by < 0 and value <= self._stop:
                return _END
        self._next = value + self._step_by
        return value


class CountingSequence(SequenceBase[np.generic]):
    """
    Sequence representing incrementing values.

    The sequence starts at `start` and increments by `step`, stopping before
    `stop` (or never, when `stop` is None).
    """

    __slots__ = ["_start", "_stop", "_step_by"]

    def __init__(self, start=0, stop=None, step=1):
        """
        Create a counting sequence.

        Args:
            start: The initial value (a Python number or numpy scalar)
            stop: Exclusive bound, or None for an unbounded sequence
            step: Non-zero increment
        """
        start = _as_scalar(start)
        dtype = start.dtype
        self._start = start
        self._stop = None if stop is None else _convert(stop, dtype, "stop")
        self._step_by = _convert(step, dtype, "step")
        if self._step_by == 0:
            raise ValueError("CountingSequence step must be non-zero")

    @property
    def value_type(self) -> np.dtype:
        return self._start.dtype

    def iterate(self) -> CountingCursor:
        return CountingCursor(self._start, self._stop, self._step_by)

    def __repr__(self) -> str:
        return (
            f"CountingSequence(start={self._start!r}, stop={self._stop!r}, "
            f"step={self._step_by!r})"
        )


class ConstantCursor(CursorBase[np.generic]):
    __slots__ = ["_constant", "_remaining"]

    def __init__(self, value: np.generic, count: int | None):
        super().__init__()
        self._constant = value
        self._remaining = count

    def _step(self) -> np.generic:
        if self._remaining is not None:
            if self._remaining == 0:
                return _END
            self._remaining -= 1
        return self._constant


class ConstantSequence(SequenceBase[np.generic]):
    """
    Sequence representing a constant value.

    Every element is the same value, repeated `count` times (or forever, when
    `count` is None).
    """

    __slots__ = ["_constant", "_count"]

    def __init__(self, value, count: int | None = None):
        """
        Create a constant sequence.

        Args:
            value: The constant value (a Python number or numpy scalar)
            count: Number of repetitions, or None for an unbounded sequence
        """
        if count is not None:
            count = operator.index(count)
        if count is not None and count < 0:
            raise ValueError(f"ConstantSequence count must be >= 0, got {count}")
        self._constant = _as_scalar(value)
        self._count = count

    @property
    def value_type(self) -> np.dtype:
        return self._constant.dtype

    def iterate(self) -> ConstantCursor:
        return ConstantCursor(self._constant, self._count)

    def __repr__(self) -> str:
        return f"ConstantSequence({self._constant!r}, count={self._count!r})"
