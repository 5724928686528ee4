# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Composite sequence implementations.

These sequences wrap other sequences and compose their cursors. Building a
composite sequence never touches the underlying sequence; the underlying
cursor is created by ``iterate()`` and stepped only by ``advance()``.
"""

from __future__ import annotations

import contextlib
import operator
from typing import Any, Callable, Sequence, TypeVar

from ._base import _END, CursorBase, SequenceBase
from .op import OpAdapter

T = TypeVar("T")


class FilterCursor(CursorBase[T]):
    __slots__ = ["_upstream", "_predicate"]

    def __init__(self, upstream: CursorBase[T], predicate: Callable[[T], bool]):
        super().__init__()
        self._upstream = upstream
        self._predicate = predicate

    def _step(self) -> T:
        upstream = self._upstream
        while upstream.advance():
            value = upstream.current()
            if self._predicate(value):
                return value
        return _END

    def _on_release(self) -> None:
        self._upstream.release()


class FilterSequence(SequenceBase[T]):
    """
    Sequence of the underlying elements accepted by a predicate.

    Rejected elements are skipped inside ``advance()``; relative order is
    preserved and nothing is materialized.
    """

    __slots__ = ["_underlying", "_predicate"]

    def __init__(self, underlying: SequenceBase[T], predicate: OpAdapter):
        """
        Create a filter sequence.

        Args:
            underlying: The sequence to filter
            predicate: Adapter for the predicate deciding which elements to keep
        """
        self._underlying = underlying
        self._predicate = predicate

    @property
    def value_type(self):
        return self._underlying.value_type

    def iterate(self) -> FilterCursor[T]:
        predicate = self._predicate.compile()
        return FilterCursor(self._underlying.iterate(), predicate)

    def __repr__(self) -> str:
        return f"FilterSequence({self._underlying!r}, {self._predicate!r})"


class TransformCursor(CursorBase[Any]):
    __slots__ = ["_upstream", "_op"]

    def __init__(self, upstream: CursorBase, op: Callable):
        super().__init__()
        self._upstream = upstream
        self._op = op

    def _step(self) -> Any:
        if not self._upstream.advance():
            return _END
        return self._op(self._upstream.current())

    def _on_release(self) -> None:
        self._upstream.release()


class TransformSequence(SequenceBase[Any]):
    """
    Sequence that applies a unary operation to values from an underlying sequence.

    The operation runs once per element, when ``advance()`` reaches it.
    """

    __slots__ = ["_underlying", "_op"]

    def __init__(self, underlying: SequenceBase, op: OpAdapter):
        """
        Create a transform sequence.

        Args:
            underlying: The sequence to transform
            op: Adapter for the unary transform operation
        """
        self._underlying = underlying
        self._op = op

    def iterate(self) -> TransformCursor:
        op = self._op.compile()
        return TransformCursor(self._underlying.iterate(), op)

    def __repr__(self) -> str:
        return f"TransformSequence({self._underlying!r}, {self._op!r})"


class TakeCursor(CursorBase[T]):
    __slots__ = ["_upstream", "_remaining"]

    def __init__(self, upstream: CursorBase[T], count: int):
        super().__init__()
        self._upstream = upstream
        self._remaining = count

    def _step(self) -> T:
        # Never step the upstream past the last element we hand out
        if self._remaining == 0:
            return _END
        if not self._upstream.advance():
            return _END
        self._remaining -= 1
        return self._upstream.current()

    def _on_release(self) -> None:
        self._upstream.release()


class TakeSequence(SequenceBase[T]):
    """Sequence of at most `count` leading elements of an underlying sequence."""

    __slots__ = ["_underlying", "_count"]

    def __init__(self, underlying: SequenceBase[T], count: int):
        count = operator.index(count)
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._underlying = underlying
        self._count = count

    @property
    def value_type(self):
        return self._underlying.value_type

    def iterate(self) -> TakeCursor[T]:
        return TakeCursor(self._underlying.iterate(), self._count)

    def __repr__(self) -> str:
        return f"TakeSequence({self._underlying!r}, {self._count})"


def _release_all(cursors: Sequence[CursorBase]) -> None:
    with contextlib.ExitStack() as stack:
        for cursor in cursors:
            stack.callback(cursor.release)


class ZipCursor(CursorBase[tuple]):
    __slots__ = ["_upstreams"]

    def __init__(self, upstreams: Sequence[CursorBase]):
        super().__init__()
        self._upstreams = list(upstreams)

    def _step(self) -> tuple:
        values = []
        for upstream in self._upstreams:
            if not upstream.advance():
                return _END
            values.append(upstream.current())
        return tuple(values)

    def _on_release(self) -> None:
        _release_all(self._upstreams)


class ZipSequence(SequenceBase[tuple]):
    """
    Sequence that zips multiple sequences together.

    At each position, yields a tuple of values from all underlying sequences.
    The zip is exhausted as soon as any underlying sequence is.
    """

    __slots__ = ["_sequences"]

    def __init__(self, sequences: Sequence[SequenceBase]):
        """
        Create a zip sequence.

        Args:
            sequences: Sequence of sequences to zip together
        """
        if len(sequences) < 1:
            raise ValueError("ZipSequence requires at least one sequence")
        self._sequences = tuple(sequences)

    def iterate(self) -> ZipCursor:
        cursors: list[CursorBase] = []
        try:
            for seq in self._sequences:
                cursors.append(seq.iterate())
        except BaseException:
            _release_all(cursors)
            raise
        return ZipCursor(cursors)

    def __repr__(self) -> str:
        inner = ", ".join(repr(seq) for seq in self._sequences)
        return f"ZipSequence({inner})"
