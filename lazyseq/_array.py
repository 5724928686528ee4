# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""ArraySequence implementation - sequence over a fixed ordered collection."""

from __future__ import annotations

from typing import Sequence, TypeVar

import numpy as np

from ._base import _END, CursorBase, SequenceBase

T = TypeVar("T")


class ArrayCursor(CursorBase[T]):
    """Cursor walking an index over a fixed collection."""

    __slots__ = ["_items", "_index"]

    def __init__(self, items: Sequence[T] | np.ndarray):
        super().__init__()
        self._items = items
        self._index = -1

    @property
    def index(self) -> int:
        """Return the index of the current element (-1 before the first advance)."""
        return self._index

    def _step(self) -> T:
        if self._index + 1 >= len(self._items):
            return _END
        self._index += 1
        return self._items[self._index]

    def _on_release(self) -> None:
        self._items = ()


class ArraySequence(SequenceBase[T]):
    """
    Sequence backed by a fixed ordered collection.

    Python collections are snapshotted into a tuple. numpy arrays are kept as
    a read-only view, so writes through this sequence are impossible while
    cursors are in flight.
    """

    __slots__ = ["_items", "_value_type"]

    def __init__(self, items: Sequence[T] | np.ndarray):
        """
        Create an array-backed sequence.

        Args:
            items: Any iterable of elements, or a one-dimensional numpy array
        """
        if isinstance(items, np.ndarray):
            if items.ndim != 1:
                raise ValueError(
                    f"ArraySequence requires a one-dimensional array, got ndim={items.ndim}"
                )
            view = items.view()
            view.flags.writeable = False
            self._items = view
            self._value_type: np.dtype | None = items.dtype
        else:
            self._items = tuple(items)
            self._value_type = None

    @property
    def value_type(self) -> np.dtype | None:
        return self._value_type

    def iterate(self) -> ArrayCursor[T]:
        return ArrayCursor(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArraySequence({list(self._items)!r})"


def _is_sequence(obj) -> bool:
    """Check if an object is a sequence (has a callable iterate method)."""
    return hasattr(obj, "iterate") and callable(obj.iterate)


def as_sequence(obj) -> SequenceBase:
    """
    Return ``obj`` as a sequence.

    Sequences pass through unchanged; any other reiterable collection or
    numpy array is wrapped in an ArraySequence. One-shot iterators are
    rejected, since they cannot mint independent cursors.
    """
    if _is_sequence(obj):
        return obj
    if not hasattr(obj, "__iter__"):
        raise TypeError(f"Cannot build a sequence from {type(obj).__name__}")
    if iter(obj) is obj:
        raise TypeError(
            f"Cannot build a reentrant sequence from a one-shot {type(obj).__name__}; "
            "wrap the generator function in GeneratorSequence instead"
        )
    return ArraySequence(obj)
