# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Iteration helpers built on the cursor protocol.

Every helper here releases the cursor it creates, whether the traversal
finishes, stops early, or raises.
"""

from __future__ import annotations

import contextlib
from typing import Any, Callable, Iterator, TypeVar

from ._array import as_sequence
from ._protocol import CursorProtocol

T = TypeVar("T")


class _Stop:
    __slots__ = ()

    def __repr__(self) -> str:
        return "STOP"


#: Returned by a ``for_each`` action to end the traversal early.
STOP: Any = _Stop()


@contextlib.contextmanager
def iterating(sequence) -> Iterator[CursorProtocol]:
    """
    Open a cursor over ``sequence`` for the duration of a ``with`` block.

    Example:
        >>> with iterating([1, 2, 3]) as cursor:
        ...     while cursor.advance():
        ...         print(cursor.current())
    """
    cursor = as_sequence(sequence).iterate()
    try:
        yield cursor
    finally:
        cursor.release()


def for_each(sequence, action: Callable[[T], Any]) -> int:
    """
    Call ``action`` on each element of ``sequence``.

    The traversal stops early when ``action`` returns ``STOP``.

    Returns:
        The number of elements passed to ``action``
    """
    visited = 0
    with iterating(sequence) as cursor:
        while cursor.advance():
            visited += 1
            if action(cursor.current()) is STOP:
                break
    return visited


def to_list(sequence) -> list:
    """Materialize ``sequence`` into a list."""
    items: list = []
    for_each(sequence, items.append)
    return items
