# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Cursor and sequence protocols for lazyseq.

Defines the interface that cursors and sequences must implement to work
with the lazyseq combinators and iteration helpers.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class CursorProtocol(Protocol[T_co]):
    """
    Protocol defining a single forward-only traversal.

    A cursor starts positioned before the first element and is owned by
    exactly one consumer for the duration of one traversal.
    """

    def advance(self) -> bool:
        """
        Move to the next element.

        Returns:
            True if an element is available through ``current()``, False once
            the traversal is exhausted. Exhaustion is permanent.
        """
        ...

    def current(self) -> T_co:
        """
        Return the element at the current position.

        Raises:
            IllegalStateError: if the last ``advance()`` did not return True
        """
        ...

    def release(self) -> None:
        """Release the cursor. Safe to call more than once."""
        ...


@runtime_checkable
class SequenceProtocol(Protocol[T_co]):
    """
    Protocol defining a reentrant sequence.

    A sequence holds no iteration state; every call to ``iterate()`` must
    return a new, independent cursor.
    """

    def iterate(self) -> CursorProtocol[T_co]:
        """Return a new cursor positioned before the first element."""
        ...
