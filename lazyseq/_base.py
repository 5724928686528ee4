# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Base classes for cursors and sequences.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, TypeVar

from ._config import get_config
from ._errors import IllegalStateError, UnsupportedOperationError

if TYPE_CHECKING:
    import numpy as np

T = TypeVar("T")

# Returned by CursorBase._step() when the traversal has no more elements.
_END: Any = object()


class CursorBase(Generic[T]):
    """
    Base class for cursors.

    Subclasses must implement:
    - _step() -> T | _END  # produce the next element, or _END when exhausted

    Optionally override:
    - _on_release() to free whatever the traversal holds (upstream cursors,
      suspended generators)

    The base class handles the exhaustion flag, the current-value slot,
    idempotent release and context-manager support.
    """

    __slots__ = [
        "_exhausted",
        "_released",
        "_has_value",
        "_value",
        "_stepping",
    ]

    def __init__(self):
        self._exhausted = False
        self._released = False
        self._has_value = False
        self._value: T | None = None
        self._stepping = False

    @property
    def exhausted(self) -> bool:
        """Return True once ``advance()`` has returned False."""
        return self._exhausted

    @property
    def released(self) -> bool:
        """Return True once ``release()`` has been called."""
        return self._released

    def advance(self) -> bool:
        """Move to the next element. Returns False once exhausted."""
        if self._exhausted or self._released:
            self._clear_value()
            return False

        if self._stepping:
            raise IllegalStateError(
                f"{type(self).__name__}.advance() called while it is already advancing"
            )

        self._stepping = True
        try:
            value = self._step()
        except BaseException:
            self._clear_value()
            self._exhausted = True
            raise
        finally:
            self._stepping = False

        if value is _END:
            self._clear_value()
            self._exhausted = True
            return False

        self._value = value
        self._has_value = True
        return True

    def current(self) -> T:
        """Return the element produced by the last successful ``advance()``."""
        if not self._has_value:
            if self._released:
                reason = "cursor has been released"
            elif self._exhausted:
                reason = "cursor is exhausted"
            else:
                reason = "advance() has not been called"
            raise IllegalStateError(f"No current element: {reason}")
        return self._value  # type: ignore[return-value]

    def release(self) -> None:
        """Release the cursor. Repeated calls have no effect."""
        if self._released:
            return
        self._released = True
        self._clear_value()
        self._on_release()

    def reset(self) -> None:
        raise UnsupportedOperationError("Cursors are forward-only and cannot be reset")

    def _clear_value(self) -> None:
        self._has_value = False
        self._value = None

    def __enter__(self) -> "CursorBase[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __iter__(self) -> "CursorBase[T]":
        return self

    def __next__(self) -> T:
        if not self.advance():
            raise StopIteration
        return self.current()

    def __del__(self):
        if getattr(self, "_released", True):
            return
        try:
            warn = get_config().warn_unreleased
        except ValueError:
            # Invalid setting; reported by the next explicit get_config()
            return
        if warn:
            warnings.warn(
                f"{type(self).__name__} was garbage-collected without being released",
                ResourceWarning,
                stacklevel=2,
            )

    # Abstract methods for subclasses
    def _step(self) -> T:
        """Produce the next element, or return _END when exhausted."""
        raise NotImplementedError

    def _on_release(self) -> None:
        """Free resources held by the traversal."""


class SequenceBase(Generic[T]):
    """
    Base class for sequences.

    Subclasses must implement:
    - iterate() -> CursorBase  # a new cursor for each call

    A sequence must not carry iteration state, so calling ``iterate()``
    repeatedly yields cursors that never interfere with each other.
    """

    __slots__ = ()

    def iterate(self) -> CursorBase[T]:
        """Return a new cursor positioned before the first element."""
        raise NotImplementedError

    @property
    def value_type(self) -> "np.dtype | None":
        """Return the dtype of the elements, or None when it is not known."""
        return None

    def __iter__(self) -> Iterator[T]:
        cursor = self.iterate()
        try:
            while cursor.advance():
                yield cursor.current()
        finally:
            cursor.release()

    def filter(self, predicate: Callable[[T], bool], jit: bool | None = None):
        """Return a sequence of the elements accepted by ``predicate``."""
        from ._factories import filter as _filter

        return _filter(self, predicate, jit=jit)

    def transform(self, op: Callable[[T], Any], jit: bool | None = None):
        """Return a sequence of ``op`` applied to each element."""
        from ._factories import transform as _transform

        return _transform(self, op, jit=jit)

    def take(self, count: int):
        """Return a sequence of at most ``count`` leading elements."""
        from ._factories import take as _take

        return _take(self, count)
