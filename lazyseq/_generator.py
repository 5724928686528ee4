# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Generator-backed sequences.

A generator body is an ordinary Python generator function: each ``yield`` is
a production point. The cursor drives the generator one production point per
``advance()``, so values are computed only when requested.

Cursor states::

    NOT_STARTED -> SUSPENDED(1) -> SUSPENDED(2) -> ... -> COMPLETED
         |              |
         +--------------+-------> ABANDONED   (early release, or body raised)

COMPLETED and ABANDONED are terminal.

Releasing a cursor before completion closes the underlying generator:
``GeneratorExit`` is raised at the parked ``yield``, so the body's own
``finally`` and ``with`` blocks run, but no further production code does.
"""

from __future__ import annotations

import enum
import functools
import inspect
from typing import Any, Callable, Generator, TypeVar

from ._base import _END, CursorBase, SequenceBase

T = TypeVar("T")


class GeneratorState(enum.Enum):
    NOT_STARTED = "not-started"
    SUSPENDED = "suspended"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class GeneratorCursor(CursorBase[T]):
    """Cursor driving one run of a generator body."""

    __slots__ = ["_generator", "_state", "_production_count"]

    def __init__(self, gen: Generator[T, None, Any]):
        super().__init__()
        self._generator: Generator[T, None, Any] | None = gen
        self._state = GeneratorState.NOT_STARTED
        self._production_count = 0

    @property
    def state(self) -> GeneratorState:
        return self._state

    @property
    def production_count(self) -> int:
        """Return how many production points this run has reached."""
        return self._production_count

    def _step(self) -> T:
        if self._generator is None:
            return _END

        try:
            value = next(self._generator)
        except StopIteration:
            self._state = GeneratorState.COMPLETED
            self._generator = None
            return _END
        except BaseException:
            self._state = GeneratorState.ABANDONED
            self._generator = None
            raise

        self._state = GeneratorState.SUSPENDED
        self._production_count += 1
        return value

    def _on_release(self) -> None:
        gen = self._generator
        if gen is None:
            return
        self._generator = None
        self._state = GeneratorState.ABANDONED
        gen.close()


class GeneratorSequence(SequenceBase[T]):
    """
    Sequence whose elements are produced by a generator function.

    Each ``iterate()`` calls the function again, so every cursor runs the body
    from the start with fresh local state.
    """

    __slots__ = ["_func", "_args", "_kwargs"]

    def __init__(
        self, func: Callable[..., Generator[T, None, Any]], *args, **kwargs
    ):
        """
        Create a generator-backed sequence.

        Args:
            func: Generator function producing the elements
            *args: Positional arguments passed to ``func`` on every run
            **kwargs: Keyword arguments passed to ``func`` on every run
        """
        if not callable(func):
            raise TypeError(f"func must be callable, got {type(func).__name__}")
        self._func = func
        self._args = args
        self._kwargs = kwargs

    def iterate(self) -> GeneratorCursor[T]:
        gen = self._func(*self._args, **self._kwargs)
        if not inspect.isgenerator(gen):
            raise TypeError(
                f"{_func_name(self._func)} must return a generator, "
                f"got {type(gen).__name__}"
            )
        return GeneratorCursor(gen)

    def __repr__(self) -> str:
        return f"GeneratorSequence({_func_name(self._func)})"


def _func_name(func) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def generator(func: Callable[..., Generator[T, None, Any]]):
    """
    Turn a generator function into a sequence factory.

    Example:
        >>> @generator
        ... def countdown(n):
        ...     while n > 0:
        ...         yield n
        ...         n -= 1
        >>> list(countdown(3))
        [3, 2, 1]
    """
    if not inspect.isgeneratorfunction(func):
        raise TypeError(f"{_func_name(func)} is not a generator function")

    @functools.wraps(func)
    def factory(*args, **kwargs) -> GeneratorSequence[T]:
        return GeneratorSequence(func, *args, **kwargs)

    return factory
