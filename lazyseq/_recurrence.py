# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""Recurrence sequences built on the generator engine."""

from __future__ import annotations

import operator
from typing import Callable, TypeVar

from ._factories import filter
from ._generator import GeneratorSequence

T = TypeVar("T")


def _run_recurrence(step: Callable[[T, T], T], prev: T, cur: T, count: int | None):
    produced = 0
    while count is None or produced < count:
        yield prev
        produced += 1
        prev, cur = cur, step(prev, cur)


def recurrence(
    step: Callable[[T, T], T], seed: tuple[T, T], count: int | None = None
) -> GeneratorSequence[T]:
    """
    Create a sequence from a second-order recurrence.

    Starting from ``seed = (prev, cur)``, each element is ``prev``, after which
    the pair becomes ``(cur, step(prev, cur))``.

    Args:
        step: Function computing the next term from the previous two
        seed: The first two terms
        count: Number of terms to produce, or None for an unbounded sequence
    """
    if count is not None:
        count = operator.index(count)
    if count is not None and count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    prev, cur = seed
    return GeneratorSequence(_run_recurrence, step, prev, cur, count)


def fibonacci(count: int | None = None) -> GeneratorSequence[int]:
    """Fibonacci numbers starting ``1, 1, 2, 3, 5, 8``."""
    return recurrence(operator.add, (1, 1), count)


def _is_even(x) -> bool:
    return x % 2 == 0


def even_only(sequence):
    """Keep only the even elements of ``sequence``."""
    return filter(sequence, _is_even, jit=False)
