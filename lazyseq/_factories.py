# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Factory functions for pipeline combinators.

These provide the user-facing API, accepting sequences or plain collections
and Python callables or CompiledOp, and converting appropriately.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from ._array import as_sequence
from ._pipeline import FilterSequence, TakeSequence, TransformSequence, ZipSequence
from .op import CompiledOp, make_op_adapter

if TYPE_CHECKING:
    from ._base import SequenceBase

T = TypeVar("T")


def filter(
    sequence: "SequenceBase[T] | Any",
    predicate: Callable[[T], bool] | CompiledOp,
    jit: bool | None = None,
) -> FilterSequence[T]:
    """
    Create a sequence of the elements for which ``predicate`` is true.

    Nothing is read from ``sequence`` until the result is iterated.

    Args:
        sequence: The underlying sequence, or a collection to wrap
        predicate: Unary predicate (Python callable or CompiledOp)
        jit: Compile the predicate with Numba; None uses ``LAZYSEQ_JIT``

    Returns:
        FilterSequence over ``sequence``
    """
    return FilterSequence(as_sequence(sequence), make_op_adapter(predicate, jit=jit))


def transform(
    sequence: "SequenceBase | Any",
    op: Callable | CompiledOp,
    jit: bool | None = None,
) -> TransformSequence:
    """
    Create a sequence of ``op`` applied to each element of ``sequence``.

    Args:
        sequence: The underlying sequence, or a collection to wrap
        op: Unary transform operation (Python callable or CompiledOp)
        jit: Compile the operation with Numba; None uses ``LAZYSEQ_JIT``

    Returns:
        TransformSequence over ``sequence``
    """
    return TransformSequence(as_sequence(sequence), make_op_adapter(op, jit=jit))


def take(sequence: "SequenceBase[T] | Any", count: int) -> TakeSequence[T]:
    """Create a sequence of at most ``count`` leading elements of ``sequence``."""
    return TakeSequence(as_sequence(sequence), operator.index(count))


def zip_sequences(*sequences) -> ZipSequence:
    """
    Create a sequence of tuples drawn from each of ``sequences`` in lockstep.

    The result is exhausted as soon as any input is exhausted.
    """
    return ZipSequence([as_sequence(seq) for seq in sequences])
