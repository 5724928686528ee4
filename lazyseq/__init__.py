# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Pull-based lazy sequences.

A sequence mints independent cursors; a cursor steps through elements on
demand with ``advance()``/``current()`` and is closed with ``release()``.
Generator functions act as sequences through ``GeneratorSequence``, and
combinators such as ``filter`` compose sequences without evaluating them.
"""

from ._array import ArrayCursor, ArraySequence, as_sequence
from ._base import CursorBase, SequenceBase
from ._config import Config, get_config, reload_config
from ._errors import IllegalStateError, SequenceError, UnsupportedOperationError
from ._factories import filter, take, transform, zip_sequences
from ._foreach import STOP, for_each, iterating, to_list
from ._generator import (
    GeneratorCursor,
    GeneratorSequence,
    GeneratorState,
    generator,
)
from ._pipeline import FilterSequence, TakeSequence, TransformSequence, ZipSequence
from ._protocol import CursorProtocol, SequenceProtocol
from ._recurrence import even_only, fibonacci, recurrence
from ._simple import ConstantSequence, CountingSequence
from .op import CompiledOp, JitOp, PythonOp, make_op_adapter

__all__ = [
    "ArrayCursor",
    "ArraySequence",
    "CompiledOp",
    "Config",
    "ConstantSequence",
    "CountingSequence",
    "CursorBase",
    "CursorProtocol",
    "FilterSequence",
    "GeneratorCursor",
    "GeneratorSequence",
    "GeneratorState",
    "IllegalStateError",
    "JitOp",
    "PythonOp",
    "STOP",
    "SequenceBase",
    "SequenceError",
    "SequenceProtocol",
    "TakeSequence",
    "TransformSequence",
    "UnsupportedOperationError",
    "ZipSequence",
    "as_sequence",
    "even_only",
    "fibonacci",
    "filter",
    "for_each",
    "generator",
    "get_config",
    "iterating",
    "make_op_adapter",
    "recurrence",
    "reload_config",
    "take",
    "to_list",
    "transform",
    "zip_sequences",
]
