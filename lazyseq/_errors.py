# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""Exceptions raised by cursors and sequences."""


class SequenceError(Exception):
    """Base class for cursor protocol violations."""


class IllegalStateError(SequenceError, RuntimeError):
    """
    Raised when a cursor is asked for a value it does not hold.

    This happens when ``current()`` is called before the first successful
    ``advance()``, after ``advance()`` has returned False, or after the
    cursor has been released.
    """


class UnsupportedOperationError(SequenceError, NotImplementedError):
    """Raised for operations cursors never support, such as ``reset()``."""
