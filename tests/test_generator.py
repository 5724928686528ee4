# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Tests for generator-backed sequences.
"""

import pytest

from lazyseq import (
    GeneratorSequence,
    GeneratorState,
    IllegalStateError,
    fibonacci,
    generator,
    recurrence,
    take,
    to_list,
)


def _logged_body(log):
    log.append("start")
    yield 1
    log.append("after-1")
    yield 2
    log.append("end")


def _with_cleanup(events, limit=None):
    try:
        n = 0
        while limit is None or n < limit:
            yield n
            n += 1
    finally:
        events.append("cleanup")


def test_fibonacci_six_terms():
    assert to_list(fibonacci(6)) == [1, 1, 2, 3, 5, 8]


def test_fibonacci_zero_terms():
    assert to_list(fibonacci(0)) == []


def test_unbounded_fibonacci_with_take():
    assert to_list(take(fibonacci(), 8)) == [1, 1, 2, 3, 5, 8, 13, 21]


def test_reiteration_reproduces_output():
    """Each iterate() starts a fresh run; nothing leaks between runs."""
    seq = fibonacci(10)
    assert to_list(seq) == to_list(seq) == [1, 1, 2, 3, 5, 8, 13, 21, 34, 55]


def test_runs_are_independent():
    seq = fibonacci()
    a = seq.iterate()
    b = seq.iterate()

    for _ in range(4):
        a.advance()
    assert a.current() == 3

    assert b.advance()
    assert b.current() == 1
    assert a.advance()
    assert a.current() == 5

    a.release()
    b.release()


def test_state_machine_and_production_points():
    log = []
    seq = GeneratorSequence(_logged_body, log)
    assert log == []

    cursor = seq.iterate()
    assert log == []
    assert cursor.state is GeneratorState.NOT_STARTED
    assert cursor.production_count == 0

    assert cursor.advance()
    assert log == ["start"]
    assert cursor.current() == 1
    assert cursor.state is GeneratorState.SUSPENDED
    assert cursor.production_count == 1

    assert cursor.advance()
    assert log == ["start", "after-1"]
    assert cursor.current() == 2
    assert cursor.production_count == 2

    assert not cursor.advance()
    assert log == ["start", "after-1", "end"]
    assert cursor.state is GeneratorState.COMPLETED

    assert not cursor.advance()
    assert log == ["start", "after-1", "end"]

    cursor.release()
    assert cursor.state is GeneratorState.COMPLETED


def test_abandon_does_not_run_past_last_production_point():
    log = []

    def body():
        for i in range(5):
            log.append(i)
            yield i

    cursor = GeneratorSequence(body).iterate()
    cursor.advance()
    cursor.advance()
    cursor.release()

    assert log == [0, 1]
    assert cursor.state is GeneratorState.ABANDONED
    assert not cursor.advance()
    assert log == [0, 1]
    with pytest.raises(IllegalStateError):
        cursor.current()


def test_abandon_runs_body_cleanup():
    events = []
    cursor = GeneratorSequence(_with_cleanup, events).iterate()
    assert cursor.advance()
    assert events == []

    cursor.release()
    assert events == ["cleanup"]

    cursor.release()
    assert events == ["cleanup"]


def test_release_before_start_runs_nothing():
    log = []
    cursor = GeneratorSequence(_logged_body, log).iterate()
    cursor.release()

    assert log == []
    assert cursor.state is GeneratorState.ABANDONED
    assert not cursor.advance()


def test_cleanup_runs_once_on_completion():
    events = []
    assert to_list(GeneratorSequence(_with_cleanup, events, 3)) == [0, 1, 2]
    assert events == ["cleanup"]


def test_body_error_propagates_and_abandons():
    def body():
        yield 1
        raise KeyError("boom")

    cursor = GeneratorSequence(body).iterate()
    assert cursor.advance()

    with pytest.raises(KeyError, match="boom"):
        cursor.advance()

    assert cursor.state is GeneratorState.ABANDONED
    assert cursor.exhausted
    assert not cursor.advance()
    with pytest.raises(IllegalStateError):
        cursor.current()
    cursor.release()


def test_body_advancing_its_own_cursor_is_rejected():
    cursors = []
    errors = []

    def body():
        try:
            cursors[0].advance()
        except IllegalStateError as exc:
            errors.append(exc)
        yield 1
        yield 2

    cursor = GeneratorSequence(body).iterate()
    cursors.append(cursor)

    assert cursor.advance()
    assert cursor.current() == 1
    assert len(errors) == 1
    assert "already advancing" in str(errors[0])
    assert cursor.state is GeneratorState.SUSPENDED
    assert cursor.production_count == 1

    assert cursor.advance()
    assert cursor.current() == 2
    assert not cursor.advance()
    assert cursor.state is GeneratorState.COMPLETED
    cursor.release()


def test_yield_during_cleanup_raises_from_release():
    def body():
        try:
            yield 1
        finally:
            yield 2

    cursor = GeneratorSequence(body).iterate()
    cursor.advance()

    with pytest.raises(RuntimeError):
        cursor.release()

    assert cursor.released
    assert cursor.state is GeneratorState.ABANDONED
    cursor.release()


def test_arguments_are_passed_on_every_run():
    def body(start, *, step):
        yield start
        yield start + step

    seq = GeneratorSequence(body, 10, step=5)
    assert to_list(seq) == [10, 15]
    assert to_list(seq) == [10, 15]


def test_decorator():
    @generator
    def countdown(n):
        while n > 0:
            yield n
            n -= 1

    seq = countdown(3)
    assert isinstance(seq, GeneratorSequence)
    assert to_list(seq) == [3, 2, 1]
    assert countdown.__name__ == "countdown"
    assert "countdown" in repr(seq)


def test_decorator_rejects_plain_function():
    def not_a_generator():
        return [1, 2]

    with pytest.raises(TypeError, match="not a generator function"):
        generator(not_a_generator)


def test_non_callable_is_rejected():
    with pytest.raises(TypeError, match="callable"):
        GeneratorSequence([1, 2, 3])


def test_iterate_requires_a_generator():
    seq = GeneratorSequence(lambda: [1, 2])
    with pytest.raises(TypeError, match="must return a generator"):
        seq.iterate()


class TestRecurrence:
    def test_custom_step(self):
        seq = recurrence(lambda a, b: a * b, (2, 3), 5)
        assert to_list(seq) == [2, 3, 6, 18, 108]

    def test_negative_count(self):
        with pytest.raises(ValueError, match="count must be >= 0"):
            recurrence(lambda a, b: a + b, (0, 1), -1)

    def test_fractional_count(self):
        with pytest.raises(TypeError):
            recurrence(lambda a, b: a + b, (1, 1), 2.5)

    def test_step_runs_lazily(self):
        calls = []

        def step(a, b):
            calls.append((a, b))
            return a + b

        cursor = recurrence(step, (1, 1)).iterate()
        cursor.advance()
        assert calls == []
        cursor.advance()
        assert calls == [(1, 1)]
        cursor.release()
        assert calls == [(1, 1)]
