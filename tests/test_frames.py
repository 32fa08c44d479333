"""Tests for frames and the traced-error capability."""

from __future__ import annotations

import traceback

import pytest

from stackshow.frames import Frame, Traced, TracedException, stack_trace_of


def _inner():
    raise KeyError("missing")


def _outer():
    _inner()


class TestFrame:
    def test_str(self):
        assert str(Frame("pkg/mod.py", 12, "handler")) == "handler (pkg/mod.py:12)"

    @pytest.mark.parametrize("line", [0, -3])
    def test_line_must_be_positive(self, line):
        with pytest.raises(ValueError, match="1-based"):
            Frame("a.py", line, "f")

    def test_frozen_and_hashable(self):
        frame = Frame("a.py", 1, "f")
        assert frame == Frame("a.py", 1, "f")
        assert len({frame, Frame("a.py", 1, "f")}) == 1


class TestCapability:
    def test_plain_exception_has_no_trace(self):
        assert stack_trace_of(ValueError("x")) is None

    def test_arbitrary_object_has_no_trace(self):
        assert stack_trace_of("just a string") is None

    def test_traced_exception(self):
        frames = [Frame("a.py", 1, "f"), Frame("b.py", 2, "g")]
        err = TracedException("bad", frames)
        assert isinstance(err, Traced)
        assert stack_trace_of(err) == tuple(frames)
        assert err.message() == "bad"

    def test_duck_typed_error(self):
        class Custom:
            def message(self):
                return "custom"

            def stack_trace(self):
                return [Frame("c.py", 3, "h")]

        assert stack_trace_of(Custom()) == [Frame("c.py", 3, "h")]


class TestFromException:
    def test_frames_outermost_first(self):
        try:
            _outer()
        except KeyError as e:
            traced = TracedException.from_exception(e)

        names = [frame.func for frame in traced.stack_trace()]
        assert names == ["test_frames_outermost_first", "_outer", "_inner"]
        assert all(frame.path == __file__ for frame in traced.stack_trace())

    def test_message_includes_type(self):
        try:
            _outer()
        except KeyError as e:
            traced = TracedException.from_exception(e)
            assert traced.cause is e
        assert traced.message() == "KeyError: 'missing'"

    def test_empty_message(self):
        try:
            raise RuntimeError()
        except RuntimeError as e:
            traced = TracedException.from_exception(e)
        assert traced.message() == "RuntimeError"
        assert len(traced.stack_trace()) == 1

    def test_line_numbers_point_at_raise(self):
        try:
            _inner()
        except KeyError as e:
            traced = TracedException.from_exception(e)
        last = traced.stack_trace()[-1]
        assert last.line == _inner.__code__.co_firstlineno + 1

    def test_never_raised_has_no_frames(self):
        assert TracedException.from_exception(ValueError("x")).stack_trace() == ()

    def test_entries_without_line_are_dropped(self, monkeypatch):
        summary = traceback.StackSummary.from_list(
            [
                traceback.FrameSummary("a.py", 3, "outer", lookup_line=False),
                traceback.FrameSummary("<generated>", None, "glue", lookup_line=False),
                traceback.FrameSummary("b.py", 7, "inner", lookup_line=False),
            ]
        )
        monkeypatch.setattr(traceback, "extract_tb", lambda tb: summary)
        traced = TracedException.from_exception(ValueError("x"))
        assert traced.stack_trace() == (Frame("a.py", 3, "outer"), Frame("b.py", 7, "inner"))
