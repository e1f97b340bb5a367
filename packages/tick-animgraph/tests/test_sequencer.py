"""Tests for FrameSequencer."""
import pytest

from tick_animgraph import FrameSequencer, InvalidRange


def test_starts_at_first():
    """A new sequencer points at its first frame."""
    seq = FrameSequencer(3, 7)
    assert seq.current() == 3
    assert seq.offset == 0
    assert seq.range == (3, 7)


def test_length():
    assert FrameSequencer(0, 3).length() == 4
    assert FrameSequencer(11, 16).length() == 6


def test_iteration_wraps():
    """Stepping past the last frame returns to the first."""
    seq = FrameSequencer(0, 3)
    assert seq.advance() == 1
    seq.advance()
    seq.advance()
    assert seq.is_last_frame()
    assert seq.current() == 3
    assert seq.advance() == 0


def test_full_cycle_returns_to_start():
    seq = FrameSequencer(5, 9)
    start = seq.current()
    for _ in range(seq.length()):
        seq.advance(1)
    assert seq.current() == start


def test_last_frame_once_per_cycle():
    """is_last_frame is true exactly once per cycle, at offset length - 1."""
    seq = FrameSequencer(2, 6)
    hits = []
    for step in range(seq.length() * 3):
        if seq.is_last_frame():
            hits.append((step, seq.offset))
        seq.advance(1)
    assert hits == [(4, 4), (9, 4), (14, 4)]


def test_advance_many_steps():
    seq = FrameSequencer(10, 14)
    assert seq.advance(7) == 12
    assert seq.advance(0) == 12


def test_negative_steps_raise():
    seq = FrameSequencer(0, 3)
    with pytest.raises(ValueError):
        seq.advance(-1)


def test_invalid_range_raises():
    with pytest.raises(InvalidRange) as exc_info:
        FrameSequencer(1, 0)
    assert exc_info.value.first == 1
    assert exc_info.value.last == 0


def test_single_frame_range():
    """first == last is valid and always on its last frame."""
    seq = FrameSequencer(0, 0)
    assert seq.length() == 1
    assert seq.is_last_frame() is True
    assert seq.advance() == 0
    assert seq.is_last_frame() is True
