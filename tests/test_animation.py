import pytest
from hypothesis import given, strategies as st

from towercomb.animation import FRAME_DURATION, AnimationFrameQueue


def test_empty_frames_rejected():
    with pytest.raises(ValueError):
        AnimationFrameQueue([])


def test_empty_override_rejected():
    queue = AnimationFrameQueue([1])
    with pytest.raises(ValueError):
        queue.set_override([])


def test_empty_set_frames_rejected():
    queue = AnimationFrameQueue([1])
    with pytest.raises(ValueError):
        queue.set_frames(())


def test_no_frame_before_duration():
    queue = AnimationFrameQueue([4, 5])
    assert queue.tick(FRAME_DURATION / 3) is None
    assert queue.current_index == 0


def test_cycles_through_frames():
    queue = AnimationFrameQueue([0, 1, 2, 3, 4])
    shown = [queue.tick(FRAME_DURATION) for _ in range(7)]
    assert shown == [0, 1, 2, 3, 4, 0, 1]


def test_override_plays_once_then_returns():
    queue = AnimationFrameQueue([8, 9])
    queue.set_override([16, 17, 18])
    shown = [queue.tick(FRAME_DURATION) for _ in range(5)]
    assert shown == [16, 17, 18, 8, 9]
    assert queue.frame_override is None


def test_override_restarts_timer():
    queue = AnimationFrameQueue([1, 2])
    queue.tick(FRAME_DURATION * 0.9)
    queue.set_override([7])
    assert queue.tick(FRAME_DURATION * 0.5) is None
    assert queue.tick(FRAME_DURATION * 0.5) == 7


def test_set_frames_resets_index():
    queue = AnimationFrameQueue([1, 2, 3])
    queue.tick(FRAME_DURATION)
    queue.set_frames([5, 6])
    assert queue.current_index == 0
    assert queue.tick(FRAME_DURATION) == 5


@given(
    st.lists(st.integers(0, 50), min_size=1, max_size=10),
    st.integers(1, 40),
)
def test_frames_always_from_active_set(frames, steps):
    queue = AnimationFrameQueue(frames)
    for _ in range(steps):
        frame = queue.tick(FRAME_DURATION)
        assert frame in frames
        assert 0 <= queue.current_index < len(frames)