"""Sprite-sheet frame sequencing."""

from __future__ import annotations

from collections.abc import Sequence

from towercomb.timer import Timer, TimerMode

FRAME_DURATION = 0.15


class AnimationFrameQueue:
    """Cycles through atlas frame indices, with an optional one-shot override."""

    def __init__(self, frames: Sequence[int]) -> None:
        self.frames = _checked(frames, "Animation frames cannot be empty")
        self.frame_override: tuple[int, ...] | None = None
        self.current_index = 0
        self.timer = Timer(FRAME_DURATION, TimerMode.REPEATING)

    def __repr__(self) -> str:
        return (
            f"AnimationFrameQueue(frames={self.frames!r}, "
            f"frame_override={self.frame_override!r}, "
            f"current_index={self.current_index})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnimationFrameQueue):
            return NotImplemented
        return (
            self.frames == other.frames
            and self.frame_override == other.frame_override
            and self.current_index == other.current_index
            and self.timer == other.timer
        )

    @property
    def active_frames(self) -> tuple[int, ...]:
        return self.frame_override if self.frame_override is not None else self.frames

    def set_frames(self, frames: Sequence[int]) -> None:
        """Replace the looping frames and start them from the beginning."""
        self.frames = _checked(frames, "Animation frames cannot be empty")
        self.current_index = 0
        self.timer.reset()

    def set_override(self, frames: Sequence[int]) -> None:
        """Play ``frames`` once, then return to the looping frames."""
        self.frame_override = _checked(frames, "Override frames cannot be empty")
        self.current_index = 0
        self.timer.reset()

    def tick(self, delta: float) -> int | None:
        """Advance time; return the frame to show if it changes, else None."""
        self.timer.tick(delta)
        if not self.timer.just_finished:
            return None

        active = self.active_frames
        frame = active[self.current_index]
        self.current_index += 1
        if self.current_index >= len(active):
            self.frame_override = None
            self.current_index = 0
        return frame


def _checked(frames: Sequence[int], message: str) -> tuple[int, ...]:
    result = tuple(frames)
    if not result:
        raise ValueError(message)
    return result