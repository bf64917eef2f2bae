"""Countdown timers and timed despawning."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

_NANOS = 1_000_000_000
_MAX_TIMES = 2**32 - 1


def _nanos(seconds: float) -> int:
    return round(seconds * _NANOS)


class TimerMode(enum.Enum):
    """Whether a timer stops when it finishes or starts over."""

    ONCE = "once"
    REPEATING = "repeating"


@dataclass
class Timer:
    """A timer counting elapsed seconds up to a duration."""

    duration: float
    mode: TimerMode = TimerMode.ONCE
    elapsed: float = 0.0
    finished: bool = field(default=False, init=False)
    times_finished_this_tick: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError("timer duration cannot be negative")
        if self.elapsed < 0:
            raise ValueError("elapsed time cannot be negative")

    @property
    def just_finished(self) -> bool:
        """True if the timer finished during the last tick."""
        return self.times_finished_this_tick > 0

    @property
    def remaining(self) -> float:
        return max(self.duration - self.elapsed, 0.0)

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError("cannot tick a timer backwards")
        if self.mode is TimerMode.ONCE and self.finished:
            self.times_finished_this_tick = 0
            return self

        self.elapsed += delta
        elapsed_ns = _nanos(self.elapsed)
        duration_ns = _nanos(self.duration)
        self.finished = elapsed_ns >= duration_ns

        if not self.finished:
            self.times_finished_this_tick = 0
        elif self.mode is TimerMode.REPEATING:
            if duration_ns == 0:
                self.times_finished_this_tick = _MAX_TIMES
                self.elapsed = 0.0
            else:
                times, rest = divmod(elapsed_ns, duration_ns)
                self.times_finished_this_tick = min(times, _MAX_TIMES)
                self.elapsed = rest / _NANOS
        else:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration
        return self

    def reset(self) -> None:
        """Start the timer over from zero."""
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0

    def set_duration(self, duration: float) -> None:
        if duration < 0:
            raise ValueError("timer duration cannot be negative")
        self.duration = duration

    def set_elapsed(self, elapsed: float) -> None:
        if elapsed < 0:
            raise ValueError("elapsed time cannot be negative")
        self.elapsed = elapsed

    def fraction(self) -> float:
        """Share of the duration that has elapsed."""
        if self.duration == 0:
            return 1.0
        return self.elapsed / self.duration

    def fraction_remaining(self) -> float:
        return 1.0 - self.fraction()


@dataclass
class Lifetime:
    """Marks something to be removed after a number of seconds."""

    duration: float
    timer: Timer = field(init=False)

    def __post_init__(self) -> None:
        self.timer = Timer(self.duration, TimerMode.ONCE)

    @property
    def expired(self) -> bool:
        return self.timer.finished

    def tick(self, delta: float) -> bool:
        """Advance the lifetime; return whether it has run out."""
        self.timer.tick(delta)
        return self.expired