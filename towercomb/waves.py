"""Enemy waves: groups of enemies released one after another."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from towercomb.enemies import EnemySpec, basic_trooper, chonkus_trooper, turbo_trooper
from towercomb.timer import Timer, TimerMode

INITIAL_WAVE_DELAY = 1.0
BUSY_FRAME = 3

_BUTTON_FRAMES = {"out": 0, "over": 2, "pressed": 1, "released": 3}


@dataclass(frozen=True)
class Group:
    """Enemies that enter the level together."""

    enemies: tuple[EnemySpec, ...] = ()

    def __iter__(self) -> Iterator[EnemySpec]:
        return iter(self.enemies)

    def __len__(self) -> int:
        return len(self.enemies)


@dataclass
class Wave:
    """Groups of enemies, each followed by a delay in seconds before the next."""

    groups: deque[tuple[Group, float]] = field(default_factory=deque)

    def __len__(self) -> int:
        return len(self.groups)

    def copy(self) -> Wave:
        return Wave(deque(self.groups))


def make_wave(groups: Iterable[tuple[Iterable[EnemySpec], float]]) -> Wave:
    """Build a wave from (enemies, delay) pairs."""
    wave = Wave()
    for enemies, delay in groups:
        if delay < 0:
            raise ValueError("group delay cannot be negative")
        wave.groups.append((Group(tuple(enemies)), float(delay)))
    return wave


def _default_timer() -> Timer:
    return Timer(INITIAL_WAVE_DELAY, TimerMode.ONCE)


@dataclass
class WaveManager:
    """Tracks the running wave and the waves still to come."""

    current_wave: Wave | None = None
    upcoming_waves: deque[Wave] = field(default_factory=deque)
    wave_timer: Timer = field(default_factory=_default_timer)

    @property
    def wave_active(self) -> bool:
        return self.current_wave is not None

    def remaining_waves(self) -> int:
        return len(self.upcoming_waves)

    def load(self, waves: Iterable[Wave]) -> None:
        """Start over with ``waves`` queued and no wave running."""
        self.current_wave = None
        self.upcoming_waves = deque(wave.copy() for wave in waves)
        self.wave_timer = _default_timer()

    def tick(self, delta: float) -> Group | None:
        """Advance time; return the group that enters now, if any."""
        self.wave_timer.tick(delta)
        if not self.wave_timer.finished or self.current_wave is None:
            return None
        if not self.current_wave.groups:
            self.current_wave = None
            return None
        group, delay = self.current_wave.groups.popleft()
        self.wave_timer.set_duration(delay)
        self.wave_timer.reset()
        return group

    def start_next_wave(self) -> bool:
        """Handle the next-wave button.

        Starts the next queued wave if none is running. Returns True when
        every wave is done, meaning the player asks for the next level.
        """
        if self.current_wave is None and not self.upcoming_waves:
            return True
        if self.current_wave is None:
            self.current_wave = self.upcoming_waves.popleft()
        return False

    def button_frame(self, pointer: str) -> int:
        """Atlas frame of the next-wave button for a pointer state.

        ``pointer`` is one of "out", "over", "pressed" or "released".
        """
        try:
            frame = _BUTTON_FRAMES[pointer]
        except KeyError:
            raise ValueError(f"unknown pointer state {pointer!r}") from None
        if self.current_wave is not None:
            return BUSY_FRAME
        return frame


def test_waves() -> deque[Wave]:
    """The waves used when a level defines none of its own."""
    return deque(
        [
            make_wave(
                [
                    ([basic_trooper()], 2.0),
                    ([basic_trooper(), turbo_trooper()], 0.0),
                ]
            ),
            make_wave(
                [
                    ([chonkus_trooper()], 0.5),
                    ([basic_trooper(), turbo_trooper()], 0.5),
                    ([basic_trooper(), turbo_trooper()], 0.5),
                    ([chonkus_trooper(), basic_trooper()], 0.0),
                ]
            ),
            make_wave(
                [
                    ([chonkus_trooper(), basic_trooper()], 0.5),
                    ([basic_trooper(), turbo_trooper()], 0.5),
                    ([chonkus_trooper(), basic_trooper()], 0.5),
                    ([chonkus_trooper(), basic_trooper()], 0.5),
                    ([chonkus_trooper(), basic_trooper()], 0.5),
                ]
            ),
            make_wave([([chonkus_trooper(), basic_trooper()], 0.5)] * 6),
        ]
    )


def waves_for_level(level_waves: Sequence[Iterable[Wave]], index: int) -> deque[Wave]:
    """Copies of the waves for level ``index``, or the default waves if it has none."""
    if 0 <= index < len(level_waves):
        return deque(wave.copy() for wave in level_waves[index])
    return test_waves()