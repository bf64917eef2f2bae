"""Short-lived visual feedback: floating damage numbers and flash messages."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from towercomb.timer import Timer, TimerMode

DAMAGE_NUMBER_SECONDS = 0.6
DAMAGE_NUMBER_RISE = 0.8
DAMAGE_NUMBER_FONT_SIZE = 18.0
DAMAGE_NUMBER_SCALE = 0.1
DAMAGE_NUMBER_SPREAD = (3.0, 2.0)
FLASH_MESSAGE_SECONDS = 1.0


@dataclass
class DamageNumber:
    """A damage value that drifts upward and fades out."""

    damage: int
    x: float
    y: float
    z: float = 0.0
    alpha: float = 1.0
    timer: Timer = field(
        default_factory=lambda: Timer(DAMAGE_NUMBER_SECONDS, TimerMode.ONCE)
    )

    @property
    def text(self) -> str:
        return str(self.damage)

    def tick(self, delta: float) -> bool:
        """Move and fade; return True once it should be removed."""
        self.timer.tick(delta)
        self.y += DAMAGE_NUMBER_RISE * delta
        progress = min(max(self.timer.fraction(), 0.0), 1.0)
        self.alpha = 1.0 - progress
        return self.timer.finished


def spawn_damage_number(
    damage: int, x: float, y: float, rng: random.Random | None = None
) -> DamageNumber:
    """A damage number near (x, y), jittered a little so numbers don't stack."""
    rng = rng if rng is not None else random.Random()
    spread_x, spread_y = DAMAGE_NUMBER_SPREAD
    return DamageNumber(
        damage=damage,
        x=x + (rng.random() - 0.5) * spread_x,
        y=y + (rng.random() - 0.5) * spread_y,
    )


@dataclass
class FlashMessage:
    """A banner message that fades away after a second."""

    message: str
    alpha: float = 1.0
    ttl: Timer = field(
        default_factory=lambda: Timer(FLASH_MESSAGE_SECONDS, TimerMode.ONCE)
    )

    def tick(self, delta: float) -> bool:
        """Fade the banner; return True once it should be removed."""
        self.ttl.tick(delta)
        if self.ttl.finished:
            return True
        self.alpha = self.ttl.fraction_remaining()
        return False