"""Heads-up display text: lives, money, wave progress and bounty pop-ups."""

from __future__ import annotations

from dataclasses import dataclass, field

from towercomb.timer import Lifetime

BOUNTY_LIFETIME = 3.0
BOUNTY_START_TOP = 32.0
BOUNTY_RIGHT = 50.0
BOUNTY_RISE_SPEED = 25.0
BOUNTY_FONT_SIZE = 18.0


def lives_text(health: int) -> str:
    return f"Lives: {health}"


def money_text(money: int) -> str:
    return f"Money: {money}"


def wave_text(level_index: int, remaining: int) -> str:
    """Level banner; ``level_index`` counts from zero but is shown from one."""
    return f"LEVEL {level_index + 1} - {remaining} waves remain"


def bounty_text(amount: int) -> str:
    return f"Earned ${amount}"


@dataclass
class BountyText:
    """A short notice of money earned that drifts down the screen and vanishes."""

    amount: int
    top: float = BOUNTY_START_TOP
    right: float = BOUNTY_RIGHT
    lifetime: Lifetime = field(default_factory=lambda: Lifetime(BOUNTY_LIFETIME))

    @property
    def text(self) -> str:
        return bounty_text(self.amount)

    @property
    def expired(self) -> bool:
        return self.lifetime.expired

    def tick(self, delta: float) -> bool:
        """Move the notice; return True once it should be removed."""
        self.top += delta * BOUNTY_RISE_SPEED
        return self.lifetime.tick(delta)