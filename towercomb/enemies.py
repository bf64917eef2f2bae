"""Enemy definitions and physics layers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from towercomb.animation import AnimationFrameQueue
from towercomb.timer import Timer, TimerMode

SHOW_DELAY_SECONDS = 0.01


class PhysicsLayer(enum.IntEnum):
    """Collision layers; each maps to one bit of a layer mask."""

    DEFAULT = 0
    LEVEL = 1
    ENEMY = 2
    PROJECTILES = 3
    ETHEREAL = 4

    @property
    def mask(self) -> int:
        return 1 << self.value


class EnemyKind(enum.Enum):
    BASIC = "basic"
    CHONKUS = "chonkus"
    TURBO = "turbo"


@dataclass(frozen=True)
class EnemySpec:
    """Everything that distinguishes one kind of enemy from another."""

    kind: EnemyKind
    name: str
    size: tuple[float, float]
    speed: float
    bounty: int
    frames: tuple[int, ...]
    sprite_size: float
    sprite_offset: tuple[float, float, float]
    health_bar_offset: float
    damage_multiplier_all: float = 1.0
    health: int = 100
    friction: float = 0.3
    linear_damping: float = 1.5
    gravity_scale: float = 1.0
    mass: float = 5.0
    corner_radius: float = 0.5
    membership: PhysicsLayer = PhysicsLayer.ENEMY
    filters: frozenset[PhysicsLayer] = field(
        default_factory=lambda: frozenset(
            {PhysicsLayer.DEFAULT, PhysicsLayer.LEVEL, PhysicsLayer.PROJECTILES}
        )
    )

    def animation(self) -> AnimationFrameQueue:
        """A fresh walking animation for one enemy."""
        return AnimationFrameQueue(self.frames)

    def collides_with(self, layer: PhysicsLayer) -> bool:
        return layer in self.filters


class ShowDelay:
    """Keeps a freshly spawned enemy hidden for a moment."""

    def __init__(self) -> None:
        self.timer = Timer(SHOW_DELAY_SECONDS, TimerMode.ONCE)
        self.visible = False

    def tick(self, delta: float) -> bool:
        """Advance the delay; return True on the tick the enemy becomes visible."""
        self.timer.tick(delta)
        if self.timer.just_finished:
            self.visible = True
            return True
        return False


def basic_trooper() -> EnemySpec:
    return EnemySpec(
        kind=EnemyKind.BASIC,
        name="Minor Trooper",
        size=(3.0, 4.0),
        speed=30.0,
        bounty=10,
        frames=(8, 9, 10, 11, 12, 13, 14),
        sprite_size=6.0,
        sprite_offset=(0.0, 0.5, 0.0),
        health_bar_offset=3.0,
    )


def chonkus_trooper() -> EnemySpec:
    return EnemySpec(
        kind=EnemyKind.CHONKUS,
        name="Major Trooper",
        size=(4.0, 5.0),
        speed=20.0,
        bounty=20,
        frames=(16, 16, 16, 17, 17, 17, 18, 18, 18, 19, 19, 19),
        sprite_size=8.0,
        sprite_offset=(0.0, 1.0, 0.0),
        health_bar_offset=4.0,
        damage_multiplier_all=0.75,
    )


def turbo_trooper() -> EnemySpec:
    return EnemySpec(
        kind=EnemyKind.TURBO,
        name="Turbo Trooper",
        size=(2.0, 3.0),
        speed=45.0,
        bounty=15,
        frames=(0, 1, 2, 3, 4, 5, 6, 7),
        sprite_size=5.0,
        sprite_offset=(0.0, 0.0, 0.0),
        health_bar_offset=2.5,
        damage_multiplier_all=1.15,
    )