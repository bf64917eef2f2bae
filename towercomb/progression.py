"""Level selection, unlocking and advancing through levels."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from towercomb.level import START_LEVEL

GOAL_RADIUS = 7.0


class Screen(enum.Enum):
    """Top-level screens the game moves between."""

    TITLE = "title"
    LEVEL_TRANSITION = "level_transition"
    GAMEPLAY = "gameplay"


@dataclass
class Progress:
    """Which level is selected, which is loaded and which are unlocked."""

    level_select: int = START_LEVEL
    current_loaded_level: int = START_LEVEL
    unlocked_levels: list[int] = field(default_factory=lambda: [START_LEVEL])

    def unlock_next_level(
        self, remaining_waves: int, wave_active: bool, enemy_count: int
    ) -> bool:
        """Unlock the level after the selected one once this one is cleared.

        Returns True if a level was newly unlocked.
        """
        if self.current_loaded_level != self.level_select:
            return False
        if remaining_waves != 0 or wave_active or enemy_count != 0:
            return False
        next_level = self.level_select + 1
        if next_level in self.unlocked_levels:
            return False
        self.unlocked_levels.append(next_level)
        return True

    def goto_next_level(self, enemy_count: int) -> Screen | None:
        """Advance to the next level if no enemies are left; return the screen to show."""
        if enemy_count != 0:
            return None
        self.level_select += 1
        return Screen.LEVEL_TRANSITION

    def select(self, index: int) -> Screen | None:
        """Choose a level from the menu; locked levels are ignored."""
        if index not in self.unlocked_levels:
            return None
        self.level_select = index
        return Screen.LEVEL_TRANSITION

    def level_labels(self, level_count: int) -> list[tuple[str, int]]:
        """Menu labels for every level, marking the locked ones."""
        return [
            (str(i + 1) if i in self.unlocked_levels else f"{i + 1} (locked)", i)
            for i in range(level_count)
        ]


def enemy_reached_goal(
    enemy_pos: tuple[float, float], goal_pos: tuple[float, float]
) -> bool:
    """Whether an enemy is close enough to the goal to cost a life."""
    return math.dist(enemy_pos, goal_pos) < GOAL_RADIUS