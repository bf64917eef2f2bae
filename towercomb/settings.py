"""Menus, the master volume setting and the credits."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1


class Menu(enum.Enum):
    """Which menu is shown over the current screen."""

    NONE = "none"
    MAIN = "main"
    CREDITS = "credits"
    SETTINGS = "settings"
    PAUSE = "pause"
    LEVEL_SELECTOR = "level_selector"


DEFAULT_MENU = Menu.NONE


@dataclass
class VolumeSetting:
    """Master volume as a linear gain, kept between the limits."""

    volume: float = 1.0

    def lower(self) -> float:
        self.volume = max(self.volume - VOLUME_STEP, MIN_VOLUME)
        return self.volume

    def raise_(self) -> float:
        self.volume = min(self.volume + VOLUME_STEP, MAX_VOLUME)
        return self.volume

    def label(self) -> str:
        """The volume as a percentage, padded to three digits."""
        percent = 100.0 * self.volume
        return f"{percent:3.0f}%"


def back_menu(screen_is_title: bool) -> Menu:
    """Where the settings menu returns to."""
    return Menu.MAIN if screen_is_title else Menu.PAUSE


def credit_rows() -> list[tuple[str, list[tuple[str, str]]]]:
    """Credits sections, each a header with (name, contribution) rows."""
    return [
        (
            "Created by",
            [
                (
                    "@zellenon",
                    "Core Game Framework\nLevel Editor\nStatus Effect Logic\n"
                    "Wave Manager and Wave Creator",
                ),
                (
                    "@jaminhaber",
                    "HUD and UI\nAsset management\nTower Spawning\nWeb builds",
                ),
                (
                    "@isaaguilar",
                    "Level Design and Progression\nTower Implementation\n"
                    "Camera Controls\nEnemy Logic",
                ),
            ],
        ),
        (
            "Assets",
            [
                ("Sprites", "@jaminhaber and @isaaguilar"),
                ("Music", "@isaaguilar"),
            ],
        ),
    ]