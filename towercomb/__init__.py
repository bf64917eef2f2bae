"""Game rules and state for a side-view tower defence game: timers, camera,
animation, level maps and layout, enemies, waves, progression, effects, HUD
text and settings."""

__version__ = "0.0.1"

__all__ = [
    "animation",
    "camera",
    "effects",
    "enemies",
    "hud",
    "layout",
    "level",
    "progression",
    "settings",
    "timer",
    "waves",
]