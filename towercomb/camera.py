"""Game camera with panning and clamped zoom."""

from __future__ import annotations

import enum
from dataclasses import dataclass

Vec3 = tuple[float, float, float]

WINDOW_TITLE = "Zod's Tower Defender"
WINDOW_SIZE = (1280.0, 720.0)
MAX_ZOOM_OUT = 2.5
MAX_ZOOM_IN = 0.5
PROJECTION_SCALE = 0.05
DRAG_DIVISOR = 15.0
TRACKPAD_DIVISOR = 35.0


class ScrollUnit(enum.Enum):
    """How a scroll event measures its movement."""

    LINE = "line"
    PIXEL = "pixel"


class SystemPhase(enum.IntEnum):
    """Ordered phases of one update step."""

    TICK_TIMERS = 0
    RECORD_INPUT = 1
    UPDATE = 2


def zoom(scaler: float, current_scale: Vec3) -> Vec3:
    """Return the scale after zooming by ``scaler``, clamped to the zoom limits."""
    x, y, z = current_scale
    step = scaler / 100.0
    final = (x - step, y - step, z)
    if final[0] > MAX_ZOOM_OUT:
        return (MAX_ZOOM_OUT, MAX_ZOOM_OUT, 1.0)
    if final[0] < MAX_ZOOM_IN:
        return (MAX_ZOOM_IN, MAX_ZOOM_IN, 1.0)
    return final


@dataclass
class Camera:
    """The 2D camera's transform."""

    translation: Vec3 = (20.0, 14.0, 0.0)
    scale: Vec3 = (1.75, 1.75, 1.0)
    projection_scale: float = PROJECTION_SCALE

    def pan(self, dx: float, dy: float) -> None:
        x, y, z = self.translation
        self.translation = (x + dx, y + dy, z)

    def apply_mouse_drag(self, dx: float, dy: float, shift: bool) -> None:
        """Handle mouse motion while a pan button is held."""
        if shift:
            self.scale = zoom(dy, self.scale)
        else:
            self.pan(-dx / DRAG_DIVISOR, dy / DRAG_DIVISOR)

    def apply_scroll(self, unit: ScrollUnit, dx: float, dy: float, shift: bool) -> None:
        """Handle a scroll event from a wheel or trackpad."""
        if unit is ScrollUnit.LINE or shift:
            self.scale = zoom(dy, self.scale)
        else:
            self.pan(-dx / TRACKPAD_DIVISOR, dy / TRACKPAD_DIVISOR)