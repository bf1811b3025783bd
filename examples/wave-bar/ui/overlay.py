"""Win overlay: paints the whole bar in the target color while in WIN."""
from __future__ import annotations

from wavebar import SegmentView, SignalBus

from ui.constants import OVERLAY_LAYER
from ui.display import BarDisplay


class WinOverlay:
    """Driven by the controller's ``win`` and ``reset`` signals."""

    def __init__(self, bus: SignalBus, display: BarDisplay) -> None:
        self.display = display
        self.active = False
        bus.subscribe("win", self._on_win)
        bus.subscribe("reset", self._on_reset)

    def _on_win(self, signal: str, data: dict) -> None:
        self.active = True

    def _on_reset(self, signal: str, data: dict) -> None:
        self.active = False

    def render(self) -> None:
        self.display.clear(OVERLAY_LAYER)
        if not self.active:
            return
        half = self.display.bar_length * 0.5
        seg = SegmentView(half, half, 0.8)
        self.display.apply_gradient(seg, self.display.palette["target"], OVERLAY_LAYER)
