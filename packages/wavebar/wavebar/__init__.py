"""wavebar - A one-dimensional wave-and-block toy simulation."""
from __future__ import annotations

from wavebar.clock import SimClock
from wavebar.config import GameConfig, Geometry, load_config, save_config
from wavebar.controller import Controller
from wavebar.flash import IDLE_ADVISORY, ColorAdvisory, FlashState
from wavebar.input import KEY_BINDINGS, ImpulseRequest, LineDecoder, request_for_key
from wavebar.machine import Phase, PhaseGuards, PhaseMachine
from wavebar.presets import IMPACT_PRESETS, Preset, preset_for, preset_named
from wavebar.scene import Scene, SegmentView
from wavebar.segments import AnchorSegment, BlockSegment, TargetSegment, overlaps
from wavebar.signals import ANY, Signal, SignalBus
from wavebar.wave import Wave, WaveParams

__all__ = [
    "ANY",
    "AnchorSegment",
    "BlockSegment",
    "ColorAdvisory",
    "Controller",
    "FlashState",
    "GameConfig",
    "Geometry",
    "IDLE_ADVISORY",
    "IMPACT_PRESETS",
    "ImpulseRequest",
    "KEY_BINDINGS",
    "LineDecoder",
    "Phase",
    "PhaseGuards",
    "PhaseMachine",
    "Preset",
    "Scene",
    "SegmentView",
    "Signal",
    "SignalBus",
    "SimClock",
    "TargetSegment",
    "Wave",
    "WaveParams",
    "load_config",
    "overlaps",
    "preset_for",
    "preset_named",
    "request_for_key",
    "save_config",
]
