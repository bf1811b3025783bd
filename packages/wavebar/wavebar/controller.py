"""Controller - per-tick orchestration of waves, segments and game phase."""
from __future__ import annotations

import logging
import math
import os
import random

from wavebar.clock import SimClock
from wavebar.config import (
    ANCHOR_BETA,
    ANCHOR_BLEND,
    ANCHOR_BREATHE_AMP,
    ANCHOR_BREATHE_OMEGA,
    BLOCK_BLEND,
    BLOCK_SPEED_SCALE,
    TARGET_BLEND,
    GameConfig,
)
from wavebar.flash import IDLE_ADVISORY, ColorAdvisory, FlashState
from wavebar.input import ImpulseRequest
from wavebar.machine import Phase, PhaseGuards, PhaseMachine
from wavebar.presets import DEFAULT_LEVEL, Preset, preset_for
from wavebar.scene import Scene, SegmentView
from wavebar.segments import AnchorSegment, BlockSegment, TargetSegment, overlaps
from wavebar.signals import SignalBus
from wavebar.wave import Wave

log = logging.getLogger(__name__)

RESPAWN_ATTEMPTS = 40
TARGET_MIN_FRACTION = 0.05
TARGET_MAX_FRACTION = 0.95

Transition = tuple[Phase, Phase]

TRANSITIONS: dict[Phase, list[tuple[str, Phase]]] = {
    Phase.PLAY: [("overlapping", Phase.TOUCH)],
    Phase.TOUCH: [("overlap_lost", Phase.PLAY), ("overlap_held", Phase.HIT)],
    Phase.HIT: [("won", Phase.WIN), ("always", Phase.PLAY)],
    Phase.WIN: [("win_elapsed", Phase.PLAY)],
}


guards: PhaseGuards[Controller] = PhaseGuards()
guards.register("overlapping", lambda c: c.overlapping)
guards.register("overlap_lost", lambda c: not c.overlapping)
guards.register("overlap_held", lambda c: c.touch_elapsed() >= c.config.overlap_threshold)
guards.register("won", lambda c: c.hit_count >= c.config.win_hits)
guards.register("always", lambda c: True)


@guards.register("win_elapsed")
def _win_elapsed(c: Controller) -> bool:
    return c.win_start is not None and c.time - c.win_start >= c.config.win_duration


class Controller:
    """Owns the simulation: clock, waves, segments and the phase machine.

    Collaborators read ``scene()`` after each ``update`` and subscribe to
    ``bus`` for phase events (``touch``, ``release``, ``hit``, ``win``,
    ``reset``, ``respawn``, ``tint``, ``launch``). Signals are delivered at
    the end of ``update``.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.geometry = self.config.geometry()
        self.bus = bus if bus is not None else SignalBus()

        seed = self.config.seed
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self.clock = SimClock()
        self.hit_count = 0
        self.win_start: float | None = None
        self.overlap_start: float | None = None
        self.overlapping = False
        self.waves: list[Wave] = []
        self.preset: Preset = preset_for(DEFAULT_LEVEL)
        self.flash: FlashState | None = None
        self._advisory = IDLE_ADVISORY

        g = self.geometry
        mid = g.bar_length * 0.5
        self.anchors = self._build_anchors()
        self.block = BlockSegment(
            mid, g.block_half_length, BLOCK_BLEND, BLOCK_SPEED_SCALE, g.bar_length
        )
        self.target = TargetSegment(
            mid + g.target_offset, g.target_half_length, TARGET_BLEND, g.bar_length
        )
        self._machine: PhaseMachine[Controller] = PhaseMachine(
            Phase.PLAY, TRANSITIONS, guards, self._on_transition
        )
        self.respawn_target()

    # -- Read-only views --

    @property
    def phase(self) -> Phase:
        return self._machine.phase

    @property
    def time(self) -> float:
        return self.clock.time

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def advisory(self) -> ColorAdvisory:
        return self._advisory

    def touch_elapsed(self) -> float:
        if self.overlap_start is None:
            return 0.0
        return self.time - self.overlap_start

    def scene(self) -> Scene:
        return Scene(
            anchors=tuple(SegmentView.of(a) for a in self.anchors),
            block=SegmentView.of(self.block),
            target=SegmentView.of(self.target),
            time=self.time,
            phase=self.phase.value,
            hit_count=self.hit_count,
            tint=self._advisory,
        )

    # -- Input --

    def set_impact_preset(self, level: int) -> Preset:
        """Select the preset for the next launch. Levels are 1-based and clamped."""
        self.preset = preset_for(level)
        return self.preset

    def launch_wave(self, direction: int) -> Wave | None:
        if self.phase is Phase.WIN:
            log.debug("ignoring launch during WIN")
            return None
        wave = Wave(direction, self.geometry.bar_length, self.preset.wave, self.time)
        self.waves.append(wave)
        self.bus.publish("launch", direction=direction, preset=self.preset.name)
        return wave

    def ingest(self, request: ImpulseRequest) -> Wave | None:
        if self.phase is Phase.WIN:
            return None
        self.set_impact_preset(request.level)
        return self.launch_wave(request.direction)

    # -- Tick --

    def update(self, dt: float) -> list[Transition]:
        """Advance one frame of ``dt`` seconds. Returns the transitions fired."""
        self.clock.advance(dt)
        self.ensure_target_valid()
        if self.phase is Phase.WIN:
            fired = self._machine.settle(self)
        else:
            self._update_waves()
            for anchor in self.anchors:
                anchor.update(self.waves, self.time)
            self.block.update(dt)
            self.overlapping = overlaps(self.block, self.target)
            fired = self._machine.settle(self)
        self._update_flash()
        self.bus.flush()
        return fired

    def _update_waves(self) -> None:
        now = self.time
        self.waves = [w for w in self.waves if w.active(now)]
        for wave in self.waves:
            if wave.block_pushed:
                continue
            if wave.reaches(self.block.center, now):
                wave.block_pushed = True
                self.block.push(wave.push_distance(), wave.c)

    def _update_flash(self) -> None:
        if self.flash is not None and self.flash.expired(self.time):
            self.flash = None
        advisory = (
            self.flash.advisory(self.time) if self.flash is not None else IDLE_ADVISORY
        )
        if advisory != self._advisory:
            self._advisory = advisory
            self.bus.publish("tint", flashing=advisory.flashing, lit=advisory.lit)

    # -- Phase transitions --

    def _on_transition(self, old: Phase, new: Phase) -> None:
        log.debug("phase %s -> %s at t=%.3f", old.value, new.value, self.time)
        if new is Phase.TOUCH:
            self.overlap_start = self.time
            self.flash = FlashState("touch", self.time, self.config.flash_interval)
            self.bus.publish("touch", time=self.time)
        elif old is Phase.TOUCH and new is Phase.PLAY:
            self.overlap_start = None
            self.flash = None
            self.bus.publish("release", time=self.time)
        elif new is Phase.HIT:
            self.hit_count += 1
            self.overlap_start = None
            self.overlapping = False
            self.flash = None
            log.info("hit %d/%d at t=%.2f", self.hit_count, self.config.win_hits, self.time)
            self.bus.publish("hit", hit_count=self.hit_count, time=self.time)
        elif new is Phase.WIN:
            self.win_start = self.time
            self.waves.clear()
            log.info("win at t=%.2f", self.time)
            self.bus.publish("win", time=self.time, hit_count=self.hit_count)
        elif old is Phase.HIT:
            self.respawn_target()
            self.bus.publish("respawn", center=self.target.center)
        elif old is Phase.WIN:
            self.reset()

    # -- Target placement and reset --

    def respawn_target(self) -> None:
        """Move the target clear of the block, then clamp it inside the bar."""
        length = self.geometry.bar_length
        min_gap = self.geometry.target_min_gap
        for _ in range(RESPAWN_ATTEMPTS):
            if self.target.respawn(
                self._rng, min_gap, self.block.center, self.block.half_length
            ):
                break
        else:
            log.debug("no clear target spot after %d attempts", RESPAWN_ATTEMPTS)
        center = self.target.center
        if not math.isfinite(center) or center < 0 or center > length:
            center = min(length - 100, length * 0.7)
        self.target.center = max(
            length * TARGET_MIN_FRACTION, min(length * TARGET_MAX_FRACTION, center)
        )

    def ensure_target_valid(self) -> None:
        center = self.target.center
        if not math.isfinite(center) or center < 0 or center > self.geometry.bar_length:
            log.warning("target center %r out of bounds, respawning", center)
            self.respawn_target()

    def reset(self) -> None:
        """Full game reset: time, hits, waves, block, anchors and target."""
        self.hit_count = 0
        self.clock.reset()
        self.win_start = None
        self.overlap_start = None
        self.overlapping = False
        self.waves.clear()
        self.flash = None
        self.block.place(self.geometry.bar_length * 0.5)
        self.anchors = self._build_anchors()
        self.respawn_target()
        self._machine.force(Phase.PLAY)
        log.info("game reset")
        self.bus.publish("reset")

    def _build_anchors(self) -> list[AnchorSegment]:
        n = self.config.segment_count
        length = self.geometry.bar_length
        return [
            AnchorSegment(
                ((i + 1) * length) / (n + 1),
                self.geometry.anchor_half_length,
                ANCHOR_BLEND,
                ANCHOR_BREATHE_AMP,
                ANCHOR_BREATHE_OMEGA,
                ANCHOR_BETA,
            )
            for i in range(n)
        ]
