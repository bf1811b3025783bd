"""Game session: owns the controller and routes every input through one ingestion point."""
from __future__ import annotations

import logging
from pathlib import Path

from wavebar import ANY, Controller, GameConfig, ImpulseRequest, LineDecoder, SignalBus, request_for_key

log = logging.getLogger(__name__)


class ImpulseReplay:
    """Replays a newline-delimited impulse file, one line per interval."""

    def __init__(self, path: Path, interval: float) -> None:
        self.lines = path.read_text(encoding="utf-8").splitlines()
        self.interval = interval
        self.decoder = LineDecoder()
        self._elapsed = 0.0
        self._cursor = 0

    @property
    def done(self) -> bool:
        return self._cursor >= len(self.lines)

    def due(self, dt: float) -> list[ImpulseRequest]:
        self._elapsed += dt
        requests: list[ImpulseRequest] = []
        while not self.done and self._elapsed >= self.interval:
            self._elapsed -= self.interval
            requests.extend(self.decoder.feed(self.lines[self._cursor] + "\n"))
            self._cursor += 1
        return requests


class Session:
    def __init__(self, config: GameConfig, replay: ImpulseReplay | None = None) -> None:
        self.bus = SignalBus()
        self.controller = Controller(config, self.bus)
        self.replay = replay
        self.wins = 0
        self.bus.subscribe("hit", self._on_hit)
        self.bus.subscribe("win", self._on_win)
        self.bus.subscribe(ANY, self._trace)

    def _trace(self, signal: str, data: dict) -> None:
        log.debug("signal %s %s", signal, data)

    def _on_hit(self, signal: str, data: dict) -> None:
        log.info("hit %d", data["hit_count"])

    def _on_win(self, signal: str, data: dict) -> None:
        self.wins += 1

    def key(self, name: str) -> None:
        request = request_for_key(name)
        if request is not None:
            self.controller.ingest(request)

    def update(self, dt: float) -> None:
        if self.replay is not None:
            for request in self.replay.due(dt):
                self.controller.ingest(request)
        self.controller.update(dt)
