"""Normalized impulse requests and the transports that produce them.

Side "A" sits at the left end and launches rightward waves; side "B" sits at
the right end and launches leftward waves.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

log = logging.getLogger(__name__)

SIDES = ("A", "B")
LEVELS = (1, 2, 3)


@dataclass(frozen=True)
class ImpulseRequest:
    side: str
    level: int

    def __post_init__(self) -> None:
        if self.side not in SIDES:
            raise ValueError(f"side must be 'A' or 'B', got {self.side!r}")

    @property
    def direction(self) -> int:
        return 1 if self.side == "A" else -1


KEY_BINDINGS: dict[str, ImpulseRequest] = {
    "a": ImpulseRequest("A", 1),
    "s": ImpulseRequest("A", 2),
    "d": ImpulseRequest("A", 3),
    "l": ImpulseRequest("B", 1),
    "k": ImpulseRequest("B", 2),
    "j": ImpulseRequest("B", 3),
}


def request_for_key(key: str) -> ImpulseRequest | None:
    return KEY_BINDINGS.get(key.lower())


class LineDecoder:
    """Incremental decoder for the newline-delimited JSON impulse protocol.

    Each line is an object keyed by side, e.g.
    ``{"A": {"p": 1, "lvl": 2}, "B": {"p": 0}}``. A side fires when its ``p``
    is 1 and ``lvl`` is one of 1, 2, 3. Anything else is dropped.
    """

    def __init__(self) -> None:
        self._buffer = ""

    @property
    def buffered(self) -> str:
        return self._buffer

    def feed(self, text: str) -> list[ImpulseRequest]:
        self._buffer += text
        requests: list[ImpulseRequest] = []
        while True:
            idx = self._buffer.find("\n")
            if idx < 0:
                break
            line = self._buffer[:idx].strip()
            self._buffer = self._buffer[idx + 1:]
            requests.extend(self.decode_line(line))
        return requests

    def reset(self) -> None:
        self._buffer = ""

    @staticmethod
    def decode_line(line: str) -> list[ImpulseRequest]:
        if not line:
            return []
        try:
            payload = json.loads(line)
        except json.JSONDecodeError:
            log.debug("dropping malformed line %r", line)
            return []
        if not isinstance(payload, dict):
            return []
        requests = []
        for side in SIDES:
            req = _side_request(side, payload.get(side))
            if req is not None:
                requests.append(req)
        return requests


def _side_request(side: str, info: Any) -> ImpulseRequest | None:
    if not isinstance(info, dict):
        return None
    try:
        pressed = float(info.get("p", 0))
        level = float(info.get("lvl", 0))
    except (TypeError, ValueError):
        log.debug("dropping side %s with non-numeric fields: %r", side, info)
        return None
    if pressed != 1:
        return None
    if level not in LEVELS:
        log.debug("dropping side %s with level %r", side, level)
        return None
    return ImpulseRequest(side, int(level))
