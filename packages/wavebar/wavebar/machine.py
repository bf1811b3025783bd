"""Guarded transition table driving the game phase."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Generic, TypeVar

S = TypeVar("S")


class Phase(str, Enum):
    PLAY = "PLAY"
    TOUCH = "TOUCH"
    HIT = "HIT"
    WIN = "WIN"


# Phases the machine never rests in across ticks.
MOMENTARY: frozenset[Phase] = frozenset({Phase.HIT})


class PhaseGuards(Generic[S]):
    """Named predicates that a transition table refers to by string.

    ``register`` can be called directly or used as a decorator::

        @guards.register("won")
        def _won(c): return c.hit_count >= c.config.win_hits
    """

    def __init__(self) -> None:
        self._predicates: dict[str, Callable[[S], bool]] = {}

    def register(self, name: str, fn: Callable[[S], bool] | None = None):
        if fn is None:
            return lambda f: self.register(name, f)
        self._predicates[name] = fn
        return fn

    def check(self, name: str, subject: S) -> bool:
        try:
            predicate = self._predicates[name]
        except KeyError:
            raise KeyError(f"unknown guard {name!r}") from None
        return bool(predicate(subject))

    def has(self, name: str) -> bool:
        return name in self._predicates

    def names(self) -> list[str]:
        return list(self._predicates)

    def missing(self, transitions: dict[Phase, list[tuple[str, Phase]]]) -> list[str]:
        """Guard names used in ``transitions`` that were never registered."""
        used = {guard for rules in transitions.values() for guard, _ in rules}
        return sorted(used - self._predicates.keys())


class PhaseMachine(Generic[S]):
    """First matching guard wins; at most one transition per ``step``.

    ``transitions`` maps a phase to ``[guard_name, target]`` pairs, checked
    in order. Raises KeyError up front when the table names an unregistered guard.
    """

    def __init__(
        self,
        initial: Phase,
        transitions: dict[Phase, list[tuple[str, Phase]]],
        guards: PhaseGuards[S],
        on_transition: Callable[[Phase, Phase], None] | None = None,
    ) -> None:
        unknown = guards.missing(transitions)
        if unknown:
            raise KeyError(f"unregistered guards: {', '.join(unknown)}")
        self.phase = initial
        self.transitions = transitions
        self.guards = guards
        self.on_transition = on_transition

    def _find_transition(self, subject: S) -> Phase | None:
        for guard_name, target in self.transitions.get(self.phase, ()):
            if self.guards.check(guard_name, subject):
                return target
        return None

    def step(self, subject: S) -> tuple[Phase, Phase] | None:
        target = self._find_transition(subject)
        if target is None:
            return None
        old = self.phase
        self.phase = target
        if self.on_transition is not None:
            self.on_transition(old, target)
        return old, target

    def settle(self, subject: S) -> list[tuple[Phase, Phase]]:
        """Step once, then keep stepping out of momentary phases."""
        fired: list[tuple[Phase, Phase]] = []
        for _ in range(len(Phase)):
            change = self.step(subject)
            if change is None:
                break
            fired.append(change)
            if self.phase not in MOMENTARY:
                break
        return fired

    def force(self, phase: Phase) -> None:
        """Jump to ``phase`` without guards or callbacks."""
        self.phase = phase
