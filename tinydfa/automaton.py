"""A deterministic finite automaton reduced to its moving parts.

A DFA is usually written (S, E, d, s0, F). Here S and E are never
materialized: the transition function d alone decides which
(state, symbol) pairs are legal, typically by raising on the ones it
does not know. d may also have side effects, which is how transition
actions are implemented.

Feeding is a read-modify-write of ``state`` and is not safe to call
concurrently on one automaton.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol

import attr
import funcy as fn

from tinydfa import State, Symbol


__all__ = ['Automaton', 'Finals', 'Transition', 'TransitionNotSet']


class Transition(Protocol):
    def __call__(self, state: State, symbol: Symbol) -> State: ...


class Finals(Protocol):
    def __contains__(self, state: Any) -> bool: ...


class TransitionNotSet(RuntimeError):
    pass


@attr.define
class Automaton:
    start: State = attr.ib(on_setattr=attr.setters.frozen)
    finals: Finals = attr.ib(factory=frozenset)
    delta: Optional[Transition] = None
    state: State = attr.ib(init=False)

    @state.default
    def _start_state(self) -> State:
        return self.start

    def set_transition(self, delta: Transition) -> Transition:
        """Replace the transition function.

        Returns delta unchanged so this can be used as a decorator.
        """
        self.delta = delta
        return delta

    def feed(self, symbol: Symbol) -> bool:
        """Transition on symbol and report if the new state is final."""
        if self.delta is None:
            raise TransitionNotSet('transition function not set')
        state = self.delta(self.state, symbol)
        self.state = state
        return self.is_final()

    def is_final(self) -> bool:
        return self.state in self.finals

    def run(self, word: Iterable[Symbol]) -> list[bool]:
        return fn.lmap(self.feed, word)
