"""Replays a fixed word through a 4 state automaton over {0, 1}.

Visited states are echoed as the transition function computes them:

    $ python -m tinydfa
    BBBCCCDCCCDA
    [False, False, False, True, True, True, False, True, True, True, False, True]
"""
from __future__ import annotations

from typing import Callable

from tinydfa import State, Symbol
from tinydfa.automaton import Automaton
from tinydfa.transitions import from_table


__all__ = ['REFERENCE_WORD', 'main', 'reference_automaton', 'reference_table']


REFERENCE_WORD = (0, 0, 0, 1, 1, 1, 0, 1, 1, 1, 0, 0)


def reference_table() -> dict[tuple[State, Symbol], State]:
    return {
        ('A', 0): 'B',
        ('A', 1): 'C',
        ('B', 0): 'B',
        ('B', 1): 'C',
        ('C', 0): 'D',
        ('C', 1): 'C',
        ('D', 0): 'A',
        ('D', 1): 'C',
    }


def _print_inline(state: State) -> None:
    print(state, end='', flush=True)


def reference_automaton(
        echo: Callable[[State], None] = _print_inline,
    ) -> Automaton:
    machine = Automaton('A', {'A', 'C'})
    lookup = from_table(reference_table())

    @machine.set_transition
    def delta(state: State, symbol: Symbol) -> State:
        state2 = lookup(state, symbol)
        echo(state2)
        return state2

    return machine


def main() -> None:
    results = reference_automaton().run(REFERENCE_WORD)
    print()
    print(results)
