"""Ready-made transition functions."""
from __future__ import annotations

from typing import Mapping

import networkx as nx

from tinydfa import State, Symbol
from tinydfa.automaton import Transition


__all__ = ['InvalidTransition', 'from_graph', 'from_table']


class InvalidTransition(ValueError):
    def __init__(self, state: State, symbol: Symbol) -> None:
        self.state = state
        self.symbol = symbol
        super().__init__(f'Invalid transition ({state}, {symbol})')


def from_table(table: Mapping[tuple[State, Symbol], State]) -> Transition:
    """Transition function looking up (state, symbol) pairs in table.

    The table is copied, later changes to it are not seen.
    """
    table = dict(table)

    def delta(state: State, symbol: Symbol) -> State:
        try:
            return table[state, symbol]
        except KeyError:
            raise InvalidTransition(state, symbol) from None

    return delta


def from_graph(graph: nx.MultiDiGraph, label: str = 'symbol') -> Transition:
    """Transition function following the out edge of graph labeled by symbol.

    Edges store their symbol under the `label` attribute. Use a
    MultiDiGraph when several symbols lead to the same target, a DiGraph
    keeps a single edge per pair. If several out edges of a state share
    a symbol, the one added to graph first wins.
    """
    def delta(state: State, symbol: Symbol) -> State:
        if state in graph:
            for _, tgt, edge_symbol in graph.out_edges(state, data=label):
                if edge_symbol == symbol:
                    return tgt
        raise InvalidTransition(state, symbol)

    return delta
