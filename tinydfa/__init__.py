from typing import Any

State = Any
Symbol = Any

from tinydfa.automaton import *
from tinydfa.transitions import *

__all__ = [
    'Automaton',
    'Finals',
    'InvalidTransition',
    'State',
    'Symbol',
    'Transition',
    'TransitionNotSet',
    'from_graph',
    'from_table',
]
