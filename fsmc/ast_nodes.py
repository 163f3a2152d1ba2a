"""
Syntax tree produced by the parser.

Names are free-standing strings here; nothing is checked until the graph is
built. Line/column fields point at the name token and are only used for error
messages.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Transition:
    event: str
    target: str
    line: int = 0
    column: int = 0


@dataclass
class State:
    name: str
    transitions: List[Transition] = field(default_factory=list)
    line: int = 0
    column: int = 0


@dataclass
class Machine:
    name: str
    states: List[State] = field(default_factory=list)
    line: int = 0
    column: int = 0
