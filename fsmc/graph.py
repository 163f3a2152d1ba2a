"""
Resolved state graph shared by both code generators.

Transition targets are indices into `FsmGraph.states`; building the graph
fails rather than leave a dangling index. The first declared state is the
initial state.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from .errors import EmptyMachineError, ResolveError, UndefinedStateError

logger = logging.getLogger(__name__)

StateId = int


@dataclass(frozen=True)
class TransitionEdge:
    event: str
    target: StateId


@dataclass(frozen=True)
class StateNode:
    name: str
    transitions: tuple = ()


@dataclass(frozen=True)
class FsmGraph:
    states: tuple
    initial_state: StateId = 0

    @classmethod
    def compile(cls, machine):
        state_map = {}
        edges: List[list] = []

        # Pass 1: collect states and assign IDs
        for index, state in enumerate(machine.states):
            if state.name in state_map:
                raise ResolveError(f"Duplicate state: {state.name}", state.line, state.column)
            state_map[state.name] = index
            edges.append([])

        # Pass 2: resolve transitions
        for index, state in enumerate(machine.states):
            seen = set()
            for trans in state.transitions:
                if trans.target not in state_map:
                    raise UndefinedStateError(trans.target, trans.line, trans.column)
                if trans.event in seen:
                    logger.warning("State %s handles event %s more than once; the first transition wins",
                                   state.name, trans.event)
                seen.add(trans.event)
                edges[index].append(TransitionEdge(trans.event, state_map[trans.target]))

        if not state_map:
            raise EmptyMachineError()

        graph = cls(tuple(StateNode(s.name, tuple(e)) for s, e in zip(machine.states, edges)), 0)

        reachable = graph.reachable()
        unreachable = [s.name for i, s in enumerate(graph.states) if i not in reachable]
        if unreachable:
            logger.warning("Unreachable from %s: %s", graph.states[0].name, ", ".join(unreachable))

        logger.debug("Resolved %d states, %d transitions", len(graph.states), sum(1 for _ in graph.edges()))
        return graph

    def is_terminal(self, index):
        return not self.states[index].transitions

    def terminal_states(self):
        return [i for i in range(len(self.states)) if self.is_terminal(i)]

    def edges(self):
        """Yields (source index, edge) in state order, then declaration order."""
        for source, state in enumerate(self.states):
            for edge in state.transitions:
                yield source, edge

    def reachable(self):
        seen = {self.initial_state}
        stack = [self.initial_state]
        while stack:
            for edge in self.states[stack.pop()].transitions:
                if edge.target not in seen:
                    seen.add(edge.target)
                    stack.append(edge.target)
        return seen
