import pytest

from fsmc.graph import FsmGraph
from fsmc.parser import parse

DOOR = """
machine Door {
  state Closed { on open -> Open; }
  state Open { on close -> Closed; }
}
"""


@pytest.fixture
def door_source():
    return DOOR


@pytest.fixture
def door_graph():
    return FsmGraph.compile(parse(DOOR))


@pytest.fixture
def terminal_graph():
    """Two states, the second with no transitions."""
    return FsmGraph.compile(parse("machine M { state Start { on go -> End; } state End {} }"))
