import logging
from typing import NamedTuple

from .codegen import generate_c, generate_dot
from .graph import FsmGraph
from .parser import parse

logger = logging.getLogger(__name__)


class CompileResult(NamedTuple):
    graph: FsmGraph
    dot: str
    c: str


def compile_source(text):
    """
    Runs the whole pipeline on DSL source text.

    Raises the first FsmError met by any stage; code generation only runs on
    a fully resolved graph.
    """
    machine = parse(text)
    graph = FsmGraph.compile(machine)
    logger.info("Compiled machine %s", machine.name)
    return CompileResult(graph, generate_dot(graph), generate_c(graph))
