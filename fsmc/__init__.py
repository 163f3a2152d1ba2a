"""Compiles the machine DSL to a Graphviz digraph and an interactive C program."""
from .compiler import CompileResult, compile_source
from .errors import (ConfigError, EmptyMachineError, FsmError, LexError, ParseError,
                     ResolveError, UndefinedStateError)
from .graph import FsmGraph, StateNode, TransitionEdge
from .parser import Parser, parse

__version__ = "0.1.0"
