"""
Recursive descent parser for the machine DSL.

    machine    := "machine" Identifier "{" state* "}"
    state      := "state" Identifier "{" transition* "}"
    transition := "on" Identifier "->" Identifier ";"

Identifiers end up verbatim in C and DOT output, so they are restricted here
to ASCII letters and digits.
"""
import logging
import re

from .ast_nodes import Machine, State, Transition
from .errors import ParseError
from .lexer import Lexer, TokenType

logger = logging.getLogger(__name__)

SAFE_IDENTIFIER = re.compile(r"[A-Za-z][A-Za-z0-9]*\Z")

# Bare words Graphviz treats as keywords, whatever the case.
DOT_KEYWORDS = {"graph", "digraph", "subgraph", "node", "edge", "strict"}

RESERVED = (TokenType.INITIAL, TokenType.TERMINAL)

# Longest event the generated program can read back with scanf.
MAX_EVENT_LENGTH = 99


class Parser:
    def __init__(self, lexer):
        self.lexer = lexer
        self._lookahead = None

    def peek(self):
        if self._lookahead is None:
            self._lookahead = self.lexer.next_token()
        return self._lookahead

    def advance(self):
        token = self.peek()
        self._lookahead = None
        return token

    def _fail(self, expected, token):
        raise ParseError(f"{expected}, found {token.describe()}", token.line, token.column)

    def _expect(self, token_type, message):
        token = self.advance()
        if token.type is not token_type:
            self._fail(message, token)
        return token

    def _expect_identifier(self, message):
        token = self._expect(TokenType.IDENTIFIER, message)
        if not SAFE_IDENTIFIER.match(token.text):
            raise ParseError(
                f"Identifier '{token.text}' may only contain ASCII letters and digits",
                token.line, token.column)
        return token

    def _expect_close(self, message):
        token = self.peek()
        if token.type in RESERVED:
            raise ParseError(f"'{token.text}' is reserved and not supported", token.line, token.column)
        self._expect(TokenType.RBRACE, message)

    def parse_machine(self):
        self._expect(TokenType.MACHINE, "Expected 'machine' keyword")
        name = self._expect_identifier("Expected machine name")
        self._expect(TokenType.LBRACE, "Expected '{' after machine name")

        states = []
        while self.peek().type is TokenType.STATE:
            states.append(self.parse_state())

        self._expect_close("Expected '}' to close machine")
        self._expect(TokenType.EOF, "Expected end of input")

        logger.debug("Parsed machine %s with %d states", name.text, len(states))
        return Machine(name.text, states, name.line, name.column)

    def parse_state(self):
        self._expect(TokenType.STATE, "Expected 'state' keyword")
        token = self._expect_identifier("Expected state name")
        if token.text.lower() in DOT_KEYWORDS:
            raise ParseError(f"State name '{token.text}' is a DOT keyword", token.line, token.column)
        self._expect(TokenType.LBRACE, "Expected '{' after state name")

        transitions = []
        while self.peek().type is TokenType.ON:
            transitions.append(self.parse_transition())

        self._expect_close("Expected '}' to close state")
        return State(token.text, transitions, token.line, token.column)

    def parse_transition(self):
        self._expect(TokenType.ON, "Expected 'on' keyword")
        event = self._expect_identifier("Expected event name")
        if len(event.text) > MAX_EVENT_LENGTH:
            raise ParseError(f"Event name is longer than {MAX_EVENT_LENGTH} characters", event.line, event.column)
        self._expect(TokenType.ARROW, "Expected '->' after event name")
        target = self._expect_identifier("Expected target state name")
        self._expect(TokenType.SEMICOLON, "Expected ';' after transition")
        return Transition(event.text, target.text, target.line, target.column)


def parse(text):
    """Lexes and parses `text` into a Machine."""
    return Parser(Lexer(text)).parse_machine()
