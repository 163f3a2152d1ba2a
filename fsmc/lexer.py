import logging
from dataclasses import dataclass
from enum import Enum, auto

from .errors import LexError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    MACHINE = auto()     # machine
    STATE = auto()       # state
    INITIAL = auto()     # initial (reserved)
    TERMINAL = auto()    # terminal (reserved)
    ON = auto()          # on
    IDENTIFIER = auto()
    ARROW = auto()       # ->
    LBRACE = auto()      # {
    RBRACE = auto()      # }
    SEMICOLON = auto()   # ;
    EOF = auto()


KEYWORDS = {
    "machine": TokenType.MACHINE,
    "state": TokenType.STATE,
    "initial": TokenType.INITIAL,
    "terminal": TokenType.TERMINAL,
    "on": TokenType.ON,
}

SYMBOLS = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str = ""
    line: int = 0
    column: int = 0

    def describe(self):
        if self.type is TokenType.EOF:
            return "end of input"
        return f"'{self.text}'"


class Lexer:
    """Pulls tokens one at a time out of the source text."""

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def _peek(self):
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def _next(self):
        c = self.text[self.pos]
        self.pos += 1
        if c == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return c

    def next_token(self):
        # 1. Whitespace
        while self._peek() is not None and self._peek().isspace():
            self._next()

        line, column = self.line, self.column
        c = self._peek()

        # 2. End of input, repeated on every later call
        if c is None:
            return Token(TokenType.EOF, "", line, column)

        self._next()

        if c in SYMBOLS:
            return Token(SYMBOLS[c], c, line, column)

        if c == "-":
            following = self._peek()
            if following != ">":
                shown = "end of input" if following is None else repr(following)
                raise LexError(f"Expected '>' after '-', found {shown}", line, column)
            self._next()
            return Token(TokenType.ARROW, "->", line, column)

        if c.isalpha():
            text = c
            while self._peek() is not None and self._peek().isalnum():
                text += self._next()
            return Token(KEYWORDS.get(text, TokenType.IDENTIFIER), text, line, column)

        raise LexError(f"Unexpected character {c!r}", line, column)


def tokenize(text):
    """Yields every token of `text`, ending with a single EOF token."""
    lexer = Lexer(text)
    while True:
        token = lexer.next_token()
        yield token
        if token.type is TokenType.EOF:
            return
