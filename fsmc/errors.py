"""
Exception hierarchy for the compiler.

Every stage raises a subclass of FsmError and nothing catches it before the
driver, so one failure aborts the whole compilation with no partial output.
"""


class FsmError(Exception):
    """Base class for all compilation errors."""

    stage = "Error"

    def __init__(self, message="", line=None, column=None):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self):
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"


class LexError(FsmError):
    stage = "Lex Error"


class ParseError(FsmError):
    stage = "Parse Error"


class ResolveError(FsmError):
    stage = "Compilation Error"


class UndefinedStateError(ResolveError):
    """A transition names a state that is never declared."""

    def __init__(self, name, line=None, column=None):
        self.name = name
        super().__init__(f"Undefined state: {name}", line, column)


class EmptyMachineError(ResolveError):
    def __init__(self):
        super().__init__("Machine must have at least one state")


class ConfigError(FsmError):
    stage = "Config Error"
