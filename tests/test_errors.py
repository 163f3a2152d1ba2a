from fsmc.errors import (ConfigError, EmptyMachineError, FsmError, LexError, ParseError,
                         ResolveError, UndefinedStateError)


def test_error_hierarchy():
    for cls in (LexError, ParseError, ResolveError, ConfigError):
        assert issubclass(cls, FsmError)
    assert issubclass(UndefinedStateError, ResolveError)
    assert issubclass(EmptyMachineError, ResolveError)


def test_message_without_position():
    assert str(FsmError("Base error")) == "Base error"
    assert str(EmptyMachineError()) == "Machine must have at least one state"


def test_message_with_position():
    error = ParseError("Expected event name", 3, 7)
    assert str(error) == "Expected event name (line 3, column 7)"
    assert error.message == "Expected event name"
    assert (error.line, error.column) == (3, 7)


def test_undefined_state_carries_name():
    error = UndefinedStateError("Gone", 1, 2)
    assert error.name == "Gone"
    assert str(error) == "Undefined state: Gone (line 1, column 2)"


def test_stage_labels():
    assert LexError.stage == "Lex Error"
    assert ParseError.stage == "Parse Error"
    assert UndefinedStateError.stage == "Compilation Error"
