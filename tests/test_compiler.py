import shutil
import subprocess

import pytest

from fsmc.compiler import compile_source
from fsmc.errors import FsmError, LexError, ParseError, UndefinedStateError
from fsmc.parser import MAX_EVENT_LENGTH

LANDER = """
machine Lander {
    state Cruise { on EntryInterface -> Descent; }
    state Descent { on Touchdown -> Safe; on Fault -> Crash; on Turbulence -> Descent; }
    state Safe {}
    state Crash {}
}
"""


def test_door_round_trip(door_source):
    result = compile_source(door_source)
    assert len(result.graph.states) == 2
    assert result.graph.initial_state == 0
    assert result.graph.states[0].name == "Closed"
    assert 'Closed -> Open [label="open"];' in result.dot
    assert 'Open -> Closed [label="close"];' in result.dot
    assert "case STATE_Closed:\n            if (strcmp(event, \"open\") == 0) return STATE_Open;" in result.c


def test_undefined_target_never_reaches_codegen(monkeypatch):
    def fail(graph):
        raise AssertionError("codegen ran")

    monkeypatch.setattr("fsmc.compiler.generate_c", fail)
    monkeypatch.setattr("fsmc.compiler.generate_dot", fail)
    with pytest.raises(UndefinedStateError) as exc:
        compile_source("machine M { state A { on x -> B; } }")
    assert exc.value.name == "B"


@pytest.mark.parametrize("text, error", [
    ("machine M { state A { on x ~ A; } }", LexError),
    ("machine M { state A }", ParseError),
    ("machine M {}", FsmError),
])
def test_all_stages_raise_fsm_errors(text, error):
    with pytest.raises(error):
        compile_source(text)


C_COMPILER = shutil.which("cc") or shutil.which("gcc") or shutil.which("clang")


def build(tmp_path, source):
    c_file = tmp_path / "fsm.c"
    exe = tmp_path / "fsm"
    c_file.write_text(compile_source(source).c)
    subprocess.run([C_COMPILER, "-o", str(exe), str(c_file)], check=True)
    return exe


def run(exe, stdin):
    return subprocess.run([str(exe)], input=stdin, capture_output=True, text=True, timeout=10).stdout


@pytest.mark.skipif(C_COMPILER is None, reason="no C compiler available")
def test_generated_program_walks_machine(tmp_path):
    out = run(build(tmp_path, LANDER), "EntryInterface\nBogus\nTurbulence\nTouchdown\n")
    assert "Current State: Cruise" in out
    assert "[Options: EntryInterface]" in out
    assert ">> Transitioned: Cruise -> Descent" in out
    assert ">> Invalid event. Stayed in Descent." in out
    assert ">> Transitioned: Descent -> Descent" in out
    assert "[Options: Touchdown, Fault, Turbulence]" in out
    assert ">> Final state reached. Terminating." in out
    assert out.rstrip().endswith("Terminating.")


@pytest.mark.skipif(C_COMPILER is None, reason="no C compiler available")
def test_generated_program_stops_at_end_of_input(tmp_path, door_source):
    out = run(build(tmp_path, door_source), "open\n")
    assert ">> Transitioned: Closed -> Open" in out
    assert "Final state reached" not in out


@pytest.mark.skipif(C_COMPILER is None, reason="no C compiler available")
def test_generated_program_accepts_longest_event(tmp_path):
    event = "e" * MAX_EVENT_LENGTH
    exe = build(tmp_path, f"machine M {{ state A {{ on {event} -> B; }} state B {{}} }}")
    out = run(exe, event + "\n")
    assert ">> Transitioned: A -> B" in out
    assert "Invalid event" not in out
