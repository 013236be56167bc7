"""
Tests for the interactive session commands
"""
from py2cpp import session as commands
from py2cpp.session import (
    CommandFailed,
    Completed,
    PreconditionNotMet,
    Session,
)

from py2cpp.tests.utils import HELLO


def run_stages(path):
    """
    Load, tokenize and parse ``path``, returning the session.
    """
    state = Session()
    for step in (
        lambda s: commands.load(s, str(path)),
        commands.tokenize_source,
        commands.parse_tokens,
    ):
        result = step(state)
        assert isinstance(result, Completed)
        state = result.session
    return state


def test_stages_require_predecessors():
    """
    Test that each command reports a missing earlier stage.
    """
    empty = Session()
    assert commands.tokenize_source(empty) == PreconditionNotMet("Load a file first.")
    assert commands.parse_tokens(empty) == PreconditionNotMet("Tokenize the code first.")
    assert commands.check_tree(empty) == PreconditionNotMet("Parse the code first.")
    assert commands.generate_code(empty) == PreconditionNotMet("Parse the code first.")


def test_full_session(tmp_path):
    """
    Test the load, tokenize, parse, check, generate sequence.
    """
    src = tmp_path / "hello.py"
    src.write_text(HELLO, encoding="utf-8")
    state = run_stages(src)
    assert state.path == str(src)
    assert [n.label for n in state.tree.children] == ["def", "print"]

    checked = commands.check_tree(state)
    assert checked == Completed(state, "Semantic check passed.")

    generated = commands.generate_code(state)
    assert isinstance(generated, Completed)
    assert generated.output.startswith("Generated C++ Code:\nvoid main() {\n")


def test_empty_file_is_a_valid_source(tmp_path):
    """
    Test that an empty file can be taken through every stage.
    """
    src = tmp_path / "empty.py"
    src.write_text("", encoding="utf-8")
    state = run_stages(src)
    assert state.tokens == ()
    assert commands.generate_code(state).output == "Generated C++ Code:\n}\n"


def test_loading_resets_later_stages(tmp_path):
    """
    Test that new source discards stale tokens and trees.
    """
    first = tmp_path / "a.py"
    first.write_text(HELLO, encoding="utf-8")
    state = run_stages(first)
    reloaded = commands.load(state, str(first)).session
    assert reloaded.tokens is None
    assert reloaded.tree is None


def test_load_missing_file(tmp_path):
    """
    Test that an unreadable file is reported as a failure.
    """
    result = commands.load(Session(), str(tmp_path / "missing.py"))
    assert result == CommandFailed("Failed to open file.")


def test_check_failure_lists_diagnostics(tmp_path):
    """
    Test that semantic errors are reported and block generation.
    """
    src = tmp_path / "bad.py"
    src.write_text("print(1)\nprint(2)\n", encoding="utf-8")
    state = run_stages(src)
    expected = CommandFailed(
        "Error: 'print' requires a string argument\n"
        "Error: 'print' requires a string argument"
    )
    assert commands.check_tree(state) == expected
    assert commands.generate_code(state) == expected


def test_generation_failure_is_reported(tmp_path):
    """
    Test that a generator error becomes a failed command.
    """
    src = tmp_path / "two.py"
    src.write_text('def a(): print("x")\ndef b(): print("y")\n', encoding="utf-8")
    result = commands.generate_code(run_stages(src))
    assert isinstance(result, CommandFailed)
    assert "Only one function" in result.message
