"""
Tests for the py2cpp code generator
"""
import logging

import pytest

from py2cpp.codegen import CodeGenerator, generate, translate
from py2cpp.exceptions import GenerationError, SemanticError
from py2cpp.lexer import TokenKind
from py2cpp.parser import Node

from py2cpp.tests.utils import HELLO, parse_source


def test_hello_world():
    """
    Test the generated C++ for the hello world program.
    """
    code = generate(parse_source(HELLO))
    assert code == (
        "void main() {\n"
        'std::cout << "Hello" << std::endl;\n'
        "}\n"
    )
    assert code.count("{") == 1
    assert code.count("}") == 1


def test_empty_tree_emits_closing_brace_only():
    """
    Test that an empty program generates just the closing brace.
    """
    assert generate(parse_source("")) == "}\n"


def test_multi_line_body():
    """
    Test a function with several print statements.
    """
    source = 'def greet():\n    print("Hello")\n    print("World")\n'
    assert generate(parse_source(source)) == (
        "void greet() {\n"
        'std::cout << "Hello" << std::endl;\n'
        'std::cout << "World" << std::endl;\n'
        "}\n"
    )


def test_print_arguments_are_concatenated():
    """
    Test that every argument is emitted with no separator.
    """
    code = generate(parse_source('print("a", "b")'))
    assert code == 'std::cout << "a","b" << std::endl;\n}\n'


def test_root_level_leaves_pass_through():
    """
    Test that root-level leaves are emitted unchanged, ':' as a brace.
    """
    root = Node("", (
        Node("(", (), TokenKind.OPERATOR),
        Node(":", (), TokenKind.OPERATOR),
        Node("x", (), TokenKind.IDENTIFIER),
    ))
    assert generate(root) == "( {\nx}\n"


def test_leading_text_is_not_passed_through():
    """
    Test that text before the first keyword never reaches the output.
    """
    assert generate(parse_source("x = 1\n")) == "}\n"
    assert generate(parse_source('\n\nprint("a")')) == 'std::cout << "a" << std::endl;\n}\n'


def test_generate_is_deterministic():
    """
    Test that equal trees give byte-identical output.
    """
    assert generate(parse_source(HELLO)) == generate(parse_source(HELLO))
    generator = CodeGenerator()
    root = parse_source(HELLO)
    assert generator.generate(root) == generator.generate(root)


def test_multiple_functions_are_rejected():
    """
    Test that a second function scope is reported, not mis-emitted.
    """
    root = parse_source('def a(): print("x")\ndef b(): print("y")')
    with pytest.raises(GenerationError) as excinfo:
        generate(root)
    assert "found 2" in str(excinfo.value)
    assert excinfo.value.statement is root.children[2]


def test_def_without_name_is_rejected():
    """
    Test that a def with nothing to name the function cannot be emitted.
    """
    with pytest.raises(GenerationError):
        generate(parse_source("def ()"))


def test_print_without_argument_is_rejected():
    """
    Test that generating from an unchecked empty print fails loudly.
    """
    with pytest.raises(GenerationError):
        generate(parse_source("print()"))


def test_translate_runs_pipeline():
    """
    Test the full pipeline.
    """
    assert translate(HELLO) == generate(parse_source(HELLO))
    with pytest.raises(SemanticError):
        translate("print(42)", "bad.py")


def test_generation_is_logged(caplog):
    """
    Test that the generator logs the size of its output.
    """
    with caplog.at_level(logging.DEBUG, logger="py2cpp.codegen"):
        translate(HELLO, "hello.py")
    assert any("hello.py" in r.getMessage() for r in caplog.records)
