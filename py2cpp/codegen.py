"""py2cpp code generator.

This module lowers a checked syntax tree into C++ source text. It relies on
the lexer, parser and semantic checker to produce and validate the tree, then
emits one chunk of C++ per statement.

Only one function scope per translation unit is supported: the closing
brace of the single ``def`` body is appended once, after every statement.
Trees with more than one ``def`` are rejected rather than emitted with
unbalanced braces.

Usage:
    python -m py2cpp.codegen path/to/script.py [output.cpp]

File: codegen.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations
import logging
import sys

from typing import List

from py2cpp.exceptions import GenerationError, TranslationError
from py2cpp.lexer import tokenize
from py2cpp.parser import Node, Parser
from py2cpp.semantics import ensure_valid

logger = logging.getLogger(__name__)

FUNCTION_OPEN = "void {name}() {{\n"
STREAM_PREFIX = "std::cout << "
STREAM_SUFFIX = " << std::endl;\n"
BLOCK_OPEN = " {\n"
SCOPE_CLOSE = "}\n"


class CodeGenerator:
    """Emit C++ source text for a py2cpp syntax tree."""

    def __init__(self, file: str = "<input>") -> None:
        """
        Initialize the generator state.
        """
        self.file = file
        self.chunks: List[str] = []

    def emit(self, text: str) -> None:
        """
        Append a chunk of output text.
        """
        self.chunks.append(text)

    def generate(self, root: Node) -> str:
        """
        Generate C++ source for ``root``.

        The tree must have passed :func:`py2cpp.semantics.check`. The
        generator does not re-run the checker.

        Args:
            root: The root node returned by the parser.

        Returns:
            str: The generated source text.

        Raises:
            GenerationError: If the tree has several ``def`` statements, or
                a ``def``/``print`` without the argument emission needs.
        """
        self.chunks = []
        functions = [n for n in root.children if n.is_statement and n.label == "def"]
        if len(functions) > 1:
            raise GenerationError(
                f"Only one function per translation unit is supported, found {len(functions)}",
                functions[1],
                self.file,
            )
        for node in root.children:
            self.statement(node)
        self.emit(SCOPE_CLOSE)
        code = "".join(self.chunks)
        logger.debug("Generated %d characters of C++ for %s", len(code), self.file)
        return code

    def statement(self, node: Node) -> None:
        """
        Emit the code for a single root-level node.
        """
        if node.is_statement and node.label == "def":
            self.gen_def(node)
        elif node.is_statement and node.label == "print":
            self.gen_print(node)
        elif node.label == ":":
            self.emit(BLOCK_OPEN)
        else:
            self.emit(node.label)

    def gen_def(self, node: Node) -> None:
        """
        Emit a function opener.

        The parameter list and the ``:`` block introducer are part of the
        opener, so the remaining signature leaves are not emitted.
        """
        arguments = node.arguments
        if not arguments:
            raise GenerationError("'def' requires a function name", node, self.file)
        self.emit(FUNCTION_OPEN.format(name=arguments[0].label))

    def gen_print(self, node: Node) -> None:
        """
        Emit a stream write of the concatenated arguments.
        """
        arguments = node.arguments
        if not arguments:
            raise GenerationError("'print' requires an argument", node, self.file)
        self.emit(STREAM_PREFIX)
        for argument in arguments:
            self.emit(argument.label)
        self.emit(STREAM_SUFFIX)


def generate(root: Node) -> str:
    """
    Generate C++ source text for a checked tree.
    """
    return CodeGenerator().generate(root)


def translate(src: str, file: str = "<input>") -> str:
    """
    Run the whole pipeline over ``src``.

    Raises:
        SemanticError: If the semantic check fails.
        GenerationError: If the tree cannot be emitted.
    """
    tokens = tokenize(src)
    root = Parser(tokens, file).parse()
    ensure_valid(root, file)
    return CodeGenerator(file).generate(root)


def main(argv: List[str]) -> int:
    """
    Entry point for the CLI.
    """
    if not argv:
        print("Usage: python -m py2cpp.codegen <script.py> [output.cpp]")
        return 1
    path = argv[0]
    with open(path, "r", encoding="utf-8") as f:
        src = f.read()
    try:
        code = translate(src, path)
    except TranslationError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    if len(argv) > 1:
        out_path = argv[1]
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(code)
    else:
        sys.stdout.write(code)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main(sys.argv[1:]))
