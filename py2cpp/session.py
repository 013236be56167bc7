"""Session commands for the interactive translator.

The menu works through the pipeline one stage at a time. Its state (the
loaded source, the tokens and the tree) is an immutable :class:`Session`
value threaded through the command handlers below. A handler whose
predecessor stage has not run returns :class:`PreconditionNotMet` rather
than operating on stale or missing state; the caller decides how to show it.


File: session.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from py2cpp.codegen import CodeGenerator
from py2cpp.exceptions import GenerationError
from py2cpp.lexer import Token, format_tokens, tokenize
from py2cpp.parser import Node, Parser
from py2cpp.semantics import check

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """
    State accumulated by the menu. ``None`` marks a stage not yet run.
    """
    source: Optional[str] = None
    path: Optional[str] = None
    tokens: Optional[tuple[Token, ...]] = None
    tree: Optional[Node] = None


@dataclass(frozen=True)
class Completed:
    """The command ran; ``output`` is ready for display."""
    session: Session
    output: str


@dataclass(frozen=True)
class PreconditionNotMet:
    """A required earlier stage has not been run."""
    message: str


@dataclass(frozen=True)
class CommandFailed:
    """The command ran and failed."""
    message: str


CommandResult = Union[Completed, PreconditionNotMet, CommandFailed]


def load(session: Session, path: str) -> CommandResult:
    """
    Read ``path`` as the new source. Later stages are discarded.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    except OSError as e:
        logger.debug("Failed to open %s: %s", path, e)
        return CommandFailed("Failed to open file.")
    return Completed(Session(source=source, path=path), "File loaded.")


def tokenize_source(session: Session) -> CommandResult:
    """
    Tokenize the loaded source.
    """
    if session.source is None:
        return PreconditionNotMet("Load a file first.")
    tokens = tuple(tokenize(session.source))
    updated = Session(session.source, session.path, tokens)
    return Completed(updated, format_tokens(tokens))


def parse_tokens(session: Session) -> CommandResult:
    """
    Parse the current tokens into a tree.
    """
    if session.tokens is None:
        return PreconditionNotMet("Tokenize the code first.")
    tree = Parser(list(session.tokens), session.path or "<input>").parse()
    updated = Session(session.source, session.path, session.tokens, tree)
    return Completed(updated, tree.dump())


def check_tree(session: Session) -> CommandResult:
    """
    Run the semantic checker over the current tree.
    """
    if session.tree is None:
        return PreconditionNotMet("Parse the code first.")
    result = check(session.tree)
    if not result.ok:
        return CommandFailed("\n".join(f"Error: {d.message}" for d in result.diagnostics))
    return Completed(session, "Semantic check passed.")


def generate_code(session: Session) -> CommandResult:
    """
    Generate C++ for the current tree.

    The tree is checked first; a tree that fails the check is not emitted.
    """
    if session.tree is None:
        return PreconditionNotMet("Parse the code first.")
    result = check(session.tree)
    if not result.ok:
        return CommandFailed("\n".join(f"Error: {d.message}" for d in result.diagnostics))
    try:
        code = CodeGenerator(session.path or "<input>").generate(session.tree)
    except GenerationError as e:
        return CommandFailed(f"Error: {e}")
    return Completed(session, f"Generated C++ Code:\n{code}")
