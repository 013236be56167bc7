"""Statement grouping utilities for py2cpp.

These functions implement one step of the parser's left fold. The fold
carries a :class:`ParseState` and never mutates it: each step returns a new
state with the token placed either as a leaf of the open statement, as a
pending leaf (before any keyword) or as the head of a new statement.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import NamedTuple, Optional

from py2cpp.lexer import Token, TokenKind
from py2cpp.parser.nodes import Node


class ParseState(NamedTuple):
    """
    Accumulator threaded through the parser's fold.

    Attributes:
        leading: Leaves seen before the first keyword, not yet owned.
        completed: Finished statement nodes, in encounter order.
        label: Keyword of the open statement, ``None`` when none is open.
        children: Leaves collected for the open statement.
    """
    leading: tuple = ()
    completed: tuple = ()
    label: Optional[str] = None
    children: tuple = ()


def close_statement(state: ParseState) -> ParseState:
    """
    Finalize the open statement, if any, into the completed statements.

    Args:
        state: The current parse state.

    Returns:
        ParseState: A state with no open statement.
    """
    if state.label is None:
        return state
    statement = Node(state.label, state.children, TokenKind.KEYWORD)
    return ParseState(state.leading, state.completed + (statement,))


def open_statement(state: ParseState, token: Token) -> ParseState:
    """
    Finalize the open statement and start a new one headed by ``token``.

    Leaves seen before the first keyword become the first children of
    the new statement.

    Syntax:
        <keyword> <token>*

    Args:
        state: The current parse state.
        token: A keyword token.

    Returns:
        ParseState: A state whose open statement is labelled ``token.text``.
    """
    closed = close_statement(state)
    return closed._replace(label=token.text, children=closed.leading, leading=())


def fold_token(state: ParseState, token: Token) -> ParseState:
    """
    Place a single token into the parse state.
    """
    if token.kind is TokenKind.KEYWORD:
        return open_statement(state, token)
    leaf = Node.leaf(token)
    if state.label is None:
        return state._replace(leading=state.leading + (leaf,))
    return state._replace(children=state.children + (leaf,))
