"""Parser for py2cpp.

Groups a token sequence into a flat, two-level tree. A new statement starts
at every keyword token and owns every following token up to the next
keyword. Tokens seen before the first keyword are attached to the first
statement, and dropped when no keyword appears at all. The parser is a
best-effort flattener: it never raises, and validation is left to
:mod:`py2cpp.semantics`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from functools import reduce

from py2cpp.lexer import Token
from py2cpp.parser.nodes import Node
from py2cpp.parser.statements import ParseState, close_statement, fold_token

logger = logging.getLogger(__name__)


class Parser:
    """
    Builds the syntax tree for a token sequence.
    """
    def __init__(self, tokens: list[Token], file: str = "<input>"):
        """
        Initialize the parser.

        Parameters:
            tokens (list[Token]): Tokens produced by the lexer.
            file (str): Name of the source, used in log messages.
        """
        self.tokens = tuple(tokens)
        self.file = file

    def parse(self) -> Node:
        """
        Fold the tokens into a root node.

        Returns:
            Node: The root, labelled ``""``, whose children are the
            statement nodes. Without any keyword it has no children.
        """
        state = close_statement(reduce(fold_token, self.tokens, ParseState()))
        if state.leading:
            logger.debug("No keyword in %s, dropping %d tokens", self.file, len(state.leading))
        root = Node("", state.completed)
        logger.debug(
            "Parsed %d tokens from %s into %d statements",
            len(self.tokens), self.file, len(state.completed)
        )
        return root


def parse(tokens: list[Token]) -> Node:
    """
    Parse ``tokens`` into a root node.
    """
    return Parser(tokens).parse()
