"""Syntax tree nodes for py2cpp.

The tree is two levels deep: a synthetic root whose children are statement
nodes (``def``/``print``). Each statement owns the leaves built from the
tokens that followed its keyword; the first one also owns any tokens that
preceded it. Nodes are frozen; later stages only read them.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from py2cpp.lexer import KEYWORDS, Token, TokenKind

# Grouping punctuation that never counts as argument content.
GROUPING = frozenset({"(", ")"})


@dataclass(frozen=True)
class Node:
    """
    A statement head or a token-derived leaf.

    ``kind`` records the token kind a node was built from and is ``None``
    for the synthetic root.
    """
    label: str
    children: tuple[Node, ...] = ()
    kind: Optional[TokenKind] = None

    @classmethod
    def leaf(cls, token: Token) -> Node:
        """
        Build a leaf node from a token.
        """
        return cls(token.text, (), token.kind)

    @property
    def is_statement(self) -> bool:
        """
        Return ``True`` for ``def`` and ``print`` statement nodes.
        """
        return self.kind is TokenKind.KEYWORD and self.label in KEYWORDS

    @property
    def arguments(self) -> tuple[Node, ...]:
        """
        Children carrying argument content.

        Whitespace leaves and the grouping parentheses are left out.
        """
        return tuple(
            child for child in self.children
            if child.kind is not TokenKind.WHITESPACE and child.label not in GROUPING
        )

    @property
    def text(self) -> str:
        """
        The label followed by the text of every child.
        """
        return self.label + "".join(child.text for child in self.children)

    def dump(self, depth: int = 0) -> str:
        """
        Render the tree indented by two spaces per level.

        Whitespace leaves are shown quoted so they stay visible.
        """
        label = repr(self.label) if self.kind is TokenKind.WHITESPACE else self.label
        lines = [" " * depth + label]
        for child in self.children:
            lines.append(child.dump(depth + 2))
        return "\n".join(lines)
