"""Semantic checker for py2cpp.

Validates a parsed tree before code generation. The only rule is that a
``print`` statement takes a string literal as its first argument; ``def``
statements are deliberately unconstrained (no arity or name checks). Every
statement is inspected so all violations are reported together, and the
tree is never modified.


File: semantics.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from py2cpp.exceptions import SemanticError
from py2cpp.lexer import TokenKind
from py2cpp.parser import Node

logger = logging.getLogger(__name__)

PRINT_REQUIRES_STRING = "'print' requires a string argument"


class Severity(Enum):
    """
    Diagnostic severities.
    """
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """
    A semantic error attached to the statement that caused it.

    Attributes:
        severity: Always :attr:`Severity.ERROR` for now.
        message: Human readable description.
        statement: The offending statement node.
        index: Position of the statement among the root's children.
    """
    severity: Severity
    message: str
    statement: Node
    index: int

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.message} in '{self.statement.text.strip()}'"


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of :func:`check`. Truthy when the tree passed.
    """
    diagnostics: tuple = field(default=())

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def __bool__(self) -> bool:
        return self.ok


def _check_print(statement: Node, index: int) -> Optional[Diagnostic]:
    """
    Return a diagnostic unless the first argument is a string literal.
    """
    arguments = statement.arguments
    if not arguments or arguments[0].kind is not TokenKind.STRING_LITERAL:
        return Diagnostic(Severity.ERROR, PRINT_REQUIRES_STRING, statement, index)
    return None


def check(root: Node) -> CheckResult:
    """
    Check every statement under ``root``.

    Args:
        root: The root node returned by the parser.

    Returns:
        CheckResult: Holds one diagnostic per violating statement.
    """
    diagnostics = []
    for index, node in enumerate(root.children):
        if node.is_statement and node.label == "print":
            diagnostic = _check_print(node, index)
            if diagnostic is not None:
                logger.debug("Statement %d rejected: %s", index, diagnostic.message)
                diagnostics.append(diagnostic)
    return CheckResult(tuple(diagnostics))


def ensure_valid(root: Node, file=None) -> None:
    """
    Raise :class:`SemanticError` unless ``root`` passes :func:`check`.
    """
    result = check(root)
    if not result.ok:
        raise SemanticError(result.diagnostics, file)
