"""Lexer for py2cpp.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
holding its kind and the exact text it matched.

Nothing is skipped: whitespace is kept as ``Whitespace`` tokens and every
other run of non-word characters is an ``Operator``, so the texts of the
returned tokens always concatenate back to the original source and
tokenization never fails. ``Unknown`` is the fallback for a character no
rule accepts.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """
    Lexical classes recognised by the lexer.
    """
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    NUMBER = "Number"
    STRING_LITERAL = "StringLiteral"
    OPERATOR = "Operator"
    WHITESPACE = "Whitespace"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


KEYWORDS = frozenset({"def", "print"})

# Delimiters always stand alone so that "():" lexes as three tokens.
DELIMITERS = "()[]{}:,;"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a kind and the text it matched.
    """
    kind: TokenKind
    text: str

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind}, {self.text!r})"


token_specification: list[tuple[str, str]] = [
    # Keywords
    ('KEYWORD',    r'\b(?:def|print)\b'),

    # Identifiers and numbers
    ('WORD',       r'\w+'),

    # Literals (an unterminated literal runs to the end of input)
    ('STRING',     r'"[^"]*"|"[^"]+'),

    # Whitespace
    ('WHITESPACE', r'\s+'),

    # Delimiters
    ('DELIMITER',  f'[{re.escape(DELIMITERS)}]'),

    # Operators (a lone trailing quote is an operator)
    ('OPERATOR',   rf'[^\w\s"{re.escape(DELIMITERS)}]+|"'),

    # Miscellaneous
    ('MISMATCH',   r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)

NUMBER_REGEX = re.compile(r'[0-9]+')


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances, whitespace included.
    """
    tokens: list[Token] = []

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'KEYWORD':
            tokens.append(Token(TokenKind.KEYWORD, value))
        elif kind == 'WORD':
            if NUMBER_REGEX.fullmatch(value):
                tokens.append(Token(TokenKind.NUMBER, value))
            else:
                tokens.append(Token(TokenKind.IDENTIFIER, value))
        elif kind == 'STRING':
            tokens.append(Token(TokenKind.STRING_LITERAL, value))
        elif kind == 'WHITESPACE':
            tokens.append(Token(TokenKind.WHITESPACE, value))
        elif kind in ('DELIMITER', 'OPERATOR'):
            tokens.append(Token(TokenKind.OPERATOR, value))
        else:
            logger.debug("Unrecognised character %r", value)
            tokens.append(Token(TokenKind.UNKNOWN, value))

    logger.debug("Tokenized %d characters into %d tokens", len(code), len(tokens))
    return tokens


def format_tokens(tokens) -> str:
    """
    Render tokens one per line for display.
    """
    return "\n".join(repr(token) for token in tokens)
