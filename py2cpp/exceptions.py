"""Errors.

Lexing and parsing never fail; only the semantic checker and the code
generator raise, and only through the classes below.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class TranslationError(Exception):
    """
    Base class for translation failures.
    """


class SemanticError(TranslationError):
    """
    Error for trees rejected by the semantic checker.
    """
    def __init__(self, diagnostics, file=None):
        self.diagnostics = list(diagnostics)
        self.file = file
        message = "; ".join(str(d) for d in self.diagnostics) or "Semantic check failed"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class GenerationError(TranslationError):
    """
    Error for trees the code generator cannot emit.
    """
    def __init__(self, message, statement=None, file=None):
        self.statement = statement
        self.file = file
        if statement is not None:
            message += f" at '{statement.text.strip()}'"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)
