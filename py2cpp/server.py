"""
py2cpp Language Server entry point.

Indexes the ``def`` statements of every open document with the py2cpp lexer
and parser, and answers definition, hover (the C++ signature a function
translates to) and document symbol requests from that index. Only open
documents are indexed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    DocumentSymbol,
    Hover,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from py2cpp.codegen import FUNCTION_OPEN
from py2cpp.lexer import TokenKind, tokenize
from py2cpp.parser import Parser


@dataclass
class FunctionSymbol:
    """A function defined in a document, with its zero-based line."""

    name: str
    uri: str
    line: int
    detail: str

    @property
    def range(self) -> Range:
        """Range covering the start of the symbol's line up to the name length."""
        return Range(Position(self.line, 0), Position(self.line, len(self.name)))


def keyword_lines(tokens) -> List[int]:
    """Zero-based line of each keyword token, in order."""
    lines = []
    line = 0
    for token in tokens:
        if token.kind is TokenKind.KEYWORD:
            lines.append(line)
        line += token.text.count("\n")
    return lines


def parse_symbols(uri: str, text: str) -> List[FunctionSymbol]:
    """Parse ``text`` and extract one symbol per named ``def`` statement.

    Every statement starts at a keyword token, so the n-th statement of the
    tree sits on the line of the n-th keyword.
    """
    tokens = tokenize(text)
    root = Parser(tokens, uri).parse()
    symbols: List[FunctionSymbol] = []
    for node, line in zip(root.children, keyword_lines(tokens)):
        if node.label != "def":
            continue
        arguments = node.arguments
        if arguments and arguments[0].kind is TokenKind.IDENTIFIER:
            name = arguments[0].label
            detail = FUNCTION_OPEN.format(name=name).rstrip(" {\n")
            symbols.append(FunctionSymbol(name, uri, line, detail))
    return symbols


class TranslatorLanguageServer(LanguageServer):
    """Language server for translatable Python files."""

    def __init__(self) -> None:
        super().__init__("py2cpp-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[FunctionSymbol]] = {}

    def update_index(self, uri: str, text: str) -> None:
        """Replace the symbols recorded for ``uri``."""
        self.symbols_by_uri[uri] = parse_symbols(uri, text)

    def lookup(self, word: str) -> Optional[FunctionSymbol]:
        """Return the first indexed function named ``word``."""
        for symbols in self.symbols_by_uri.values():
            for sym in symbols:
                if sym.name == word:
                    return sym
        return None

    def symbol_at(self, params) -> Optional[FunctionSymbol]:
        """Return the indexed function named by the word under the cursor."""
        doc = self.workspace.get_text_document(params.text_document.uri)
        word = doc.word_at_position(params.position)
        return self.lookup(word) if word else None


lang_server = TranslatorLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: TranslatorLanguageServer, params) -> None:
    """Index a document when it is opened."""
    ls.update_index(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: TranslatorLanguageServer, params) -> None:
    """Re-index a document from the workspace copy after a change."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.update_index(doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: TranslatorLanguageServer, params) -> Optional[Location]:
    """Jump to the ``def`` of the function under the cursor."""
    sym = ls.symbol_at(params)
    return Location(uri=sym.uri, range=sym.range) if sym else None


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: TranslatorLanguageServer, params) -> Optional[Hover]:
    """Show the C++ signature of the function under the cursor."""
    sym = ls.symbol_at(params)
    if sym is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=sym.detail))


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: TranslatorLanguageServer, params) -> List[DocumentSymbol]:
    """List the functions defined in the given document."""
    return [
        DocumentSymbol(
            name=sym.name,
            kind=SymbolKind.Function,
            range=sym.range,
            selection_range=sym.range,
            detail=sym.detail,
        )
        for sym in ls.symbols_by_uri.get(params.text_document.uri, [])
    ]


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
