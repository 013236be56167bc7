"""
Utility functions shared across py2cpp tests.
"""
from pathlib import Path
import sys

from py2cpp.lexer import tokenize
from py2cpp.parser import Parser

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

HELLO = 'def main(): print("Hello")'


def parse_source(source: str):
    """
    Tokenize and parse source code, returning the root node.
    """
    return Parser(tokenize(source), "<test>").parse()


def kinds_and_texts(tokens):
    """
    Flatten tokens into (kind name, text) pairs.
    """
    return [(str(t.kind), t.text) for t in tokens]


def leaf_texts(node):
    """
    Collect every label in the tree below ``node``, depth first.
    """
    texts = []
    for child in node.children:
        texts.append(child.label)
        texts.extend(leaf_texts(child))
    return texts
