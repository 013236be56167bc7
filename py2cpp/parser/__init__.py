"""Parser package for py2cpp.

This package splits the parser functionality into multiple modules to
keep the code organized. The :class:`Parser` class, the :func:`parse`
function and the :class:`Node` tree type are exposed at the package level
for convenience.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .nodes import Node
from .parser import Parser, parse

__all__ = ["Node", "Parser", "parse"]
