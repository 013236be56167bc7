"""py2cpp.

Translates a small subset of Python (``def`` headers and ``print`` calls) into
C++ source text. The pipeline runs lexer, parser, semantic checker and code
generator in strict sequence.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
