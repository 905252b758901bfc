"""
SPL Package

Front end tooling for SPL, a small teaching language.

Architecture:
    spl/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # spl-lex command line tool

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import (
    Lexer,
    Token,
    TokenType,
    Position,
    LexerError,
    UnterminatedStringSequence,
    UnexpectedChar,
)

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "Position",
    "LexerError",
    "UnterminatedStringSequence",
    "UnexpectedChar",

    # Version info
    "__version__",
    "__license__",
]
