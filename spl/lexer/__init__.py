"""
SPL Lexer Package

Implements a from-scratch lexical analyzer (tokenizer) for SPL, the small
teaching language.

Key Features:
- Single linear pass with one character of lookahead
- Line and column tracking for diagnostics
- Error recovery: lexical errors are collected, scanning continues
"""

from .tokens import Token, TokenType, Position
from .lexer import Lexer, TokenizeResult, tokenize_string, tokenize_file
from .errors import LexerError, UnterminatedStringSequence, UnexpectedChar

__all__ = [
    "Lexer",
    "TokenizeResult",
    "Token",
    "TokenType",
    "Position",
    "LexerError",
    "UnterminatedStringSequence",
    "UnexpectedChar",
    "tokenize_string",
    "tokenize_file",
]
