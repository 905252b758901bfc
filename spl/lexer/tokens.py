"""
Token definitions for the SPL lexer.

This module defines all token types supported by SPL, including:
- Operators (arithmetic and comparison)
- Delimiters
- Keywords
- Literals (numbers and strings) and identifiers
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict


class TokenType(Enum):
    """
    Enumeration of all token types in SPL.

    Member values are the display names used when rendering tokens.
    """

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = "Plus"                                   # +
    MINUS = "Minus"                                 # -
    TIMES = "Times"                                 # *
    DIVIDE = "Divide"                               # /
    EQUALS = "Equals"                               # =
    DOUBLE_EQUALS = "DoubleEquals"                  # ==
    NOT_EQUALS = "NotEquals"                        # !=
    GREATER = "Greater"                             # >
    LESS = "Less"                                   # <
    GREATER_OR_EQUAL = "GreaterOrEqual"             # >=
    LESS_OR_EQUAL = "LessOrEqual"                   # <=

    # ========================================================================
    # Delimiters
    # ========================================================================
    SEMICOLON = "Semicolon"                         # ;
    OPENING_PARENTHESES = "OpeningParentheses"      # (
    CLOSING_PARENTHESES = "ClosingParentheses"      # )
    OPENING_BRACES = "OpeningBraces"                # {
    CLOSING_BRACES = "ClosingBraces"                # }

    # ========================================================================
    # Keywords
    # ========================================================================
    TRUE = "True"                                   # true
    FALSE = "False"                                 # false
    AND = "And"                                     # and
    OR = "Or"                                       # or
    VAR = "Var"                                     # var
    PRINT = "Print"                                 # print
    IF = "If"                                       # if
    ELSE = "Else"                                   # else
    WHILE = "While"                                 # while

    # ========================================================================
    # Literals and identifiers
    # ========================================================================
    NUMBER = "Number"                               # 42, 3.14, 7.
    STRING = "String"                               # "hello"
    IDENTIFIER = "Identifier"                       # counter, x1

    # Appended once after the whole input has been scanned (opt-in)
    END_OF_FILE = "EndOfFile"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Position:
    """
    A location in the source text.

    ``line`` starts at 1 and counts consumed newlines. ``column`` counts the
    characters consumed on the current line and is 0 at the start of a line.
    """
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


@dataclass(frozen=True)
class Token:
    """
    A lexical token in SPL.

    ``lexeme`` is the source text the token came from. String literals are
    the exception: their lexeme is the content between the quotes.
    """
    type: TokenType
    lexeme: str
    line: int

    def __str__(self) -> str:
        return f"<{self.type}, {self.lexeme}> Line: {self.line}"

    @property
    def is_keyword(self) -> bool:
        return self.type in KEYWORDS.values()

    @property
    def is_literal(self) -> bool:
        return self.type in (TokenType.NUMBER, TokenType.STRING)


# Lookup tables used by the lexer

KEYWORDS: Dict[str, TokenType] = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "and": TokenType.AND,
    "or": TokenType.OR,
    "var": TokenType.VAR,
    "print": TokenType.PRINT,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
}

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.TIMES,
    ";": TokenType.SEMICOLON,
    "(": TokenType.OPENING_PARENTHESES,
    ")": TokenType.CLOSING_PARENTHESES,
    "{": TokenType.OPENING_BRACES,
    "}": TokenType.CLOSING_BRACES,
}

# Characters that may be followed by '=' to form a two-character operator.
# Maps the first character to (single form, '=' form); a None single form
# means the character is not valid on its own.
EQUALS_SUFFIXED_TOKENS = {
    "=": (TokenType.EQUALS, TokenType.DOUBLE_EQUALS),
    ">": (TokenType.GREATER, TokenType.GREATER_OR_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_OR_EQUAL),
    "!": (None, TokenType.NOT_EQUALS),
}

WHITESPACE = frozenset(" \t\r\n")
