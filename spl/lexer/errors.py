"""
Error handling for the SPL lexer.

Lexical errors are values: the lexer collects them while scanning and hands
them back next to the tokens. They still subclass ``Exception`` so callers
that want fail-fast behaviour (see ``tokenize_string``) can raise them.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import Position, EQUALS_SUFFIXED_TOKENS


@dataclass
class Diagnostic:
    """Structured description of a lexer problem."""
    message: str
    location: Position
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Base class of the lexical errors.

    Subclasses are the closed set of error kinds the lexer can report.
    """

    def __init__(
        self,
        message: str,
        location: Position,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
        )

    def _key(self) -> tuple:
        raise NotImplementedError

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def __str__(self) -> str:
        return self.message


class UnterminatedStringSequence(LexerError):
    """An opening quote with no closing quote before the end of input."""

    def __init__(self, starts_at: Position, ends_at: Position):
        super().__init__(
            f"Unterminated string sequence found, starting at {starts_at}, ending at {ends_at}",
            starts_at,
            code="L002",
            help_text='String literals must be closed with a matching " quote.',
        )
        self.starts_at = starts_at
        self.ends_at = ends_at

    def _key(self) -> tuple:
        return (self.starts_at, self.ends_at)

    def __repr__(self) -> str:
        return f"UnterminatedStringSequence(starts_at={self.starts_at!r}, ends_at={self.ends_at!r})"


class UnexpectedChar(LexerError):
    """A character outside the SPL grammar."""

    def __init__(self, position: Position, char: str, help_text: Optional[str] = None):
        super().__init__(
            f"Unexpected char '{char}' (unicode {escape_unicode(char)}) found at {position}",
            position,
            code="L001",
            help_text=help_text,
        )
        self.position = position
        self.char = char

    def _key(self) -> tuple:
        return (self.position, self.char)

    def __repr__(self) -> str:
        return f"UnexpectedChar(position={self.position!r}, char={self.char!r})"


class UnterminatedSequence(Exception):
    """
    Raised by ``Lexer.advance_until_equal`` when the input runs out before
    the expected character. Never escapes the lexer.
    """

    def __init__(self, expected: str, consumed: str):
        super().__init__(f"input exhausted while looking for {expected!r}")
        self.expected = expected
        self.consumed = consumed


def escape_unicode(char: str) -> str:
    """Render a character as a ``\\u{hex}`` escape, e.g. ``\\u{21}`` for '!'."""
    return f"\\u{{{ord(char):x}}}"


def suggest_operator_corrections(char: str) -> List[str]:
    """Suggest valid operators that start with an invalid character."""
    if char in EQUALS_SUFFIXED_TOKENS:
        return [char + "="]
    return []


def create_unexpected_char_error(char: str, position: Position) -> UnexpectedChar:
    """Create an error for a character the lexer does not recognize."""
    suggestions = suggest_operator_corrections(char)
    help_text = None

    if suggestions:
        help_text = f"Did you mean '{suggestions[0]}'?"
    elif not char.isprintable():
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnexpectedChar(position, char, help_text=help_text)


def create_unterminated_string_error(starts_at: Position, ends_at: Position) -> UnterminatedStringSequence:
    """Create an error for a string literal that never closes."""
    return UnterminatedStringSequence(starts_at, ends_at)
