"""
SPL Lexer - turns source text into tokens in a single pass.

The scanner is a small hand-written state machine: the state is implied by
the character just consumed, with one character of lookahead for the
two-character operators and for comments. Lexical errors are collected and
scanning carries on with the next character.
"""

import logging
from typing import Callable, List, NamedTuple, Optional

from .tokens import (
    Token, TokenType, Position, KEYWORDS, SINGLE_CHAR_TOKENS,
    EQUALS_SUFFIXED_TOKENS, WHITESPACE
)
from .errors import (
    LexerError, UnterminatedSequence, create_unexpected_char_error,
    create_unterminated_string_error
)

log = logging.getLogger(__name__)


class TokenizeResult(NamedTuple):
    """Tokens and errors produced by one ``Lexer.tokenize`` call."""
    tokens: List[Token]
    errors: List[LexerError]

    def has_errors(self) -> bool:
        return len(self.errors) > 0


class Lexer:
    """
    SPL lexical analyzer.

    Owns a cursor over the source text together with the current line and
    column. ``tokenize`` drives the cursor primitives until the input is
    exhausted.
    """

    def __init__(self, source: str, emit_eof: bool = False):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            emit_eof: Append an EndOfFile token after the last real token
        """
        self.source = source
        self.emit_eof = emit_eof
        self.pos = 0
        self.line = 1
        self.column = 0
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    # ========================================================================
    # Cursor primitives
    # ========================================================================

    def peek(self) -> Optional[str]:
        """Return the next unconsumed character, or None at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return the next character, updating line/column."""
        if self.pos >= len(self.source):
            return None

        char = self.source[self.pos]
        self.pos += 1
        if char == '\n':
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return char

    def advance_if_equal(self, expected: str) -> bool:
        """Consume the next character only if it equals ``expected``."""
        if self.peek() == expected:
            self.advance()
            return True
        return False

    def advance_until_equal(self, expected: str) -> str:
        """
        Consume characters up to, but not including, ``expected``.

        Raises:
            UnterminatedSequence: if the input ends before ``expected`` shows
                up. Everything up to the end of input has been consumed by then.
        """
        start_pos = self.pos
        while True:
            char = self.peek()
            if char is None:
                raise UnterminatedSequence(expected, self.source[start_pos:self.pos])
            if char == expected:
                return self.source[start_pos:self.pos]
            self.advance()

    def advance_while_matching(self, predicate: Callable[[str], bool]) -> str:
        """Consume the longest run of characters satisfying ``predicate``."""
        start_pos = self.pos
        while self.peek() is not None and predicate(self.peek()):
            self.advance()
        return self.source[start_pos:self.pos]

    @property
    def position(self) -> Position:
        """Current cursor position."""
        return Position(self.line, self.column)

    # ========================================================================
    # Tokenizer
    # ========================================================================

    def tokenize(self) -> TokenizeResult:
        """
        Tokenize the entire source code.

        Returns:
            TokenizeResult with the tokens in source order and every lexical
            error found along the way
        """
        self.pos = 0
        self.line = 1
        self.column = 0
        self.tokens = []
        self.errors = []

        log.debug("Starting tokenization of %d characters", len(self.source))

        while self.peek() is not None:
            self._scan_token()

        if self.emit_eof:
            self.tokens.append(Token(TokenType.END_OF_FILE, "", self.line))

        log.debug("Finished tokenization: %d tokens, %d errors",
                  len(self.tokens), len(self.errors))

        return TokenizeResult(list(self.tokens), list(self.errors))

    def _scan_token(self):
        """Consume one character and emit whatever it starts."""
        start = self.position
        char = self.advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char], char, start.line)
        elif char == '/':
            if self.advance_if_equal('/'):
                self._skip_comment()
            else:
                self._add_token(TokenType.DIVIDE, char, start.line)
        elif char in EQUALS_SUFFIXED_TOKENS:
            single, with_equals = EQUALS_SUFFIXED_TOKENS[char]
            if self.advance_if_equal('='):
                self._add_token(with_equals, char + '=', start.line)
            elif single is not None:
                self._add_token(single, char, start.line)
            else:
                self._add_error(create_unexpected_char_error(char, start))
        elif char == '"':
            self._scan_string(start)
        elif char in WHITESPACE:
            pass
        elif char.isalpha():
            self._scan_identifier(char, start)
        elif char.isdecimal():
            self._scan_number(char, start)
        else:
            self._add_error(create_unexpected_char_error(char, start))

    def _skip_comment(self):
        """Discard the rest of the line. A comment may end the input."""
        try:
            self.advance_until_equal('\n')
        except UnterminatedSequence:
            pass

    def _scan_string(self, start: Position):
        """Scan a string literal; the opening quote is already consumed."""
        try:
            body = self.advance_until_equal('"')
        except UnterminatedSequence:
            self._add_error(create_unterminated_string_error(start, self.position))
            return

        self.advance()  # closing quote
        self._add_token(TokenType.STRING, body, start.line)

    def _scan_identifier(self, first: str, start: Position):
        """Scan an identifier or keyword starting with ``first``."""
        name = first + self.advance_while_matching(str.isalnum)
        token_type = KEYWORDS.get(name, TokenType.IDENTIFIER)
        self._add_token(token_type, name, start.line)

    def _scan_number(self, first: str, start: Position):
        """Scan a number literal: digits, optionally one '.' and more digits."""
        lexeme = first + self.advance_while_matching(str.isdecimal)
        if self.advance_if_equal('.'):
            lexeme += '.' + self.advance_while_matching(str.isdecimal)
        self._add_token(TokenType.NUMBER, lexeme, start.line)

    def _add_token(self, token_type: TokenType, lexeme: str, line: int):
        self.tokens.append(Token(token_type, lexeme, line))

    def _add_error(self, error: LexerError):
        log.debug("Lexer error: %s", error)
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Check if the last scan encountered any errors."""
        return len(self.errors) > 0


def tokenize_string(source: str, emit_eof: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        emit_eof: Append an EndOfFile token

    Returns:
        List of tokens

    Raises:
        LexerError: The first error encountered, if lexing found any
    """
    lexer = Lexer(source, emit_eof=emit_eof)
    result = lexer.tokenize()

    if result.has_errors():
        raise result.errors[0]

    return result.tokens


def tokenize_file(filepath: str, emit_eof: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, emit_eof=emit_eof)
