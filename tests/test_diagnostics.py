"""
Tests for token and error rendering.
"""

import sys
import os

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from spl.lexer.tokens import Token, TokenType, Position
from spl.lexer.errors import (
    UnexpectedChar, UnterminatedStringSequence, Diagnostic, escape_unicode
)


class TestTokenRendering:

    @pytest.mark.parametrize("token, expected", [
        (Token(TokenType.DOUBLE_EQUALS, "==", 1), "<DoubleEquals, ==> Line: 1"),
        (Token(TokenType.IDENTIFIER, "counter", 4), "<Identifier, counter> Line: 4"),
        (Token(TokenType.STRING, "Hello world", 2), "<String, Hello world> Line: 2"),
        (Token(TokenType.END_OF_FILE, "", 9), "<EndOfFile, > Line: 9"),
    ])
    def test_str(self, token, expected):
        assert str(token) == expected

    def test_tokens_are_immutable(self):
        token = Token(TokenType.NUMBER, "1", 1)
        with pytest.raises(AttributeError):
            token.lexeme = "2"

    def test_position_str(self):
        assert str(Position(3, 14)) == "line 3, column 14"


class TestErrorRendering:

    def test_unexpected_char(self):
        error = UnexpectedChar(Position(1, 4), "@")
        assert str(error) == "Unexpected char '@' (unicode \\u{40}) found at line 1, column 4"

    def test_unterminated_string(self):
        error = UnterminatedStringSequence(Position(1, 0), Position(2, 3))
        assert str(error) == (
            "Unterminated string sequence found, starting at line 1, column 0, "
            "ending at line 2, column 3"
        )

    @pytest.mark.parametrize("char, expected", [
        ("!", "\\u{21}"),
        ("é", "\\u{e9}"),
        ("☃", "\\u{2603}"),
    ])
    def test_escape_unicode(self, char, expected):
        assert escape_unicode(char) == expected

    def test_errors_compare_by_value(self):
        assert UnexpectedChar(Position(1, 0), "!") == UnexpectedChar(Position(1, 0), "!")
        assert UnexpectedChar(Position(1, 0), "!") != UnexpectedChar(Position(1, 1), "!")
        assert UnexpectedChar(Position(1, 0), "!") != \
            UnterminatedStringSequence(Position(1, 0), Position(1, 0))

    def test_diagnostic(self):
        error = UnexpectedChar(Position(2, 5), "!", help_text="Did you mean '!='?")
        diagnostic = error.diagnostic
        assert isinstance(diagnostic, Diagnostic)
        assert diagnostic.code == "L001"
        assert diagnostic.location == Position(2, 5)
        rendered = str(diagnostic)
        assert rendered.startswith("ERROR[L001]: Unexpected char '!'")
        assert "  --> line 2, column 5" in rendered
        assert "help: Did you mean '!='?" in rendered
