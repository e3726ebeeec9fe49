"""
Monkey Lexer - turns source text into tokens, one at a time

The lexer is pull based: callers ask for next_token() until they see EOF.
It never raises on bad input. Characters it doesn't recognize come back as
ILLEGAL tokens (and get recorded in self.warnings) so the scan always runs
to the end of the buffer.

Classification happens in a fixed priority order, see Lexer._rules.
"""

import logging
from typing import Callable, Iterator, List, Optional, Tuple

from ..config import LexerConfig
from .tokens import Token, TokenType, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS, lookup_ident
from .errors import LexerWarning, SourceLocation, create_illegal_character_warning

logger = logging.getLogger(__name__)

# Returned by current_char/peek once the cursor is past the end of the buffer
EOF_CHAR = "\0"


class Lexer:
    """
    Monkey lexical analyzer.

    Holds the input buffer and a cursor over it. Each call to next_token()
    skips whitespace, classifies the character under the cursor and returns
    exactly one token. Once the buffer is exhausted every further call
    returns an EOF token.
    """

    def __init__(self, source: str, config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source text, indexed by character
            config: Lexer options, defaults to LexerConfig()
        """
        self.source = source
        self.config = config or LexerConfig()
        self.position = 0           # index of current_char
        self.read_position = 0      # index of the next character to read
        self.current_char = ""
        self.line = 1
        self.column = 0
        self.warnings: List[LexerWarning] = []

        self._whitespace = self.config.whitespace
        # Priority order matters: exact symbols, then lookahead pairs, then
        # identifiers, numbers, end of input and finally the illegal fallback.
        self._rules: Tuple[Callable[[], Optional[Token]], ...] = (
            self._single_char_token,
            self._two_char_token,
            self._identifier_token,
            self._number_token,
            self._eof_token,
            self._illegal_token,
        )

        self._read_char()

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()
        start = self.position

        for rule in self._rules:
            token = rule()
            if token is not None:
                logger.debug("token %s at offset %d", token, start)
                return token

        # _illegal_token always matches
        raise AssertionError("no lexer rule matched")  # pragma: no cover

    def tokenize(self) -> List[Token]:
        """
        Scan the rest of the input.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        tokens = list(self)
        tokens.append(self.next_token())
        return tokens

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until end of input. The EOF token is not yielded."""
        while True:
            token = self.next_token()
            if token.type == TokenType.EOF:
                return
            yield token

    def has_warnings(self) -> bool:
        """Check if the lexer produced any ILLEGAL tokens so far."""
        return len(self.warnings) > 0

    # ------------------------------------------------------------------
    # Classification rules. Each returns a token or None if it doesn't apply.
    # ------------------------------------------------------------------

    def _single_char_token(self) -> Optional[Token]:
        token_type = SINGLE_CHAR_TOKENS.get(self.current_char)
        if token_type is None:
            return None
        token = Token(token_type, self.current_char)
        self._read_char()
        return token

    def _two_char_token(self) -> Optional[Token]:
        pair = TWO_CHAR_TOKENS.get(self.current_char)
        if pair is None:
            return None
        double_type, single_type = pair

        first = self.current_char
        if self._peek_char() == "=":
            self._read_char()
            token = Token(double_type, first + self.current_char)
        else:
            token = Token(single_type, first)
        self._read_char()
        return token

    def _identifier_token(self) -> Optional[Token]:
        if not self.current_char.isalpha():
            return None
        # _read_identifier leaves the cursor on the first non-letter
        literal = self._read_identifier()
        return Token(lookup_ident(literal), literal)

    def _number_token(self) -> Optional[Token]:
        if not _is_digit(self.current_char):
            return None
        return Token(TokenType.INT, self._read_number())

    def _eof_token(self) -> Optional[Token]:
        if not self._at_end():
            return None
        return Token(TokenType.EOF, "")

    def _illegal_token(self) -> Token:
        char = self.current_char
        warning = create_illegal_character_warning(char, self._location())
        self.warnings.append(warning)
        logger.debug("illegal character %r at %s", char, warning.location)

        self._read_char()
        return Token(TokenType.ILLEGAL, char)

    # ------------------------------------------------------------------
    # Cursor handling
    # ------------------------------------------------------------------

    def _read_char(self):
        """Move the cursor one character forward, updating line/column."""
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        if self.read_position >= len(self.source):
            self.current_char = EOF_CHAR
        else:
            self.current_char = self.source[self.read_position]
        self.position = self.read_position
        if self.read_position <= len(self.source):
            self.read_position += 1

    def _peek_char(self) -> str:
        """Look at the next character without consuming it."""
        if self.read_position >= len(self.source):
            return EOF_CHAR
        return self.source[self.read_position]

    def _at_end(self) -> bool:
        return self.position >= len(self.source)

    def _read_identifier(self) -> str:
        start = self.position
        while not self._at_end() and self.current_char.isalpha():
            self._read_char()
        return self.source[start:self.position]

    def _read_number(self) -> str:
        start = self.position
        while not self._at_end() and _is_digit(self.current_char):
            self._read_char()
        return self.source[start:self.position]

    def _skip_whitespace(self):
        while not self._at_end() and self.current_char in self._whitespace:
            self._read_char()

    def _location(self) -> SourceLocation:
        return SourceLocation(self.config.filename, self.line, self.column, self.position)


def _is_digit(char: str) -> bool:
    # ASCII only; str.isdigit() would also accept superscripts and the like
    return "0" <= char <= "9"


def tokenize_string(source: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        config: Lexer options

    Returns:
        List of tokens, ending with EOF
    """
    return Lexer(source, config).tokenize()


def tokenize_file(filepath: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        config: Lexer options; the filename defaults to filepath

    Returns:
        List of tokens, ending with EOF

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    if config is None:
        config = LexerConfig(filename=filepath)
    return tokenize_string(source, config)
