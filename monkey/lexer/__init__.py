"""
Monkey Lexer Package

Implements the lexical analyzer (tokenizer) for the Monkey language.

Key Features:
- Pull-based scanning, one token per next_token() call
- One character of lookahead for == and !=
- Fixed keyword table (fn, let, true, false, if, else, return)
- Total: unrecognized characters become ILLEGAL tokens, never exceptions
- Line/column diagnostics for every ILLEGAL token
"""

from .tokens import Token, TokenType, KEYWORDS, lookup_ident
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerWarning, SourceLocation

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "lookup_ident",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerWarning",
    "SourceLocation",
]
