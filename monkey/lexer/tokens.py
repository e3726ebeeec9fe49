"""
Token definitions for the Monkey lexer.

This module defines every token type the Monkey language knows about:
- Keywords (fn, let, true, false, if, else, return)
- Operators, including the two-character comparisons == and !=
- Identifiers and integer literals
- Punctuation and delimiters

The set is closed. Anything the lexer cannot place in one of these
categories becomes an ILLEGAL token carrying the offending character.
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


class TokenType(Enum):
    """
    Enumeration of all token types in Monkey.

    Organized by category for clarity.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input
    ILLEGAL = auto()                # Unrecognized character

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENT = auto()                  # add, foobar, x
    INT = auto()                    # 1343456

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    BANG = auto()                   # !
    ASTERISK = auto()               # *
    SLASH = auto()                  # /

    EQ = auto()                     # ==
    NOT_EQ = auto()                 # !=
    GT = auto()                     # >
    LT = auto()                     # <

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return


@dataclass(frozen=True)
class Token:
    """
    A lexical token in the Monkey language.

    Holds the token type and the literal text it was scanned from. Two
    tokens are equal when both fields are equal.
    """
    type: TokenType
    literal: str

    def __str__(self) -> str:
        return f"{self.type.name}({self.literal!r})"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {TokenType.INT, TokenType.TRUE, TokenType.FALSE}


# Lookup tables used by the lexer. They are read-only; the language has no
# user-defined keywords or operators.

KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
})

SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ">": TokenType.GT,
    "<": TokenType.LT,
})

# Characters that need one character of lookahead. Each maps to the pair
# (type when followed by '=', type when standing alone).
TWO_CHAR_TOKENS: Mapping[str, tuple] = MappingProxyType({
    "=": (TokenType.EQ, TokenType.ASSIGN),
    "!": (TokenType.NOT_EQ, TokenType.BANG),
})

OPERATOR_TYPES = frozenset({
    TokenType.ASSIGN, TokenType.PLUS, TokenType.MINUS, TokenType.BANG,
    TokenType.ASTERISK, TokenType.SLASH, TokenType.EQ, TokenType.NOT_EQ,
    TokenType.GT, TokenType.LT,
})


def lookup_ident(ident: str) -> TokenType:
    """Return the keyword type for ``ident``, or IDENT if it isn't one."""
    return KEYWORDS.get(ident, TokenType.IDENT)
