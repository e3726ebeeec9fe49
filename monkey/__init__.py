"""
Monkey Language Front End

Lexical analysis for Monkey, a small C-like scripting language, plus a
line-based REPL that prints the tokens of whatever you type.

Architecture:
    monkey/
    ├── lexer/           # Token model, scanner and diagnostics
    ├── config.py        # Lexer and REPL options
    ├── repl.py          # Interactive read-scan-print loop
    └── cli.py           # `monkey` command line entry point
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .config import LexerConfig, ReplConfig
from .lexer import Lexer, Token, TokenType

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "LexerConfig",
    "ReplConfig",

    "__version__",
    "__license__",
]
