"""
Configuration for the Monkey lexer and REPL.
"""

from dataclasses import dataclass
from typing import FrozenSet


# Whitespace the lexer always skips. Newline is deliberately absent: the REPL
# feeds one stripped line at a time, so a newline inside a buffer is ILLEGAL
# unless LexerConfig.newline_is_whitespace is set.
BASE_WHITESPACE = frozenset({" ", "\t", "\r"})


@dataclass(frozen=True)
class LexerConfig:
    """
    Options controlling how the lexer treats its input.

    Args:
        filename: Name reported in diagnostic locations
        newline_is_whitespace: Skip '\\n' like a space instead of emitting ILLEGAL
    """
    filename: str = "<string>"
    newline_is_whitespace: bool = False

    @property
    def whitespace(self) -> FrozenSet[str]:
        if self.newline_is_whitespace:
            return BASE_WHITESPACE | {"\n"}
        return BASE_WHITESPACE


@dataclass(frozen=True)
class ReplConfig:
    """Options for the interactive REPL."""
    prompt: str = ">> "
    # Empty by default: any word typed at the prompt may be a Monkey identifier
    exit_commands: FrozenSet[str] = frozenset()
    show_warnings: bool = False
