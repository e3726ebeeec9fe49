"""
Diagnostics for the Monkey lexer.

The lexer never raises on bad input. Unrecognized characters come back as
ILLEGAL tokens and are also recorded here as warnings, so a caller (the
REPL, the CLI, eventually a parser) can decide how serious they are.
"""

from dataclasses import dataclass
from typing import Optional, List


@dataclass(frozen=True)
class SourceLocation:
    """
    A location in the source text.

    Lines and columns are 1-based, offset is the 0-based character index.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass
class Diagnostic:
    """Base record for lexer diagnostics."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}: {self.message}\n"
        result += f"  --> {self.location}\n"
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        return result


class LexerWarning:
    """
    A lexer warning that doesn't stop scanning.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"LexerWarning({self.diagnostic.message!r}, {self.location})"


def create_illegal_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a character the lexer does not recognize."""
    if char == "\n":
        help_text = "Newlines are not whitespace unless newline_is_whitespace is set."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in Monkey source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerWarning(
        message=f"Illegal character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
    )


def format_warnings(warnings: List[LexerWarning]) -> str:
    """Join warnings into a single report, one diagnostic per block."""
    return "".join(str(w) for w in warnings)
