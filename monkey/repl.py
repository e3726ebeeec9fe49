"""
Interactive REPL for the Monkey lexer.

Reads one line at a time, scans it and prints each token on its own line.
Lines are stripped before scanning, so the trailing newline never reaches
the lexer.
"""

import logging
import sys
from typing import Optional, TextIO

from .config import LexerConfig, ReplConfig
from .lexer import Lexer
from .lexer.errors import format_warnings

logger = logging.getLogger(__name__)


def scan_line(line: str, out: TextIO, lexer_config: Optional[LexerConfig] = None,
              show_warnings: bool = False) -> int:
    """
    Scan a single line and print its tokens.

    Returns:
        Number of ILLEGAL tokens seen
    """
    lexer = Lexer(line, lexer_config)
    for token in lexer:
        print(token, file=out)

    if show_warnings and lexer.has_warnings():
        out.write(format_warnings(lexer.warnings))
    return len(lexer.warnings)


def start(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
          config: Optional[ReplConfig] = None,
          lexer_config: Optional[LexerConfig] = None) -> int:
    """
    Run the read-scan-print loop until end of input or an exit command.

    Returns:
        Number of lines scanned
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    config = config or ReplConfig()
    lexer_config = lexer_config or LexerConfig(filename="<stdin>")

    lines = 0
    while True:
        stdout.write(config.prompt)
        stdout.flush()

        raw = stdin.readline()
        if not raw:
            # End of input (Ctrl-D or a closed pipe)
            stdout.write("\n")
            break

        line = raw.strip()
        if line in config.exit_commands:
            break

        illegal = scan_line(line, stdout, lexer_config, config.show_warnings)
        lines += 1
        logger.debug("scanned line %d (%d illegal)", lines, illegal)

    return lines
