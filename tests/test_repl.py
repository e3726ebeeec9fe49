"""
Tests for the REPL and the command line entry point.
"""

import unittest
import io
import os
import sys
import tempfile
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey import repl
from monkey.cli import main
from monkey.config import ReplConfig


class TestRepl(unittest.TestCase):

    def _run(self, text: str, config: ReplConfig = None):
        stdin = io.StringIO(text)
        stdout = io.StringIO()
        lines = repl.start(stdin=stdin, stdout=stdout, config=config)
        return lines, stdout.getvalue()

    def test_prints_one_token_per_line(self):
        lines, output = self._run("let five = 5;\n")

        self.assertEqual(lines, 1)
        self.assertIn("LET('let')\n", output)
        self.assertIn("IDENT('five')\n", output)
        self.assertIn("ASSIGN('=')\n", output)
        self.assertIn("INT('5')\n", output)
        self.assertIn("SEMICOLON(';')\n", output)
        self.assertNotIn("EOF", output)

    def test_trailing_newline_is_stripped(self):
        _, output = self._run("x\r\n")
        self.assertNotIn("ILLEGAL", output)

    def test_stops_at_end_of_input(self):
        lines, output = self._run("1\n2\n")
        self.assertEqual(lines, 2)
        self.assertEqual(output.count(">> "), 3)

    def test_exit_command(self):
        config = ReplConfig(exit_commands=frozenset({":q"}))
        lines, output = self._run("1\n:q\n2\n", config)
        self.assertEqual(lines, 1)
        self.assertNotIn("INT('2')", output)

    def test_exit_is_scanned_by_default(self):
        """Words like exit and quit are ordinary identifiers."""
        lines, output = self._run("exit\nquit\n")
        self.assertEqual(lines, 2)
        self.assertIn("IDENT('exit')\n", output)
        self.assertIn("IDENT('quit')\n", output)

    def test_custom_prompt_and_warnings(self):
        config = ReplConfig(prompt="monkey> ", show_warnings=True)
        _, output = self._run("@\n", config)
        self.assertIn("monkey> ", output)
        self.assertIn("ILLEGAL('@')", output)
        self.assertIn("WARNING: Illegal character: '@'", output)


class TestCli(unittest.TestCase):

    def _main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_command_string(self):
        code, out, err = self._main(["-c", "10 == 10"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "INT('10')\nEQ('==')\nINT('10')\n")
        self.assertEqual(err, "")

    def test_illegal_reported_on_stderr(self):
        code, out, err = self._main(["-c", "@"])
        self.assertEqual(code, 0)
        self.assertIn("ILLEGAL('@')", out)
        self.assertIn("<command>:1:1", err)

    def test_strict_mode_fails_on_illegal(self):
        code, _, _ = self._main(["--strict", "-c", "let x = @;"])
        self.assertEqual(code, 1)

    def test_file_with_newlines(self):
        with tempfile.NamedTemporaryFile('w', suffix='.mk', delete=False, encoding='utf-8') as f:
            f.write("let x = 1;\nlet y = 2;\n")
            path = f.name
        try:
            code, out, _ = self._main(["--strict", "--newline-whitespace", path])
            self.assertEqual(code, 0)
            self.assertEqual(out.count("LET('let')"), 2)

            code, out, _ = self._main(["--strict", path])
            self.assertEqual(code, 1)
            self.assertIn("ILLEGAL('\\n')", out)
        finally:
            os.unlink(path)

    def test_invalid_utf8_file(self):
        with tempfile.NamedTemporaryFile('wb', suffix='.mk', delete=False) as f:
            f.write(b"let x = \xff;")
            path = f.name
        try:
            with self.assertRaises(SystemExit) as ctx:
                self._main([path])
        finally:
            os.unlink(path)
        self.assertEqual(ctx.exception.code, 2)

    def test_repl_show_warnings_flag(self):
        """Diagnostics in the REPL come from --show-warnings, not --verbose."""
        with mock.patch.object(sys, 'stdin', io.StringIO("@\n")):
            code, out, _ = self._main(["--show-warnings"])
        self.assertEqual(code, 0)
        self.assertIn("ILLEGAL('@')", out)
        self.assertIn("WARNING: Illegal character", out)

        with mock.patch.object(sys, 'stdin', io.StringIO("@\n")):
            code, out, _ = self._main([])
        self.assertIn("ILLEGAL('@')", out)
        self.assertNotIn("WARNING", out)

    def test_missing_file(self):
        missing = os.path.join(tempfile.gettempdir(), "does-not-exist.mk")
        with self.assertRaises(SystemExit) as ctx:
            self._main([missing])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
