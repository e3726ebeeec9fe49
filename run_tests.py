#!/usr/bin/env python3
"""
Main test runner for the Monkey lexer tests.

Runs a quick smoke scan first, then the unittest suite under tests/.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

def run_all_tests():
    """Run all Monkey lexer tests."""

    print("Monkey Lexer Test Suite")
    print("=" * 60)

    try:
        from monkey.lexer.lexer import Lexer
        from monkey.lexer.tokens import TokenType
        print("✅ Lexer modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import lexer modules: {e}")
        return False

    print("Testing a simple scan...")
    code = "let add = fn(x, y) { x + y; }; if (add(1, 2) != 3) { return false; }"
    tokens = Lexer(code).tokenize()
    illegal = [t for t in tokens if t.type == TokenType.ILLEGAL]
    print(f"     Generated {len(tokens)} tokens")
    if illegal or tokens[-1].type != TokenType.EOF:
        print(f"     ❌ Unexpected result: {illegal or tokens[-1]}")
        return False
    print("     ✅ Scan OK")
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()

if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
