# python
"""
Commands module behavioral tests.

Scope
- Validate prompt tokenization (shell-like strings, iterables, sys.argv).
- Validate that invoke() prints help and exits with status 1 on `--help`.
- Validate that show_params output reaches the stdout console.

Conventions
- Test method names follow CamelCase per project convention.
- SystemExit is asserted, never allowed to escape a test.
"""

from __future__ import annotations

import io
import sys
import unittest
from unittest import TestCase, mock

from rich.console import Console

from declargs import Diagnostics, Registry, invoke


def _registry():
    registry = Registry()
    registry.integer("intarg", "an integer argument.", 128)
    registry.string("strarg", "a string argument.", "default")
    registry.boolean("boolarg", "a boolean argument.")
    return registry


class TestInvoke(TestCase):

    def setUp(self):
        self.stdout = Console(file=io.StringIO(), width=200, color_system=None)
        self.stderr = Console(file=io.StringIO(), width=200, color_system=None)
        self.diagnostics = Diagnostics(self.stderr)

    def invoke(self, *prompt, **options):
        return invoke(_registry(), *prompt, diagnostics=self.diagnostics, stdout=self.stdout, **options)

    def testStringPrompt(self):
        table = self.invoke("--intarg=5 --boolarg")
        self.assertEqual(table.intarg, 5)
        self.assertIs(table.boolarg, True)

    def testStringPromptQuotedValue(self):
        self.assertEqual(self.invoke("--strarg '\"a b c\"'").strarg, "a b c")

    def testIterablePromptTrimsTokens(self):
        table = self.invoke(["  --intarg ", "", "7", "   "])
        self.assertEqual(table.intarg, 7)

    def testIterablePromptQuotedValue(self):
        self.assertEqual(self.invoke(["--strarg", '"a b c"']).strarg, "a b c")

    def testDefaultPromptReadsArgv(self):
        with mock.patch.object(sys, "argv", ["prog", "--intarg", "9"]):
            self.assertEqual(self.invoke().intarg, 9)

    def testInvalidPrompt(self):
        with self.assertRaises(TypeError):
            self.invoke(5)
        with self.assertRaises(TypeError):
            self.invoke(["--intarg", 5])

    def testMalformedValueReported(self):
        table = self.invoke("--intarg foo")
        self.assertEqual(table.intarg, 128)
        self.assertEqual(self.stderr.file.getvalue(), "ERROR: provided value for intarg is not an integer.\n")

    def testHelpPrintsTableAndExits(self):
        with self.assertRaises(SystemExit) as context:
            self.invoke("--help")
        self.assertEqual(context.exception.code, 1)
        output = self.stdout.file.getvalue()
        self.assertTrue(output.startswith("parameter"))
        self.assertIn("show parameter values after parsing.", output)
        self.assertIn("a boolean argument.", output)

    def testFancyHelp(self):
        with self.assertRaises(SystemExit):
            self.invoke(["--help"], fancy=True)
        self.assertIn("parameters", self.stdout.file.getvalue())

    def testShowParams(self):
        self.invoke("--show_params --strarg hello")
        output = self.stdout.file.getvalue()
        self.assertIn("hello", output)
        self.assertTrue(output.startswith("-" * 17))


if __name__ == "__main__":
    unittest.main()
