# python
"""
Faults module behavioral tests.

Scope
- Validate FaultCode normalization through the host __codes__ mapping.
- Validate trigger() dispatch: declaration errors raise, parse faults report,
  help requests render and exit.
- Validate that __replace__ leaves the original fault untouched.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import io
import sys
import unittest
from unittest import TestCase, mock

from rich.console import Console

from declargs import (
    DeclarationError,
    Diagnostics,
    DuplicateDeclarationError,
    FaultCode,
    HelpRequested,
    MalformedValueError,
    Registry,
    trigger,
)


class TestFaultCode(TestCase):

    def testNormalizeDefaultsToNumber(self):
        self.assertEqual(FaultCode.MALFORMED_VALUE.normalize(), "22111")

    def testNormalizeUsesHostLabels(self):
        codes = {FaultCode.MALFORMED_VALUE: "E-MALFORMED"}
        with mock.patch.object(sys.modules["__main__"], "__codes__", codes, create=True):
            self.assertEqual(FaultCode.MALFORMED_VALUE.normalize(), "E-MALFORMED")
            self.assertEqual(FaultCode.HELP_REQUESTED.normalize(), "23101")


class TestTrigger(TestCase):

    def testRejectsPlainObjects(self):
        with self.assertRaises(TypeError):
            trigger(object())

    def testDeclarationErrorRaises(self):
        with self.assertRaises(DuplicateDeclarationError) as context:
            trigger(DuplicateDeclarationError("parameter 'x' is already declared", name="x"), hint="rename it")
        self.assertEqual(context.exception.name, "x")
        self.assertEqual(context.exception.hint, "rename it")
        self.assertIsInstance(context.exception, DeclarationError)

    def testParseFaultReportsToDiagnostics(self):
        console = Console(file=io.StringIO(), width=200, color_system=None)
        diagnostics = Diagnostics(console)
        fault = MalformedValueError("provided value for intarg is not an integer.", name="intarg")
        trigger(fault, diagnostics=diagnostics)
        self.assertEqual(diagnostics.records, (("error", "provided value for intarg is not an integer."),))
        self.assertNotIn("diagnostics", fault.options)

    def testParseFaultRequiresDiagnostics(self):
        with self.assertRaises(TypeError):
            trigger(MalformedValueError("provided value for intarg is not an integer."))

    def testHelpRequestedRendersAndExits(self):
        registry = Registry()
        registry.integer("intarg", "an integer argument.", 128)
        console = Console(file=io.StringIO(), width=200, color_system=None)
        with self.assertRaises(SystemExit) as context:
            trigger(HelpRequested(registry=registry, bindings=registry.defaults()), console=console)
        self.assertEqual(context.exception.code, 1)
        self.assertIn("an integer argument.", console.file.getvalue())

    def testHelpRequestedStatusOverride(self):
        console = Console(file=io.StringIO(), width=200, color_system=None)
        with self.assertRaises(SystemExit) as context:
            trigger(HelpRequested(registry=Registry()), console=console, status=2)
        self.assertEqual(context.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
