"""
Registry module behavioral tests.

Scope
- Validate reserved declarations, ordering and kind shorthands.
- Validate duplicate and reserved-name rejection through DuplicateDeclarationError.
- Validate freezing once parsing starts and default bindings.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import io
import unittest
from unittest import TestCase

from rich.console import Console

from declargs import (
    Diagnostics,
    DuplicateDeclarationError,
    FaultCode,
    FrozenRegistryError,
    ParameterKind,
    Registry,
    parse,
)


class TestRegistry(TestCase):
    """Behavioral tests for Registry declarations."""

    def setUp(self):
        self.registry = Registry()

    def testReservedParametersAlwaysPresent(self):
        self.assertEqual([parameter.name for parameter in self.registry], ["help", "show_params"])
        for name in ("help", "show_params"):
            self.assertIs(self.registry[name].kind, ParameterKind.BOOLEAN)
            self.assertIs(self.registry[name].default, False)

    def testDeclarationOrderPreserved(self):
        self.registry.string("zeta")
        self.registry.integer("alpha")
        self.registry.boolean("mid")
        self.assertEqual(
            [parameter.name for parameter in self.registry.list()],
            ["help", "show_params", "zeta", "alpha", "mid"],
        )

    def testDeclareReturnsParameter(self):
        parameter = self.registry.declare("intarg", "an integer argument.", ParameterKind.INTEGER, 128)
        self.assertIs(self.registry["intarg"], parameter)
        self.assertIn("intarg", self.registry)
        self.assertEqual(len(self.registry), 3)

    def testShorthandsPickKinds(self):
        self.assertIs(self.registry.integer("a").kind, ParameterKind.INTEGER)
        self.assertIs(self.registry.string("b").kind, ParameterKind.STRING)
        self.assertIs(self.registry.boolean("c").kind, ParameterKind.BOOLEAN)

    def testDuplicateRejected(self):
        self.registry.integer("intarg")
        with self.assertRaises(DuplicateDeclarationError) as context:
            self.registry.string("intarg")
        self.assertEqual(context.exception.code, FaultCode.DUPLICATE_DECLARATION)
        self.assertEqual(context.exception.name, "intarg")
        self.assertIs(self.registry["intarg"].kind, ParameterKind.INTEGER)

    def testReservedNameRejected(self):
        with self.assertRaises(DuplicateDeclarationError) as context:
            self.registry.boolean("help")
        self.assertIn("reserved", context.exception.message)

    def testInvalidDeclarationNotAppended(self):
        with self.assertRaises(ValueError):
            self.registry.integer("intarg", "", "foo")
        self.assertNotIn("intarg", self.registry)

    def testDefaultsBindEveryDeclaration(self):
        self.registry.integer("intarg", "", 128)
        self.registry.string("strarg", "", "default")
        defaults = self.registry.defaults()
        self.assertEqual(dict(defaults), {
            "help": False,
            "show_params": False,
            "intarg": 128,
            "strarg": "default",
        })

    def testFrozenOnceParsingStarts(self):
        self.assertFalse(self.registry.frozen)
        parse(self.registry, [], diagnostics=Diagnostics(Console(file=io.StringIO())))
        self.assertTrue(self.registry.frozen)
        with self.assertRaises(FrozenRegistryError) as context:
            self.registry.integer("late")
        self.assertEqual(context.exception.code, FaultCode.FROZEN_REGISTRY)

    def testDeclarationErrorRendersWithRich(self):
        with self.assertRaises(DuplicateDeclarationError) as context:
            self.registry.boolean("show_params")
        console = Console(file=io.StringIO(), width=200, color_system=None)
        console.print(context.exception)
        output = console.file.getvalue()
        self.assertIn("21101", output)
        self.assertIn("DuplicateDeclarationError", output)


if __name__ == "__main__":
    unittest.main()
