"""
declargs faults (errors, recoverable faults and control signals) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue.
  Codes are grouped by domain to keep logs and searches predictable.
- DeclarationError: raised while building a registry (duplicates, late declarations).
- ParseFault: recoverable faults found while binding values; they are reported to
  a diagnostics sink and recorded on the binding table, never raised.
- HelpRequested: control signal raised when `--help` is bound true.
- trigger(): central entry point to surface any fault with runtime options.

Integration
- Registry code raises declaration errors through trigger(fault).
- Parser code triggers parse faults with a `diagnostics` option; the fault writes
  itself to the sink's ERROR channel.
- Host code catches HelpRequested and triggers it with a `console` option; the
  signal renders the help table and exits with its status.
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.text import Text

from .render import render_help
from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes used across declargs (stable identifiers).

    grouping (by high-level domain)
    - declaration (211xx)
      • DUPLICATE_DECLARATION, FROZEN_REGISTRY
    - binding (221xx)
      • MALFORMED_VALUE
    - control signals (231xx)
      • HELP_REQUESTED

    spacing leaves room for future additions without reshuffling existing codes.
    """
    # --- declaration errors (21xxx) ---
    DUPLICATE_DECLARATION = 21101
    FROZEN_REGISTRY       = 21102

    # --- binding faults (22xxx) ---
    MALFORMED_VALUE       = 22111

    # --- control signals (23xxx) ---
    HELP_REQUESTED        = 23101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _styles(defaults):
    return defaultdict(str, defaults | getattr(__import__("__main__"), "__styles__", {}))


class DeclarationError(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    @property
    def name(self):
        return self.options.get("name")

    @property
    def hint(self):
        return self.options.get("hint")

    def __rich__(self):
        styles = _styles({
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        })
        header = Text.assemble(
            "[ ",
            (self.code.normalize() if self.code else "-", styles["code"]),
            " | ",
            (type(self).__name__, styles["error-title"]),
            " ]"
        )
        message = Text(str(self.message), styles["error-message"])
        if not self.hint:
            return Group(header, message)
        return Group(header, message, Text.assemble((" → ", styles["hint-arrow"]), (self.hint, styles["hint"])))

    def __trigger__(self) -> None:
        raise self from None

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DuplicateDeclarationError(DeclarationError): ...
class FrozenRegistryError(DeclarationError): ...


class ParseFault(Exception):
    """
    recoverable fault found while binding a parameter.

    parse faults are reported, not raised: the binder keeps the parameter's
    default and proceeds with the next declaration.

    options
    - diagnostics: the sink that receives the ERROR line (required to trigger).
    - code, name, kind, text, default, hint: descriptive context.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    @property
    def name(self):
        return self.options.get("name")

    @property
    def text(self):
        return self.options.get("text")

    @property
    def default(self):
        return self.options.get("default")

    def __trigger__(self) -> None:
        try:
            diagnostics = self.options["diagnostics"]
        except KeyError:
            raise TypeError("parse faults must be triggered with a 'diagnostics' sink") from None
        diagnostics.error(self.message)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MalformedValueError(ParseFault): ...


class HelpRequested(Exception):
    """
    control signal: `--help` was bound true.

    carries the registry and the binding table so the host can render usage.
    triggering the signal prints the help table to the given console and exits
    the process with `status` (1 unless overridden).
    """

    def __init__(self, message="help requested", /, **options):
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType({"code": FaultCode.HELP_REQUESTED, "status": 1} | options)

    @property
    def registry(self):
        return self.options.get("registry")

    @property
    def bindings(self):
        return self.options.get("bindings")

    @property
    def status(self):
        return self.options["status"]

    def __trigger__(self) -> None:
        render_help(self.registry, self.options.get("console") or Console(), fancy=self.options.get("fancy", False))
        sys.exit(self.status)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into a copy of the fault via __replace__(**options)
      before triggering, so the original fault stays untouched.
    - declaration errors raise; parse faults report to options["diagnostics"];
      help requests render to options["console"] and exit.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


__all__ = (
    "FaultCode",
    "DeclarationError",
    "DuplicateDeclarationError",
    "FrozenRegistryError",
    "ParseFault",
    "MalformedValueError",
    "HelpRequested",
    "trigger",
)
