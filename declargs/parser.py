r"""
declargs parser/binder: bind every declared parameter from an argument vector.

Grammar
- A parameter named <name> occurs as "--<name>", "--<name>=<value>" or
  "--<name> <value>". Matching is per token, so "--name1" or "--othername"
  never match a parameter called "name". When a parameter occurs more than
  once, the last occurrence wins.
- Booleans also accept the negation form "--no<name>", which binds False when
  the parameter itself does not occur.
- The text following an occurrence is the rest of its token (from '=') and
  every later token, joined with single spaces. Each kind reads its value from
  that text:
  • integer: cut at the first "--", strip one leading '=' and the surrounding
    whitespace, then take the longest "-?[0-9]+" prefix.
    2, =2, =-2, "= 2", "=2 --next x" and "= 2--next" are valid; =+3, +3,
    --help and ==3 are not.
  • string: strip one leading '=' and the surrounding whitespace; a leading
    "..." or '...' span is the value with its quotes removed, otherwise the
    first whitespace-delimited token (an empty string when that token is the
    next "--" flag).
  • boolean: cut at the first "--", strip one leading '='; a leading 1 or 0 is
    the value, anything else means the flag is present (True).

Faults
- Malformed integers (and, for strict parsers, malformed booleans) are reported
  as MalformedValueError through the diagnostics sink and recorded on the table;
  the parameter keeps its default and the remaining parameters are unaffected.
- A true `help` binding raises HelpRequested after every parameter is bound.
"""
import re
from collections.abc import Iterable

from rich.console import Console

from .bindings import BindingTable
from .diagnostics import Diagnostics
from .faults import *
from .parameters import ParameterKind
from .registry import Registry
from .render import render_params
from .utils import *

_INTEGER = re.compile(r"-?[0-9]+")
_BOOLEAN = re.compile(r"[01]")
_QUOTES = ("'", '"')


def _unassign(text, /):
    # surrounding whitespace and one leading assignment sign
    text = text.strip()
    if text.startswith("="):
        text = text[1:].strip()
    return text


def _truncate(text, /):
    return text.partition("--")[0]


def _extract_integer(text, /):
    if match := _INTEGER.match(_unassign(_truncate(text))):
        return int(match.group())
    return Unset


def _extract_string(text, /):
    text = _unassign(text)
    if text[:1] in _QUOTES and (end := text.find(text[0], 1)) > 0:
        return text[1:end]
    token = next(iter(text.split()), "")
    return "" if token.startswith("--") else token


def _extract_boolean(text, /):
    """
    1/0 → True/False, nothing → True, anything else → Unset.
    """
    if not (text := _unassign(_truncate(text))):
        return True
    if match := _BOOLEAN.match(text):
        return match.group() == "1"
    return Unset


class Parser:
    """
    Binds a registry's declarations from argument vectors.

    Options
    - diagnostics: sink receiving malformed-value errors (a stderr Diagnostics by default).
    - console: stdout console used for the show_params dump.
    - strict: report booleans followed by something other than 1/0 as malformed
      instead of treating them as present.
    - fancy: draw the show_params dump as a rich table.

    A parser freezes its registry on the first parse; declarations must happen before.
    """

    registry = mirror("registry")
    diagnostics = mirror("diagnostics")
    console = mirror("console")
    strict = mirror("strict")
    fancy = mirror("fancy")

    def __init__(self, registry, /, *, diagnostics=Unset, console=Unset, strict=False, fancy=False):
        if not isinstance(registry, Registry):
            raise TypeError("parser 'registry' must be a registry")
        if not isinstance(diagnostics, Diagnostics | Unset):
            raise TypeError("parser 'diagnostics' must be a diagnostics sink")
        if not isinstance(console, Console | Unset):
            raise TypeError("parser 'console' must be a rich console")
        self._registry = registry
        self._diagnostics = coalesce(diagnostics, Diagnostics())
        self._console = coalesce(console, Console())
        self._strict = bool(strict)
        self._fancy = bool(fancy)
        self._faults = []

    def trigger(self, fault, /, **options):
        """
        Report a parse fault to this parser's diagnostics and record it for the table.
        """
        self._faults.append(fault := fault.__replace__(**options, diagnostics=self._diagnostics))
        trigger(fault)

    def _locate(self, parameter, tokens):
        """
        Text following the last occurrence of `parameter`, or Unset when absent.
        """
        flag = parameter.flag
        for index in reversed(range(len(tokens))):
            if (token := tokens[index]) == flag:
                return " ".join(tokens[index + 1:])
            if token.startswith(flag + "="):
                return " ".join((token[len(flag):], *tokens[index + 1:]))
        return Unset

    def _malformed(self, parameter, text):
        article = "an" if parameter.kind is ParameterKind.INTEGER else "a"
        self.trigger(MalformedValueError(
            "provided value for %s is not %s %s." % (parameter.name, article, parameter.kind.label),
            code=FaultCode.MALFORMED_VALUE,
            name=parameter.name,
            kind=parameter.kind,
            text=text.strip(),
            default=parameter.default,
            hint="use %s=<%s>; keeping the default %r" % (parameter.flag, parameter.kind.label, parameter.default),
        ))

    def _bind(self, parameter, tokens):
        """
        Resolve one parameter; returns (value, supplied).
        """
        if (text := self._locate(parameter, tokens)) is Unset:
            if parameter.kind is ParameterKind.BOOLEAN and parameter.negation in tokens:
                return False, True
            return parameter.default, False

        match parameter.kind:
            case ParameterKind.INTEGER:
                value = _extract_integer(text)
            case ParameterKind.STRING:
                value = _extract_string(text)
            case ParameterKind.BOOLEAN:
                value = _extract_boolean(text)
                if value is Unset and not self._strict:
                    value = True
            case _:
                raise RuntimeError("unexpected parameter kind")

        if value is Unset:
            self._malformed(parameter, text)
            return parameter.default, False
        return value, True

    def parse(self, args, /):
        """
        Bind every declared parameter from `args` and return the binding table.

        Raises
        - TypeError: args is not an iterable of strings.
        - HelpRequested: `--help` was bound true (nothing is printed here).
        """
        if isinstance(args, str) or not isinstance(args, Iterable):
            raise TypeError("parse() argument must be an iterable of strings")
        tokens = tuple(args)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("parse() argument must be an iterable of strings")

        self._registry.freeze()
        self._faults = []

        values = {}
        supplied = set()
        for parameter in self._registry:
            values[parameter.name], given = self._bind(parameter, tokens)
            if given:
                supplied.add(parameter.name)

        bindings = BindingTable(self._registry, values, supplied=supplied, faults=self._faults)

        if bindings["help"]:
            raise HelpRequested(registry=self._registry, bindings=bindings)

        if bindings["show_params"]:
            render_params(bindings, self._console, fancy=self._fancy)

        return bindings


def parse(registry, args, /, **options):
    """
    Shortcut for Parser(registry, **options).parse(args).
    """
    return Parser(registry, **options).parse(args)


__all__ = (
    "Parser",
    "parse",
)
