"""
Leveled diagnostic sink.

Messages are printed to a rich console bound to stderr with a fixed prefix per
level (LOG:, WARNING:, ERROR:) and kept in memory as (level, message) records so
hosts and tests can inspect what was reported during a parse.

Prefix colors can be overridden through a __styles__ mapping in __main__ using
the "log-prefix", "warning-prefix" and "error-prefix" keys.
"""
from collections import defaultdict

from rich.console import Console
from rich.text import Text

from .utils import *


class Diagnostics:
    __prefixes__ = {
        "log": "LOG:",
        "warning": "WARNING:",
        "error": "ERROR:",
    }

    console = mirror("console")
    records = mirror("records")
    colorful = mirror("colorful")

    def __init__(self, console=Unset, /, *, colorful=False):
        if not isinstance(console, Console | Unset):
            raise TypeError("diagnostics 'console' must be a rich console")
        self._console = coalesce(console, Console(stderr=True))
        self._colorful = bool(colorful)
        self._records = []

    def _emit(self, level, message):
        styles = defaultdict(str, {
            "log-prefix": "bold #36C5F0",
            "warning-prefix": "bold #FFB400",
            "error-prefix": "bold #FF4DA6",
        } | getattr(__import__("__main__"), "__styles__", {}))

        self._records.append((level, message := str(message)))
        prefix = Text(self.__prefixes__[level], styles[level + "-prefix"] if self.colorful else "")
        self._console.print(Text.assemble(prefix, " ", message), soft_wrap=True)

    def log(self, message, /):
        self._emit("log", message)

    def warn(self, message, /):
        self._emit("warning", message)

    def error(self, message, /):
        self._emit("error", message)

    def clear(self):
        self._records.clear()

    def __repr__(self):
        return "diagnostics(records=%d, colorful=%r)" % (len(self._records), self.colorful)


__all__ = ("Diagnostics",)
