"""
declargs host layer: run a registry against the process command line.

The parser never prints help or exits; this module is where a CLI script hands
over control. invoke() tokenizes the prompt, parses it, and turns a
HelpRequested signal into "print the parameter table, exit with status 1".

Quick start
    from declargs import Registry, invoke

    registry = Registry()
    registry.integer("intarg", "an integer argument.", 128)
    registry.string("strarg", "a string argument.", "default")
    registry.boolean("boolarg", "a boolean argument.")

    if __name__ == "__main__":
        bindings = invoke(registry)
        print(bindings.intarg, bindings.strarg, bindings.boolarg)
"""
import shlex
import sys
from collections.abc import Iterable

from rich.console import Console

from .faults import *
from .parser import Parser
from .utils import *


def _tokenize(prompt, /):
    """
    Normalize a prompt into a list of tokens.

    - Unset: sys.argv[1:].
    - str: shell-like string, split with shlex.split.
    - Iterable[str]: each item trimmed; empty items dropped.
    """
    if prompt is Unset:
        return sys.argv[1:]
    if isinstance(prompt, str):
        return shlex.split(prompt)
    if not isinstance(prompt, Iterable):
        raise TypeError("invoke() second argument must be a string or an iterable of strings")

    tokens = []
    for item in prompt:
        if not isinstance(item, str):
            raise TypeError("invoke() second argument must be a string or an iterable of strings")
        if item := item.strip():
            tokens.append(item)
    return tokens


def invoke(registry, prompt=Unset, /, *, diagnostics=Unset, stdout=Unset, strict=False, fancy=False):
    """
    Parse `prompt` against `registry` and return the binding table.

    Parameters
    - registry: the Registry holding every declaration.
    - prompt: Unset (read sys.argv[1:]), a shell-like string, or an iterable of strings.
    - diagnostics: sink for malformed-value errors (stderr by default).
    - stdout: console for help and show_params output (stdout by default).
    - strict, fancy: forwarded to the Parser.

    Behavior
    - When `--help` is bound true, the help table is printed to `stdout` and the
      process exits with status 1 (SystemExit propagates to the caller).
    """
    console = coalesce(stdout, Console())
    parser = Parser(registry, diagnostics=diagnostics, console=console, strict=strict, fancy=fancy)
    try:
        return parser.parse(_tokenize(prompt))
    except HelpRequested as signal:
        trigger(signal, console=console, fancy=fancy)


__all__ = ("invoke",)
