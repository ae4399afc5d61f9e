"""
Help table and debug dump renderers.

Both renderers have a plain form with a fixed layout (tab separated, 10-wide
padded columns) and a fancy form drawn as a rich table. The plain form is built
as a string first (format_help / format_params) so identical registries always
produce byte-identical text.
"""
from rich.box import ROUNDED
from rich.table import Table
from rich.text import Text

_ROW = "%-10s\t%-10s\t%s"
_DUMP = "%-10s\t=\t%-10s"
_RULE = "-" * 17


def display(value, /):
    """
    Render a bound or default value for help and dumps (booleans as 1/0).
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def format_help(registry, /):
    lines = [
        _ROW % ("parameter", "default", "description"),
        _ROW % ("-" * 10, "-" * 10, "-" * 10),
    ]
    for parameter in registry:
        lines.append(_ROW % (parameter.name, display(parameter.default), parameter.descr))
    return "\n".join(lines) + "\n"


def format_params(bindings, /):
    lines = [_RULE]
    for name, value in bindings.items():
        lines.append(_DUMP % (name, display(value)))
    lines.append(_RULE)
    return "\n".join(lines) + "\n"


def render_help(registry, console, /, *, fancy=False):
    """
    Print the parameter table (name, default, description) in declaration order.
    """
    if not fancy:
        console.print(Text(format_help(registry).rstrip("\n")), soft_wrap=True)
        return
    table = Table("parameter", "default", "description", title="parameters", box=ROUNDED)
    for parameter in registry:
        table.add_row(parameter.name, display(parameter.default), parameter.descr)
    console.print(table)


def render_params(bindings, console, /, *, fancy=False):
    """
    Print every binding as `name = value` in declaration order.
    """
    if not fancy:
        console.print(Text(format_params(bindings).rstrip("\n")), soft_wrap=True)
        return
    table = Table("parameter", "value", title="bindings", box=ROUNDED)
    for name, value in bindings.items():
        table.add_row(name, display(value))
    console.print(table)


__all__ = (
    "display",
    "format_help",
    "format_params",
    "render_help",
    "render_params",
)
