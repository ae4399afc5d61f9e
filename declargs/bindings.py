"""
Binding table: the result of one parse pass.

A BindingTable is a read-only mapping from parameter name to bound value,
ordered like the registry it was bound from. Values are reachable by key
(`table["intarg"]`) or attribute (`table.intarg`) when the name is a valid
identifier that does not shadow a table attribute.
"""
from collections.abc import Mapping
from types import MappingProxyType

from .utils import *


class BindingTable(Mapping):
    __slots__ = ("_registry", "_values", "_supplied", "_faults")

    registry = mirror("registry")
    faults = mirror("faults")

    def __init__(self, registry, values, /, *, supplied=(), faults=()):
        values = dict(values)
        if unknown := values.keys() - {parameter.name for parameter in registry}:
            raise ValueError("binding table names must be declared: %s" % ", ".join(sorted(unknown)))
        self._registry = registry
        # Re-key in declaration order so iteration matches help and dumps.
        self._values = MappingProxyType({
            parameter.name: values[parameter.name] for parameter in registry if parameter.name in values
        })
        self._supplied = frozenset(supplied)
        self._faults = tuple(faults)

    def __getitem__(self, name, /):
        return self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __getattr__(self, name, /):
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"binding table has no parameter {name!r}") from None

    def supplied(self, name, /):
        """
        Whether `name` was bound from the argument vector rather than its default.
        """
        if name not in self._values:
            raise KeyError(name)
        return name in self._supplied

    def __repr__(self):
        return "binding-table(%s)" % ", ".join("%s=%r" % item for item in self._values.items())

    def __rich_repr__(self):
        yield from self._values.items()


__all__ = ("BindingTable",)
