"""
declargs parameter registry.

The registry is the ordered, append-only collection of declarations a parser
binds from. It is created with the two reserved booleans every command line
understands:

- help: show the parameter table and exit.
- show_params: dump every bound value after parsing.

Declaring a name twice (reserved names included) raises
DuplicateDeclarationError; declaring after a parser started reading the
registry raises FrozenRegistryError.
"""
from .bindings import BindingTable
from .faults import *
from .parameters import Parameter, ParameterKind
from .utils import *


class Registry:
    __reserved__ = (
        ("help", "show help message."),
        ("show_params", "show parameter values after parsing."),
    )

    frozen = mirror("frozen")

    def __init__(self):
        self._parameters = {}
        self._frozen = False
        for name, descr in self.__reserved__:
            self.declare(name, descr, ParameterKind.BOOLEAN, False)

    def declare(self, name, descr="", kind=ParameterKind.STRING, default=Unset):
        """
        Append a declaration and return it.

        The declaration is bound to its default right away (see defaults()).

        Raises
        - FrozenRegistryError: parsing already started on this registry.
        - DuplicateDeclarationError: a parameter with the same name exists.
        - TypeError/ValueError: invalid name, kind or default.
        """
        if self._frozen:
            trigger(FrozenRegistryError(
                "cannot declare %r once parsing has started" % name,
                code=FaultCode.FROZEN_REGISTRY,
                name=name,
                hint="declare every parameter before calling parse()",
            ))

        parameter = Parameter(name, descr, kind, default)

        if parameter.name in self._parameters:
            reserved = parameter.name in dict(self.__reserved__)
            trigger(DuplicateDeclarationError(
                "parameter %r is %s" % (parameter.name, "reserved" if reserved else "already declared"),
                code=FaultCode.DUPLICATE_DECLARATION,
                name=parameter.name,
                hint="pick another name; each parameter can be declared only once",
            ))

        self._parameters[parameter.name] = parameter
        return parameter

    def integer(self, name, descr="", default=Unset):
        return self.declare(name, descr, ParameterKind.INTEGER, default)

    def string(self, name, descr="", default=Unset):
        return self.declare(name, descr, ParameterKind.STRING, default)

    def boolean(self, name, descr="", default=Unset):
        return self.declare(name, descr, ParameterKind.BOOLEAN, default)

    def list(self):
        return tuple(self._parameters.values())

    def defaults(self):
        """
        Every declared parameter bound to its default.
        """
        return BindingTable(self, {parameter.name: parameter.default for parameter in self})

    def freeze(self):
        self._frozen = True

    def __iter__(self):
        return iter(tuple(self._parameters.values()))

    def __len__(self):
        return len(self._parameters)

    def __contains__(self, name, /):
        return name in self._parameters

    def __getitem__(self, name, /):
        return self._parameters[name]

    def __repr__(self):
        return "registry(%s)" % ", ".join(self._parameters)

    def __rich_repr__(self):
        for parameter in self._parameters.values():
            yield parameter.name, parameter


__all__ = ("Registry",)
