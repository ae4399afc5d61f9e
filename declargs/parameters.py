r"""
declargs parameter declarations.

Overview
- ParameterKind: the value grammar a parameter is bound with (integer, string, boolean).
- Parameter: one named, described, typed and defaulted declaration.

- Introspection & representation
  • ParameterType metaclass provides stable __repr__/__rich_repr__ and exposes the
    fields listed in __introspectable__ as read-only properties.

Metadata (sanitized on construction)
- name: non-empty string without whitespace, '=' or a leading dash; the parser
  matches it as "--<name>" (and "--no<name>" for booleans).
- descr: free text shown in help, may be empty.
- kind: ParameterKind (integers 1, 2, 3 are accepted and converted).
- default: value matching the kind; the kind's zero value when not provided.

Quick example:
    >>> Parameter("intarg", "an integer argument.", ParameterKind.INTEGER, 128)
    parameter(name='intarg', descr='an integer argument.', kind=<ParameterKind.INTEGER: 1>, default=128)
"""
import functools
import operator
import re
from enum import IntEnum

from rich.text import Text

from .utils import *


class ParameterKind(IntEnum):
    INTEGER = 1
    STRING  = 2
    BOOLEAN = 3

    @property
    def zero(self):
        """
        Implicit default of the kind: 0, "" or False.
        """
        match self:
            case ParameterKind.INTEGER:
                return 0
            case ParameterKind.STRING:
                return ""
            case ParameterKind.BOOLEAN:
                return False

    @property
    def label(self):
        return self.name.lower()

    def sanitize(self, default, /):
        """
        Validate a caller-supplied default and normalize it to the kind's type.

        - INTEGER: int (not bool) or a string of optional '-' and digits.
        - STRING: str.
        - BOOLEAN: bool, or the integers 1 and 0.

        Raises
        - TypeError: the default has the wrong type for the kind.
        - ValueError: the default has the right type but an unusable value.
        """
        match self:
            case ParameterKind.INTEGER:
                if isinstance(default, bool) or not isinstance(default, int | str):
                    raise TypeError("integer parameter 'default' must be an integer")
                if isinstance(default, str):
                    if not re.fullmatch(r"-?[0-9]+", default := default.strip()):
                        raise ValueError("integer parameter 'default' must be a base-10 integer")
                    return int(default)
                return default
            case ParameterKind.STRING:
                if not isinstance(default, str):
                    raise TypeError("string parameter 'default' must be a string")
                return default
            case ParameterKind.BOOLEAN:
                if isinstance(default, bool):
                    return default
                if not isinstance(default, int):
                    raise TypeError("boolean parameter 'default' must be a boolean")
                if default not in (0, 1):
                    raise ValueError("boolean parameter 'default' must be 0 or 1")
                return bool(default)


class ParameterType(type):
    """
    Metaclass that turns declarations into read-only, introspectable records.

    Responsibilities
    - Expose every name listed in __introspectable__ as a read-only property
      backed by "_<name>" (see mirror()).
    - Provide stable __repr__/__rich_repr__ implementations for diagnostics.
    - Derive __typename__ from the class name (camel-case split with hyphens).
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize and validate declaration metadata in place.

    Raises
    - TypeError: name/descr/kind of the wrong type.
    - ValueError: empty or malformed name, unknown kind value, unusable default.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not (name := name.strip()):
        raise ValueError(f"{cls.__typename__} 'name' cannot be empty")
    elif not re.fullmatch(r"[^\s=-][^\s=]*", name):
        raise ValueError(f"{cls.__typename__} 'name' cannot contain whitespace, '=' or a leading dash")
    metadata["name"] = name

    if not isinstance(descr := metadata["descr"], str | Text | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    metadata["descr"] = str(coalesce(descr, "")).strip()

    if isinstance(kind := metadata["kind"], bool) or not isinstance(kind, int):
        raise TypeError(f"{cls.__typename__} 'kind' must be a parameter kind")
    try:
        metadata["kind"] = kind = ParameterKind(kind)
    except ValueError:
        raise ValueError(f"{cls.__typename__} 'kind' must be one of {', '.join(map(repr, ParameterKind))}") from None

    metadata["default"] = kind.sanitize(metadata["default"]) if metadata["default"] is not Unset else kind.zero


class Parameter(metaclass=ParameterType):
    """
    One named, typed, described and defaulted declaration.

    Parameters are created once by the registry and never mutated afterwards;
    the fields below are read-only properties over the sanitized metadata.
    """

    __introspectable__ = (
        "name",
        "descr",
        "kind",
        "default",
    )

    def __new__(cls, name, descr=Unset, kind=ParameterKind.STRING, default=Unset):
        metadata = {
            "name": name,
            "descr": descr,
            "kind": kind,
            "default": default,
        }
        _sanitize_metadata(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    @property
    def flag(self):
        """
        The token that names this parameter on the command line ("--<name>").
        """
        return "--" + self.name

    @property
    def negation(self):
        """
        The token that forces a boolean parameter false ("--no<name>"), else None.
        """
        if self.kind is not ParameterKind.BOOLEAN:
            return None
        return "--no" + self.name


__all__ = (
    "ParameterKind",
    "Parameter",
)

# Remove the internal metaclass from the module namespace to avoid accidental
# exposure in docs, autocompletion, or star-imports. Not part of the public API.
del ParameterType
