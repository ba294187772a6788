r"""
argparser schema entities.

Overview
- Flag: a recognized switch, written on the command line as its title behind
  the "-" marker (e.g. "-a"). It declares an ordered list of option labels;
  the number of labels is its arity (how many tokens it consumes).
- Argument: a recognized positional token (a command), matched by its bare
  title.

- Factories
  • create_flag(title, description, options): build a Flag.
  • create_arg(title, description): build an Argument.
  • Flag.blank() / Argument.blank(): empty instances to be edited further
    with copy.replace(entity, field=value).

Semantics
- Entities are immutable once built: every field is a read-only property and
  "editing" returns a new instance (see __replace__).
- No validation happens here. Malformed or duplicated entities are rejected
  when handed to a Parser (see argparser.parser).
- Equality and hashing are by value, so two flags spelled the same way are
  interchangeable.
"""
import functools
import operator
from collections.abc import Iterable

from .utils import *


class _Entity:
    """
    Shared plumbing for schema entities: value semantics and representations.

    Subclasses list their public fields in __introspectable__; each one is
    backed by a private "_name" attribute and exposed through mirror().
    """
    __introspectable__ = ()
    __slots__ = ()

    def __init_subclass__(cls, **options):
        super().__init_subclass__(**options)
        for name in cls.__introspectable__:
            setattr(cls, name, mirror(name))

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)

    def __repr__(self):
        return f"{type(self).__name__.lower()}({
            ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
        })"

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return tuple(self.__rich_repr__()) == tuple(other.__rich_repr__())

    def __hash__(self):
        return hash((type(self), *self.__rich_repr__()))

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        unknown = overrides.keys() - set(type(self).__introspectable__)
        if unknown:
            raise TypeError(f"{type(self).__name__.lower()} has no field(s) {", ".join(sorted(unknown))}")
        return type(self)(**dict(self.__rich_repr__()) | overrides)


class Flag(_Entity):
    """
    Named switch specification.

    Properties
    - title: str
      Bare name used after the marker ("a" for "-a").
    - description: str
      Help text shown under the flag.
    - options: tuple[str, ...]
      Labels of the option values the flag expects, in order. Empty when the
      flag takes no value.

    Example
        Flag("o", "Write the report to a file", ["path"])
    """
    __introspectable__ = ("title", "description", "options")
    __slots__ = ("_title", "_description", "_options")

    def __init__(self, title, description, options=()):
        self._title = title
        self._description = description
        # Copied so later edits of the caller's list do not leak in. Strings
        # and non-iterables are kept as-is for the parser to reject.
        if isinstance(options, Iterable) and not isinstance(options, str):
            options = tuple(options)
        self._options = options

    @property
    def arity(self):
        """Number of option tokens consumed when the flag is matched."""
        return len(self._options)

    @classmethod
    def blank(cls):
        """Return an empty flag to be edited further with copy.replace()."""
        return cls("", "", ())


class Argument(_Entity):
    """
    Positional argument (command) specification.

    Properties
    - title: str
      The exact token that selects the argument.
    - description: str
      Help text shown under the argument.
    """
    __introspectable__ = ("title", "description")
    __slots__ = ("_title", "_description")

    def __init__(self, title, description):
        self._title = title
        self._description = description

    @classmethod
    def blank(cls):
        """Return an empty argument to be edited further with copy.replace()."""
        return cls("", "")


def create_flag(title, description, options=()):
    """Create a Flag with a title, a description and its option labels."""
    return Flag(title, description, options)


def create_arg(title, description):
    """Create an Argument with a title and a description."""
    return Argument(title, description)


__all__ = (
    "Flag",
    "Argument",
    "create_flag",
    "create_arg",
)
