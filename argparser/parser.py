"""
argparser schema registry and token scanner.

What this module provides
- Parser: owns an ordered schema of Flag and Argument entities plus project
  metadata. It renders help (help()) and validates token streams (parse()).
- ParsedResult: the structured outcome of a successful parse.
- create_parser(...): factory mirroring the Parser constructor.

Scanning rules (single left-to-right pass, no backtracking)
- The first token is the invocation path and is discarded.
- "-<title>" with a registered flag title matches that flag. The flag then
  consumes exactly as many following tokens as it declares option labels,
  verbatim, even when they look like flags themselves. The first consumed
  token becomes the flag's value ("" for flags without options).
- A token equal to a registered argument title matches that argument.
- "-h" (when not registered) asks for help.
- Anything else is unknown.
- A flag or argument matched twice, or a flag missing option tokens, rejects
  the whole stream. Every rejection is a ParseFailure (see argparser.faults).

Quick start
    from argparser import create_flag, create_arg, create_parser

    parser = create_parser("Test Parser", "Tests arguments", [
        create_flag("a", "This is the a flag", ["some"]),
        create_flag("d", "This is the d flag", []),
    ], [
        create_arg("foo", "This is the foo argument"),
    ])

    result = parser.parse(["prog", "-a", "3", "foo"])
    result.flags      # [("a", "3")]
    result.arguments  # ["foo"]
"""
import copy
import difflib
import logging
from collections import deque, namedtuple
from collections.abc import Iterable

from .entities import Flag, Argument
from .faults import *
from .helper import MARKER, HELP, format_help, render_help
from .utils import *

logger = logging.getLogger(__name__)


class ParsedResult(namedtuple("ParsedResult", ("flags", "arguments", "options"))):
    """
    Outcome of a successful parse, owned by the caller.

    Fields
    - flags: list[tuple[str, str]]
      (title, value) per matched flag, in order of appearance. value is the
      first consumed option token, or "" when the flag takes no options.
    - arguments: list[str]
      Titles of the matched arguments, in order of appearance.
    - options: dict[str, tuple[str, ...]]
      Every option token consumed per matched flag (empty tuple for flags
      without options). Use it for flags declaring more than one option label.
    """
    __slots__ = ()

    def __new__(cls, flags=Unset, arguments=Unset, options=Unset):
        return super().__new__(cls, coalesce(flags, []), coalesce(arguments, []), coalesce(options, {}))

    def __contains__(self, title):
        return self.has(title)

    def has(self, title, /):
        """Return whether a flag or an argument with this title was matched."""
        return title in self.options or title in self.arguments

    def value(self, title, default=None, /):
        """Return the value of a matched flag, or default when it was not given."""
        for name, value in self.flags:
            if name == title:
                return value
        return default


def _check_title(kind, entity):
    if not isinstance(entity.title, str):
        raise TypeError(f"{kind} title must be a string, not {type(entity.title).__name__}")
    if not entity.title:
        raise ValueError(f"{kind} title must be a non-empty string")
    if not isinstance(entity.description, str):
        raise TypeError(f"{kind} {entity.title!r} description must be a string")


class Parser:
    """
    Schema registry: project metadata plus ordered flags and arguments.

    The registry is validated on construction and never mutated afterwards, so
    a single Parser can serve concurrent parse() calls.

    Raises (on construction)
    - TypeError: wrong entity types, or non-string titles/descriptions/labels.
    - ValueError: empty titles, or a flag (resp. argument) title used twice.
    """

    __introspectable__ = (
        "project_title",
        "project_description",
        "flags",
        "arguments",
    )

    project_title = mirror("project_title")
    project_description = mirror("project_description")
    flags = mirror("flags")
    arguments = mirror("arguments")

    def __init__(self, project_title, project_description, flags=(), arguments=()):
        if not isinstance(project_title, str):
            raise TypeError("project title must be a string")
        if not isinstance(project_description, str):
            raise TypeError("project description must be a string")

        self._project_title = project_title
        self._project_description = project_description
        self._flags = tuple(flags)
        self._arguments = tuple(arguments)

        # Title lookups; registration order lives in the tuples above.
        self._flagmap = {}
        self._argmap = {}

        for flag in self._flags:
            if not isinstance(flag, Flag):
                raise TypeError(f"flags must be Flag instances, not {type(flag).__name__}")
            _check_title("flag", flag)
            if not isinstance(flag.options, tuple) or not all(isinstance(option, str) for option in flag.options):
                raise TypeError(f"flag {flag.title!r} options must be a sequence of strings")
            if flag.title in self._flagmap:
                raise ValueError(f"duplicate flag title {flag.title!r}")
            self._flagmap[flag.title] = flag

        for argument in self._arguments:
            if not isinstance(argument, Argument):
                raise TypeError(f"arguments must be Argument instances, not {type(argument).__name__}")
            _check_title("argument", argument)
            if argument.title in self._argmap:
                raise ValueError(f"duplicate argument title {argument.title!r}")
            self._argmap[argument.title] = argument

    def __repr__(self):
        return "parser(%s)" % ", ".join("%s=%r" % (name, getattr(self, name)) for name in self.__introspectable__)

    def __rich_repr__(self):
        for name in self.__introspectable__:
            yield name, getattr(self, name)

    def __rich__(self):
        return render_help(self)

    def help(self):
        """Return the help message (see argparser.helper)."""
        return format_help(self)

    def _suggest(self, token):
        # Closest registered spellings, flags first.
        candidates = [MARKER + title for title in self._flagmap] + list(self._argmap)
        suggestions = difflib.get_close_matches(token, candidates, 5)
        try:
            return "did you mean %r? run with '%s' to see every flag and argument" % (suggestions[0], HELP)
        except IndexError:
            return "run with '%s' to see every flag and argument" % HELP

    def parse(self, tokens):
        """
        Validate a token stream against the schema and extract its flags and arguments.

        Parameters
        - tokens: Iterable[str]
          Raw tokens of the invocation; the first one (the program path) is skipped.

        Returns
        - ParsedResult

        Raises
        - TypeError: tokens is not an iterable of strings.
        - HelpRequested: "-h" was given and no flag "h" is registered.
        - UnknownTokenError: a token is neither a registered flag nor argument.
        - DuplicateFlagError / DuplicateArgumentError: a title matched twice.
        - NotEnoughValuesError: a flag ran out of tokens for its options.
        All of the above except TypeError derive from ParseFailure.
        """
        if isinstance(tokens, str) or not isinstance(tokens, Iterable):
            raise TypeError("parse() argument must be an iterable of strings")
        tokens = deque(tokens)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("parse() argument must be an iterable of strings")

        result = ParsedResult()
        if not tokens:
            return result
        tokens.popleft()

        index = 0
        while tokens:
            token = tokens.popleft()
            index += 1

            if token.startswith(MARKER) and (flag := self._flagmap.get(token[len(MARKER):])) is not None:
                if flag.title in result.options:
                    raise self._fault(DuplicateFlagError(
                        "flag %r at %s position was already given" % (token, ordinal(index)),
                        title="duplicate flag",
                        code=FaultCode.DUPLICATED_FLAG,
                        hint="flags may only be used once; remove the repeated %r" % token,
                        token=token,
                        index=index,
                    ))
                if len(tokens) < flag.arity:
                    raise self._fault(NotEnoughValuesError(
                        "flag %r at %s position expects %d option(s) but %d remain" % (
                            token, ordinal(index), flag.arity, len(tokens)
                        ),
                        title="not enough values",
                        code=FaultCode.NOT_ENOUGH_VALUES,
                        hint="pass %s after %r" % (" ".join("<%s>" % option for option in flag.options), token),
                        token=token,
                        index=index,
                    ))
                values = tuple(tokens.popleft() for _ in range(flag.arity))
                index += flag.arity
                result.options[flag.title] = values
                result.flags.append((flag.title, values[0] if values else ""))
                logger.debug("matched flag %r with %r", flag.title, values)
            elif token in self._argmap:
                if token in result.arguments:
                    raise self._fault(DuplicateArgumentError(
                        "argument %r at %s position was already given" % (token, ordinal(index)),
                        title="duplicate argument",
                        code=FaultCode.DUPLICATED_ARGUMENT,
                        hint="arguments may only be used once; remove the repeated %r" % token,
                        token=token,
                        index=index,
                    ))
                result.arguments.append(token)
                logger.debug("matched argument %r", token)
            elif token == HELP:
                raise self._fault(HelpRequested(
                    "help requested at %s position" % ordinal(index),
                    title="help",
                    code=FaultCode.HELP_REQUESTED,
                    hint="read the usage below",
                    token=token,
                    index=index,
                ))
            else:
                flagged = token.startswith(MARKER)
                raise self._fault(UnknownTokenError(
                    "unknown %s %r at %s position" % ("flag" if flagged else "argument", token, ordinal(index)),
                    title="unknown flag" if flagged else "unknown argument",
                    code=FaultCode.UNKNOWN_FLAG if flagged else FaultCode.UNKNOWN_ARGUMENT,
                    hint=self._suggest(token),
                    token=token,
                    index=index,
                ))

        return result

    def _fault(self, fault):
        logger.debug("rejected token %r: %s", fault.token, fault)
        return copy.replace(fault, parser=self)


def create_parser(project_title, project_description, flags=(), arguments=()):
    """Create a Parser from project metadata, flags and arguments."""
    return Parser(project_title, project_description, flags, arguments)


__all__ = (
    "Parser",
    "ParsedResult",
    "create_parser",
)
