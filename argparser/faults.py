"""
argparser faults (parse failures) and rendering.

Scope
- FaultCode: stable numeric identifiers for every way a token stream can be
  rejected. Hosts may remap them to friendlier labels (see normalize()).
- ParseFailure: base exception raised by Parser.parse(); carries a message and
  keyword options (code, title, hint, token, index, ...) and knows how to
  render itself through rich.
- One subclass per failure kind, so callers that only care about
  success/failure catch ParseFailure while diagnostics keep the reason.

UX
- Position-first messages: every message names the ordinal position of the
  offending token ("at third position").
- Lowercased, short titles; one-sentence bodies; a single hint.
- Colors are configurable via a __styles__ mapping in __main__.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, UnsetType


class FaultCode(IntEnum):
    """
    canonical fault codes for parse failures (stable identifiers).

    grouping
    - help (100xx)
      • HELP_REQUESTED
    - flags (111xx)
      • UNKNOWN_FLAG, DUPLICATED_FLAG, NOT_ENOUGH_VALUES
    - arguments (112xx)
      • UNKNOWN_ARGUMENT, DUPLICATED_ARGUMENT
    """
    # --- help (10xxx) ---
    HELP_REQUESTED      = 10001

    # --- flag errors (111xx) ---
    UNKNOWN_FLAG        = 11112
    DUPLICATED_FLAG     = 11115
    NOT_ENOUGH_VALUES   = 11122

    # --- argument errors (112xx) ---
    UNKNOWN_ARGUMENT    = 11201
    DUPLICATED_ARGUMENT = 11202

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__ to
        override numeric ids with friendlier labels. when no mapping is
        present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParseFailure(Exception):
    """
    base type for every rejection of a token stream.

    options (all optional, read-only)
    - code: FaultCode
    - title: short lowercased title for headers
    - hint: one actionable sentence
    - token: the offending token
    - index: 1-based position of the offending token (invocation path excluded)
    - parser: the Parser that raised it (used for the program name)
    - colorful / fancy: rendering switches set by the runner
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | UnsetType)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    @property
    def token(self):
        return self.options.get("token")

    @property
    def index(self):
        return self.options.get("index")

    def __str__(self):
        return "" if self.message is Unset else self.message

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        parser = self.options.get("parser")
        prog = getattr(main, "__prog__", parser.project_title if parser is not None else "")

        header = Text.assemble(
            "[ ",
            *((text(prog, "prog-name"), " — ") if prog else ()),
            text(self.code.normalize() if self.code is not None else "", "code"),
            " | ",
            text(self.options.get("title", "").title(), "error-title"),
            " ]"
        )
        message = text(str(self), "error-message")
        hint = Text.assemble(text(" → ", "hint-arrow"), text(self.options.get("hint", ""), "hint"))

        if self.options.get("fancy", False):
            return Panel(Group(message, hint), title=header, title_align="left")
        return Group(header, message, hint)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class HelpRequested(ParseFailure): ...
class UnknownTokenError(ParseFailure): ...
class DuplicateFlagError(ParseFailure): ...
class DuplicateArgumentError(ParseFailure): ...
class NotEnoughValuesError(ParseFailure): ...


__all__ = (
    "FaultCode",
    "ParseFailure",
    "HelpRequested",
    "UnknownTokenError",
    "DuplicateFlagError",
    "DuplicateArgumentError",
    "NotEnoughValuesError",
)
