"""
argparser runner: the thin I/O layer around Parser.parse().

invoke() reads the process arguments (or the given tokens), parses them and
hands back the ParsedResult. When parsing fails it prints the fault, then the
help, and ends the program. Printing and exiting stay two separate steps, so
the core parser never touches the terminal or the process.

Every failure, "-h" included, exits with status 1.
"""
import copy
import logging
import sys

from rich.console import Console
from rich.panel import Panel

from .faults import ParseFailure, HelpRequested
from .helper import render_help
from .utils import *

logger = logging.getLogger(__name__)


def _render(parser, *, colorful, fancy):
    renderable = render_help(parser, colorful=colorful)
    if fancy:
        return Panel(renderable, title=parser.project_title, title_align="left")
    return renderable


def invoke(parser, tokens=Unset, /, *, colorful=True, fancy=False, console=Unset):
    """
    Parse the invocation tokens or end the program with the help message.

    Parameters
    - parser: Parser
    - tokens: Unset | Iterable[str]
      Full invocation, program path first. Defaults to sys.argv.
    - colorful: bool
      Style faults and help (palette overridable via __main__.__styles__).
    - fancy: bool
      Wrap faults and help in rich panels.
    - console: Unset | rich.console.Console
      Where to print; defaults to stdout for help and stderr for faults.

    Returns
    - ParsedResult on success.

    Raises
    - SystemExit: after printing, when parsing failed or help was requested.
    """
    tokens = coalesce(tokens, sys.argv)
    try:
        return parser.parse(tokens)
    except HelpRequested:
        out = Console() if console is Unset else console
        out.print(_render(parser, colorful=colorful, fancy=fancy))
        status = 1
    except ParseFailure as fault:
        logger.info("invalid invocation: %s", fault)
        out = Console(stderr=True) if console is Unset else console
        out.print(copy.replace(fault, colorful=colorful, fancy=fancy))
        out.print()
        out.print(_render(parser, colorful=colorful, fancy=fancy))
        status = 1
    sys.exit(status)


__all__ = (
    "invoke",
)
