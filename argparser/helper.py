"""
argparser help formatter.

Renders the help message of a Parser, a pure function of its schema:

    Test Parser, Tests arguments
    Usage: -h for help:

     Options:
        -a <some> :
    	 This is the a flag
        -d :
    	 This is the d flag

     Arguments:
        foo :
    	 This is the foo argument

- render_help(parser, colorful=True) builds a rich Text (styled when colorful).
- format_help(parser) is the same layout as a plain string.

The Options block is only emitted when flags are registered, the Arguments
block only when arguments are registered. Flags and arguments appear in
registration order.

Palette keys (override through a __styles__ mapping in __main__)
- project-title, project-description, usage-label
- section-label, flag-name, option-label, argument-name, description
"""
from collections import defaultdict

from rich.text import Text

MARKER = "-"
HELP = MARKER + "h"


def render_help(parser, /, *, colorful=True):
    """
    Build the help message of a parser as rich Text.

    Parameters
    - parser: Parser
    - colorful: bool
      When False, no styles are applied (the plain text is identical).
    """
    styles = defaultdict(str, {
        "project-title": "bold #FF4D94",  # magenta-pink brand pop
        "project-description": "italic #A3A3A3",  # neutral gray
        "usage-label": "bold #00E6FF",  # cyan signature info
        "section-label": "bold #FFFFFF",  # white headers
        "flag-name": "bold #22C55E",  # green switches
        "option-label": "bold #FFD600",  # amber placeholders
        "argument-name": "bold #36C5F0",  # sky-blue commands
        "description": "#9CA3AF",  # muted gray
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    text = Text()
    text.append(parser.project_title, styler("project-title"))
    text.append(", ")
    text.append(parser.project_description, styler("project-description"))
    text.append("\n")
    text.append("Usage: %s for help:" % HELP, styler("usage-label"))
    text.append("\n\n")

    if parser.flags:
        text.append(" ")
        text.append("Options:", styler("section-label"))
        text.append("\n")
        for flag in parser.flags:
            text.append("    ")
            text.append(MARKER + flag.title, styler("flag-name"))
            text.append(" ")
            for option in flag.options:
                text.append("<%s>" % option, styler("option-label"))
                text.append(" ")
            text.append(":\n\t ")
            text.append(flag.description, styler("description"))
            text.append("\n")
        text.append("\n")

    if parser.arguments:
        text.append(" ")
        text.append("Arguments:", styler("section-label"))
        text.append("\n")
        for argument in parser.arguments:
            text.append("    ")
            text.append(argument.title, styler("argument-name"))
            text.append(" :\n\t ")
            text.append(argument.description, styler("description"))
            text.append("\n")

    return text


def format_help(parser, /):
    """Return the help message of a parser as a plain string."""
    return render_help(parser, colorful=False).plain


__all__ = (
    "render_help",
    "format_help",
)
