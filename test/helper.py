"""
Help formatter behavioral tests.

Scope
- Validate the exact plain layout (sections, markers, bracketed labels, tabs).
- Validate optional sections, ordering and idempotence.
- Validate the rich rendering matches the plain text and honors colorful.
"""
import unittest
from unittest import TestCase

from rich.text import Text

import argparser
from argparser import Parser, create_arg, create_flag, create_parser, format_help, render_help

EXPECTED = (
    "Test Parser, Tests arguments\n"
    "Usage: -h for help:\n"
    "\n"
    " Options:\n"
    "    -a <some> :\n"
    "\t This is the a flag\n"
    "    -b <some> <thing> :\n"
    "\t This is the b flag\n"
    "    -c <some> :\n"
    "\t This is the c flag\n"
    "    -d :\n"
    "\t This is the d flag\n"
    "\n"
    " Arguments:\n"
    "    foo :\n"
    "\t This is the foo argument\n"
    "    bar :\n"
    "\t This is the bar argument\n"
)


def _parser():
    return create_parser("Test Parser", "Tests arguments", [
        create_flag("a", "This is the a flag", ["some"]),
        create_flag("b", "This is the b flag", ["some", "thing"]),
        create_flag("c", "This is the c flag", ["some"]),
        create_flag("d", "This is the d flag", []),
    ], [
        create_arg("foo", "This is the foo argument"),
        create_arg("bar", "This is the bar argument"),
    ])


class TestHelp(TestCase):
    """Behavioral tests for the generated help message."""

    def testExactLayout(self):
        self.assertEqual(_parser().help(), EXPECTED)

    def testFormatHelpMatchesMethod(self):
        parser = _parser()
        self.assertEqual(format_help(parser), parser.help())

    def testIdempotent(self):
        parser = _parser()
        self.assertEqual(parser.help(), parser.help())

    def testEntriesFollowRegistrationOrder(self):
        help = _parser().help()
        positions = [help.index(fragment) for fragment in ("-a <some>", "-b <some> <thing>", "-c <some>", "-d :", "foo :", "bar :")]
        self.assertEqual(positions, sorted(positions))

    def testEveryEntryIsListed(self):
        parser = _parser()
        help = parser.help()
        for flag in parser.flags:
            self.assertIn("-" + flag.title, help)
            self.assertIn(flag.description, help)
            for option in flag.options:
                self.assertIn("<%s>" % option, help)
        for argument in parser.arguments:
            self.assertIn(argument.title, help)
            self.assertIn(argument.description, help)

    def testNoFlagsOmitsOptionsSection(self):
        help = Parser("P", "D", [], [create_arg("foo", "the foo")]).help()
        self.assertNotIn("Options:", help)
        self.assertEqual(help, "P, D\nUsage: -h for help:\n\n Arguments:\n    foo :\n\t the foo\n")

    def testNoArgumentsOmitsArgumentsSection(self):
        help = Parser("P", "D", [create_flag("v", "verbose")], []).help()
        self.assertNotIn("Arguments:", help)
        self.assertEqual(help, "P, D\nUsage: -h for help:\n\n Options:\n    -v :\n\t verbose\n\n")

    def testEmptyRegistry(self):
        self.assertEqual(Parser("P", "D").help(), "P, D\nUsage: -h for help:\n\n")

    def testRichRenderingMatchesPlainText(self):
        parser = _parser()
        text = render_help(parser)
        self.assertIsInstance(text, Text)
        self.assertEqual(text.plain, EXPECTED)
        self.assertTrue(text.spans)

    def testColorlessRenderingHasNoStyles(self):
        text = render_help(_parser(), colorful=False)
        self.assertFalse([span for span in text.spans if span.style])

    def testLayoutConstantsAreNotExported(self):
        for name in ("MARKER", "HELP"):
            self.assertNotIn(name, argparser.__all__)

    def testParserIsRenderable(self):
        parser = _parser()
        self.assertEqual(parser.__rich__().plain, parser.help())


if __name__ == '__main__':
    unittest.main()
