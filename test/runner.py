"""
Runner behavioral tests (invoke(): parse, print, exit).

Scope
- Validate pass-through of successful parses (explicit tokens and sys.argv).
- Validate failure output (fault then help) and exit statuses.
- Validate help requests exit cleanly.
"""
import io
import sys
import unittest
from unittest import TestCase, mock

from rich.console import Console

from argparser import create_arg, create_flag, create_parser, invoke


def _parser():
    return create_parser("Test Parser", "Tests arguments", [
        create_flag("a", "This is the a flag", ["some"]),
        create_flag("d", "This is the d flag", []),
    ], [
        create_arg("foo", "This is the foo argument"),
    ])


def _console():
    return Console(file=io.StringIO(), width=120, color_system=None)


class TestInvoke(TestCase):
    """Behavioral tests for the runner."""

    def testSuccessReturnsResult(self):
        console = _console()
        result = invoke(_parser(), ["prog", "-a", "3", "foo"], console=console)
        self.assertEqual(result.flags, [("a", "3")])
        self.assertEqual(result.arguments, ["foo"])
        self.assertEqual(console.file.getvalue(), "")

    def testReadsProcessArguments(self):
        with mock.patch.object(sys, "argv", ["prog", "-d"]):
            result = invoke(_parser(), console=_console())
        self.assertEqual(result.flags, [("d", "")])

    def testFailurePrintsFaultThenHelpAndExits(self):
        console = _console()
        with self.assertRaises(SystemExit) as context:
            invoke(_parser(), ["prog", "-a", "1", "-a", "2"], console=console)
        self.assertEqual(context.exception.code, 1)
        output = console.file.getvalue()
        self.assertIn("Duplicate Flag", output)
        self.assertIn("Usage: -h for help:", output)
        self.assertLess(output.index("Duplicate Flag"), output.index("Usage: -h for help:"))

    def testMissingOptionExits(self):
        with self.assertRaises(SystemExit) as context:
            invoke(_parser(), ["prog", "-a"], console=_console())
        self.assertEqual(context.exception.code, 1)

    def testHelpRequestPrintsHelpAndExitsWithFailure(self):
        console = _console()
        with self.assertRaises(SystemExit) as context:
            invoke(_parser(), ["prog", "-h"], console=console)
        self.assertEqual(context.exception.code, 1)
        output = console.file.getvalue()
        self.assertIn("Test Parser, Tests arguments", output)
        self.assertIn("This is the foo argument", output)

    def testFancyHelp(self):
        console = _console()
        with self.assertRaises(SystemExit):
            invoke(_parser(), ["prog", "-h"], fancy=True, console=console)
        self.assertIn("╭", console.file.getvalue())


if __name__ == '__main__':
    unittest.main()
