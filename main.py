from rich.pretty import pprint

from argparser import *

parser = create_parser("Test Parser", "Tests arguments", [
    create_flag("a", "This is the a flag", ["some"]),
    create_flag("b", "This is the b flag", ["some", "thing"]),
    create_flag("c", "This is the c flag", ["some"]),
    create_flag("d", "This is the d flag", []),
], [
    create_arg("foo", "This is the foo argument"),
    create_arg("bar", "This is the bar argument"),
])


if __name__ == '__main__':
    pprint(invoke(parser))
