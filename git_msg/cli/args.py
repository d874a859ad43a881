"""CLI Argument Parsing"""

import argparse
import sys

import argcomplete


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that exits 1 (not 2) on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog='git-msg',
        description='AI-powered Git commit message generator',
        epilog='Generate meaningful commit messages based on your uncommitted changes using AI',
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND', parser_class=ArgumentParser)
    subparsers.add_parser(
        'generate',
        help='Generate a commit message',
        description='Generate a commit message for staged (or, if none, unstaged) changes',
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
