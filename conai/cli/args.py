"""CLI Argument Parsing"""

import argparse

from conai import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='conai',
        description='Conventionalize your commit messages with AI',
        epilog='Example: git commit -m "$(conai -m \'added login page\')"'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-m', '--message', type=str, metavar='MESSAGE', help='The commit message to conventionalize')
    parser.add_argument('-k', '--key', type=str, metavar='KEY', help='Set your OpenAI API key')
    parser.add_argument('--verbose', action='store_true', help='Show debug info (model, tokens used)')

    return parser


def parse_args(argv: list[str] | None = None, parser: argparse.ArgumentParser | None = None) -> argparse.Namespace:
    """Parse recognized options. Anything else on the command line is ignored."""
    parser = parser or build_parser()
    args, _unknown = parser.parse_known_args(argv)
    return args
