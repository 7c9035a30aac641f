"""CLI Argument Parsing"""

import argparse
import argcomplete
from argcomplete.completers import ChoicesCompleter

from convcommit import COMMIT_TYPE_NAMES, __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='convcommit',
        description='Create commits that follow the Conventional Commits specification',
        epilog='Example: convcommit -t feat -s api -m "add user endpoint" -p'
    )

    parser.add_argument('-v', '--version', action='version', version=f'Convcommit v{__version__}')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.add_parser('version', help='Print the version number')

    # Commit fields
    type_arg = parser.add_argument('-t', '--type', type=str, default='', metavar='TYPE', help=f"Commit type (required): {', '.join(COMMIT_TYPE_NAMES)}")
    type_arg.completer = ChoicesCompleter(COMMIT_TYPE_NAMES)
    parser.add_argument('-s', '--scope', type=str, default='', help='Commit scope (optional)')
    parser.add_argument('-m', '--title', type=str, default='', help='Commit title (required)')
    parser.add_argument('-d', '--description', type=str, default='', help='Commit description (optional)')
    parser.add_argument('-b', '--body', type=str, default='', help='Commit body (optional)')
    parser.add_argument('-!', '--breaking', action='store_true', help='Indicates a breaking change')
    parser.add_argument('-f', '--footer', type=str, default='', help='Commit footer (optional)')

    # Flow options
    parser.add_argument('-r', '--review', action='store_true', help='Review (and optionally edit) the message before committing')
    parser.add_argument('-p', '--push', action='store_true', help='Push commit to remote repository')
    parser.add_argument('-i', '--interactive', action='store_true', help='Run in interactive mode')
    parser.add_argument('--verbose', action='store_true', help='Show debug info (git commands, config path)')

    argcomplete.autocomplete(parser)
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
