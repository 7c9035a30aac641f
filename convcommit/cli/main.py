"""CLI Main Entry Point"""

from convcommit import __version__
from convcommit.commit import CommitMessage, CommitValidationError, assemble_commit
from convcommit.config import Config, ConfigManager
from convcommit.feedback import check_feedback
from convcommit.git import GitRepository, GitError
from convcommit.output import (
    bold, dim, success, warning, colorize_commit_type,
    print_debug, print_error, print_success, print_warning, CHECK, RULE,
)
from convcommit.prompts import CommitPrompter, PromptAborted

from convcommit.cli.args import parse_args
from convcommit.cli.utils import edit_message, is_interactive_mode


def _display_message(message):
    """Print the message between rules, header in bold with its type colored."""
    width = max(len(line) for line in message.split('\n'))
    header, _, rest = colorize_commit_type(message).partition('\n')
    print(dim(RULE * width))
    print(bold(header))
    if rest:
        print(rest)
    print(dim(RULE * width))


def _build_commit(args) -> CommitMessage:
    """Collect the commit interactively or from flags.

    Raises:
        CommitValidationError: missing or invalid flag values
        PromptAborted: input closed during a required prompt
    """
    if is_interactive_mode(args):
        return CommitPrompter().prompt()
    return assemble_commit(
        commit_type=args.type,
        title=args.title,
        scope=args.scope,
        description=args.description,
        body=args.body,
        breaking=args.breaking,
        footer=args.footer,
    )


def _review_message(message):
    """Let the user accept, edit or abandon the message.

    Returns:
        The message to commit, or None if the user quit
    """
    while True:
        _display_message(message)
        try:
            action = input(dim('(e)dit, (q)uit, or Enter to accept: ')).strip().lower()
        except EOFError:
            return message

        if action == 'q':
            return None
        if action != 'e':
            return message

        edited = edit_message(message)
        if edited:
            message = edited
        else:
            print_warning("Editor returned nothing, keeping the previous message")


def _record_commit(manager: ConfigManager, verbose: bool) -> Config | None:
    """Bump the usage counter. A failed write is only a warning: the commit already happened."""
    try:
        config = manager.increment_commit_count()
    except OSError as e:
        print_warning(f"Failed to update commit count: {e}")
        return None
    if verbose:
        print_debug(f"commit_count={config.commit_count} ({manager.path})")
    return config


def _commit_flow(args) -> int:
    """Main commit flow.

    Returns:
        int: Exit code
    """
    repo = GitRepository(verbose=args.verbose)
    if not repo.is_repository():
        print_error("Not a Git repository. Please run this command inside a Git repository.")
        return 1

    try:
        commit = _build_commit(args)
    except (CommitValidationError, PromptAborted) as e:
        print_error(str(e))
        return 1

    message = commit.format()

    if args.review:
        message = _review_message(message)
        if message is None:
            print(dim("Cancelled."))
            return 0

    print(success(f"\n{CHECK} Commit Created:"))
    _display_message(message)

    try:
        repo.commit(message)
    except GitError as e:
        print_error(str(e))
        return 1

    print_success("Changes committed successfully.")

    config = _record_commit(ConfigManager(), args.verbose)
    if config is not None:
        check_feedback(config)

    if args.push:
        print(warning("Pushing changes to remote repository..."))
        try:
            repo.push()
        except GitError as e:
            print_error(str(e))
            return 1
        print_success("Changes pushed successfully.")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.command == 'version':
        print(f"Convcommit v{__version__}")
        return 0

    try:
        return _commit_flow(args)
    except KeyboardInterrupt:
        print()
        print(dim("Cancelled."))
        return 130
