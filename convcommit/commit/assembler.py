"""Commit Assembler - Build a commit directly from flag values."""

from convcommit import COMMIT_TYPE_NAMES
from convcommit.commit.message import CommitMessage, is_valid_type


class CommitValidationError(Exception):
    """Raised when supplied commit fields are missing or invalid."""
    pass


def merge_body(description: str, body: str) -> str:
    """Join description text and body text with a blank line, skipping empty parts."""
    if description and body:
        return f"{description}\n\n{body}"
    return description or body


def assemble_commit(
    commit_type: str,
    title: str,
    scope: str = "",
    description: str = "",
    body: str = "",
    breaking: bool = False,
    footer: str = "",
) -> CommitMessage:
    """Validate flag values and build a CommitMessage.

    Checks run in order and stop at the first failure:
    missing type, missing title, unknown type.

    Raises:
        CommitValidationError: if a required value is missing or the type is unknown
    """
    if not commit_type:
        raise CommitValidationError("--type is required in non-interactive mode.")
    if not title.strip():
        raise CommitValidationError("--title is required in non-interactive mode.")
    if not is_valid_type(commit_type):
        raise CommitValidationError(
            f"Invalid commit type. Valid types are: {', '.join(COMMIT_TYPE_NAMES)}"
        )

    return CommitMessage(
        type=commit_type,
        scope=scope,
        description=title,
        body=merge_body(description, body),
        breaking=breaking,
        footer=footer,
    )
