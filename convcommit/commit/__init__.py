"""Commit Message Package"""

from convcommit.commit.message import (
    CommitMessage,
    format_commit_message,
    is_valid_type,
    BREAKING_CHANGE_MARKER,
    BREAKING_CHANGE_FOOTER,
)
from convcommit.commit.assembler import assemble_commit, merge_body, CommitValidationError

__all__ = [
    "CommitMessage",
    "format_commit_message",
    "is_valid_type",
    "assemble_commit",
    "merge_body",
    "CommitValidationError",
    "BREAKING_CHANGE_MARKER",
    "BREAKING_CHANGE_FOOTER",
]
