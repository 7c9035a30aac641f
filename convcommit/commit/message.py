"""Commit Message - Conventional commit model and serializer."""

from dataclasses import dataclass

from convcommit import COMMIT_TYPE_NAMES

BREAKING_CHANGE_MARKER = "BREAKING CHANGE"
BREAKING_CHANGE_FOOTER = f"{BREAKING_CHANGE_MARKER}: This commit introduces breaking changes."


@dataclass
class CommitMessage:
    """A single conventional commit, built for one commit and then discarded."""
    type: str
    description: str
    scope: str = ""
    body: str = ""
    breaking: bool = False
    footer: str = ""

    @property
    def header(self) -> str:
        """type(scope)!: description"""
        scope = f"({self.scope})" if self.scope else ""
        bang = "!" if self.breaking else ""
        return f"{self.type}{scope}{bang}: {self.description}"

    @property
    def effective_footer(self) -> str:
        """Footer with the breaking change line injected when it is missing."""
        if not self.breaking or BREAKING_CHANGE_MARKER in self.footer:
            return self.footer
        if not self.footer:
            return BREAKING_CHANGE_FOOTER
        return f"{BREAKING_CHANGE_FOOTER}\n{self.footer}"

    def format(self) -> str:
        return format_commit_message(self)


def is_valid_type(candidate: str) -> bool:
    """Exact, case-sensitive match against the allowed commit types."""
    return candidate in COMMIT_TYPE_NAMES


def format_commit_message(commit: CommitMessage) -> str:
    """Serialize a commit to the Conventional Commits text format."""
    parts = [commit.header]

    if commit.body:
        parts.append(commit.body)

    footer = commit.effective_footer
    if footer:
        parts.append(footer)

    return '\n\n'.join(parts)
