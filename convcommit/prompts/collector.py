"""Commit Prompter - Collect commit fields from a person at the terminal."""

import re
from typing import Callable, Optional

from convcommit import COMMIT_TYPES, COMMIT_TYPE_NAMES
from convcommit.commit import CommitMessage, is_valid_type, merge_body
from convcommit.output import dim, error, info

LEADING_NUMBER_RE = re.compile(r'[+-]?\d+')


class PromptAborted(Exception):
    """Raised when input closes before a required answer is given."""
    pass


class CommitPrompter:
    """Walks through type, scope, title, description, body, breaking and footer.

    Every prompt blocks on a single line of input. End of input reads as an
    empty answer; required prompts give up with PromptAborted instead of
    asking again forever.
    """

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None):
        self._input = input_fn or input
        self._closed = False

    def prompt(self) -> CommitMessage:
        commit_type = self.prompt_type()
        scope = self._read(info("Enter scope (optional, press Enter to skip): "))
        title = self.prompt_title()

        print(info("Enter description (optional, press Enter to skip, multiple lines allowed, end with an empty line):"))
        description = self.read_multiline()
        print(info("Enter body (optional, press Enter to skip, multiple lines allowed, end with an empty line):"))
        body = self.read_multiline()

        breaking = self._read(info("Is this a breaking change? (y/N): ")).lower() == 'y'

        print(info("Enter footer (optional, press Enter to skip, multiple lines allowed, end with an empty line):"))
        footer = self.read_multiline()

        return CommitMessage(
            type=commit_type,
            scope=scope,
            description=title,
            body=merge_body(description, body),
            breaking=breaking,
            footer=footer,
        )

    def prompt_type(self) -> str:
        """Show the numbered type menu until a valid number or type name is entered."""
        while True:
            print(info("Select commit type:"))
            for i, name in enumerate(COMMIT_TYPE_NAMES, 1):
                print(f"{i:2d}. {name:<9} {dim(COMMIT_TYPES[name])}")

            choice = self._read(info("Enter number or type directly: "))
            if not choice and self._closed:
                raise PromptAborted("Input closed before a commit type was selected.")

            # A leading number wins, so "3x" selects the third type
            number = LEADING_NUMBER_RE.match(choice)
            if number is None:
                if is_valid_type(choice):
                    return choice
                print(error("Invalid type. Please try again."))
                continue

            index = int(number.group())
            if 1 <= index <= len(COMMIT_TYPE_NAMES):
                return COMMIT_TYPE_NAMES[index - 1]
            print(error("Invalid selection. Please try again."))

    def prompt_title(self) -> str:
        while True:
            title = self._read(info("Enter short title (required): "))
            if title:
                return title
            if self._closed:
                raise PromptAborted("Input closed before a title was entered.")
            print(error("Title is required. Please try again."))

    def read_multiline(self) -> str:
        """Read trimmed lines until the first blank one and join them with newlines."""
        lines = []
        while True:
            line = self._read()
            if not line:
                break
            lines.append(line)
        return '\n'.join(lines)

    def _read(self, prompt: str = '') -> str:
        if self._closed:
            return ''
        try:
            return self._input(prompt).strip()
        except EOFError:
            self._closed = True
            return ''
