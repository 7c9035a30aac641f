import re

import pytest

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def scripted_input():
    """Return a factory for input() replacements that replay answers, then hit EOF."""
    def _make(answers):
        remaining = iter(answers)
        prompts = []

        def _input(prompt=''):
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        _input.prompts = prompts
        return _input
    return _make
