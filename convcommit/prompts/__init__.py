"""Interactive Prompt Package"""

from convcommit.prompts.collector import CommitPrompter, PromptAborted

__all__ = ["CommitPrompter", "PromptAborted"]
