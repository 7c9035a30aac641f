"""Git Operations Package"""

from convcommit.git.repository import GitRepository, GitError

__all__ = [
    "GitRepository",
    "GitError",
]
