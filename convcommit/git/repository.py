"""Git Repository - Commit and push through the git binary."""

import os
import subprocess
import tempfile
from pathlib import Path

from convcommit.output import print_debug, print_warning


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitRepository:
    """Thin wrapper over the git commands this tool needs."""

    def __init__(self, cwd: Path | None = None, verbose: bool = False):
        self.cwd = Path(cwd) if cwd else Path.cwd()
        self.verbose = verbose

    def _run_git(self, *args: str) -> str:
        """Run a git command and return its combined stdout/stderr."""
        if self.verbose:
            print_debug(f"git {' '.join(args)}")
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError((e.stdout or '').strip() or f"git {' '.join(args)} exited with status {e.returncode}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def is_repository(self) -> bool:
        """True when the working directory is inside a git work tree."""
        if (self.cwd / '.git').exists():
            return True
        try:
            return self._run_git('rev-parse', '--is-inside-work-tree').strip() == 'true'
        except GitError:
            return False

    def commit(self, message: str) -> str:
        """Commit staged changes with message, staged through a temp file.

        Returns:
            git's output on success

        Raises:
            GitError: with git's combined output when the commit fails
        """
        try:
            tmp = tempfile.NamedTemporaryFile(
                mode='w', prefix='commit-msg-', suffix='.txt', delete=False, encoding='utf-8'
            )
        except OSError as e:
            raise GitError(f"Failed to create temporary file for commit message: {e}")

        try:
            try:
                tmp.write(message)
                tmp.close()
            except OSError as e:
                raise GitError(f"Failed to write commit message to temporary file: {e}")
            if self.verbose:
                print_debug(f"message written to {tmp.name}")
            try:
                return self._run_git('commit', '-F', tmp.name)
            except GitError as e:
                raise GitError(f"Failed to commit changes: {e}")
        finally:
            try:
                os.unlink(tmp.name)
            except OSError as e:
                # Report so temp files don't silently accumulate
                print_warning(f"Could not delete temp file {tmp.name}: {e}")

    def push(self) -> str:
        try:
            return self._run_git('push')
        except GitError as e:
            raise GitError(f"Failed to push changes: {e}")
