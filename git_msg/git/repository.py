"""Git Repository - read uncommitted changes and stage the next commit message."""

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

COMMIT_MSG_FILENAME = "COMMIT_EDITMSG"


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitRepository:
    """Thin wrapper over the git binary for the working tree in cwd."""

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not inside a git repository")

    def get_diff(self) -> str:
        """Diff of staged changes, or of unstaged changes when nothing is staged.

        Returns an empty string when the working tree is clean.
        """
        diff = self._run_git('diff', '--staged')
        if diff:
            return diff
        logger.debug("nothing staged, falling back to unstaged diff")
        return self._run_git('diff')

    def get_git_dir(self) -> Path:
        return Path(self._run_git('rev-parse', '--git-dir').strip())

    def set_commit_message(self, message: str) -> Path:
        """Overwrite the pending commit message used by the next `git commit`."""
        path = self.get_git_dir() / COMMIT_MSG_FILENAME
        try:
            path.write_text(message, encoding='utf-8')
        except OSError as e:
            raise GitError(f"Could not write {path}: {e}")
        logger.debug("wrote %d chars to %s", len(message), path)
        return path
