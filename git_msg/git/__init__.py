"""Git Operations Package"""

from git_msg.git.repository import GitRepository, GitError, COMMIT_MSG_FILENAME

__all__ = [
    "GitRepository",
    "GitError",
    "COMMIT_MSG_FILENAME",
]
