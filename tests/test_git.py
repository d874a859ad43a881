"""
Tests for GitRepository against a real throwaway repository.

Run with:
    pytest tests/test_git.py -v
"""

import shutil
import subprocess

import pytest

from git_msg.cli.main import main
from git_msg.git import COMMIT_MSG_FILENAME, GitError, GitRepository

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def git(*args):
    subprocess.run(
        ["git", "-c", "user.email=test@example.com", "-c", "user.name=Test User", *args],
        check=True,
        capture_output=True,
    )


@pytest.fixture
def work_tree(clean_env):
    """An initialized repository with one committed file, cwd set to it."""
    git("init", "-q")
    (clean_env / "test.txt").write_text("initial content\n")
    git("add", "test.txt")
    git("commit", "-q", "-m", "Initial commit")
    return clean_env


class TestGetDiff:

    def test_clean_tree_is_empty(self, work_tree):
        assert GitRepository().get_diff() == ""

    def test_unstaged_changes(self, work_tree):
        (work_tree / "test.txt").write_text("modified content\n")
        assert "+modified content" in GitRepository().get_diff()

    def test_staged_changes_preferred(self, work_tree):
        (work_tree / "test.txt").write_text("staged content\n")
        git("add", "test.txt")
        (work_tree / "other.txt").write_text("untracked\n")
        (work_tree / "test.txt").write_text("staged content\nunstaged line\n")

        diff = GitRepository().get_diff()
        assert "+staged content" in diff
        assert "unstaged line" not in diff

    def test_outside_repository(self, clean_env, monkeypatch):
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(clean_env.parent))
        with pytest.raises(GitError, match="Not inside a git repository"):
            GitRepository()


class TestSetCommitMessage:

    def test_writes_commit_editmsg(self, work_tree):
        path = GitRepository().set_commit_message("feat: add hello")
        assert path.name == COMMIT_MSG_FILENAME
        assert (work_tree / ".git" / COMMIT_MSG_FILENAME).read_text() == "feat: add hello"

    def test_overwrites_previous_message(self, work_tree):
        repo = GitRepository()
        repo.set_commit_message("feat: first draft with a long subject line")
        repo.set_commit_message("fix: second")
        assert (work_tree / ".git" / COMMIT_MSG_FILENAME).read_text() == "fix: second"


class TestEndToEnd:

    def test_staged_hello_with_local_provider(self, work_tree, server, monkeypatch, capsys):
        (work_tree / ".git-msg.json").write_text('{"provider": "local"}')
        (work_tree / "hello.txt").write_text("hello\n")
        git("add", "hello.txt")
        server.queue({"commit_message": "feat: add hello"})
        monkeypatch.setattr("builtins.input", lambda prompt="": "a")

        assert main(["generate"]) == 0

        assert "+hello" in server.payload()["diff"]
        assert "feat: add hello" in capsys.readouterr().out
        assert (work_tree / ".git" / COMMIT_MSG_FILENAME).read_text() == "feat: add hello"
