"""
Tests for the accept / edit / reject prompt.

Run with:
    pytest tests/test_approval.py -v
"""

import pytest

from git_msg.cli.approval import ApprovalOutcome, prompt_for_approval

MESSAGE = "feat: add hello"


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted lines to input() and record the prompts shown."""
    prompts = []

    def _answer(*lines):
        remaining = list(lines)

        def fake_input(prompt=""):
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return _answer


class TestPromptForApproval:

    @pytest.mark.parametrize("line", ["a", "accept", "  A  ", "ACCEPT\n"])
    def test_accept(self, answers, line):
        answers(line)
        assert prompt_for_approval(MESSAGE) == ApprovalOutcome(True, MESSAGE)

    @pytest.mark.parametrize("line", ["r", "reject", " R "])
    def test_reject(self, answers, line):
        answers(line)
        assert prompt_for_approval(MESSAGE) == ApprovalOutcome(False, "")

    def test_edit_with_empty_line_keeps_original(self, answers):
        answers("e", "")
        assert prompt_for_approval(MESSAGE) == ApprovalOutcome(True, MESSAGE)

    def test_edit_replaces_text(self, answers):
        answers("e", "foo")
        assert prompt_for_approval(MESSAGE) == ApprovalOutcome(True, "foo")

    def test_edit_trims_replacement(self, answers):
        answers("edit", "  fix: tidy up  ")
        assert prompt_for_approval(MESSAGE) == ApprovalOutcome(True, "fix: tidy up")

    def test_unrecognized_input_reprompts(self, answers):
        prompts = answers("x", "", "yes", "a")
        assert prompt_for_approval(MESSAGE) == ApprovalOutcome(True, MESSAGE)
        assert len(prompts) == 4
        assert prompts[0] == "[a]ccept, [e]dit, [r]eject? "
        assert all(p == "Please enter [a]ccept, [e]dit, or [r]eject: " for p in prompts[1:])

    def test_end_of_input_rejects(self, answers):
        answers()
        assert prompt_for_approval(MESSAGE) == ApprovalOutcome(False, "")

    def test_end_of_input_while_editing_keeps_original(self, answers):
        answers("e")
        assert prompt_for_approval(MESSAGE) == ApprovalOutcome(True, MESSAGE)

    def test_shows_suggestion(self, answers, capsys):
        answers("r")
        prompt_for_approval(MESSAGE)
        out = capsys.readouterr().out
        assert "Suggested commit:" in out
        assert MESSAGE in out
