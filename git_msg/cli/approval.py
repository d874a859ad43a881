"""Approval prompt - accept, edit or reject a generated commit message."""

from dataclasses import dataclass

from git_msg.output import dim, display_message

ACCEPT = {'a', 'accept'}
EDIT = {'e', 'edit'}
REJECT = {'r', 'reject'}


@dataclass
class ApprovalOutcome:
    """Final decision; text is only meaningful when accepted."""
    accepted: bool
    text: str = ""


def prompt_for_approval(message: str) -> ApprovalOutcome:
    """Show the suggestion and loop until the user accepts, edits or rejects it.

    End of input or Ctrl-C counts as a rejection.
    """
    print("\nSuggested commit:")
    display_message(message)

    prompt = "[a]ccept, [e]dit, [r]eject? "
    while True:
        try:
            choice = input(prompt).strip().lower()
        except (KeyboardInterrupt, EOFError):
            print()
            return ApprovalOutcome(accepted=False)

        if choice in ACCEPT:
            return ApprovalOutcome(accepted=True, text=message)
        if choice in EDIT:
            return ApprovalOutcome(accepted=True, text=prompt_for_edit(message))
        if choice in REJECT:
            return ApprovalOutcome(accepted=False)
        prompt = "Please enter [a]ccept, [e]dit, or [r]eject: "


def prompt_for_edit(message: str) -> str:
    """Read one replacement line; an empty line keeps the original."""
    print("Edit your commit message (press Enter to keep it):")
    print(dim(f"> {message}"))
    try:
        edited = input("> ").strip()
    except (KeyboardInterrupt, EOFError):
        print()
        return message
    return edited or message
