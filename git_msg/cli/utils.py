"""CLI Utility Functions"""

import re

from git_msg import COMMIT_TYPE_NAMES

TYPES_PATTERN = '|'.join(COMMIT_TYPE_NAMES)

TYPE_LINE = re.compile(rf'^[`\s]*({TYPES_PATTERN})[\(!:]')

# Lines that mark the end of the message: echoed diffs or code fences
JUNK_PATTERNS = re.compile(r'^(diff --git |@@\s|[+-]{3}\s[ab]/|index [0-9a-f]+\.\.[0-9a-f]+|```)')


def _is_preamble(lines: list[str]) -> bool:
    """Lines before the type line are chatter when they lead into it ("Here it is:")."""
    text = [line.strip() for line in lines if line.strip() and not line.strip().startswith('```')]
    return not text or text[-1].endswith(':')


def clean_commit_message(text: str) -> str:
    """Clean up a model response to extract just the commit message.

    Drops a preamble that introduces the first `type(scope):` line, wrapping
    backticks, and trailing diff or code blocks. A response that opens with
    its own subject keeps it, even if a later line looks like a type line.
    """
    lines = text.strip().split('\n')
    start_idx = 0
    for i, line in enumerate(lines):
        if TYPE_LINE.match(line):
            if _is_preamble(lines[:i]):
                start_idx = i
            break

    end_idx = len(lines)
    for i in range(start_idx + 1, len(lines)):
        if JUNK_PATTERNS.match(lines[i]):
            end_idx = i
            break

    lines = '\n'.join(lines[start_idx:end_idx]).rstrip().split('\n')
    lines[0] = lines[0].strip('`').strip()

    return '\n'.join(lines).strip()
