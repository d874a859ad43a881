"""Prompt Builder - the fixed Conventional Commits prompt sent to remote models."""

from git_msg import COMMIT_TYPES


class PromptBuilder:
    """Builds the instruction prompt followed by the raw diff.

    The text is identical for every remote provider; the local service
    receives the bare diff and does its own prompting.
    """

    def build(self, diff: str) -> str:
        sections = [
            self._build_role_section(),
            self._build_format_section(),
            self._build_instructions_section(),
            self._build_diff_section(diff),
        ]
        return "\n\n".join(sections)

    def _build_role_section(self) -> str:
        return """You are a helpful assistant that generates git commit messages based on code diffs.
Please analyze the following git diff and generate a clear, concise commit message following the Conventional Commits specification."""

    def _build_format_section(self) -> str:
        types_list = "\n".join(f"- {t}: {desc}" for t, desc in COMMIT_TYPES.items())
        return f"""The format should be: <type>[optional scope]: <description>

Where <type> is one of:
{types_list}"""

    def _build_instructions_section(self) -> str:
        return """The description should be concise but descriptive, written in imperative mood.
Only output the commit message, no additional text."""

    def _build_diff_section(self, diff: str) -> str:
        return f"Git diff:\n{diff}"
