"""Prompt Construction Package"""

from git_msg.prompts.builder import PromptBuilder

__all__ = ["PromptBuilder"]
