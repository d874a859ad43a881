"""CLI Main Entry Point"""

import logging
import sys

from git_msg.cli.approval import prompt_for_approval
from git_msg.cli.args import build_parser, parse_args
from git_msg.cli.utils import clean_commit_message
from git_msg.config import Config, load_config
from git_msg.errors import EmptyResultError, GitMsgError
from git_msg.git import GitError, GitRepository
from git_msg.llm import FallbackCoordinator, GenerationOutcome
from git_msg.output import Spinner, dim, info, print_error, print_success, warning

logger = logging.getLogger("git_msg")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(level: str) -> None:
    """Send git_msg log records to stderr at the configured level."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.handlers = [handler]
    logger.setLevel(level)


def _report_failure(summary: str, e: Exception) -> int:
    """Log a terminal failure with its kind and tell the user. Returns exit code 1."""
    kind = e.kind if isinstance(e, GitMsgError) else type(e).__name__
    logger.error("%s kind=%s error=%s", summary, kind, e)
    print_error(f"{summary}: {e}")
    return 1


def _generate_message(config: Config, diff: str) -> GenerationOutcome:
    """Run generation (with the fallback hop) behind a spinner."""
    with Spinner() as spinner:
        def announce(failed, error, alternate):
            spinner.write(warning(f"{failed.name} failed: {error}"))
            spinner.write(f"Falling back to {info(alternate.name)}...")

        return FallbackCoordinator(config, on_fallback=announce).generate(diff)


def _generate_commit_flow(config: Config) -> int:
    """Diff -> provider (+ fallback) -> approval -> pending commit message.

    Returns:
        int: Exit code
    """
    try:
        repo = GitRepository()
        diff = repo.get_diff()
    except GitError as e:
        return _report_failure("Failed to get git diff", e)

    if not diff:
        print("No changes detected. Stage your changes first.")
        return 0

    print("Analyzing changes...")
    try:
        outcome = _generate_message(config, diff)
        message = clean_commit_message(outcome.message)
        if not message:
            raise EmptyResultError(f"nothing left of the {outcome.provider.name} reply after cleanup")
    except GitMsgError as e:
        return _report_failure("Failed to generate commit message", e)

    logger.info("message generated by %s (fallback=%s)", outcome.provider.name, outcome.fell_back)
    print(dim(f"Generated by {outcome.provider.name}"))

    approval = prompt_for_approval(message)
    if not approval.accepted:
        print("Operation cancelled.")
        return 0

    try:
        repo.set_commit_message(approval.text)
    except GitError as e:
        return _report_failure("Failed to set commit message", e)

    print_success("Commit message set successfully!")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.command is None:
        build_parser().print_help()
        return 0

    try:
        config = load_config()
    except GitMsgError as e:
        _configure_logging("WARNING")
        return _report_failure("Failed to load configuration", e)

    _configure_logging(config.log_level)
    return _generate_commit_flow(config)
