from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from telegram import Bot

from remote_outcome.config import AppConfig, ConfigError, load_config
from remote_outcome.log_setup import setup_logging
from remote_outcome.parsing.models import (
    CapturedOutput,
    DisplayOutcome,
    Fetch,
    Pull,
    Push,
    Remote,
    RemoteOperation,
    WithActionLink,
    WithFullLog,
)
from remote_outcome.parsing.remote_classifier import classify
from remote_outcome.parsing.terminal_emulator import render_output
from remote_outcome.telegram.notifier import OutcomeNotifier

logger = logging.getLogger(__name__)


def _common_options(*, suppress: bool) -> argparse.ArgumentParser:
    """Options accepted both before and after the operation name.

    The copy attached to each subcommand uses SUPPRESS defaults, otherwise
    its unset defaults would overwrite values given before the subcommand.
    """
    def default(value):
        return argparse.SUPPRESS if suppress else value

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=default(None),
                        help="Path to YAML config file")
    common.add_argument("--stdout-file", default=default(None),
                        help="File holding the command's stdout ('-' for stdin)")
    common.add_argument("--stderr-file", default=default(None),
                        help="File holding the command's stderr ('-' for stdin)")
    common.add_argument("--notify", action="store_true", default=default(False),
                        help="Send the outcome to the configured Telegram chat")
    common.add_argument("--debug", action="store_true", default=default(False),
                        help="Enable debug mode (verbose logging)")
    common.add_argument("--trace", action="store_true", default=default(False),
                        help="Enable trace mode (writes trace file to debug/)")
    common.add_argument("--verbose", action="store_true", default=default(False),
                        help="With --trace, also send trace output to terminal")
    return common


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="remote-outcome",
        description="Classify captured git remote output into a notification",
        parents=[_common_options(suppress=False)],
    )
    shared = [_common_options(suppress=True)]

    sub = parser.add_subparsers(dest="operation", required=True)
    fetch = sub.add_parser("fetch", parents=shared, help="Classify git fetch output")
    fetch.add_argument("--remote", default=None, help="Remote name (default: all)")
    pull = sub.add_parser("pull", parents=shared, help="Classify git pull output")
    pull.add_argument("remote", help="Remote name")
    push = sub.add_parser("push", parents=shared, help="Classify git push output")
    push.add_argument("branch", help="Local branch that was pushed")
    push.add_argument("remote", help="Remote name")
    return parser.parse_args(argv)


def _build_operation(args: argparse.Namespace) -> RemoteOperation:
    if args.operation == "push":
        return Push(branch_name=args.branch, remote=Remote(args.remote))
    if args.operation == "pull":
        return Pull(remote=Remote(args.remote))
    return Fetch(remote=Remote(args.remote) if args.remote else None)


def _read_stream(path: str | None) -> str:
    if path is None:
        return ""
    # Bytes, so universal newlines do not fold git's progress \r into \n
    if path == "-":
        return sys.stdin.buffer.read().decode("utf-8", errors="replace")
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def format_outcome_text(outcome: DisplayOutcome, cols: int) -> str:
    """Plain-text rendering of an outcome for the terminal."""
    lines = [outcome.message]
    style = outcome.style
    if isinstance(style, WithActionLink):
        lines.append(f"link: {style.label} {style.url}")
    elif isinstance(style, WithFullLog):
        rendered = render_output(style.output, cols)
        if rendered:
            lines.extend(["", rendered])
    return "\n".join(lines)


async def _notify(config: AppConfig, outcome: DisplayOutcome) -> None:
    async with Bot(config.telegram.bot_token) as bot:
        notifier = OutcomeNotifier(bot, presentation=config.presentation)
        # No application is left running to answer "Show full log" presses
        await notifier.send_outcome(config.telegram.chat_id, outcome, attach_log=True)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the remote-outcome command line."""
    args = _parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    # Command-line flags only ever switch debugging on
    if args.debug:
        config.debug.enabled = True
    if args.trace:
        config.debug.trace = True
    if args.verbose:
        config.debug.verbose = True
    setup_logging(config.debug, operation=args.operation)
    logger.debug("Config: %s", args.config or "built-in defaults")

    if args.stdout_file == "-" and args.stderr_file == "-":
        print("error: only one stream can be read from stdin", file=sys.stderr)
        return 2
    if args.notify and config.telegram is None:
        print("error: --notify requires a telegram section in the config", file=sys.stderr)
        return 2

    try:
        output = CapturedOutput(
            stdout=_read_stream(args.stdout_file),
            stderr=_read_stream(args.stderr_file),
        )
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    outcome = classify(_build_operation(args), output, config.hint_table())
    print(format_outcome_text(outcome, config.presentation.terminal_cols))

    if args.notify:
        asyncio.run(_notify(config, outcome))
        logger.info("Sent outcome to chat %d", config.telegram.chat_id)
    return 0
