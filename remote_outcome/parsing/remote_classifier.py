"""Turn the captured output of a finished git remote command into a display decision.

Pipeline for a push::

    stderr ──► up-to-date sentinel? ──► Plain
          └──► "\\nremote: " marker? ──► hint table ──► first URL ──► WithActionLink
                        │                    │              │
                        └────────────────────┴──────────────┴──► WithFullLog

Fetch and pull only choose between :class:`Plain` and :class:`WithFullLog`.
Every branch ends in a usable :class:`DisplayOutcome`; nothing here raises.
"""

from __future__ import annotations

import logging

from remote_outcome.log_setup import TRACE
from remote_outcome.parsing.hint_patterns import (
    PULL_UP_TO_DATE,
    PUSH_HINTS,
    PUSH_UP_TO_DATE,
    REMOTE_MARKER,
    HintPattern,
    files_changed,
    match_hint,
    pull_kind,
)
from remote_outcome.parsing.link_finder import find_first_url
from remote_outcome.parsing.models import (
    CapturedOutput,
    DisplayOutcome,
    DisplayStyle,
    Fetch,
    Plain,
    Pull,
    Push,
    RemoteOperation,
    WithActionLink,
    WithFullLog,
)

logger = logging.getLogger(__name__)


def classify(
    operation: RemoteOperation,
    output: CapturedOutput,
    hints: tuple[HintPattern, ...] = PUSH_HINTS,
) -> DisplayOutcome:
    """Decide how to present the result of a remote operation.

    Args:
        operation: The fetch, pull or push that produced ``output``.
        output: Captured stdout/stderr of the completed command. Carried
            through unchanged when the outcome falls back to the full log.
        hints: Ordered hint table consulted for pushes. Defaults to the
            built-in GitHub/Bitbucket/GitLab phrases.

    Returns:
        The summary message and display style.
    """
    logger.log(TRACE, "stdout=%r stderr=%r", output.stdout, output.stderr)
    if isinstance(operation, Push):
        outcome = _classify_push(operation, output, hints)
    elif isinstance(operation, Pull):
        outcome = _classify_pull(operation, output)
    else:
        outcome = _classify_fetch(operation, output)
    logger.debug(
        "classify %s -> %s (%s)",
        type(operation).__name__,
        type(outcome.style).__name__,
        outcome.message,
    )
    return outcome


def _classify_push(
    operation: Push, output: CapturedOutput, hints: tuple[HintPattern, ...]
) -> DisplayOutcome:
    if output.stderr.endswith(PUSH_UP_TO_DATE):
        return DisplayOutcome("Push: Everything is up-to-date", Plain())

    message = f"Pushed {operation.branch_name} to {operation.remote.name}"
    return DisplayOutcome(message, _push_style(output, hints))


def _push_style(
    output: CapturedOutput, hints: tuple[HintPattern, ...]
) -> DisplayStyle:
    stderr = output.stderr
    if REMOTE_MARKER not in stderr:
        return WithFullLog(output)

    pattern = match_hint(stderr, hints)
    if pattern is None:
        return WithFullLog(output)

    # The URL is usually on the line after the hint, so scan everything
    url = find_first_url(stderr)
    if url is None:
        logger.debug("Hint %r matched but no URL found", pattern.hint)
        return WithFullLog(output)

    return WithActionLink(label=pattern.label, url=url)


def _classify_fetch(operation: Fetch, output: CapturedOutput) -> DisplayOutcome:
    # git fetch is silent when there is nothing new
    if not output.stderr and not output.stdout:
        return DisplayOutcome("Fetch: Already up-to-date", Plain())

    if operation.remote is None:
        message = "Fetched from all remotes"
    else:
        message = f"Fetched from {operation.remote.name}"
    return DisplayOutcome(message, WithFullLog(output))


def _classify_pull(operation: Pull, output: CapturedOutput) -> DisplayOutcome:
    stdout = output.stdout
    if stdout.endswith(PULL_UP_TO_DATE):
        return DisplayOutcome("Pull: Already up-to-date", Plain())

    remote = operation.remote.name
    kind = pull_kind(stdout)
    if kind == "fast_forward":
        count = files_changed(stdout)
        if count is None:
            message = f"Fast-forwarded from {remote}"
        else:
            message = f"Received {_file_changes(count)} from {remote}"
    elif kind == "merge":
        count = files_changed(stdout)
        if count is None:
            message = f"Merged from {remote}"
        else:
            message = f"Merged {_file_changes(count)} from {remote}"
    elif kind == "rebase":
        message = f"Rebased onto {remote}"
    else:
        message = f"Pulled from {remote}"
    return DisplayOutcome(message, WithFullLog(output))


def _file_changes(count: int) -> str:
    return f"{count} file change{'' if count == 1 else 's'}"
