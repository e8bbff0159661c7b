from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class HintPattern:
    """A provider phrase that signals a PR/MR link follows in the push output.

    Attributes:
        hint: Case-sensitive substring searched for in the push's stderr.
        label: Button label shown next to the extracted link.
    """

    hint: str
    label: str


# --- Push ---

# Git prints this as the very last line when nothing was pushed
PUSH_UP_TO_DATE = "Everything up-to-date\n"

# Server-side messages are relayed line by line with this prefix
REMOTE_MARKER = "\nremote: "

# Order matters: first match wins and some hints are substrings of others
PUSH_HINTS: tuple[HintPattern, ...] = (
    HintPattern("Create a pull request", "Create Pull Request"),  # GitHub
    HintPattern("Create pull request", "Create Pull Request"),  # Bitbucket
    HintPattern("create a merge request", "Create Merge Request"),  # GitLab
    HintPattern("View merge request", "View Merge Request"),  # GitLab, MR exists
)


def match_hint(
    text: str, hints: tuple[HintPattern, ...] = PUSH_HINTS
) -> HintPattern | None:
    """Return the first hint whose phrase occurs anywhere in ``text``.

    Args:
        text: Full stderr of a push. Not split into lines.
        hints: Ordered hint table; earlier rows take priority.

    Returns:
        The matching :class:`HintPattern`, or None.
    """
    for pattern in hints:
        if pattern.hint in text:
            return pattern
    return None


# --- Pull ---

# Older git releases spell it with hyphens
PULL_UP_TO_DATE = ("Already up to date.\n", "Already up-to-date.\n")

_FAST_FORWARD_PREFIX = "Updating"
_MERGE_PREFIX = "Merge"
_REBASE_MARKER = "Successfully rebased"

# Diffstat summary: " 3 files changed, 10 insertions(+), 2 deletions(-)"
_FILES_CHANGED_RE = re.compile(r"^\s*(\d+) files? changed")


def files_changed(stdout: str) -> int | None:
    """Extract the changed-file count from the diffstat on the last stdout line."""
    lines = stdout.rstrip("\n").splitlines()
    if not lines:
        return None
    match = _FILES_CHANGED_RE.match(lines[-1])
    return int(match.group(1)) if match else None


PullKind = Literal["fast_forward", "merge", "rebase", "other"]


def pull_kind(stdout: str) -> PullKind:
    """Classify non-trivial ``git pull`` stdout.

    Returns:
        How the pull integrated upstream changes, or ``"other"`` when the
        output does not say.
    """
    if stdout.startswith(_FAST_FORWARD_PREFIX):
        return "fast_forward"
    if stdout.startswith(_MERGE_PREFIX):
        return "merge"
    if _REBASE_MARKER in stdout:
        return "rebase"
    return "other"
