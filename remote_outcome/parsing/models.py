"""Shared data types for remote output classification."""

from __future__ import annotations

from dataclasses import dataclass


# --- Operation descriptors ---


@dataclass(frozen=True)
class Remote:
    """A git remote as shown to the user."""

    name: str


@dataclass(frozen=True)
class Fetch:
    """``git fetch`` against one remote, or all remotes when ``remote`` is None."""

    remote: Remote | None = None


@dataclass(frozen=True)
class Pull:
    """``git pull`` from a remote."""

    remote: Remote


@dataclass(frozen=True)
class Push:
    """``git push`` of a local branch to a remote."""

    branch_name: str
    remote: Remote


RemoteOperation = Fetch | Pull | Push


@dataclass(frozen=True)
class CapturedOutput:
    """The two text streams captured from a finished remote command."""

    stdout: str = ""
    stderr: str = ""


# --- Display decisions ---


@dataclass(frozen=True)
class Plain:
    """Summary only, no further affordance."""


@dataclass(frozen=True)
class WithFullLog:
    """Summary plus a way to reveal the captured output verbatim."""

    output: CapturedOutput


@dataclass(frozen=True)
class WithActionLink:
    """Summary plus a single labelled link (e.g. "Create Pull Request")."""

    label: str
    url: str


DisplayStyle = Plain | WithFullLog | WithActionLink


@dataclass(frozen=True)
class DisplayOutcome:
    """Classifier result: a human-readable summary and how to present it.

    Attributes:
        message: One-line summary, e.g. ``"Pushed feature to origin"``.
        style: Exactly one of :class:`Plain`, :class:`WithFullLog` or
            :class:`WithActionLink`.
    """

    message: str
    style: DisplayStyle
