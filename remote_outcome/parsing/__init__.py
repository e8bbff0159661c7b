"""Remote output parsing: models → hint patterns → link finder → classifier."""

from remote_outcome.parsing.models import (  # noqa: F401
    CapturedOutput,
    DisplayOutcome,
    Fetch,
    Plain,
    Pull,
    Push,
    Remote,
    WithActionLink,
    WithFullLog,
)
from remote_outcome.parsing.remote_classifier import classify  # noqa: F401

__all__ = [
    "CapturedOutput",
    "DisplayOutcome",
    "Fetch",
    "Plain",
    "Pull",
    "Push",
    "Remote",
    "WithActionLink",
    "WithFullLog",
    "classify",
]
