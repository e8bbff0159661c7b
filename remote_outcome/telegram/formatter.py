from __future__ import annotations

import html

from remote_outcome.parsing.models import (
    CapturedOutput,
    DisplayOutcome,
    WithActionLink,
)
from remote_outcome.parsing.terminal_emulator import DEFAULT_COLS, render_output

# Telegram rejects messages above 4096 characters after entity parsing
TELEGRAM_MESSAGE_LIMIT = 4096

_TRUNCATED_NOTE = "… (truncated)\n"


def format_outcome_html(outcome: DisplayOutcome) -> str:
    """Format the outcome summary as a Telegram HTML message.

    The link of a :class:`WithActionLink` outcome is carried by the inline
    button, so only the summary text is rendered here.

    Args:
        outcome: Classifier result to announce.

    Returns:
        An HTML-formatted string suitable for sending via Telegram.
    """
    text = f"<b>{html.escape(outcome.message)}</b>"
    if isinstance(outcome.style, WithActionLink):
        text += f"\n{html.escape(outcome.style.label)} available."
    return text


def truncate_log(text: str, max_chars: int) -> str:
    """Keep the last ``max_chars`` characters of a log, marking the cut.

    The tail is kept because git reports the interesting parts (remote
    messages, ref updates) last.
    """
    if len(text) <= max_chars:
        return text
    keep = max(0, max_chars - len(_TRUNCATED_NOTE))
    return _TRUNCATED_NOTE + text[len(text) - keep:]


def format_full_log_html(
    output: CapturedOutput,
    max_chars: int = 3500,
    cols: int = DEFAULT_COLS,
) -> str:
    """Format captured output as a ``<pre>`` block for Telegram.

    Args:
        output: The verbatim captured streams.
        max_chars: Upper bound on rendered log characters before escaping.
        cols: Virtual terminal width used when rendering.

    Returns:
        HTML with the rendered, escaped and possibly truncated log, or an
        italic placeholder when both streams are empty.
    """
    rendered = render_output(output, cols)
    if not rendered:
        return "<i>(no output)</i>"
    max_chars = min(max_chars, TELEGRAM_MESSAGE_LIMIT)
    return f"<pre>{html.escape(truncate_log(rendered, max_chars))}</pre>"
