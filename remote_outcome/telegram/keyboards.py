from __future__ import annotations

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from remote_outcome.parsing.models import DisplayOutcome, WithActionLink, WithFullLog

LOG_CALLBACK_PREFIX = "log:"
SHOW_LOG_TEXT = "Show full log"


def build_outcome_keyboard(
    outcome: DisplayOutcome, log_id: str | None = None
) -> list[list[dict]]:
    """Build the inline keyboard layout for a classified outcome.

    - :class:`WithActionLink` → one URL button labelled with the action.
    - :class:`WithFullLog` → one "Show full log" callback button, when the
      output was stored under ``log_id``.
    - :class:`Plain` → no buttons.

    Args:
        outcome: Classifier result being announced.
        log_id: Key of the stored captured output, if any.

    Returns:
        A list of rows, where each row is a list of button dicts with
        "text" plus either "url" or "callback_data". Empty when the outcome
        carries no action.
    """
    style = outcome.style
    if isinstance(style, WithActionLink):
        return [[{"text": style.label, "url": style.url}]]
    if isinstance(style, WithFullLog) and log_id is not None:
        return [[{"text": SHOW_LOG_TEXT, "callback_data": f"{LOG_CALLBACK_PREFIX}{log_id}"}]]
    return []


def to_inline_markup(rows: list[list[dict]]) -> InlineKeyboardMarkup | None:
    """Convert a button-dict layout into an InlineKeyboardMarkup.

    Returns:
        The markup, or None for an empty layout so the message is sent
        without a keyboard.
    """
    if not rows:
        return None
    return InlineKeyboardMarkup(
        [[InlineKeyboardButton(**button) for button in row] for row in rows]
    )


def parse_log_callback(data: str | None) -> str | None:
    """Return the log id from ``log:<id>`` callback data, or None."""
    if not data or not data.startswith(LOG_CALLBACK_PREFIX):
        return None
    return data[len(LOG_CALLBACK_PREFIX):] or None
