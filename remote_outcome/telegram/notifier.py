"""Deliver classified remote outcomes to a Telegram chat.

One message per outcome:

- ``Plain`` → summary only
- ``WithFullLog`` → summary plus a "Show full log" button; pressing it posts
  the rendered captured output as a reply
- ``WithActionLink`` → summary plus a URL button that Telegram's client opens
  directly
"""

from __future__ import annotations

import logging

from telegram import Bot, Message, Update
from telegram.constants import ParseMode
from telegram.ext import CallbackQueryHandler, ContextTypes

from remote_outcome.config import PresentationConfig
from remote_outcome.parsing.models import CapturedOutput, DisplayOutcome, WithFullLog
from remote_outcome.telegram.formatter import format_full_log_html, format_outcome_html
from remote_outcome.telegram.keyboards import (
    build_outcome_keyboard,
    parse_log_callback,
    to_inline_markup,
)
from remote_outcome.telegram.log_store import LogStore

logger = logging.getLogger(__name__)

EXPIRED_LOG_TEXT = "This log is no longer available"


class OutcomeNotifier:
    """Sends outcome messages and serves their "Show full log" callbacks."""

    def __init__(
        self,
        bot: Bot,
        store: LogStore | None = None,
        presentation: PresentationConfig | None = None,
    ):
        self.bot = bot
        self.presentation = presentation or PresentationConfig()
        # An empty LogStore is falsy
        if store is None:
            store = LogStore(self.presentation.log_store_size)
        self.store = store

    async def send_outcome(
        self, chat_id: int, outcome: DisplayOutcome, attach_log: bool = False,
    ) -> Message:
        """Send ``outcome`` to ``chat_id`` with its inline keyboard.

        Telegram API errors propagate to the caller.

        Args:
            chat_id: Destination chat.
            outcome: Classifier result to announce.
            attach_log: For ``WithFullLog`` outcomes, post the log right away
                as a reply instead of behind a button. Used when no
                long-running application is around to answer callbacks.

        Returns:
            The sent summary message.
        """
        style = outcome.style
        log_id = None
        if isinstance(style, WithFullLog) and not attach_log:
            log_id = self.store.put(style.output)

        markup = to_inline_markup(build_outcome_keyboard(outcome, log_id))
        logger.debug(
            "send_outcome chat_id=%d style=%s log_id=%s",
            chat_id,
            type(style).__name__,
            log_id,
        )
        message = await self.bot.send_message(
            chat_id=chat_id,
            text=format_outcome_html(outcome),
            parse_mode=ParseMode.HTML,
            reply_markup=markup,
        )

        if isinstance(style, WithFullLog) and attach_log:
            await message.reply_text(self._log_html(style.output), parse_mode=ParseMode.HTML)
        return message

    async def handle_callback_query(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE,
    ) -> None:
        """Answer a ``log:<id>`` callback by replying with the full log.

        Args:
            update: Incoming Telegram update containing the callback query.
            context: Bot context (unused).
        """
        query = update.callback_query
        log_id = parse_log_callback(query.data)
        if log_id is None:
            return

        output = self.store.get(log_id)
        if output is None:
            logger.debug("Log %s requested after eviction", log_id)
            await query.answer(EXPIRED_LOG_TEXT)
            return

        await query.answer()
        await query.message.reply_text(self._log_html(output), parse_mode=ParseMode.HTML)

    def _log_html(self, output: CapturedOutput) -> str:
        return format_full_log_html(
            output,
            max_chars=self.presentation.max_log_chars,
            cols=self.presentation.terminal_cols,
        )

    def callback_handler(self) -> CallbackQueryHandler:
        """Handler to register on an ``Application`` for log buttons."""
        return CallbackQueryHandler(self.handle_callback_query, pattern=r"^log:")
