"""Telegram presentation of remote outcomes: formatter → keyboards → notifier."""
