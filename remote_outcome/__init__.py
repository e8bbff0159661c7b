"""Classify git remote command output into user-facing notifications."""

__version__ = "0.1.0"
