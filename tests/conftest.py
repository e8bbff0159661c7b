from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_bot():
    """Create a mock Telegram Bot whose send_message returns a mock Message."""
    bot = MagicMock()
    message = MagicMock()
    message.reply_text = AsyncMock()
    bot.send_message = AsyncMock(return_value=message)
    return bot


@pytest.fixture
def git_output_files(tmp_path):
    """Write sample captured push output to files and return their paths."""
    stdout_file = tmp_path / "stdout.txt"
    stdout_file.write_text("")
    stderr_file = tmp_path / "stderr.txt"
    stderr_file.write_text(
        "remote: \n"
        "remote: Create a pull request for 'feature' on GitHub by visiting:\n"
        "remote:      https://github.com/user/repo/pull/new/feature\n"
        "remote: \n"
    )
    return stdout_file, stderr_file
