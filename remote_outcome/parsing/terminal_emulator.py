from __future__ import annotations

import pyte

from remote_outcome.parsing.models import CapturedOutput

DEFAULT_COLS = 160


def render_log(text: str, cols: int = DEFAULT_COLS) -> str:
    """Render captured command output the way a terminal would show it.

    Git redraws progress counters with ``\\r`` and remote lines often end in
    ``ESC[K``. Rather than regex-stripping these, the text is fed into a pyte
    virtual screen and the resulting display is read back, so every progress
    line collapses to its final state.

    Args:
        text: Raw captured text. Line feeds are translated to CR+LF first, as
            a tty would.
        cols: Screen width. Longer lines wrap.

    Returns:
        The visible lines joined by ``\\n``, right-stripped, with trailing
        blank lines removed. Empty input gives an empty string.
    """
    if not text:
        return ""

    # Tall enough that nothing scrolls off, allowing for wrapped lines
    rows = sum(len(line) // cols + 1 for line in text.split("\n"))
    screen = pyte.Screen(cols, rows)
    stream = pyte.Stream(screen)
    stream.feed(text.replace("\r\n", "\n").replace("\n", "\r\n"))

    lines = [line.rstrip() for line in screen.display]
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines)


def render_output(output: CapturedOutput, cols: int = DEFAULT_COLS) -> str:
    """Render both captured streams, stdout first, separated by a blank line."""
    parts = [
        rendered
        for rendered in (render_log(output.stdout, cols), render_log(output.stderr, cols))
        if rendered
    ]
    return "\n\n".join(parts)
