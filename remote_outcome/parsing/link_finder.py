"""Provider-agnostic URL recognition for free-form remote messages.

Wraps :class:`linkify_it.LinkifyIt` (a port of the linkify-it JavaScript
library) configured to recognise only web links that carry an explicit scheme
(``https://``, ``http://``, ``ftp://``).  Schema-less domains such as
``github.com`` are ignored so a provider's brand name in prose never turns
into a link. ``mailto:`` addresses and schema-relative ``//host`` spans are
not actionable as a button URL and are ignored too.
"""

from __future__ import annotations

import threading

from linkify_it import LinkifyIt

# Disabled schemas map to None
_LINKIFY_SCHEMAS = {
    "mailto:": None,
    "//": None,
}

_LINKIFY_OPTIONS = {
    "fuzzy_link": False,
    "fuzzy_email": False,
    "fuzzy_ip": False,
}

# LinkifyIt keeps scan state on the instance, so one per thread
_local = threading.local()


def _linkify() -> LinkifyIt:
    linkify = getattr(_local, "linkify", None)
    if linkify is None:
        linkify = LinkifyIt(schemas=_LINKIFY_SCHEMAS, options=_LINKIFY_OPTIONS)
        _local.linkify = linkify
    return linkify


def find_urls(text: str) -> list[str]:
    """Return every recognised URL in ``text``, in document order.

    Each entry is the exact substring of the input covered by the match, not
    the recogniser's normalised form.

    Args:
        text: Arbitrary text, e.g. the stderr of ``git push``.

    Returns:
        List of URL substrings, empty when none are found.
    """
    if not text:
        return []
    matches = _linkify().match(text) or []
    return [text[m.index:m.last_index] for m in matches]


def find_first_url(text: str) -> str | None:
    """Return the earliest URL in ``text``, or None."""
    urls = find_urls(text)
    return urls[0] if urls else None
