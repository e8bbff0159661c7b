from __future__ import annotations

import logging
import uuid
from collections import OrderedDict

from remote_outcome.parsing.models import CapturedOutput

logger = logging.getLogger(__name__)


class LogStore:
    """Bounded in-memory store of captured outputs behind "Show full log" buttons.

    Callback data is limited to 64 bytes, so the output itself cannot ride on
    the button; it is kept here under a short random id instead. When the
    store is full the oldest entry is evicted and its button stops working.
    """

    def __init__(self, capacity: int = 100):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._entries: OrderedDict[str, CapturedOutput] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def put(self, output: CapturedOutput) -> str:
        """Store ``output`` and return its id."""
        log_id = uuid.uuid4().hex[:12]
        self._entries[log_id] = output
        while len(self._entries) > self.capacity:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted stored log %s", evicted)
        return log_id

    def get(self, log_id: str) -> CapturedOutput | None:
        """Return the stored output, or None if unknown or evicted."""
        return self._entries.get(log_id)
