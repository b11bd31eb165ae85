from __future__ import annotations

import threading
from contextlib import AbstractContextManager, nullcontext
from enum import Enum


class LockMode(Enum):
    """Select locking behavior around the override tables.

    Use these values for the ``lock_mode`` argument of ``ObjectFactory``. The
    lock only covers table reads and writes; custom factories and constructors
    always run outside of it.
    """

    THREAD = "thread"
    """Guard override tables with ``threading.Lock``."""

    NONE = "none"
    """Disable locking for single-threaded use."""

    def create_guard(self) -> AbstractContextManager[object]:
        """Return a fresh guard object implementing this mode."""
        if self is LockMode.THREAD:
            return threading.Lock()
        return nullcontext()
