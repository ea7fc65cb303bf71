"""
pardis.core.notices
-------------------
One-time deprecation notices. Each picker engine reports through a
DeprecationNotices collaborator instead of a process-wide flag; engines that
are not given one share DEFAULT_NOTICES, which lives for the process.
"""

from __future__ import annotations

import logging
import warnings
from typing import List, Set

LOG = logging.getLogger(__name__)


class DeprecationNotices:
    def __init__(self) -> None:
        self._seen: Set[str] = set()
        self.issued: List[str] = []

    def notify(self, key: str, message: str) -> bool:
        """Log and warn the first time `key` is seen. Returns True if issued."""
        if key in self._seen:
            return False
        self._seen.add(key)
        self.issued.append(message)
        LOG.warning(message)
        warnings.warn(message, DeprecationWarning, stacklevel=3)
        return True

    def reset(self) -> None:
        self._seen.clear()
        self.issued.clear()


DEFAULT_NOTICES = DeprecationNotices()
