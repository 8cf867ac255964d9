"""Tracking of section directories that already have an index file."""

import os
from pathlib import Path
from typing import List, Tuple, Union


class SectionTracker:
    """
    Remembers which output directories received a section index.

    One tracker belongs to one conversion run. Entries are never evicted, so
    every directory gets its index exactly once, on the first post under it.
    """

    def __init__(self):
        self._seen = set()
        self._order: List[str] = []

    def ensure(self, directory: Union[str, Path]) -> bool:
        """
        Register a directory.

        Returns:
            True if the directory is new and its index must be written now,
            False if it was already registered
        """
        key = self._canonical(directory)
        if key in self._seen:
            return False
        self._seen.add(key)
        self._order.append(key)
        return True

    @property
    def sections(self) -> Tuple[str, ...]:
        """Registered directories in first-seen order."""
        return tuple(self._order)

    def __contains__(self, directory) -> bool:
        return self._canonical(directory) in self._seen

    def __len__(self) -> int:
        return len(self._order)

    @staticmethod
    def _canonical(directory: Union[str, Path]) -> str:
        return os.path.normpath(str(directory))


__all__ = ['SectionTracker']
