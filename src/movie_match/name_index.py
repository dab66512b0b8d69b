"""
Bidirectional name <-> vertex id mapping with prefix hinting.

Ids are dense and assigned in insertion order, so they double as graph
vertex numbers. A second, case-insensitively sorted copy of the names
supports approximate auto-complete via binary search.
"""

import logging
from bisect import bisect_left, bisect_right

logger = logging.getLogger(__name__)


class NameIndex:
    """
    Name index for a movie database.

    Usage:
        index = NameIndex()
        index.insert("Bacon, Kevin")   # (True, 0)
        index.retrieve("Bacon, Kevin")  # 0
        index.sort()
        index.hint("bacon")
    """

    def __init__(self, hint_length: int = 6, hint_pad: str = "zz", hint_margin: int = 2):
        self.hint_length = hint_length
        self.hint_pad = hint_pad
        self.hint_margin = hint_margin
        self._ids: dict[str, int] = {}
        self._names: list[str] = []
        self._capacity_hint = 0
        # Hint array: names in case-insensitive order plus their folded keys
        self._sorted: list[str] = []
        self._keys: list[str] = []

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: str) -> bool:
        return name in self._ids

    @property
    def names(self) -> list[str]:
        """Names in id order."""
        return self._names

    @property
    def sorted_names(self) -> list[str]:
        """Names in case-insensitive order, as of the last sort()."""
        return self._sorted

    def insert(self, name: str) -> tuple[bool, int]:
        """
        Insert ``name`` if absent.

        Returns:
            (inserted, id) - inserted is False when the name already existed
        """
        v = self._ids.get(name)
        if v is not None:
            return False, v
        v = len(self._names)
        self._ids[name] = v
        self._names.append(name)
        return True, v

    def retrieve(self, name: str) -> int | None:
        return self._ids.get(name)

    def name(self, v: int) -> str:
        return self._names[v]

    def reserve(self, n: int) -> None:
        """
        Capacity hint before a bulk load.

        Python dicts resize themselves with amortized growth, so the hint is
        only recorded for diagnostics.
        """
        self._capacity_hint = max(self._capacity_hint, n)
        logger.debug("name index capacity hint: %d", self._capacity_hint)

    def clear(self) -> None:
        self._ids.clear()
        self._names.clear()
        self._sorted.clear()
        self._keys.clear()
        self._capacity_hint = 0

    def sort(self) -> None:
        """Rebuild the hint array; call after every bulk load."""
        self._sorted = sorted(self._names, key=lambda s: (s.casefold(), s))
        self._keys = [s.casefold() for s in self._sorted]

    def hint_range(self, prefix: str) -> tuple[int, int]:
        """
        Half-open range of the hint array matching ``prefix``.

        The query is truncated to ``hint_length`` characters and folded.
        ``lo`` is the lower bound of the truncated prefix. ``hi`` is past
        every key starting with the prefix and past the prefix padded with
        ``hint_pad``. Both are then widened by ``hint_margin`` and clamped
        to the array.
        """
        key = prefix[: self.hint_length].casefold()
        n = len(key)
        lo = bisect_left(self._keys, key)
        # Truncated keys stay sorted; this bound covers every key with the prefix
        hi = max(
            bisect_right(self._keys, key, key=lambda k: k[:n]),
            bisect_right(self._keys, key + self.hint_pad),
        )
        lo = max(0, lo - self.hint_margin)
        hi = min(len(self._keys), hi + self.hint_margin)
        return lo, hi

    def hint(self, prefix: str, max_suggestions: int | None = None) -> list[str]:
        """Names near ``prefix`` in the hint array, at most ``max_suggestions``."""
        lo, hi = self.hint_range(prefix)
        suggestions = self._sorted[lo:hi]
        if max_suggestions is not None:
            suggestions = suggestions[:max_suggestions]
        return suggestions
