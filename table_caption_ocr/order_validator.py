from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Tuple

from . import config
from .types import TableRecord

log = logging.getLogger("table_caption_ocr")


def _dotted_key(identifier: str) -> Tuple[int, ...]:
    return tuple(int(part) for part in str(identifier).split(".") if part)


def _string_not_after(current: str, previous: str) -> bool:
    return current <= previous


def _dotted_not_after(current: str, previous: str) -> bool:
    return _dotted_key(current) <= _dotted_key(previous)


STRATEGIES: Dict[str, Callable[[str, str], bool]] = {
    "string": _string_not_after,
    "dotted": _dotted_not_after,
}


class OrderValidator:
    """
    Flag captions whose identifier does not exceed the one before it.

    "string" compares identifiers lexicographically, so "10" after "2" is flagged.
    "dotted" compares dot-separated integer segments ("1.9" < "1.10").
    Each violation reports the offending identifier followed by its predecessor.
    """

    def __init__(
        self,
        *,
        strategy: str = config.ORDER_STRATEGY,
        start: str = config.ORDER_START_IDENTIFIER,
    ) -> None:
        name = str(strategy or "").lower().strip()
        if name not in STRATEGIES:
            raise ValueError(f"Unknown comparison strategy: {strategy!r} (expected one of {sorted(STRATEGIES)})")
        self.strategy = name
        self.start = str(start)
        self._not_after = STRATEGIES[name]

    def find_misordered(self, records: Iterable[TableRecord]) -> List[str]:
        misordered: List[str] = []
        prev = self.start
        for rec in records:
            cur = rec.identifier
            if self._not_after(cur, prev):
                misordered.append(cur)
                misordered.append(prev)
            prev = cur
        if misordered:
            log.debug("Found %d numbering violation(s) (%s comparison)", len(misordered) // 2, self.strategy)
        return misordered


def find_misordered(records: Iterable[TableRecord], *, strategy: str = config.ORDER_STRATEGY) -> List[str]:
    return OrderValidator(strategy=strategy).find_misordered(records)
