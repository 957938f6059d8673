"""
Conditional distributions over quantized symbols.

One table per model position: previous symbol -> {symbol: probability}.
Symbols are strings; the start-of-contour condition is the empty string.
"""

from typing import Dict, Iterator, Mapping, Optional

START_SYMBOL = ""


class ConditionalDistribution:
    """
    Read-only lookup table P(symbol | previous).

    Example:
        dist = ConditionalDistribution.from_dict({"": {0: 0.5, 1: 0.5}})
        dist.lookup("", "0")   # 0.5
        dist.lookup("", "2")   # None
    """

    def __init__(self, table: Optional[Mapping[str, Mapping[str, float]]] = None):
        self._table: Dict[str, Dict[str, float]] = {}

        for previous, row in (table or {}).items():
            for symbol, p in row.items():
                if not 0 < p <= 1:
                    raise ValueError(
                        f"Probability of {symbol!r} after {previous!r} must be in (0, 1], got {p}"
                    )
            self._table[previous] = dict(row)

    @classmethod
    def from_dict(cls, mapping: Mapping) -> 'ConditionalDistribution':
        """Create from a mapping, converting symbol keys to strings."""
        return cls({
            str(previous): {str(symbol): float(p) for symbol, p in row.items()}
            for previous, row in mapping.items()
        })

    def lookup(self, previous: str, symbol: str) -> Optional[float]:
        """Probability of `symbol` after `previous`, or None if unseen."""
        row = self._table.get(previous)
        if row is None:
            return None
        return row.get(symbol)

    def conditions(self) -> Iterator[str]:
        return iter(self._table)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {previous: dict(row) for previous, row in self._table.items()}

    def __contains__(self, previous: str) -> bool:
        return previous in self._table

    def __len__(self) -> int:
        return len(self._table)
