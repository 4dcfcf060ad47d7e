"""Access Log Analyzer - Ranking"""

from typing import Mapping

from .models import RankedTable


def top_n(counts: Mapping[str, int], limit: int) -> RankedTable:
    """Return the `limit` most frequent keys of `counts` as (key, count)
    pairs in descending order of count.

    Ties keep the mapping's iteration order, but callers should not rely
    on it.
    """
    if limit <= 0:
        return []
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]
