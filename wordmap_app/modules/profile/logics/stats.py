"""
Stats - Shape grouped count rows into the statistics payload.

Pure functions over ``(key, count)`` pairs; the service does the SQL.
"""

from typing import Any, Dict, Iterable, List, Tuple


def count_rows(rows: Iterable[Tuple[Any, int]], key_name: str) -> List[Dict[str, Any]]:
    """``[(key, n), ...]`` -> ``[{key_name: key, 'count': n}, ...]`` sorted by key, zero counts dropped."""
    items = [(key, int(count)) for key, count in rows if key is not None and count]
    items.sort(key=lambda item: item[0])
    return [{key_name: key, 'count': count} for key, count in items]


def build_stats(
    total_words: int,
    total_vaults: int,
    by_confidence: Iterable[Tuple[Any, int]],
    by_category: Iterable[Tuple[Any, int]],
    by_grammatical_class: Iterable[Tuple[Any, int]],
    total_connections: int,
) -> Dict[str, Any]:
    return {
        'total_words': int(total_words or 0),
        'total_vaults': int(total_vaults or 0),
        'words_by_confidence': count_rows(by_confidence, 'confidence'),
        'words_by_category': count_rows(by_category, 'category'),
        'words_by_grammatical_class': count_rows(by_grammatical_class, 'grammatical_class'),
        'total_connections': int(total_connections or 0),
    }
