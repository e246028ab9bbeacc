"""Normalization and ranking of favorite-menu records."""

import math
from collections.abc import Iterable, Mapping, Sequence

ORDER_COUNT_KEY = "orderCount"
# The backend has emitted the sales counter under both names.
COUNT_KEYS = ("count", ORDER_COUNT_KEY)


def read_first_present(
    record: Mapping[str, object], keys: Sequence[str], default: object = None
) -> object:
    """Return the value of the first key in ``keys`` that is set and not None."""
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return default


def as_count(value: object) -> int:
    """Coerce a loosely typed backend number to a non-negative int."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return max(int(value), 0)
    return 0


def normalize_favorite(record: object) -> dict[str, object]:
    """Return a copy of ``record`` carrying a canonical integer ``orderCount``."""
    if not isinstance(record, Mapping):
        return {ORDER_COUNT_KEY: 0}
    normalized = dict(record)
    normalized[ORDER_COUNT_KEY] = as_count(read_first_present(record, COUNT_KEYS, 0))
    return normalized


def normalize_favorites(records: Iterable[object]) -> list[dict[str, object]]:
    """Normalize every record of a favorite-menu payload."""
    return [normalize_favorite(record) for record in records]


def rank(records: Iterable[Mapping[str, object]]) -> list[Mapping[str, object]]:
    """Sort records by ``orderCount`` descending.

    The sort is stable: records with equal counts keep their input order, so
    ranking an already ranked list returns it unchanged.
    """
    return sorted(records, key=_order_count, reverse=True)


def top_n(
    records: Sequence[Mapping[str, object]], k: int
) -> list[Mapping[str, object]]:
    """Return the first ``k`` records, or fewer when the input is shorter."""
    if k <= 0:
        return []
    return list(records[:k])


def _order_count(record: Mapping[str, object]) -> int:
    return as_count(record.get(ORDER_COUNT_KEY))
