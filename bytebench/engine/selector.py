"""Entry selection by implementation name."""

from collections.abc import Iterable

from bytebench.engine.entry import AlgorithmEntry


def select(
    entries: Iterable[AlgorithmEntry], filter: str | None = None
) -> list[AlgorithmEntry]:
    """Keep entries whose implementation name contains ``filter``.

    Matching is a case-sensitive substring test. With no filter every entry
    is kept. Order is preserved.
    """
    if filter is None:
        return list(entries)
    return [entry for entry in entries if filter in entry.implementation_name]


def variant_names(entries: Iterable[AlgorithmEntry]) -> list[str]:
    """Return the distinct variant names, sorted."""
    return sorted({entry.variant_name for entry in entries})
