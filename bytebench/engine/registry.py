"""Entry registry: the ordered collection of benchmarkable entries.

Usage:
    from bytebench.engine.registry import EntryRegistry

    registry = EntryRegistry()

    # Everything available in this environment
    entries = registry.get_all_entries()

    # Only codecs or only hashes
    codecs = registry.get_codec_entries()
    hashes = registry.get_hash_entries()

    # Distinct variant names for list mode
    names = registry.variant_names(EntryKind.HASH)
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from bytebench.engine.entry import AlgorithmEntry, EntryKind
from bytebench.engine.errors import CapabilityUnavailable
from bytebench.engine.selector import variant_names
from bytebench.utils.logger import Logger

if TYPE_CHECKING:
    from bytebench.backends.base import Backend


class EntryRegistry:
    """Builds and queries the entries of a set of backends.

    Backends that cannot be imported or that do not support this machine are
    omitted silently (logged at DEBUG). Entries are built once; every query
    returns a fresh list so callers cannot mutate the registry.

    Example:
        >>> registry = EntryRegistry()
        >>> for entry in registry.get_codec_entries():
        ...     print(entry.label)
    """

    def __init__(
        self,
        backends: Sequence["Backend"] | None = None,
        lazy: bool = True,
    ) -> None:
        """Initialize the registry.

        Args:
            backends: Backends in registration order; defaults to the
                built-in codec backends followed by the hash backends.
            lazy: If True, defer building entries until first access.
        """
        # Deferred: backend modules import the engine package.
        from bytebench.backends import default_backends

        self._backends: "list[Backend]" = (
            list(backends) if backends is not None else default_backends()
        )
        self._entries: tuple[AlgorithmEntry, ...] = ()
        self._omitted: dict[str, str] = {}
        self._built: bool = False

        if not lazy:
            self._ensure_built()

    @property
    def logger(self) -> logging.Logger:
        """Get the logger for the registry."""
        return Logger.get("engine.registry")

    def _ensure_built(self) -> None:
        """Ensure entries have been built."""
        if not self._built:
            self._entries = tuple(self.build())
            self._built = True

    def build(self) -> list[AlgorithmEntry]:
        """Build entries from every available backend, in order."""
        entries: list[AlgorithmEntry] = []
        self._omitted.clear()
        for backend in self._backends:
            try:
                built = backend.build_entries()
            except CapabilityUnavailable as e:
                self._omitted[self._key(backend)] = e.reason
                self.logger.debug(f"Omitting backend {backend.name}: {e.reason}")
                continue
            self.logger.debug(f"Backend {backend.name}: {len(built)} entries")
            entries.extend(built)
        return entries

    @staticmethod
    def _key(backend: "Backend") -> str:
        return f"{backend.kind.value}:{backend.name}"

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def get_all_entries(self) -> list[AlgorithmEntry]:
        """Get every entry, codecs first, in registration order."""
        self._ensure_built()
        return list(self._entries)

    def get_entries(self, kind: EntryKind) -> list[AlgorithmEntry]:
        """Get the entries of one kind, in registration order."""
        self._ensure_built()
        return [e for e in self._entries if e.kind == kind]

    def get_codec_entries(self) -> list[AlgorithmEntry]:
        """Get codec entries."""
        return self.get_entries(EntryKind.CODEC)

    def get_hash_entries(self) -> list[AlgorithmEntry]:
        """Get hash entries."""
        return self.get_entries(EntryKind.HASH)

    def variant_names(self, kind: EntryKind | None = None) -> list[str]:
        """Get distinct variant names, sorted.

        Args:
            kind: Restrict to codecs or hashes; None covers both.
        """
        entries = self.get_all_entries() if kind is None else self.get_entries(kind)
        return variant_names(entries)

    def list_backends(self) -> list[dict[str, str | int | bool | None]]:
        """Get a summary of every backend.

        Returns:
            List of dicts with name, kind, available, entries, requirement
            and reason (why an unavailable backend was omitted).
        """
        self._ensure_built()
        counts: dict[str, int] = {}
        for entry in self._entries:
            key = f"{entry.kind.value}:{entry.implementation_name}"
            counts[key] = counts.get(key, 0) + 1

        summaries: list[dict[str, str | int | bool | None]] = []
        for backend in self._backends:
            key = self._key(backend)
            summaries.append(
                {
                    "name": backend.name,
                    "kind": backend.kind.value,
                    "available": key not in self._omitted,
                    "entries": counts.get(key, 0),
                    "requirement": backend.requirement,
                    "reason": self._omitted.get(key),
                }
            )
        return summaries

    def __len__(self) -> int:
        """Return number of registered entries."""
        self._ensure_built()
        return len(self._entries)
