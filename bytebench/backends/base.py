"""Base class for algorithm backends.

A backend wraps one supplier library (a standard-library module or an
optional third-party package) and builds the entries it can provide.

- every backend exposes the same interface
- unavailable backends are omitted by the registry, never surfaced as errors
"""

import platform
from abc import ABC, abstractmethod
from types import ModuleType

from bytebench.engine.entry import AlgorithmEntry, EntryKind
from bytebench.engine.errors import CapabilityUnavailable


class Backend(ABC):
    """Abstract base class for codec and hash backends.

    Subclasses implement build_entries(), importing their library through
    require() so that a missing or unsupported library raises
    CapabilityUnavailable instead of ImportError.
    """

    #: Machines (``platform.machine()``, lower-cased) the backend supports.
    #: Empty means every machine.
    SUPPORTED_MACHINES: tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the implementation name shared by this backend's entries."""
        pass

    @property
    @abstractmethod
    def kind(self) -> EntryKind:
        """Return whether this backend provides codecs or hashes."""
        pass

    @property
    def requirement(self) -> str | None:
        """Return the distribution to install for this backend, if any."""
        return None

    @abstractmethod
    def build_entries(self) -> list[AlgorithmEntry]:
        """Build every entry this backend provides.

        Returns:
            Entries in a fixed declaration order.

        Raises:
            CapabilityUnavailable: If the library is missing or unsupported.
        """
        pass

    def is_available(self) -> bool:
        """Check if this backend can build entries on the current system."""
        try:
            self.check_platform()
        except CapabilityUnavailable:
            return False
        return all(self._safe_import(m) is not None for m in self.modules())

    def modules(self) -> tuple[str, ...]:
        """Return the modules this backend imports."""
        return ()

    def check_platform(self) -> None:
        """Raise CapabilityUnavailable on unsupported machines."""
        if not self.SUPPORTED_MACHINES:
            return
        machine = platform.machine().lower()
        if machine not in self.SUPPORTED_MACHINES:
            raise CapabilityUnavailable(
                self.name, f"unsupported architecture '{machine}'"
            )

    def require(self, module_name: str) -> ModuleType:
        """Import a module needed by this backend.

        Raises:
            CapabilityUnavailable: If the platform is unsupported or the
                module cannot be imported.
        """
        self.check_platform()
        module = self._safe_import(module_name)
        if module is None:
            hint = f" (pip install {self.requirement})" if self.requirement else ""
            raise CapabilityUnavailable(
                self.name, f"module '{module_name}' not importable{hint}"
            )
        return module

    @staticmethod
    def _safe_import(module_name: str) -> ModuleType | None:
        """Import a module by dotted name without raising.

        Returns:
            The imported module if successful, None otherwise.
        """
        import importlib

        try:
            return importlib.import_module(module_name)
        except ImportError:
            return None
