"""
Canonical repository name registry.

This module provides a deduplicating cache that maps raw repository name
strings to a single shared ``RepositoryName``. Values are held weakly: an
entry lives only while something else references the name, so the registry
saves memory without ever growing unboundedly.
"""

import sys
import threading
import weakref
from typing import Any, Dict, Optional

from .repository_name import DEFAULT, MAIN, WELL_KNOWN_NAMES, RepositoryName
from .utils.constants import DEFAULT_REPOSITORY, MAIN_REPOSITORY, REPO_MARKER
from .utils.exceptions import LabelSyntaxError
from .utils.logging import get_logger
from .validation import validate

logger = get_logger(__name__)


class RepositoryNameRegistry:
    """
    Deduplicates ``RepositoryName`` instances by raw string.

    Lookups of cached names do not take the lock. First insertions are
    double-checked under it, so concurrent requests for the same unseen
    name materialize a single instance. The registry is a memoization
    layer only: ``RepositoryName`` equality is value based and does not
    depend on sharing.
    """

    def __init__(self, intern_names: Optional[bool] = None):
        """
        Initialize the registry.

        Args:
            intern_names: Intern raw strings with ``sys.intern``. Defaults
                to the ``registry.intern_names`` configuration setting.
        """
        if intern_names is None:
            from .utils.config import get_config

            intern_names = get_config().registry.intern_names

        self.intern_names = intern_names
        self._entries: "weakref.WeakValueDictionary[str, RepositoryName]" = (
            weakref.WeakValueDictionary()
        )
        # Guards insertion into _entries
        self._lock = threading.Lock()
        # Guards _stats only; never held while acquiring _lock
        self._stats_lock = threading.Lock()
        self._stats: Dict[str, int] = {"hits": 0, "misses": 0, "rejections": 0}
        self._register_well_known_names()

    def _register_well_known_names(self) -> None:
        for repo_name in WELL_KNOWN_NAMES:
            self._entries[repo_name.get_name()] = repo_name

    def _count(self, stat: str) -> None:
        with self._stats_lock:
            self._stats[stat] += 1

    def create(self, name: str) -> RepositoryName:
        """
        Validate ``name`` and return its canonical ``RepositoryName``.

        The default and main repositories bypass the cache and always
        return the shared ``DEFAULT`` and ``MAIN`` instances.

        Args:
            name: Raw repository name, e.g. ``"@foo"``

        Returns:
            The canonical instance for ``name``

        Raises:
            LabelSyntaxError: If the name is invalid; nothing is cached
        """
        if name == DEFAULT_REPOSITORY:
            return DEFAULT
        if name == MAIN_REPOSITORY:
            return MAIN
        return self._get_or_insert(name, validate_name=True)

    def create_from_valid_stripped_name(self, name: str) -> RepositoryName:
        """
        Return the canonical instance for ``@<name>`` without validating.

        The caller guarantees ``name`` is a valid stripped repository name,
        typically because it was produced by ``get_exec_path``.
        """
        return self._get_or_insert(REPO_MARKER + name, validate_name=False)

    def _get_or_insert(self, name: str, validate_name: bool) -> RepositoryName:
        repo_name = self._entries.get(name)
        if repo_name is None:
            with self._lock:
                repo_name = self._entries.get(name)
                if repo_name is None:
                    if validate_name:
                        error = validate(name)
                        if error is not None:
                            self._count("rejections")
                            raise LabelSyntaxError(name, error)
                    self._count("misses")
                    return self._insert(name)
        self._count("hits")
        return repo_name

    def _insert(self, name: str) -> RepositoryName:
        # Caller holds the lock
        if self.intern_names:
            name = sys.intern(name)
        repo_name = RepositoryName(name)
        self._entries[name] = repo_name
        logger.debug(f"Registered repository name '{name}'")
        return repo_name

    def __contains__(self, name: str) -> bool:
        if name in (DEFAULT_REPOSITORY, MAIN_REPOSITORY):
            return True
        return self._entries.get(name) is not None

    def __len__(self) -> int:
        """Number of live cached entries, sentinels excluded."""
        return len(self._entries)

    def clear(self) -> None:
        """Drop every cached entry and re-register the well-known names."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._register_well_known_names()
        logger.info(f"Cleared repository name registry ({count} entries)")

    def get_stats(self) -> Dict[str, Any]:
        """
        Get registry statistics.

        Returns:
            Dictionary with hit, miss and rejection counts and the number
            of live entries
        """
        with self._stats_lock:
            stats: Dict[str, Any] = dict(self._stats)
        stats["size"] = len(self._entries)
        lookups = stats["hits"] + stats["misses"]
        stats["hit_rate"] = stats["hits"] / lookups if lookups else 0.0
        return stats

    def reset_stats(self) -> None:
        """Reset hit, miss and rejection counters."""
        with self._stats_lock:
            for key in self._stats:
                self._stats[key] = 0
