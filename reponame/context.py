"""
Context management for reponame.

The registry of canonical names is a process-wide service, but it is owned
by a context object rather than a bare module global so that it can be
swapped out and isolated, for example per test or per build evaluation.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .registry import RepositoryNameRegistry
from .utils.logging import get_logger
from .utils.path_policy import PathPolicy, get_path_policy, set_path_policy

logger = get_logger(__name__)


@dataclass
class RepositoryContext:
    """
    Holds the registry and path policy used to create and compare names.

    Args:
        registry: Canonical name registry; a fresh one by default
        path_policy: Policy activated with this context; None keeps the
            currently active policy
    """

    registry: RepositoryNameRegistry = field(default_factory=RepositoryNameRegistry)
    path_policy: Optional[PathPolicy] = None

    def activate(self) -> None:
        """Apply this context's path policy, if it has one."""
        if self.path_policy is not None:
            set_path_policy(self.path_policy)


# Global context instance
_global_context: Optional[RepositoryContext] = None
_context_lock = threading.Lock()


def get_global_context() -> RepositoryContext:
    """Get or create the global context instance."""
    global _global_context
    context = _global_context
    if context is not None:
        return context
    with _context_lock:
        if _global_context is None:
            _global_context = RepositoryContext()
            logger.debug("Initialized global repository context")
        return _global_context


def set_global_context(context: Optional[RepositoryContext]) -> None:
    """Install ``context`` as the global context. None recreates it lazily."""
    global _global_context
    with _context_lock:
        _global_context = context
    if context is not None:
        context.activate()


def get_registry() -> RepositoryNameRegistry:
    """Get the registry of the global context."""
    return get_global_context().registry


@contextmanager
def repository_context(context: Optional[RepositoryContext] = None) -> Iterator[RepositoryContext]:
    """
    Temporarily install a context, restoring the previous one on exit.

    Args:
        context: Context to install; a fresh, isolated one by default

    Yields:
        The installed context
    """
    global _global_context
    if context is None:
        context = RepositoryContext()

    with _context_lock:
        previous = _global_context
        _global_context = context
    previous_policy = get_path_policy()
    context.activate()
    try:
        yield context
    finally:
        with _context_lock:
            _global_context = previous
        set_path_policy(previous_policy)
