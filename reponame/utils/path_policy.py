"""
Path equality policies.

Repository names double as directory names, so they compare the way the
host filesystem compares paths: case-sensitively on POSIX systems and
case-insensitively on Windows.
"""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from typing import Optional

from .constants import CaseSensitivity
from .logging import get_logger

logger = get_logger(__name__)


class PathPolicy(ABC):
    """Equality and hashing of path-like strings."""

    name = "abstract"

    @abstractmethod
    def normalize(self, value: str) -> str:
        """Return the form of ``value`` that equality and hashing use."""
        pass

    def equals(self, first: Optional[str], second: Optional[str]) -> bool:
        """Compare two optional strings; None only equals None."""
        if first is None or second is None:
            return first is second
        return self.normalize(first) == self.normalize(second)

    def hash(self, value: Optional[str]) -> int:
        """Hash consistent with ``equals``."""
        if value is None:
            return 0
        return hash(self.normalize(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CaseSensitivePathPolicy(PathPolicy):
    """Exact string comparison."""

    name = CaseSensitivity.SENSITIVE.value

    def normalize(self, value: str) -> str:
        return value


class CaseInsensitivePathPolicy(PathPolicy):
    """Comparison ignoring case."""

    name = CaseSensitivity.INSENSITIVE.value

    def normalize(self, value: str) -> str:
        return value.casefold()


CASE_SENSITIVE = CaseSensitivePathPolicy()
CASE_INSENSITIVE = CaseInsensitivePathPolicy()


def policy_for_platform(platform: Optional[str] = None) -> PathPolicy:
    """Return the policy matching how ``platform`` compares file paths."""
    platform = sys.platform if platform is None else platform
    if platform.startswith("win") or platform == "cygwin":
        return CASE_INSENSITIVE
    return CASE_SENSITIVE


def policy_for(case_sensitivity: str) -> PathPolicy:
    """
    Resolve a configured case sensitivity to a policy.

    Args:
        case_sensitivity: One of ``auto``, ``sensitive`` or ``insensitive``

    Returns:
        The matching policy

    Raises:
        ValueError: If the value is not recognised
    """
    mode = CaseSensitivity(case_sensitivity)
    if mode is CaseSensitivity.SENSITIVE:
        return CASE_SENSITIVE
    if mode is CaseSensitivity.INSENSITIVE:
        return CASE_INSENSITIVE
    return policy_for_platform()


# Active policy, resolved from configuration on first use
_active_policy: Optional[PathPolicy] = None
_policy_lock = threading.Lock()


def get_path_policy() -> PathPolicy:
    """Get the active path policy."""
    global _active_policy
    policy = _active_policy
    if policy is not None:
        return policy
    with _policy_lock:
        if _active_policy is None:
            from .config import get_config

            _active_policy = policy_for(get_config().paths.case_sensitivity)
            logger.debug(f"Using {_active_policy!r} for repository name comparison")
        return _active_policy


def set_path_policy(policy: Optional[PathPolicy]) -> None:
    """Set the active path policy. None re-resolves from configuration."""
    global _active_policy
    with _policy_lock:
        _active_policy = policy
