"""
The name of an external repository.

A ``RepositoryName`` is an immutable, validated value. Instances are obtained
through ``RepositoryName.create`` (validating, deduplicated by the registry of
the active context) rather than the constructor.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Optional, Tuple, Union

from .utils.constants import (
    DEFAULT_REPOSITORY,
    EMPTY_PATH,
    EXTERNAL_PATH_PREFIX,
    MAIN_REPOSITORY,
    REPO_MARKER,
    RUNFILES_PATH_PREFIX,
    SIBLING_EXTERNAL_PATH_PREFIX,
)
from .utils.exceptions import LabelSyntaxError
from .utils.path_policy import get_path_policy


def _layout_prefix(sibling_layout: Optional[bool]) -> PurePosixPath:
    if sibling_layout is None:
        from .utils.config import get_config

        sibling_layout = get_config().is_sibling_layout()
    return SIBLING_EXTERNAL_PATH_PREFIX if sibling_layout else EXTERNAL_PATH_PREFIX


def _normalized_parts(path: Union[str, PurePosixPath]) -> Tuple[str, ...]:
    # Leading ".." of a relative path is kept; ".." at the root is dropped
    parts = []
    for part in PurePosixPath(path).parts:
        if part == "..":
            if parts and parts[-1] == "/":
                continue
            if parts and parts[-1] != "..":
                parts.pop()
                continue
        parts.append(part)
    return tuple(parts)


class RepositoryName:
    """
    The name of an external repository.

    ``name`` is ``""`` for the default repository, ``"@"`` for the main
    repository, and ``"@<stripped name>"`` otherwise.

    When ``owner_repo_if_not_visible`` is set, the instance stands for a
    requested repository that is not visible from that owner repository.
    Such an instance is a failed lookup result and fetching it should fail.
    """

    __slots__ = ("_name", "_owner_repo_if_not_visible", "__weakref__")

    def __init__(self, name: str, owner_repo_if_not_visible: Optional[str] = None):
        """Not validated; use ``RepositoryName.create``."""
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_owner_repo_if_not_visible", owner_repo_if_not_visible)

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @staticmethod
    def create(name: str, registry=None) -> "RepositoryName":
        """
        Validate ``name`` and return its canonical ``RepositoryName``.

        Args:
            name: Raw repository name, e.g. ``"@foo"``
            registry: Registry to use; defaults to the active context's

        Raises:
            LabelSyntaxError: If the name is not a valid repository name
        """
        if registry is None:
            from .context import get_registry

            registry = get_registry()
        return registry.create(name)

    @staticmethod
    def create_from_valid_stripped_name(name: str, registry=None) -> "RepositoryName":
        """
        Create a name from a known-valid string that has no leading ``@``.

        Generally this is a directory name produced by ``get_exec_path``.
        The string is not validated.
        """
        if registry is None:
            from .context import get_registry

            registry = get_registry()
        return registry.create_from_valid_stripped_name(name)

    @staticmethod
    def from_path(
        path: Union[str, PurePosixPath],
        sibling_layout: Optional[bool] = None,
        registry=None,
    ) -> Optional[Tuple["RepositoryName", PurePosixPath]]:
        """
        Extract the repository name from a path made by ``get_exec_path``.

        Args:
            path: Path starting with the layout's external prefix
            sibling_layout: Layout the path was produced with; defaults to
                the configured layout
            registry: Registry to use; defaults to the active context's

        Returns:
            The repository name and the rest of the path after it, or None
            if the path is too short, has the wrong prefix, or does not name
            a valid repository. The path is normalized first, so ``..``
            segments cancel the segment before them, and the prefix is compared
            under the active path policy.
        """
        parts = _normalized_parts(path)
        if len(parts) < 2:
            return None

        policy = get_path_policy()
        prefix = _layout_prefix(sibling_layout).parts
        if len(parts) < len(prefix) or not all(
            policy.equals(segment, expected) for segment, expected in zip(parts, prefix)
        ):
            return None

        try:
            repo_name = RepositoryName.create(REPO_MARKER + parts[1], registry)
        except LabelSyntaxError:
            return None
        return repo_name, PurePosixPath(*parts[2:])

    @staticmethod
    def strip_name(name: str) -> str:
        """Return ``name`` without a leading ``@``, if it has one."""
        return name[len(REPO_MARKER):] if name.startswith(REPO_MARKER) else name

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_name(self) -> str:
        """Return the name with its leading ``@`` (``""`` for the default repository)."""
        return self._name

    @property
    def name(self) -> str:
        return self._name

    def stripped_name(self) -> str:
        """Return the name without the leading ``@``; ``""`` for the default repository."""
        if not self._name:
            return self._name
        return self._name[len(REPO_MARKER):]

    def is_default(self) -> bool:
        return self._name == DEFAULT_REPOSITORY

    def is_main(self) -> bool:
        return self._name == MAIN_REPOSITORY

    def get_canonical_form(self) -> str:
        """Return the name, with the main repository conflated with the default one."""
        return DEFAULT_REPOSITORY if self.is_main() else self._name

    # -------------------------------------------------------------------------
    # Visibility
    # -------------------------------------------------------------------------

    def to_non_visible(self, owner_repo: str) -> "RepositoryName":
        """
        Mark this name as not visible from ``owner_repo``.

        Returns a new instance with the same name; the registry is not
        consulted and this instance is left unchanged.

        Raises:
            ValueError: If ``owner_repo`` is None
        """
        if owner_repo is None:
            raise ValueError("owner_repo must not be None")
        return RepositoryName(self._name, owner_repo)

    def is_visible(self) -> bool:
        return self._owner_repo_if_not_visible is None

    def get_owner_repo_if_not_visible(self) -> Optional[str]:
        return self._owner_repo_if_not_visible

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def get_exec_path(self, sibling_layout: Optional[bool] = None) -> PurePosixPath:
        """
        Return the source root of this repository relative to the exec root.

        The default and main repositories map to the empty path. Otherwise
        the legacy layout gives ``external/<name>`` and the sibling layout
        gives ``../<name>``, a sibling of the main repository.
        """
        if self.is_default() or self.is_main():
            return EMPTY_PATH
        return _layout_prefix(sibling_layout) / self.stripped_name()

    def get_runfiles_path(self) -> PurePosixPath:
        """Return the runfiles path relative to the main repository's runfiles directory."""
        if self.is_default() or self.is_main():
            return EMPTY_PATH
        return RUNFILES_PATH_PREFIX / self.stripped_name()

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, RepositoryName):
            return NotImplemented
        policy = get_path_policy()
        return policy.equals(self._name, other._name) and policy.equals(
            self._owner_repo_if_not_visible, other._owner_repo_if_not_visible
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        policy = get_path_policy()
        return hash((policy.hash(self._name), policy.hash(self._owner_repo_if_not_visible)))

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        if self._owner_repo_if_not_visible is None:
            return f"RepositoryName({self._name!r})"
        return (
            f"RepositoryName({self._name!r}, "
            f"owner_repo_if_not_visible={self._owner_repo_if_not_visible!r})"
        )

    def __reduce__(self):
        return (_restore, (self._name, self._owner_repo_if_not_visible))


def _restore(name: str, owner_repo_if_not_visible: Optional[str] = None) -> RepositoryName:
    # Unpickling goes through the registry so constants come back as singletons
    repo_name = RepositoryName.create(name)
    if owner_repo_if_not_visible is not None:
        return repo_name.to_non_visible(owner_repo_if_not_visible)
    return repo_name


DEFAULT = RepositoryName(DEFAULT_REPOSITORY)
MAIN = RepositoryName(MAIN_REPOSITORY)
BAZEL_TOOLS = RepositoryName("@bazel_tools")
LOCAL_CONFIG_PLATFORM = RepositoryName("@local_config_platform")

# Pre-registered in every registry
WELL_KNOWN_NAMES = (BAZEL_TOOLS, LOCAL_CONFIG_PLATFORM)
