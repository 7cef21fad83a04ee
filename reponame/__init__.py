"""
reponame: canonical repository names for a build label graph.

Validated, deduplicated identifiers for the external repositories a build
depends on, with visibility tagging and exec-root/runfiles path derivation.

Usage:
    from reponame import RepositoryName

    repo = RepositoryName.create("@rules_cc")
    repo.get_exec_path(sibling_layout=False)   # external/rules_cc
    RepositoryName.from_path("external/rules_cc/cc/defs.bzl", False)
"""

__version__ = "0.1.0"
__author__ = "reponame Team"
__email__ = "reponame@example.com"

# Public API exports
from .repository_name import (
    BAZEL_TOOLS,
    DEFAULT,
    LOCAL_CONFIG_PLATFORM,
    MAIN,
    RepositoryName,
)
from .registry import RepositoryNameRegistry
from .context import (
    RepositoryContext,
    get_global_context,
    get_registry,
    repository_context,
    set_global_context,
)
from .validation import classify, is_valid, validate
from .utils.exceptions import LabelSyntaxError, ReponameError

__all__ = [
    "RepositoryName",
    "DEFAULT",
    "MAIN",
    "BAZEL_TOOLS",
    "LOCAL_CONFIG_PLATFORM",
    "RepositoryNameRegistry",
    "RepositoryContext",
    "get_global_context",
    "set_global_context",
    "get_registry",
    "repository_context",
    "validate",
    "classify",
    "is_valid",
    "ReponameError",
    "LabelSyntaxError",
]
