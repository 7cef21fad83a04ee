"""
Constants and Enumerations for the reponame package.

This module consolidates the constant definitions used for repository name
syntax, path layouts and configuration defaults, providing a single source
of truth for values shared across the package.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import PurePosixPath


# =============================================================================
# Repository Name Syntax
# =============================================================================

# Leading character of every non-default repository name
REPO_MARKER = "@"

# Raw name of the default (unnamed) repository
DEFAULT_REPOSITORY = ""

# Raw name of the main repository
MAIN_REPOSITORY = REPO_MARKER

# Reserved exact forms, rejected even though their characters are allowed
RESERVED_DOT_NAME = "@."
RESERVED_DOTDOT_NAME = "@.."

# Everything after the marker; ASCII only
VALID_STRIPPED_NAME_PATTERN = re.compile(r"[A-Za-z0-9_.\-]+")


class DefectReason(Enum):
    """Reasons a raw string is rejected as a repository name."""

    MUST_START_WITH_MARKER = "workspace names must start with '@'"
    RESERVED_DOT = "workspace names are not allowed to be '@.'"
    RESERVED_DOTDOT = "workspace names are not allowed to be '@..'"
    DISALLOWED_CHARACTERS = (
        "workspace names may contain only A-Z, a-z, 0-9, '-', '_' and '.'"
    )


# =============================================================================
# Path Layout Constants
# =============================================================================

# Legacy layout: external repositories nested under the main build root
EXTERNAL_PATH_PREFIX = PurePosixPath("external")

# Sibling layout: external repositories beside the main build root
SIBLING_EXTERNAL_PATH_PREFIX = PurePosixPath("..")

# Runfiles paths ascend out of the main repository's runfiles tree
RUNFILES_PATH_PREFIX = PurePosixPath("..")

EMPTY_PATH = PurePosixPath()


class CaseSensitivity(Enum):
    """Case handling applied when comparing repository names."""

    AUTO = "auto"
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"


# =============================================================================
# Configuration Constants
# =============================================================================

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "reponame.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Environment variables
ENV_LOG_LEVEL = "REPONAME_LOG_LEVEL"
ENV_CONFIG_FILE = "REPONAME_CONFIG"
ENV_SIBLING_LAYOUT = "REPONAME_SIBLING_REPOSITORY_LAYOUT"
ENV_CASE_SENSITIVITY = "REPONAME_PATH_CASE_SENSITIVITY"

TRUE_VALUES = ("1", "true", "yes")
