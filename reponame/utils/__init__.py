"""
Utils package for reponame.

This module provides the ambient utilities shared across the package:
constants, exceptions, logging, configuration and path comparison.
"""

from .constants import CaseSensitivity, DefectReason, REPO_MARKER
from .exceptions import LabelSyntaxError, ReponameError
from .logging import configure_logging, get_logger, setup_logging
from .string_utils import sanitize_control_chars
from .config import (
    LayoutConfig,
    LoggingConfig,
    PathConfig,
    RegistryConfig,
    ReponameConfig,
    get_config,
    load_config,
    set_config,
)
from .path_policy import (
    CASE_INSENSITIVE,
    CASE_SENSITIVE,
    PathPolicy,
    get_path_policy,
    policy_for,
    set_path_policy,
)

__all__ = [
    # Constants
    "CaseSensitivity",
    "DefectReason",
    "REPO_MARKER",

    # Exceptions
    "ReponameError",
    "LabelSyntaxError",

    # Logging
    "get_logger",
    "setup_logging",
    "configure_logging",

    # Strings
    "sanitize_control_chars",

    # Configuration
    "ReponameConfig",
    "LayoutConfig",
    "PathConfig",
    "RegistryConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Path comparison
    "PathPolicy",
    "CASE_SENSITIVE",
    "CASE_INSENSITIVE",
    "get_path_policy",
    "set_path_policy",
    "policy_for",
]
