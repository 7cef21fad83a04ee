"""
Repository name syntax validation.

Pure functions, no state: a raw candidate string is either a valid
repository name or has exactly one reported defect.
"""

from typing import Optional

from .utils.constants import (
    DEFAULT_REPOSITORY,
    DefectReason,
    MAIN_REPOSITORY,
    REPO_MARKER,
    RESERVED_DOT_NAME,
    RESERVED_DOTDOT_NAME,
    VALID_STRIPPED_NAME_PATTERN,
)


def classify(name: str) -> Optional[DefectReason]:
    """
    Find the syntax defect of a raw repository name.

    The empty string (default repository) and ``@`` (main repository) are
    always valid. Anything else must be ``@`` followed by one or more of
    ``A-Z a-z 0-9 - _ .``, except the exact forms ``@.`` and ``@..``.

    Args:
        name: Raw candidate, including the leading ``@``

    Returns:
        The defect, or None if the name is valid
    """
    if name == DEFAULT_REPOSITORY or name == MAIN_REPOSITORY:
        return None

    if not name.startswith(REPO_MARKER):
        return DefectReason.MUST_START_WITH_MARKER
    if name == RESERVED_DOT_NAME:
        return DefectReason.RESERVED_DOT
    if name == RESERVED_DOTDOT_NAME:
        return DefectReason.RESERVED_DOTDOT

    if not VALID_STRIPPED_NAME_PATTERN.fullmatch(name, len(REPO_MARKER)):
        return DefectReason.DISALLOWED_CHARACTERS

    return None


def validate(name: str) -> Optional[str]:
    """Return None for a valid repository name, the defect message otherwise."""
    defect = classify(name)
    return None if defect is None else defect.value


def is_valid(name: str) -> bool:
    """Check whether ``name`` is a syntactically valid repository name."""
    return classify(name) is None
