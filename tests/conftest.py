"""
Pytest configuration and shared fixtures for reponame tests.

Every test runs against a fresh, isolated repository context with a
case-sensitive path policy and freshly loaded configuration.
"""

import pytest

from reponame.context import RepositoryContext, repository_context
from reponame.registry import RepositoryNameRegistry
from reponame.utils.config import set_config
from reponame.utils.path_policy import CASE_SENSITIVE


@pytest.fixture(autouse=True)
def isolated_context():
    """Install a fresh context for the duration of each test."""
    set_config(None)
    context = RepositoryContext(
        registry=RepositoryNameRegistry(intern_names=True),
        path_policy=CASE_SENSITIVE,
    )
    with repository_context(context) as ctx:
        yield ctx
    set_config(None)


@pytest.fixture
def registry(isolated_context):
    """The registry of the isolated context."""
    return isolated_context.registry


@pytest.fixture
def valid_names():
    """A sample of valid non-sentinel repository names."""
    return [
        "@foo",
        "@foo-bar_1.2",
        "@a.b",
        "@rules_cc",
        "@com_google_protobuf",
        "@...",
        "@.hidden",
        "@x",
        "@bazel_tools",
    ]


@pytest.fixture
def invalid_names():
    """Invalid names mapped to the expected defect message fragment."""
    return {
        "foo": "must start with '@'",
        "@.": "not allowed to be '@.'",
        "@..": "not allowed to be '@..'",
        "@foo/bar": "may contain only",
        "@foo bar": "may contain only",
        "@@": "may contain only",
        "@föo": "may contain only",
        "@foo\n": "may contain only",
    }
