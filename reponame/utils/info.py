"""
Package information utility.

This module provides a command-line utility for displaying information
about the reponame installation and for checking repository names.
"""

import argparse
import platform
import sys
from typing import Any, Dict, List, Optional

import reponame
from reponame.context import get_registry
from reponame.utils.config import get_config
from reponame.utils.exceptions import LabelSyntaxError
from reponame.utils.logging import configure_logging
from reponame.utils.path_policy import get_path_policy


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to reponame.

    Returns:
        Dictionary containing system information
    """
    return {
        'python_version': sys.version,
        'platform': platform.platform(),
        'sys_platform': sys.platform,
    }


def get_reponame_info() -> Dict[str, Any]:
    """
    Get reponame-specific information.

    Returns:
        Dictionary containing package, configuration and registry information
    """
    config = get_config()
    return {
        'version': reponame.__version__,
        'author': reponame.__author__,
        'config_file': str(config.config_file),
        'sibling_repository_layout': config.is_sibling_layout(),
        'path_policy': get_path_policy().name,
        'registry': get_registry().get_stats(),
    }


def check_names(names: List[str]) -> List[Dict[str, Any]]:
    """
    Validate repository names through the registry.

    Args:
        names: Raw repository names

    Returns:
        One result per name with either its canonical form or its error
    """
    results = []
    for name in names:
        try:
            repo_name = reponame.RepositoryName.create(name)
        except LabelSyntaxError as e:
            results.append({'name': name, 'valid': False, 'error': str(e)})
            continue
        results.append({
            'name': name,
            'valid': True,
            'canonical_form': repo_name.get_canonical_form(),
            'exec_path': str(repo_name.get_exec_path()),
        })
    return results


def print_info() -> None:
    """Print formatted information about reponame and the system."""
    print("reponame: canonical repository names")
    print("=" * 40)

    info = get_reponame_info()
    print(f"\nVersion: {info['version']}")
    print(f"Author: {info['author']}")
    print(f"Config File: {info['config_file']}")
    print(f"Sibling Repository Layout: {info['sibling_repository_layout']}")
    print(f"Path Policy: {info['path_policy']}")
    print(f"Registry Entries: {info['registry']['size']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")


def print_name_results(results: List[Dict[str, Any]]) -> None:
    """Print the outcome of ``check_names``."""
    for result in results:
        if result['valid']:
            canonical = result['canonical_form'] or '<main>'
            print(f"OK       {result['name']!r} -> {canonical} ({result['exec_path']})")
        else:
            print(f"INVALID  {result['error']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the reponame-info command."""
    parser = argparse.ArgumentParser(
        prog='reponame-info',
        description='Show reponame information or check repository names.',
    )
    parser.add_argument('names', nargs='*', help='repository names to validate, e.g. @foo')
    args = parser.parse_args(argv)

    configure_logging(get_config())

    if not args.names:
        print_info()
        return 0

    results = check_names(args.names)
    print_name_results(results)
    return 0 if all(result['valid'] for result in results) else 1


if __name__ == '__main__':
    sys.exit(main())
