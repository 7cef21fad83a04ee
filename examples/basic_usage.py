#!/usr/bin/env python3
"""
Basic usage example for reponame.

This example creates repository names, derives their exec-root paths in
both layouts, decodes a path back into a name and tags a name as not
visible from a requesting repository.
"""

from reponame import MAIN, LabelSyntaxError, RepositoryName


def main():
    """Demonstrate basic reponame usage."""
    print("reponame - Basic Usage Example")
    print("=" * 60)

    repo = RepositoryName.create("@rules_cc")
    print(f"Name:            {repo}")
    print(f"Stripped:        {repo.stripped_name()}")
    print(f"Legacy layout:   {repo.get_exec_path(sibling_layout=False)}")
    print(f"Sibling layout:  {repo.get_exec_path(sibling_layout=True)}")
    print(f"Runfiles path:   {repo.get_runfiles_path()}")
    print(f"Main canonical:  {MAIN.get_canonical_form()!r}")

    decoded = RepositoryName.from_path("external/rules_cc/cc/defs.bzl", sibling_layout=False)
    if decoded is not None:
        name, remainder = decoded
        print(f"Decoded:         {name} + {remainder}")

    hidden = repo.to_non_visible("@my_module")
    print(f"Visible:         {hidden.is_visible()} (owner {hidden.get_owner_repo_if_not_visible()})")

    for candidate in ("foo", "@..", "@bad/name"):
        try:
            RepositoryName.create(candidate)
        except LabelSyntaxError as e:
            print(f"Rejected:        {e}")


if __name__ == "__main__":
    main()
