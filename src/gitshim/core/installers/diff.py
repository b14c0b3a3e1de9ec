"""Rendering of textual configuration diffs.

Install diffs use ``+++``/``+`` lines, uninstall diffs ``---``/``-`` lines:

    +++ com.DanPristupov.Fork
    +gitInstanceType = 2
    +customGitInstancePath = /Users/me/.gitshim/bin/git
"""

from collections.abc import Sequence

DiffEntry = tuple[str, str]


def format_added(location: str, entries: Sequence[DiffEntry]) -> str:
    """Render a diff adding `entries` to the store at `location`."""
    return _format("+", location, entries)


def format_removed(location: str, entries: Sequence[DiffEntry]) -> str:
    """Render a diff removing `entries` from the store at `location`."""
    return _format("-", location, entries)


def _format(sign: str, location: str, entries: Sequence[DiffEntry]) -> str:
    lines = [f"{sign * 3} {location}"]
    lines.extend(f"{sign}{key} = {value}" for key, value in entries)
    return "\n".join(lines) + "\n"
