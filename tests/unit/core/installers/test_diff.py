"""Tests for diff rendering."""

from gitshim.core.installers.diff import format_added, format_removed


def test_format_added() -> None:
    diff = format_added("com.example.App", [("type", "2"), ("path", "/bin/git")])

    assert diff == "+++ com.example.App\n+type = 2\n+path = /bin/git\n"


def test_format_removed_with_single_entry() -> None:
    assert format_removed("settings.json", [("type", "2")]) == "--- settings.json\n-type = 2\n"
