"""Shim path normalization.

Persisted values always use forward slashes, whatever the host separator is.
A path spelled natively on Windows (``C:\\bin\\git.exe``) and the same path
written by another tool (``C:/bin/git.exe``) must compare equal, and the value
must be safe to embed in JSON or plist text unchanged.
"""

from pathlib import PurePath

EXTENDED_LENGTH_PREFIX = "\\\\?\\"
EXTENDED_LENGTH_UNC_PREFIX = "\\\\?\\UNC\\"


def clean_path(path: PurePath | str) -> str:
    """Strip the Windows extended-length prefix from a path.

    ``\\\\?\\C:\\dir`` becomes ``C:\\dir`` and ``\\\\?\\UNC\\server\\share``
    becomes ``\\\\server\\share``. Other paths are returned unchanged.
    """
    raw = str(path)
    if raw.startswith(EXTENDED_LENGTH_UNC_PREFIX):
        return "\\\\" + raw[len(EXTENDED_LENGTH_UNC_PREFIX) :]
    if raw.startswith(EXTENDED_LENGTH_PREFIX):
        return raw[len(EXTENDED_LENGTH_PREFIX) :]
    return raw


def normalize_shim_path(path: PurePath | str) -> str:
    """Render a shim path the way it is compared against and written to client prefs.

    Examples:
        >>> normalize_shim_path("C:\\\\Users\\\\x\\\\.bin\\\\git.exe")
        'C:/Users/x/.bin/git.exe'
        >>> normalize_shim_path("/home/x/bin/git")
        '/home/x/bin/git'
    """
    return clean_path(path).replace("\\", "/")
