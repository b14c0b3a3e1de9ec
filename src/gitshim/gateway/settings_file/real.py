"""Real implementation of SettingsFileStore - reads/writes the real filesystem."""

import json
import logging
import os
import tempfile
from pathlib import Path

from gitshim.core.errors import SettingsParseError
from gitshim.gateway.settings_file.abc import SettingsFileStore

logger = logging.getLogger(__name__)


class RealSettingsFileStore(SettingsFileStore):
    """Production implementation using atomic replace for writes."""

    def read(self, path: Path) -> dict[str, object]:
        if not path.exists():
            return {}

        raw = path.read_bytes()
        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SettingsParseError(path, f"not valid UTF-8: {e}") from e
        if not content.strip():
            return {}

        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise SettingsParseError(path, str(e)) from e

        if not isinstance(document, dict):
            raise SettingsParseError(path, f"expected a JSON object, got {type(document).__name__}")
        return document

    def write(self, path: Path, document: dict[str, object]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(document, indent=2, ensure_ascii=False)

        # Temp file must live in the same directory so the replace is a rename
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        temp_path = Path(temp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise
        logger.debug("Wrote %s", path)
