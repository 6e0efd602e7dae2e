"""
JSON file implementation of WorkoutStorage.

Keeps the whole workout collection in a single UTF-8 JSON file, the
local equivalent of a browser's local storage slot.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, List, Dict, Any, Union

from domain.errors import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileWorkoutStorage:
    """
    File-backed implementation of WorkoutStorage protocol.

    A missing file reads as "nothing stored yet". Writes go to a temporary
    sibling file that is then moved over the target, so readers never see
    a half-written collection.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize with the path of the JSON file.

        Args:
            path: File holding the collection (parent dirs are created on write)
        """
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Optional[List[Dict[str, Any]]]:
        """Read the stored collection, or None if the file does not exist."""
        if not self._path.exists():
            return None
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Could not read {self._path}: {e}") from e

        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"{self._path} is not valid JSON: {e}") from e

    def write(self, records: List[Dict[str, Any]]) -> None:
        """Atomically replace the stored collection."""
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(records, handle, ensure_ascii=True, indent=2)
            os.replace(tmp_name, self._path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Could not write {self._path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning(f"Could not remove temporary file {tmp_name}")

        logger.debug(f"Wrote {len(records)} workouts to {self._path}")
