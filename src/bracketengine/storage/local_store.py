"""Local JSON file store for the tournament document.

Writes are atomic: the document goes to a temp file in the same directory
which is then renamed over the target, so a crash never leaves a
half-written file behind.
"""

# Bracket Engine
# Copyright (C) 2025  Bracket Engine developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
import os
from pathlib import Path
from typing import Optional, Union

from bracketengine.constants import DEFAULT_DATA_FILE
from bracketengine.exceptions import StorageException
from bracketengine.type_hints import RawState
from bracketengine.utils import setup_logger

logger = setup_logger(__name__)


class JsonFileStore:
    """Persists the raw tournament document as a single JSON file.

    Example:
        store = JsonFileStore("data/tournament.json")
        data = store.load()          # None when missing or corrupted
        store.save(tournament.to_dict())
        store.clear()
    """

    temp_suffix = ".tmp"

    def __init__(self, path: Union[str, Path] = DEFAULT_DATA_FILE):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Optional[RawState]:
        """Read the stored document.

        A file that is not a JSON object is treated as absent: it is
        removed and None is returned.

        Returns:
            The raw document, or None if there is no usable local copy

        Raises:
            StorageException: If the file exists but cannot be read
        """
        if not self.path.exists():
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise StorageException(f"Impossible de lire {self.path}: {e}") from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            logger.warning(f"Discarding corrupted tournament file {self.path}: {e}")
            self.clear()
            return None

        if not isinstance(data, dict):
            logger.warning(
                f"Discarding tournament file {self.path}: expected a JSON object, "
                f"got {type(data).__name__}"
            )
            self.clear()
            return None

        logger.debug(f"Loaded tournament data from {self.path}")
        return data

    def save(self, data: RawState) -> None:
        """Atomically write the document.

        Raises:
            StorageException: If the file cannot be written
        """
        temp_path = self.path.with_name(self.path.name + self.temp_suffix)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(temp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            temp_path.unlink(missing_ok=True)
            raise StorageException(
                f"Impossible d'enregistrer {self.path}: {e}"
            ) from e

        logger.info(f"Tournament saved to {self.path}")

    def clear(self) -> None:
        """Remove the stored document if there is one.

        Raises:
            StorageException: If the file exists but cannot be removed
        """
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageException(f"Impossible de supprimer {self.path}: {e}") from e
        logger.info(f"Cleared local tournament data at {self.path}")
