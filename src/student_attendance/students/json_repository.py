from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from ..core.exceptions import PersistenceError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class JsonFileStudentRepository(StudentRepository):
    """Stores the whole collection as one JSON document.

    Writes go to a temp file in the same directory followed by os.replace, so
    a reader sees either the old or the new document, never a partial one.
    A missing file is an empty collection.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def load_all(self) -> Sequence[Student]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ()
        except UnicodeDecodeError as e:
            raise PersistenceError(f"Corrupt student store {self._path}: {e}") from e
        except OSError as e:
            raise PersistenceError(f"Cannot read {self._path}: {e}") from e

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Corrupt student store {self._path}: {e}") from e
        if not isinstance(payload, list):
            raise PersistenceError(f"Corrupt student store {self._path}: expected a JSON list")

        return tuple(Student.from_dict(item) for item in payload)

    def save_all(self, students: Sequence[Student]) -> None:
        payload = [s.to_dict() for s in students]
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", dir=str(self._path.parent))
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            raise PersistenceError(f"Cannot write {self._path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temp file %s", tmp_name)
        logger.debug("Saved %d students to %s", len(payload), self._path)
