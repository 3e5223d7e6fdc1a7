from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Persistence seam for the student collection.

    Note (DIP): the store and services depend on this interface, never on a
    concrete medium. Implementations raise PersistenceError when the medium
    is unavailable or corrupt.
    """

    def load_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def save_all(self, students: Sequence[Student]) -> None:
        """Replace the whole persisted collection."""

        raise NotImplementedError
