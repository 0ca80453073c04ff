"""Thread-safe in-memory storage for `Person` records."""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from people.models import Person
from people.utils.validators import matches_ignoring_case

logger = logging.getLogger(__name__)


class PersonRepository:
    """Keeps people in a dict keyed by an auto-incremented id.

    Every method takes the same re-entrant lock, so id generation is atomic
    and lookups never see a half-written record. Records are copied on the
    way in and on the way out; the only way to change a stored person is
    `update`.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._people: Dict[int, Person] = {}
        self._last_id = 0

    def create(self, person: Person) -> Person:
        """Assign the next id to ``person`` and store it."""

        with self._lock:
            self._last_id += 1
            person.id = self._last_id
            self._people[person.id] = person.model_copy()
        logger.debug("Stored person %s", person.id)
        return person

    def find_by_id(self, person_id: Optional[int]) -> Optional[Person]:
        with self._lock:
            stored = self._people.get(person_id)
            return stored.model_copy() if stored is not None else None

    def find_by_email(self, email: Optional[str]) -> Optional[Person]:
        """Return a person whose email matches ignoring case, if any."""

        with self._lock:
            for stored in self._people.values():
                if matches_ignoring_case(stored.email, email):
                    return stored.model_copy()
        return None

    def find_by_name(self, name: Optional[str]) -> Optional[Person]:
        """Return a person whose name matches ignoring case, if any.

        Names are not unique; which match is returned is unspecified.
        """

        with self._lock:
            for stored in self._people.values():
                if matches_ignoring_case(stored.name, name):
                    return stored.model_copy()
        return None

    def find_all(self) -> List[Person]:
        with self._lock:
            return [stored.model_copy() for stored in self._people.values()]

    def update(self, person: Person) -> bool:
        """Overwrite the record stored under ``person.id``.

        Returns ``False`` without touching anything when the id is unset or
        unknown.
        """

        with self._lock:
            if person.id is None or person.id not in self._people:
                return False
            self._people[person.id] = person.model_copy()
        logger.debug("Replaced person %s", person.id)
        return True

    def delete_by_id(self, person_id: Optional[int]) -> bool:
        with self._lock:
            removed = self._people.pop(person_id, None) is not None
        if removed:
            logger.debug("Deleted person %s", person_id)
        return removed

    def exists(self, person_id: object) -> bool:
        with self._lock:
            return person_id in self._people

    def count(self) -> int:
        with self._lock:
            return len(self._people)

    def clear(self) -> None:
        """Drop every record and restart id generation. Meant for tests."""

        with self._lock:
            self._people.clear()
            self._last_id = 0
        logger.debug("Repository cleared")

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, person_id: object) -> bool:
        return self.exists(person_id)
