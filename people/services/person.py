"""Business rules for people: required fields and unique email addresses."""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from people.core.config import Settings, settings as default_settings
from people.core.exceptions import ConflictError, ValidationError
from people.models import Person
from people.repositories.person import PersonRepository
from people.utils.validators import require_non_empty

logger = logging.getLogger(__name__)


class PersonService:
    """Validate input and enforce email uniqueness before delegating to storage.

    Writes go through a service-level lock so the uniqueness check and the
    repository write happen as one step.
    """

    def __init__(self, repository: PersonRepository, settings: Optional[Settings] = None) -> None:
        if repository is None:
            raise TypeError("repository must not be None")
        self._repository = repository
        self._settings = settings or default_settings
        self._write_lock = threading.Lock()

    @property
    def repository(self) -> PersonRepository:
        return self._repository

    def create(self, person: Person) -> Person:
        """Store a new person and return it with its id assigned.

        Raises:
            ValidationError: if ``name`` or ``email`` is missing or blank.
            ConflictError: if another person already uses the email, ignoring case.
        """

        self._validate(person)
        with self._write_lock:
            if self._repository.find_by_email(person.email) is not None:
                logger.warning("Rejected create: email %s already registered", person.email)
                raise ConflictError(
                    f"Person with email '{person.email}' already exists",
                    email=person.email,
                )
            saved = self._repository.create(person)
        logger.info("Created person %s", saved.id)
        return saved

    def find_by_id(self, person_id: Optional[int]) -> Optional[Person]:
        return self._repository.find_by_id(person_id)

    def find_all(self) -> List[Person]:
        return self._repository.find_all()

    def find_by_email(self, email: Optional[str]) -> Optional[Person]:
        return self._repository.find_by_email(email)

    def find_by_name(self, name: Optional[str]) -> Optional[Person]:
        return self._repository.find_by_name(name)

    def update(self, person: Person) -> bool:
        """Replace an existing person after validation.

        Returns ``False`` when ``person.id`` is unset or unknown. When
        ``ENFORCE_UNIQUE_EMAIL_ON_UPDATE`` is on, moving to an email held by a
        different person raises `ConflictError`.
        """

        self._validate(person)
        with self._write_lock:
            if person.id is None or not self._repository.exists(person.id):
                logger.info("Update skipped: person %s not found", person.id)
                return False
            if self._settings.ENFORCE_UNIQUE_EMAIL_ON_UPDATE:
                holder = self._repository.find_by_email(person.email)
                if holder is not None and holder.id != person.id:
                    logger.warning(
                        "Rejected update of person %s: email %s held by person %s",
                        person.id,
                        person.email,
                        holder.id,
                    )
                    raise ConflictError(
                        f"Person with email '{person.email}' already exists",
                        email=person.email,
                    )
            updated = self._repository.update(person)

        if updated:
            logger.info("Updated person %s", person.id)
        return updated

    def delete_by_id(self, person_id: Optional[int]) -> bool:
        deleted = self._repository.delete_by_id(person_id)
        if deleted:
            logger.info("Deleted person %s", person_id)
        return deleted

    @staticmethod
    def _validate(person: Person) -> None:
        try:
            require_non_empty(person.name, "name")
            require_non_empty(person.email, "email")
        except ValidationError as exc:
            logger.warning("Rejected person %s: %s", person.id, exc.message)
            raise
