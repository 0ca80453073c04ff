"""In-memory people registry."""

from people.container import build_service
from people.core.exceptions import ConflictError, PeopleError, ValidationError
from people.models import Person
from people.repositories.person import PersonRepository
from people.services.person import PersonService

__version__ = "0.1.0"

__all__ = [
    "ConflictError",
    "PeopleError",
    "Person",
    "PersonRepository",
    "PersonService",
    "ValidationError",
    "build_service",
]
