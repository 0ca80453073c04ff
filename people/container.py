"""Composition root wiring the repository and service together."""

from __future__ import annotations

from typing import Optional

from people.core.config import Settings, get_settings
from people.repositories.person import PersonRepository
from people.services.person import PersonService


def build_service(settings: Optional[Settings] = None) -> PersonService:
    """Return a service backed by its own, empty repository."""

    settings = settings or get_settings()
    return PersonService(PersonRepository(), settings)


__all__ = ["build_service"]
