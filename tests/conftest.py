import pytest

from people.core.config import Settings
from people.repositories.person import PersonRepository
from people.services.person import PersonService


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def repository():
    return PersonRepository()


@pytest.fixture
def service(repository, settings):
    return PersonService(repository, settings)
