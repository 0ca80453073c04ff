from concurrent.futures import ThreadPoolExecutor

from people.models import Person
from people.repositories.person import PersonRepository


def test_create_assigns_sequential_ids_starting_at_one(repository):
    first = repository.create(Person(name="Siva", email="siva@gmail.com"))
    second = repository.create(Person(name="Ravi", email="ravi@gmail.com"))

    assert first.id == 1
    assert second.id == 2
    assert len(repository) == 2


def test_find_by_id_returns_none_for_unknown_id(repository):
    repository.create(Person(name="Siva", email="siva@gmail.com"))

    assert repository.find_by_id(42) is None
    assert repository.find_by_id(None) is None


def test_find_by_email_ignores_case(repository):
    created = repository.create(Person(name="Siva", email="siva@gmail.com"))

    found = repository.find_by_email("SIVA@Gmail.COM")

    assert found == created
    assert repository.find_by_email("other@gmail.com") is None


def test_find_by_name_ignores_case_and_allows_duplicates(repository):
    repository.create(Person(name="Siva", email="one@gmail.com"))
    repository.create(Person(name="Siva", email="two@gmail.com"))

    found = repository.find_by_name("siva")

    assert found is not None
    assert found.email in {"one@gmail.com", "two@gmail.com"}
    assert repository.find_by_name("nobody") is None


def test_lookups_skip_records_with_missing_fields(repository):
    repository.create(Person(name=None, email=None))

    assert repository.find_by_email("siva@gmail.com") is None
    assert repository.find_by_name("Siva") is None


def test_find_all_returns_independent_snapshot(repository):
    repository.create(Person(name="Siva", email="siva@gmail.com"))

    snapshot = repository.find_all()
    snapshot.clear()

    assert len(repository.find_all()) == 1


def test_returned_records_do_not_alias_stored_state(repository):
    created = repository.create(Person(name="Siva", email="siva@gmail.com"))

    created.name = "Changed"
    fetched = repository.find_by_id(created.id)
    fetched.email = "changed@gmail.com"

    stored = repository.find_by_id(created.id)
    assert stored.name == "Siva"
    assert stored.email == "siva@gmail.com"


def test_update_replaces_existing_record(repository):
    created = repository.create(Person(name="Siva", email="siva@gmail.com"))

    assert repository.update(Person(id=created.id, name="Siva K", email="sk@gmail.com")) is True

    stored = repository.find_by_id(created.id)
    assert stored.name == "Siva K"
    assert stored.email == "sk@gmail.com"


def test_update_rejects_missing_or_unknown_id(repository):
    repository.create(Person(name="Siva", email="siva@gmail.com"))
    before = repository.find_all()

    assert repository.update(Person(id=None, name="X", email="x@gmail.com")) is False
    assert repository.update(Person(id=99, name="X", email="x@gmail.com")) is False
    assert repository.find_all() == before


def test_delete_by_id_reports_whether_anything_was_removed(repository):
    created = repository.create(Person(name="Siva", email="siva@gmail.com"))

    assert repository.delete_by_id(created.id) is True
    assert repository.find_by_id(created.id) is None
    assert repository.delete_by_id(created.id) is False
    assert created.id not in repository
    assert "1" not in repository


def test_clear_resets_records_and_id_counter(repository):
    repository.create(Person(name="Siva", email="siva@gmail.com"))
    repository.create(Person(name="Ravi", email="ravi@gmail.com"))

    repository.clear()

    assert repository.count() == 0
    assert repository.create(Person(name="Anu", email="anu@gmail.com")).id == 1


def test_ids_restart_at_one_regardless_of_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("ID_START=41\n", encoding="utf-8")
    monkeypatch.setenv("ID_START", "41")
    repository = PersonRepository()

    assert repository.create(Person(name="Siva", email="siva@gmail.com")).id == 1
    repository.clear()
    assert repository.create(Person(name="Ravi", email="ravi@gmail.com")).id == 1


def test_separate_repositories_do_not_share_state():
    first = PersonRepository()
    second = PersonRepository()

    first.create(Person(name="Siva", email="siva@gmail.com"))

    assert second.count() == 0
    assert second.create(Person(name="Ravi", email="ravi@gmail.com")).id == 1


def test_concurrent_creates_never_share_an_id(repository):
    def create(index):
        return repository.create(Person(name=f"p{index}", email=f"p{index}@example.com")).id

    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(create, range(500)))

    assert len(set(ids)) == 500
    assert sorted(ids) == list(range(1, 501))
    assert repository.count() == 500
