"""In-memory store and service tests."""

from users_api.db.store import InMemoryUserStore
from users_api.schemas.user import User
from users_api.services.user_service import UserService


def _user(user_id: int, name: str = "Alice") -> User:
    return User(id=user_id, name=name, email=f"{name.lower()}@example.com", age=30)


def test_add_returns_the_same_record() -> None:
    store = InMemoryUserStore()
    user = _user(1)

    assert store.add(user) is user
    assert len(store) == 1


def test_get_by_id_scans_in_insertion_order() -> None:
    store = InMemoryUserStore()
    first = store.add(_user(1, "Alice"))
    store.add(_user(1, "Alicia"))

    assert store.get_by_id(1) is first
    assert store.get_by_id(2) is None
    assert store.get_by_id(None) is None


def test_list_all_returns_a_snapshot() -> None:
    store = InMemoryUserStore()
    store.add(_user(1))

    listed = store.list_all()
    listed.append(_user(2, "Bob"))

    assert [user.id for user in store.list_all()] == [1]


def test_service_delegates_to_store() -> None:
    store = InMemoryUserStore()
    service = UserService(store)

    alice = service.add_user(_user(1))
    bob = service.add_user(_user(2, "Bob"))

    assert service.get_user_by_id(2) is bob
    assert service.list_users() == [alice, bob]
    assert store.list_all() == [alice, bob]


def test_service_logs_stored_users(caplog) -> None:
    service = UserService(InMemoryUserStore())

    with caplog.at_level("INFO", logger="users_api.services.user_service"):
        service.add_user(_user(4))

    assert "stored user id=4" in caplog.text
