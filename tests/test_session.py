import json

from cryptography.fernet import Fernet

from stayfinder.session import FileTokenStore, MemoryTokenStore, SessionContext


def test_file_store_round_trip(tmp_path):
    store = FileTokenStore(tmp_path / "session.json", encryption_key="")

    assert store.get() is None
    store.set("tok-abc")
    assert store.get() == "tok-abc"
    assert json.loads((tmp_path / "session.json").read_text()) == {"token": "tok-abc"}

    store.clear()
    assert store.get() is None


def test_file_store_encrypts_token_at_rest(tmp_path):
    key = Fernet.generate_key().decode()
    path = tmp_path / "session.json"
    store = FileTokenStore(path, encryption_key=key)

    store.set("tok-secret")

    assert "tok-secret" not in path.read_text()
    assert FileTokenStore(path, encryption_key=key).get() == "tok-secret"


def test_file_store_ignores_token_encrypted_with_another_key(tmp_path):
    path = tmp_path / "session.json"
    FileTokenStore(path, encryption_key=Fernet.generate_key().decode()).set("tok-secret")

    assert FileTokenStore(path, encryption_key=Fernet.generate_key().decode()).get() is None


def test_file_store_survives_corrupt_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json")

    store = FileTokenStore(path, encryption_key="")

    assert store.get() is None
    store.set("tok-new")
    assert store.get() == "tok-new"


def test_file_store_keeps_other_keys(tmp_path):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"theme": "dark"}))
    store = FileTokenStore(path, encryption_key="")

    store.set("tok-1")
    store.clear()

    assert json.loads(path.read_text()) == {"theme": "dark"}


def test_authenticated_needs_user_and_token(guest_user):
    session = SessionContext(MemoryTokenStore())
    session.user = guest_user
    assert not session.is_authenticated

    session.set_token("tok-1")
    assert session.is_authenticated
    assert session.user_id == "guest-1"
    assert session.role == "guest"


def test_invalidate_clears_and_notifies(session):
    events = []
    session.subscribe(lambda: events.append("first"))
    unsubscribe = session.subscribe(lambda: events.append("second"))
    unsubscribe()

    session.invalidate()

    assert events == ["first"]
    assert session.token is None
    assert session.user is None
    assert session.role is None


def test_clear_does_not_notify(session):
    events = []
    session.subscribe(lambda: events.append("invalidated"))

    session.clear()

    assert events == []
    assert not session.is_authenticated


def test_file_store_ignores_non_object_json(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("[]")
    store = FileTokenStore(path, encryption_key="")

    assert store.get() is None
    store.set("tok-new")
    assert store.get() == "tok-new"
