import pytest
from sqlalchemy import select

from gamerverse.core.config import Settings
from gamerverse.core.security import hash_session_token
from gamerverse.models.session import UserSession
from gamerverse.models.user import User
from gamerverse.services.sessions import (
    DEFAULT_MAX_AGE,
    DEFAULT_SWEEP_INTERVAL,
    MemorySessionStore,
    SqlSessionStore,
    build_session_store,
)


@pytest.fixture
def user_ids(db):
    users = [User(name=f"u{i}", email=f"u{i}@example.com", password_hash="x") for i in range(2)]
    db.add_all(users)
    db.commit()
    return [u.id for u in users]


@pytest.fixture(params=["memory", "sql"])
def store(request, database, clock):
    if request.param == "memory":
        return MemorySessionStore(clock=clock)
    return SqlSessionStore(database, clock=clock)


def test_create_and_resolve(store, user_ids):
    token = store.create(user_ids[0])

    assert isinstance(token, str) and len(token) >= 32
    assert store.resolve(token) == user_ids[0]
    assert store.resolve("unknown") is None
    assert store.resolve(None) is None


def test_tokens_are_unique_per_session(store, user_ids):
    first = store.create(user_ids[0])
    second = store.create(user_ids[0])

    assert first != second
    assert store.resolve(first) == store.resolve(second) == user_ids[0]


def test_expiry_is_fixed_seven_days(store, user_ids, clock):
    token = store.create(user_ids[0])

    clock.advance(DEFAULT_MAX_AGE - 1)
    assert store.resolve(token) == user_ids[0]

    clock.advance(1)
    assert store.resolve(token) is None


def test_destroy_is_idempotent(store, user_ids):
    token = store.create(user_ids[0])

    store.destroy(token)
    store.destroy(token)
    store.destroy(None)

    assert store.resolve(token) is None


def test_sweep_expired(store, user_ids, clock):
    old = store.create(user_ids[0])
    clock.advance(DEFAULT_MAX_AGE // 2)
    fresh = store.create(user_ids[1])
    clock.advance(DEFAULT_MAX_AGE // 2)

    assert store.sweep_expired() == 1
    assert store.resolve(old) is None
    assert store.resolve(fresh) == user_ids[1]
    assert store.sweep_expired() == 0


def test_sql_store_keeps_only_token_digest(database, db, user_ids, clock):
    store = SqlSessionStore(database, clock=clock)
    token = store.create(user_ids[0])

    rows = db.execute(select(UserSession)).scalars().all()
    assert len(rows) == 1
    assert rows[0].token_hash == hash_session_token(token)
    assert rows[0].token_hash != token
    assert rows[0].expires_at == clock.now + DEFAULT_MAX_AGE


def test_build_session_store(database):
    assert isinstance(build_session_store(Settings(_env_file=None, session_backend="memory"), database), MemorySessionStore)
    assert isinstance(build_session_store(Settings(_env_file=None, session_backend="sql"), database), SqlSessionStore)
    with pytest.raises(ValueError):
        build_session_store(Settings(_env_file=None, session_backend="redis"), database)

    store = build_session_store(
        Settings(_env_file=None, session_backend="memory", session_sweep_interval=30), database
    )
    assert store.sweep_interval == 30


def test_app_with_sql_sessions(tmp_path):
    from fastapi.testclient import TestClient

    from gamerverse.main import create_app

    settings = Settings(_env_file=None, data_dir=tmp_path / "data", session_backend="sql", bcrypt_rounds=4)
    with TestClient(create_app(settings)) as client:
        response = client.post("/api/signup", json={"name": "A", "email": "a@example.com", "password": "pw"})
        assert response.status_code == 200
        assert client.get("/api/profile").status_code == 200
        assert client.post("/api/logout").json() == {"ok": True}
        assert client.get("/api/profile").status_code == 401

    assert (tmp_path / "data" / "gamerverse.db").exists()


def test_create_sweeps_expired_sessions_without_restart(store, user_ids, clock, db):
    stale = store.create(user_ids[0])
    clock.advance(DEFAULT_MAX_AGE + DEFAULT_SWEEP_INTERVAL)

    fresh = store.create(user_ids[1])

    if isinstance(store, MemorySessionStore):
        assert len(store) == 1
    else:
        rows = db.execute(select(UserSession)).scalars().all()
        assert [r.token_hash for r in rows] == [hash_session_token(fresh)]
    assert store.resolve(stale) is None
    assert store.resolve(fresh) == user_ids[1]


def test_create_does_not_sweep_before_interval(clock):
    store = MemorySessionStore(max_age=10, clock=clock, sweep_interval=100)
    store.create(1)
    clock.advance(50)

    store.create(2)

    # the expired entry is still held until the next sweep window
    assert len(store) == 2
    clock.advance(50)
    store.create(3)
    assert len(store) == 1
