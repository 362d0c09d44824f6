import pytest
from fastapi.testclient import TestClient

from gamerverse.core.config import Settings
from gamerverse.core.security import configure_password_hashing
from gamerverse.db.session import Database
from gamerverse.main import create_app
from tests.helpers import FakeClock


@pytest.fixture(autouse=True, scope="session")
def fast_hashing():
    # bcrypt's minimum cost keeps the suite quick
    configure_password_hashing(4)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        data_dir=tmp_path / "data",
        session_backend="memory",
        bcrypt_rounds=4,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def database(tmp_path):
    database = Database(f"sqlite:///{(tmp_path / 'unit.db').as_posix()}")
    database.open()
    database.create_all()
    yield database
    database.close()


@pytest.fixture
def db(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def clock():
    return FakeClock()
