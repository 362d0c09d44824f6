from sqlalchemy import update

from gamerverse.models.user import User


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def signup(client, name="Alice", email="alice@example.com", password="s3cret-pass"):
    response = client.post("/api/signup", json={"name": name, "email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["userId"]


def login(client, email="alice@example.com", password="s3cret-pass"):
    response = client.post("/api/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["userId"]


def set_user_fields(client, user_id, **values):
    with client.app.state.database.session() as session:
        session.execute(update(User).where(User.id == user_id).values(**values))
        session.commit()
