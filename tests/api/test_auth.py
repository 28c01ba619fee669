"""
API tests for POST /signup and POST /login.

Covers duplicate registration, missing fields, unknown users (reported as 400
by /login), wrong passwords (401) and that passwords are stored hashed.
"""

from sqlalchemy import select


def test_signup_creates_account(client):
    resp = client.post("/signup", json={"email": "a@x.com", "password": "pw1"})

    assert resp.status_code == 201
    assert resp.json() == {"message": "User registered successfully"}


def test_signup_same_email_twice_is_rejected(client):
    first = client.post("/signup", json={"email": "a@x.com", "password": "pw1"})
    second = client.post("/signup", json={"email": "a@x.com", "password": "pw2"})

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json()["error"] == "User already exists or invalid data"


def test_signup_missing_password_is_rejected(client):
    resp = client.post("/signup", json={"email": "a@x.com"})

    assert resp.status_code == 400
    assert "error" in resp.json()


def test_signup_malformed_body_is_rejected(client):
    resp = client.post(
        "/signup", content="not json", headers={"Content-Type": "application/json"}
    )

    assert resp.status_code == 400
    assert "error" in resp.json()


def test_login_with_correct_password(client, registered):
    email, password = registered[0]

    resp = client.post("/login", json={"email": email, "password": password})

    assert resp.status_code == 200
    assert resp.json() == {"message": "Login successful"}


def test_login_with_wrong_password(client, registered):
    email, _ = registered[0]

    resp = client.post("/login", json={"email": email, "password": "nope"})

    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


def test_login_with_another_accounts_password(client, registered):
    (email_a, _), (_, password_b) = registered

    resp = client.post("/login", json={"email": email_a, "password": password_b})

    assert resp.status_code == 401


def test_login_unknown_email(client):
    resp = client.post("/login", json={"email": "ghost@x.com", "password": "pw"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "User not found"}


def test_login_missing_fields(client):
    resp = client.post("/login", json={})

    assert resp.status_code == 400


def test_password_is_stored_as_bcrypt_hash(app, client, registered):
    from api.features.auth.entities.account import Account

    email, password = registered[0]
    db = app.container.infrastructure.database()

    async def load_hash():
        async with db.get_session() as session:
            result = await session.execute(
                select(Account.password_hash).where(Account.email == email)
            )
            return result.scalar_one()

    stored = client.portal.call(load_hash)

    assert stored != password
    assert stored.startswith("$2")


def test_unknown_email_error_is_part_of_the_error_hierarchy():
    from api.features.auth.exceptions import UnknownLoginError
    from api.shared.exceptions import MaternalAPIException

    error = UnknownLoginError()

    assert isinstance(error, MaternalAPIException)
    assert error.status_code == 400
    assert error.details == {}
