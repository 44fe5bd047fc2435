import pytest

from eticket.crud.auth import create_user, get_or_create_group
from eticket.database.models.user import User, UserRoles
from eticket.deps import get_current_user
from eticket.main import app
from eticket.utils.hash import hash_password


async def create_test_user(db_session, email="user@test.com", role=UserRoles.USER, password="Password123"):
    group = await get_or_create_group(db_session, role.value)
    user = User(
        full_name=email.split("@")[0],
        email=email,
        username=email,
        hashed_password=hash_password(password),
        group=group,
    )
    db_session.add(user)
    await db_session.commit()
    return user


async def login_as(db_session, email="user@test.com", role=UserRoles.USER):
    user = await create_test_user(db_session, email=email, role=role)
    app.dependency_overrides[get_current_user] = lambda: user
    return user


def register_payload(**overrides):
    payload = {
        "full_name": "Jane Doe",
        "email": "jane@test.com",
        "password": "Password123",
        "confirm_password": "Password123",
    }
    payload.update(overrides)
    return payload


def test_register_user(client):
    response = client.post("/account/register", json=register_payload())
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "jane@test.com"
    assert data["username"] == "jane@test.com"
    assert data["role"] == "User"
    assert "hashed_password" not in data


def test_register_duplicate_email(client):
    client.post("/account/register", json=register_payload())

    response = client.post("/account/register", json=register_payload(full_name="Someone Else"))
    assert response.status_code == 409
    assert response.json()["detail"] == "This email is already in use!"


def test_register_passwords_do_not_match(client):
    response = client.post("/account/register", json=register_payload(confirm_password="Different123"))
    assert response.status_code == 422
    assert "Passwords do not match" in response.text


@pytest.mark.asyncio
async def test_login_success(client, db_session):
    await create_test_user(db_session, email="login@test.com")

    response = client.post("/account/login", json={"email": "login@test.com", "password": "Password123"})
    assert response.status_code == 200
    data = response.json()
    assert data["access_token"]
    assert data["refresh_token"]
    assert data["token_type"] == "bearer"
    assert data["redirect_to"] == "/movies/"


@pytest.mark.asyncio
async def test_login_wrong_password(client, db_session):
    await create_test_user(db_session, email="wrong@test.com")

    response = client.post("/account/login", json={"email": "wrong@test.com", "password": "NotThePassword"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Wrong Credentials. Please try again"


def test_login_unknown_email_skips_password_check(client, monkeypatch):
    calls = []

    def fake_verify(raw_password, hashed_password):
        calls.append(raw_password)
        return True

    monkeypatch.setattr("eticket.routes.account.verify_password", fake_verify)

    response = client.post("/account/login", json={"email": "nobody@test.com", "password": "Password123"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Wrong Credentials. Please try again"
    assert calls == []


@pytest.mark.asyncio
async def test_token_grants_access(client, db_session):
    await create_test_user(db_session, email="token@test.com")
    tokens = client.post("/account/login", json={"email": "token@test.com", "password": "Password123"}).json()

    response = client.get("/orders/", headers={"Authorization": f"Bearer {tokens['access_token']}"})
    assert response.status_code == 200
    assert response.json() == []


def test_invalid_token_rejected(client):
    response = client.get("/orders/", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_refresh_and_logout(client, db_session):
    await create_test_user(db_session, email="refresh@test.com")
    tokens = client.post("/account/login", json={"email": "refresh@test.com", "password": "Password123"}).json()

    response = client.post("/account/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert response.status_code == 200
    assert response.json()["access_token"]

    response = client.post("/account/logout", json={"refresh_token": tokens["refresh_token"]})
    assert response.status_code == 200
    assert response.json()["redirect_to"] == "/movies/"

    response = client.post("/account/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_users_list_admin_only(client, db_session):
    await create_test_user(db_session, email="plain@test.com")
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    response = client.get("/account/users")
    assert response.status_code == 200
    emails = [user["email"] for user in response.json()]
    assert emails == ["plain@test.com", "admin@test.com"]


@pytest.mark.asyncio
async def test_users_list_forbidden_for_user(client, db_session):
    await login_as(db_session, email="plain@test.com")

    response = client.get("/account/users")
    assert response.status_code == 403
    assert response.json()["detail"] == "You do not have permission to access this resource."


def test_access_denied(client):
    response = client.get("/account/access-denied")
    assert response.status_code == 403
    assert response.json()["detail"] == "You do not have permission to access this resource."


@pytest.mark.asyncio
async def test_create_user_returns_none_for_taken_email(db_session):
    user = await create_user(db_session, full_name="First", email="taken@test.com", password="Password123")
    assert user.role == UserRoles.USER

    again = await create_user(db_session, full_name="Second", email="taken@test.com", password="Password123")
    assert again is None
