import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from eticket.crud.actors import get_actors_service
from eticket.database.models.movies import ActorMovie
from eticket.database.models.user import UserRoles
from eticket.main import app
from eticket.test.test_auth import login_as
from eticket.test.test_movie import create_test_actor, create_test_movie

ACTOR_PAYLOAD = {
    "full_name": "Tom Hanks",
    "profile_picture_url": "https://img.test/hanks.png",
    "bio": "Actor and filmmaker.",
}


def test_list_actors_anonymous(client):
    response = client.get("/actors/")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_get_actor(client, db_session):
    actor = await create_test_actor(db_session, "Meryl Streep")

    response = client.get(f"/actors/{actor.id}")
    assert response.status_code == 200
    assert response.json()["full_name"] == "Meryl Streep"


def test_get_actor_not_found(client):
    response = client.get("/actors/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Actor not found."


@pytest.mark.asyncio
async def test_create_actor(client, db_session):
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    response = client.post("/actors/", json=ACTOR_PAYLOAD)
    assert response.status_code == 201
    data = response.json()
    assert data["id"] is not None
    assert data["full_name"] == "Tom Hanks"


def test_create_actor_anonymous_is_unauthorized(client):
    response = client.post("/actors/", json=ACTOR_PAYLOAD)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_actor_requires_admin(client, db_session):
    await login_as(db_session, email="user@test.com")

    response = client.post("/actors/", json=ACTOR_PAYLOAD)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_actor_invalid_payload(client, db_session):
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    response = client.post("/actors/", json={**ACTOR_PAYLOAD, "full_name": ""})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_edit_actor(client, db_session):
    actor = await create_test_actor(db_session, "Old Name")
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    response = client.put(f"/actors/{actor.id}", json={**ACTOR_PAYLOAD, "id": actor.id})
    assert response.status_code == 200
    assert response.json()["full_name"] == "Tom Hanks"
    assert client.get(f"/actors/{actor.id}").json()["bio"] == "Actor and filmmaker."


@pytest.mark.asyncio
async def test_edit_actor_id_mismatch(client, db_session):
    actor = await create_test_actor(db_session)
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    response = client.put(f"/actors/{actor.id}", json={**ACTOR_PAYLOAD, "id": actor.id + 1})
    assert response.status_code == 404
    assert client.get(f"/actors/{actor.id}").json()["full_name"] == "Actor 1"


@pytest.mark.asyncio
async def test_edit_missing_actor(client, db_session):
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    response = client.put("/actors/999", json={**ACTOR_PAYLOAD, "id": 999})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_actor_removes_movie_links(client, db_session):
    movie = await create_test_movie(db_session, "Linked")
    actor_id = (await db_session.execute(select(ActorMovie.actor_id))).scalar_one()
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    response = client.delete(f"/actors/{actor_id}")
    assert response.status_code == 200
    assert client.get(f"/actors/{actor_id}").status_code == 404
    assert client.get(f"/movies/{movie.id}").json()["actors_movies"] == []


@pytest.mark.asyncio
async def test_delete_missing_actor(client, db_session):
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    assert client.delete("/actors/999").status_code == 404


def test_database_error_is_reported_as_server_error(client):
    class BrokenActorsService:
        async def get_all(self):
            raise IntegrityError("INSERT INTO actors", {}, Exception("constraint failed"))

    app.dependency_overrides[get_actors_service] = lambda: BrokenActorsService()

    response = client.get("/actors/")
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
