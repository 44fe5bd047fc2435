import pytest

from eticket.database.models.user import UserRoles
from eticket.test.test_auth import login_as
from eticket.test.test_movie import create_test_cinema, create_test_movie

CINEMA_PAYLOAD = {
    "name": "Cinema City",
    "logo": "https://img.test/cinema-city.png",
    "description": "Twelve screens downtown.",
}


@pytest.mark.asyncio
async def test_list_cinemas(client, db_session):
    await create_test_cinema(db_session, "First")
    await create_test_cinema(db_session, "Second")

    response = client.get("/cinemas/")
    assert response.status_code == 200
    assert [cinema["name"] for cinema in response.json()] == ["First", "Second"]


def test_get_cinema_not_found(client):
    assert client.get("/cinemas/999").status_code == 404


@pytest.mark.asyncio
async def test_create_and_edit_cinema(client, db_session):
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    created = client.post("/cinemas/", json=CINEMA_PAYLOAD)
    assert created.status_code == 201
    cinema_id = created.json()["id"]

    response = client.put(f"/cinemas/{cinema_id}", json={**CINEMA_PAYLOAD, "id": cinema_id, "name": "Renamed"})
    assert response.status_code == 200
    assert client.get(f"/cinemas/{cinema_id}").json()["name"] == "Renamed"


@pytest.mark.asyncio
async def test_edit_cinema_id_mismatch(client, db_session):
    cinema = await create_test_cinema(db_session)
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    response = client.put(f"/cinemas/{cinema.id}", json={**CINEMA_PAYLOAD, "id": cinema.id + 1})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_cinema_write_requires_admin(client, db_session):
    cinema = await create_test_cinema(db_session)
    await login_as(db_session, email="user@test.com")

    assert client.post("/cinemas/", json=CINEMA_PAYLOAD).status_code == 403
    assert client.delete(f"/cinemas/{cinema.id}").status_code == 403


@pytest.mark.asyncio
async def test_delete_cinema(client, db_session):
    cinema = await create_test_cinema(db_session)
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    assert client.delete(f"/cinemas/{cinema.id}").status_code == 200
    assert client.get(f"/cinemas/{cinema.id}").status_code == 404
    assert client.delete(f"/cinemas/{cinema.id}").status_code == 404


@pytest.mark.asyncio
async def test_movie_shows_its_cinema(client, db_session):
    movie = await create_test_movie(db_session, "Screened")

    response = client.get(f"/cinemas/{movie.cinema_id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Screened Cinema"


@pytest.mark.asyncio
async def test_delete_cinema_keeps_its_movies(client, db_session):
    movie = await create_test_movie(db_session, "Homeless")
    await login_as(db_session, email="admin@test.com", role=UserRoles.ADMIN)

    assert client.delete(f"/cinemas/{movie.cinema_id}").status_code == 200

    response = client.get(f"/movies/{movie.id}")
    assert response.status_code == 200
    data = response.json()
    assert data["cinema"] is None
    assert data["cinema_id"] is None
    assert data["producer"]["full_name"] == "Homeless Producer"
