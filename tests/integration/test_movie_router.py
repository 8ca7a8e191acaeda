import pytest
from httpx import AsyncClient

INCEPTION_ID = "5ad1a235-0d9c-410a-b32b-220d91689a08"

@pytest.mark.asyncio
async def test_list_movies(client: AsyncClient, movie_repo):
    response = await client.get("/movies")

    assert response.status_code == 200
    assert [m["id"] for m in response.json()] == [m.id for m in movie_repo.list_all()]

@pytest.mark.asyncio
async def test_list_movies_by_genre(client: AsyncClient):
    response = await client.get("/movies", params={"genre": "ACTION"})

    assert response.status_code == 200
    assert [m["title"] for m in response.json()] == [
        "The Dark Knight",
        "Inception",
        "The Matrix",
        "The Lord of the Rings: The Return of the King",
    ]

@pytest.mark.asyncio
async def test_list_movies_unknown_genre(client: AsyncClient):
    response = await client.get("/movies", params={"genre": "Western"})

    assert response.status_code == 200
    assert response.json() == []

@pytest.mark.asyncio
async def test_reads_do_not_mutate_store(client: AsyncClient, movie_repo):
    before = movie_repo.list_all()

    for _ in range(3):
        await client.get("/movies")
        await client.get("/movies", params={"genre": "drama"})
        await client.get(f"/movies/{INCEPTION_ID}")

    assert movie_repo.list_all() == before

@pytest.mark.asyncio
async def test_get_movie(client: AsyncClient):
    response = await client.get(f"/movies/{INCEPTION_ID}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == INCEPTION_ID
    assert data["title"] == "Inception"
    assert data["genre"] == ["Action", "Adventure", "Sci-Fi"]

@pytest.mark.asyncio
async def test_get_movie_not_found(client: AsyncClient):
    response = await client.get("/movies/not-a-real-id")

    assert response.status_code == 404
    assert response.json() == {"message": "Movie not found"}

@pytest.mark.asyncio
async def test_movie_lifecycle(client: AsyncClient, movie_payload):
    # 1. Create
    create_response = await client.post("/movies", json=movie_payload)
    assert create_response.status_code == 201
    created = create_response.json()
    movie_id = created.pop("id")
    assert created == movie_payload

    # 2. Shows up under a case-insensitive genre filter
    list_response = await client.get("/movies", params={"genre": "action"})
    assert movie_id in [m["id"] for m in list_response.json()]

    # 3. Partial update
    patch_response = await client.patch(f"/movies/{movie_id}", json={"rate": 9.0})
    assert patch_response.status_code == 200
    assert patch_response.json() == {**movie_payload, "id": movie_id, "rate": 9.0}

    # 4. Delete, then it is gone
    delete_response = await client.delete(f"/movies/{movie_id}")
    assert delete_response.status_code == 200
    assert delete_response.json() == {"message": "Movie deleted"}

    get_response = await client.get(f"/movies/{movie_id}")
    assert get_response.status_code == 404

@pytest.mark.asyncio
async def test_create_is_not_idempotent(client: AsyncClient, movie_repo, movie_payload):
    size = len(movie_repo)

    first = await client.post("/movies", json=movie_payload)
    second = await client.post("/movies", json=movie_payload)

    assert first.json()["id"] != second.json()["id"]
    assert len(movie_repo) == size + 2

@pytest.mark.asyncio
async def test_create_defaults_rate(client: AsyncClient, movie_payload):
    del movie_payload["rate"]

    response = await client.post("/movies", json=movie_payload)

    assert response.status_code == 201
    assert response.json()["rate"] == 0

@pytest.mark.asyncio
async def test_delete_twice(client: AsyncClient):
    first = await client.delete(f"/movies/{INCEPTION_ID}")
    second = await client.delete(f"/movies/{INCEPTION_ID}")

    assert first.status_code == 200
    assert second.status_code == 404
    assert second.json() == {"message": "Movie not found"}

@pytest.mark.asyncio
async def test_update_not_found(client: AsyncClient):
    response = await client.patch("/movies/not-a-real-id", json={"rate": 5})

    assert response.status_code == 404
    assert response.json() == {"message": "Movie not found"}

@pytest.mark.asyncio
async def test_update_empty_payload(client: AsyncClient):
    before = (await client.get(f"/movies/{INCEPTION_ID}")).json()

    response = await client.patch(f"/movies/{INCEPTION_ID}", json={})

    assert response.status_code == 200
    assert response.json() == before

@pytest.mark.asyncio
async def test_update_cannot_change_id(client: AsyncClient):
    response = await client.patch(f"/movies/{INCEPTION_ID}", json={"id": "new-id"})

    assert response.status_code == 400
    assert (await client.get(f"/movies/{INCEPTION_ID}")).status_code == 200

@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
