import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from movies_api.main import create_app
from movies_api.repositories.movie_repository import MovieRepository
from movies_api.seed_data import load_seed_movies

@pytest.fixture
def movie_repo():
    # Fresh store per test so mutations never leak between cases
    return MovieRepository(load_seed_movies())

@pytest.fixture
def app(movie_repo):
    return create_app(repository=movie_repo)

@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
def movie_payload():
    return {
        "title": "Inception",
        "year": 2010,
        "director": "Nolan",
        "duration": 148,
        "poster": "http://x/p.jpg",
        "genre": ["Action", "Sci-Fi"],
        "rate": 8.8,
    }
