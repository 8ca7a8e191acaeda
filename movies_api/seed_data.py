from typing import List

from .schemas.movie import Movie

# Catalog the store starts with on every boot; runtime changes are never written back
MOVIES = [
    {
        "id": "dcdd0fad-a94c-4810-8acc-5f108d3b18c3",
        "title": "The Shawshank Redemption",
        "year": 1994,
        "director": "Frank Darabont",
        "duration": 142,
        "poster": "https://image.tmdb.org/t/p/w500/q6y0Go1tsGEsmtFryDOJo3dEmqu.jpg",
        "genre": ["Drama"],
        "rate": 9.3
    },
    {
        "id": "c8a7d63f-3b04-44d3-9d95-8782fd7dcfaf",
        "title": "The Dark Knight",
        "year": 2008,
        "director": "Christopher Nolan",
        "duration": 152,
        "poster": "https://image.tmdb.org/t/p/w500/qJ2tW6WMUDux911r6m7haRef0WH.jpg",
        "genre": ["Action", "Crime", "Drama"],
        "rate": 9.0
    },
    {
        "id": "5ad1a235-0d9c-410a-b32b-220d91689a08",
        "title": "Inception",
        "year": 2010,
        "director": "Christopher Nolan",
        "duration": 148,
        "poster": "https://image.tmdb.org/t/p/w500/9gk7admal4zlWH9O46ggyEBDs5e.jpg",
        "genre": ["Action", "Adventure", "Sci-Fi"],
        "rate": 8.8
    },
    {
        "id": "241bf55d-b649-4109-af7c-0e6890ded3fc",
        "title": "Pulp Fiction",
        "year": 1994,
        "director": "Quentin Tarantino",
        "duration": 154,
        "poster": "https://image.tmdb.org/t/p/w500/d5iIlFn5s0ImszYzBPb8JPIfbXD.jpg",
        "genre": ["Crime", "Drama"],
        "rate": 8.9
    },
    {
        "id": "9e6106f0-848b-4810-a11a-3d832a5610f9",
        "title": "Forrest Gump",
        "year": 1994,
        "director": "Robert Zemeckis",
        "duration": 142,
        "poster": "https://image.tmdb.org/t/p/w500/arw2vcBveWOVZr6pxd9XTd1TdQa.jpg",
        "genre": ["Drama", "Comedy"],
        "rate": 8.8
    },
    {
        "id": "7e3fd5ab-60ff-4ae2-92b6-9597f0308d1a",
        "title": "The Matrix",
        "year": 1999,
        "director": "The Wachowskis",
        "duration": 136,
        "poster": "https://image.tmdb.org/t/p/w500/f89U3ADr1oiB1s9GkdPOEpQZw5.jpg",
        "genre": ["Action", "Sci-Fi"],
        "rate": 8.7
    },
    {
        "id": "c906673b-3948-4402-ac7f-73ac3a9e3105",
        "title": "The Lord of the Rings: The Return of the King",
        "year": 2003,
        "director": "Peter Jackson",
        "duration": 201,
        "poster": "https://image.tmdb.org/t/p/w500/rCzpDGLbOoPwLjy3OAm5NUPOTrC.jpg",
        "genre": ["Action", "Adventure", "Fantasy"],
        "rate": 8.9
    },
    {
        "id": "b6e03689-cccd-478e-8565-d92f40813b13",
        "title": "Interstellar",
        "year": 2014,
        "director": "Christopher Nolan",
        "duration": 169,
        "poster": "https://image.tmdb.org/t/p/w500/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg",
        "genre": ["Adventure", "Drama", "Sci-Fi"],
        "rate": 8.6
    },
    {
        "id": "aa391090-b938-42eb-b520-86ea0aa3917b",
        "title": "Parasite",
        "year": 2019,
        "director": "Bong Joon Ho",
        "duration": 132,
        "poster": "https://image.tmdb.org/t/p/w500/7IiTTgloJzvGI1TAYymCfbfl3vT.jpg",
        "genre": ["Comedy", "Drama", "Thriller"],
        "rate": 8.5
    },
    {
        "id": "2e6900e2-0b48-4fb6-ad48-09c7086e54fe",
        "title": "The Exorcist",
        "year": 1973,
        "director": "William Friedkin",
        "duration": 122,
        "poster": "https://image.tmdb.org/t/p/w500/5x0CeVHJI8tcDx8tUUwYHQSNILq.jpg",
        "genre": ["Horror"],
        "rate": 8.1
    }
]

def load_seed_movies() -> List[Movie]:
    """Validate the seed catalog; a broken entry fails fast at startup"""
    return [Movie.model_validate(movie) for movie in MOVIES]
