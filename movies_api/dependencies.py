from fastapi import Depends, Request

from .repositories.movie_repository import MovieRepository
from .services.movie_service import MovieService

# The repository lives on app.state so every app instance owns its own store
def get_movie_repository(request: Request) -> MovieRepository:
    return request.app.state.movie_repository

def get_movie_service(movie_repo: MovieRepository = Depends(get_movie_repository)) -> MovieService:
    return MovieService(movie_repo)
