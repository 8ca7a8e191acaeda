from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, status

from ..dependencies import get_movie_service
from ..schemas.movie import MessageResponse, Movie
from ..services.movie_service import MovieService

router = APIRouter(prefix="/movies", tags=["movies"])

@router.get("", response_model=List[Movie])
async def list_movies(
    genre: Optional[str] = None,
    service: MovieService = Depends(get_movie_service)
):
    """List movies, optionally filtered by genre (case-insensitive)"""
    return service.list_movies(genre)

@router.get("/{movie_id}", response_model=Movie)
async def get_movie(movie_id: str, service: MovieService = Depends(get_movie_service)):
    return service.get_movie(movie_id)

@router.post("", response_model=Movie, status_code=status.HTTP_201_CREATED)
async def create_movie(
    payload: Any = Body(None),
    service: MovieService = Depends(get_movie_service)
):
    """Create a movie; the id is generated by the server"""
    return service.create_movie(payload)

@router.delete("/{movie_id}", response_model=MessageResponse)
async def delete_movie(movie_id: str, service: MovieService = Depends(get_movie_service)):
    service.delete_movie(movie_id)
    return MessageResponse(message="Movie deleted")

@router.patch("/{movie_id}", response_model=Movie)
async def update_movie(
    movie_id: str,
    payload: Any = Body(None),
    service: MovieService = Depends(get_movie_service)
):
    """Partially update a movie; fields not in the body are kept"""
    return service.update_movie(movie_id, payload)
