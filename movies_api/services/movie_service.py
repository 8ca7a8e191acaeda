import logging
import uuid
from typing import Any, List, Optional

from ..exceptions import MovieNotFoundError, MovieValidationError
from ..repositories.movie_repository import MovieRepository
from ..schemas.movie import Movie, validate_movie, validate_partial_movie

logger = logging.getLogger(__name__)

class MovieService:
    def __init__(self, movie_repo: MovieRepository):
        self.movie_repo = movie_repo

    def list_movies(self, genre: Optional[str] = None) -> List[Movie]:
        """All movies in stored order, optionally restricted to one genre (case-insensitive)"""
        movies = self.movie_repo.list_all()
        if not genre:
            return movies

        wanted = genre.lower()
        return [
            movie for movie in movies
            if any(g.value.lower() == wanted for g in movie.genre)
        ]

    def get_movie(self, movie_id: str) -> Movie:
        movie = self.movie_repo.get_by_id(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    def create_movie(self, payload: Any) -> Movie:
        result = validate_movie(payload)
        if not result.success:
            raise MovieValidationError(result.issues)

        movie = Movie(id=self._new_id(), **result.data.model_dump())
        self.movie_repo.append(movie)
        logger.info("Movie created", extra={"movie_id": movie.id})
        return movie

    def delete_movie(self, movie_id: str) -> None:
        if not self.movie_repo.remove_by_id(movie_id):
            raise MovieNotFoundError(movie_id)
        logger.info("Movie deleted", extra={"movie_id": movie_id})

    def update_movie(self, movie_id: str, payload: Any) -> Movie:
        # Payload is checked before the lookup: a bad body is a 400 even for unknown ids
        result = validate_partial_movie(payload)
        if not result.success:
            raise MovieValidationError(result.issues)

        current = self.get_movie(movie_id)
        updated = current.model_copy(update=result.data)
        self.movie_repo.replace_by_id(movie_id, updated)
        logger.info("Movie updated", extra={"movie_id": movie_id})
        return updated

    def _new_id(self) -> str:
        while True:
            movie_id = str(uuid.uuid4())
            if movie_id not in self.movie_repo:
                return movie_id
