from typing import Iterable, List, Optional

from ..schemas.movie import Movie

class MovieRepository:
    """
    Ordered in-memory collection of movie records.

    Nothing here awaits, so each call runs to completion before the event loop
    can switch to another request.
    """
    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = list(movies or [])

    def __len__(self) -> int:
        return len(self._movies)

    def __contains__(self, movie_id: object) -> bool:
        return self._index_of(movie_id) is not None

    def list_all(self) -> List[Movie]:
        return list(self._movies)

    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        index = self._index_of(movie_id)
        return self._movies[index] if index is not None else None

    def append(self, movie: Movie) -> Movie:
        """Add a validated record carrying a fresh id to the end of the collection"""
        self._movies.append(movie)
        return movie

    def remove_by_id(self, movie_id: str) -> bool:
        index = self._index_of(movie_id)
        if index is None:
            return False
        del self._movies[index]
        return True

    def replace_by_id(self, movie_id: str, movie: Movie) -> bool:
        """Swap the stored record in place, keeping its position"""
        index = self._index_of(movie_id)
        if index is None:
            return False
        self._movies[index] = movie
        return True

    def _index_of(self, movie_id: object) -> Optional[int]:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return None
