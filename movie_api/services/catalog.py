"""Movie CRUD on top of the record store."""

import logging

from movie_api.errors import ConcurrencyConflictError, InvalidArgumentError, NotFoundError
from movie_api.models import Movie, MovieCreate
from movie_api.services.store import MovieStore

logger = logging.getLogger(__name__)


class MovieCatalogService:
    def __init__(self, store: MovieStore):
        self._store = store

    def list_movies(self) -> list[Movie]:
        return self._store.list_all()

    def get_movie(self, movie_id: int) -> Movie:
        movie = self._store.find_by_id(movie_id)
        if movie is None:
            raise NotFoundError(f"Movie {movie_id} not found")
        return movie

    def create_movie(self, data: MovieCreate) -> Movie:
        movie = self._store.add(data)
        logger.info("Created movie id=%d title=%r", movie.id, movie.title)
        return movie

    def update_movie(self, movie_id: int, movie: Movie) -> None:
        """
        Replace the stored record with `movie`.

        A write conflict on a record that no longer exists is reported as
        NotFoundError; any other conflict propagates unchanged.
        """
        if movie_id != movie.id:
            raise InvalidArgumentError(
                f"Path id {movie_id} does not match body id {movie.id}"
            )
        try:
            self._store.save(movie)
        except ConcurrencyConflictError:
            if not self._store.exists(movie_id):
                raise NotFoundError(f"Movie {movie_id} not found") from None
            raise
        logger.info("Updated movie id=%d", movie_id)

    def delete_movie(self, movie_id: int) -> None:
        movie = self.get_movie(movie_id)
        self._store.remove(movie)
        logger.info("Deleted movie id=%d title=%r", movie.id, movie.title)
