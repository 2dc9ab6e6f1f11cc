"""Record store interface the movie services depend on."""

from abc import ABC, abstractmethod

from movie_api.models import Movie, MovieCreate


class MovieStore(ABC):
    """Unordered collection of movie records.

    Every read returns a materialized snapshot; callers may keep and iterate
    it freely without affecting the store.
    """

    @abstractmethod
    def list_all(self) -> list[Movie]:
        """Return a snapshot of every stored record."""

    @abstractmethod
    def find_by_id(self, movie_id: int) -> Movie | None:
        """Return the record with this id, or None when there is none."""

    @abstractmethod
    def exists(self, movie_id: int) -> bool:
        """Tell whether a record with this id is stored."""

    @abstractmethod
    def add(self, movie: MovieCreate) -> Movie:
        """Insert a new record and return it with its store-assigned id."""

    @abstractmethod
    def save(self, movie: Movie) -> None:
        """Commit modifications of an existing record, or raise ConcurrencyConflictError."""

    @abstractmethod
    def remove(self, movie: Movie) -> None:
        """Delete a stored record, or raise ConcurrencyConflictError."""
