"""Shared fixtures: an in-memory record store and an app client on a temp database."""

from collections.abc import Iterable

import pytest
from fastapi.testclient import TestClient

from movie_api.config import settings
from movie_api.errors import ConcurrencyConflictError
from movie_api.main import app
from movie_api.models import Movie, MovieCreate
from movie_api.services.store import MovieStore


class InMemoryMovieStore(MovieStore):
    def __init__(self, movies: Iterable[Movie] = ()):
        self._movies: dict[int, Movie] = {m.id: m for m in movies}
        self._next_id = max(self._movies, default=0) + 1
        self.list_calls = 0

    def list_all(self) -> list[Movie]:
        self.list_calls += 1
        return list(self._movies.values())

    def find_by_id(self, movie_id: int) -> Movie | None:
        return self._movies.get(movie_id)

    def exists(self, movie_id: int) -> bool:
        return movie_id in self._movies

    def add(self, movie: MovieCreate) -> Movie:
        created = Movie(id=self._next_id, **movie.model_dump())
        self._movies[created.id] = created
        self._next_id += 1
        return created

    def save(self, movie: Movie) -> None:
        if movie.id not in self._movies:
            raise ConcurrencyConflictError(f"Movie {movie.id} was not updated")
        self._movies[movie.id] = movie

    def remove(self, movie: Movie) -> None:
        if self._movies.pop(movie.id, None) is None:
            raise ConcurrencyConflictError(f"Movie {movie.id} was not deleted")


@pytest.fixture()
def sample_movies() -> list[Movie]:
    return [
        Movie(id=1, title="Dune", genre="Sci-Fi", year=2021),
        Movie(id=2, title="Dune Part Two", genre="Sci-Fi", year=2024),
        Movie(id=3, title="Amelie", genre="Drama", year=2001),
    ]


@pytest.fixture()
def store(sample_movies) -> InMemoryMovieStore:
    return InMemoryMovieStore(sample_movies)


@pytest.fixture()
def empty_store() -> InMemoryMovieStore:
    return InMemoryMovieStore()


@pytest.fixture()
def make_store():
    return InMemoryMovieStore


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "db_path", tmp_path / "movies.db")
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def seeded_client(client, sample_movies):
    for movie in sample_movies:
        app.state.store.add(MovieCreate(**movie.model_dump(exclude={"id"})))
    return client
