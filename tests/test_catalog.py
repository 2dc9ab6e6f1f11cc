"""Unit tests for CRUD orchestration and its error mapping."""

import pytest

from movie_api.errors import ConcurrencyConflictError, InvalidArgumentError, NotFoundError
from movie_api.models import Movie, MovieCreate
from movie_api.services.catalog import MovieCatalogService


@pytest.fixture()
def catalog(store):
    return MovieCatalogService(store)


class TestRead:
    def test_list(self, catalog, sample_movies):
        assert catalog.list_movies() == sample_movies

    def test_get(self, catalog):
        assert catalog.get_movie(3).title == "Amelie"

    def test_get_missing(self, catalog):
        with pytest.raises(NotFoundError):
            catalog.get_movie(42)


class TestCreate:
    def test_assigns_id(self, catalog, store):
        created = catalog.create_movie(MovieCreate(title="Heat", genre="Crime", year=1995))
        assert created.id == 4
        assert store.find_by_id(4) == created


class TestUpdate:
    def test_update(self, catalog, store):
        catalog.update_movie(1, Movie(id=1, title="Dune", genre="Sci-Fi", rating=8.0))
        assert store.find_by_id(1).rating == 8.0

    def test_id_mismatch(self, catalog):
        with pytest.raises(InvalidArgumentError):
            catalog.update_movie(1, Movie(id=2, title="Dune", genre="Sci-Fi"))

    def test_missing_becomes_not_found(self, catalog):
        with pytest.raises(NotFoundError):
            catalog.update_movie(42, Movie(id=42, title="Ghost", genre="Drama"))

    def test_conflict_on_existing_row_propagates(self, make_store, sample_movies):
        class ConflictingStore(make_store):
            def save(self, movie):
                raise ConcurrencyConflictError("row version changed")

        catalog = MovieCatalogService(ConflictingStore(sample_movies))
        with pytest.raises(ConcurrencyConflictError):
            catalog.update_movie(1, Movie(id=1, title="Dune", genre="Sci-Fi"))


class TestDelete:
    def test_delete(self, catalog, store):
        catalog.delete_movie(2)
        assert not store.exists(2)
        assert [m.id for m in store.list_all()] == [1, 3]

    def test_delete_missing(self, catalog):
        with pytest.raises(NotFoundError):
            catalog.delete_movie(42)
