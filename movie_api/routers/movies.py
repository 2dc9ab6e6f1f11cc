"""Movie CRUD, listing, search and random-pick endpoints."""

from http import HTTPStatus

from fastapi import APIRouter, Request, Response

from movie_api.dependencies import CatalogServiceDep, QueryServiceDep
from movie_api.models import ErrorResponse, Movie, MovieCreate, MovieListResponse

router = APIRouter(prefix="/movies", tags=["movies"])

_NOT_FOUND = {HTTPStatus.NOT_FOUND.value: {"model": ErrorResponse}}
_BAD_REQUEST = {HTTPStatus.BAD_REQUEST.value: {"model": ErrorResponse}}


def _movie_list(movies: list[Movie]) -> MovieListResponse:
    return MovieListResponse(count=len(movies), movies=movies)


@router.get("", response_model=MovieListResponse)
def list_movies(catalog: CatalogServiceDep):
    """List every movie in the database."""
    return _movie_list(catalog.list_movies())


# Static paths go before /{movie_id} so they are not parsed as an id.

@router.get("/titles", response_model=list[str])
def list_titles(queries: QueryServiceDep):
    """All movie titles in alphabetical order."""
    return queries.list_titles()


@router.get("/genres", response_model=list[str])
def list_genres(queries: QueryServiceDep):
    """All movie genres in alphabetical order, one entry per movie."""
    return queries.list_genres()


@router.get("/search/title/{title}", response_model=MovieListResponse)
def search_by_title(title: str, queries: QueryServiceDep):
    """Movies whose title equals `title`, ignoring case."""
    return _movie_list(queries.search_exact_title(title))


@router.get("/search/keyword/{keyword}", response_model=MovieListResponse)
def search_by_keyword(keyword: str, queries: QueryServiceDep):
    """Movies whose title contains `keyword` (case-sensitive)."""
    return _movie_list(queries.search_title(keyword))


@router.get("/search/genre/{genre}", response_model=MovieListResponse)
def search_by_genre(genre: str, queries: QueryServiceDep):
    """
    Movies whose genre contains `genre` (case-sensitive).
    Use /movies/genres to find genres to search for.
    """
    return _movie_list(queries.search_genre(genre))


@router.get("/random", response_model=Movie, responses=_NOT_FOUND)
def random_movie(queries: QueryServiceDep):
    """A single random movie."""
    return queries.random_movie()


@router.get("/random/genre/{genre}", response_model=Movie, responses=_NOT_FOUND)
def random_movie_by_genre(genre: str, queries: QueryServiceDep):
    """A single random movie among those whose genre contains `genre`."""
    return queries.random_movie_by_genre(genre)


@router.get("/random/list/{count}", response_model=MovieListResponse, responses=_BAD_REQUEST)
def random_movie_list(count: int, queries: QueryServiceDep):
    """`count` distinct random movies; 400 if fewer than `count` exist."""
    return _movie_list(queries.random_movie_list(count))


@router.get("/{movie_id}", response_model=Movie, responses=_NOT_FOUND)
def get_movie(movie_id: int, catalog: CatalogServiceDep):
    """Get a single movie by its id."""
    return catalog.get_movie(movie_id)


@router.post("", response_model=Movie, status_code=HTTPStatus.CREATED)
def create_movie(movie: MovieCreate, request: Request, response: Response, catalog: CatalogServiceDep):
    created = catalog.create_movie(movie)
    response.headers["Location"] = str(request.url_for("get_movie", movie_id=created.id))
    return created


@router.put(
    "/{movie_id}",
    status_code=HTTPStatus.NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def update_movie(movie_id: int, movie: Movie, catalog: CatalogServiceDep):
    """Replace a movie. The body id must match the path id."""
    catalog.update_movie(movie_id, movie)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.delete(
    "/{movie_id}",
    status_code=HTTPStatus.NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
def delete_movie(movie_id: int, catalog: CatalogServiceDep):
    catalog.delete_movie(movie_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
