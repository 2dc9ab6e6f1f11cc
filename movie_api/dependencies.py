"""FastAPI dependencies handing the request-scoped services their record store."""

from typing import Annotated

from fastapi import Depends, Request

from movie_api.services.catalog import MovieCatalogService
from movie_api.services.query import MovieQueryService
from movie_api.services.store import MovieStore


def get_store(request: Request) -> MovieStore:
    return request.app.state.store


def get_query_service(store: Annotated[MovieStore, Depends(get_store)]) -> MovieQueryService:
    return MovieQueryService(store)


def get_catalog_service(store: Annotated[MovieStore, Depends(get_store)]) -> MovieCatalogService:
    return MovieCatalogService(store)


QueryServiceDep = Annotated[MovieQueryService, Depends(get_query_service)]
CatalogServiceDep = Annotated[MovieCatalogService, Depends(get_catalog_service)]
