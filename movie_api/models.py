"""Pydantic request/response schemas for the Movie API."""

from pydantic import BaseModel, Field


class MovieBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200, examples=["Dune"])
    genre: str = Field(..., min_length=1, max_length=100, examples=["Sci-Fi"])
    year: int | None = Field(None, ge=1888, le=2100)
    director: str | None = Field(None, max_length=200)
    rating: float | None = Field(None, ge=0, le=10)


class MovieCreate(MovieBase):
    pass


class Movie(MovieBase):
    id: int


# Request / Response

class MovieListResponse(BaseModel):
    count: int
    movies: list[Movie]


class ErrorResponse(BaseModel):
    detail: str
    error: str


class HealthResponse(BaseModel):
    status: str
    database: bool
