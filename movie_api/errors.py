"""Named failure outcomes raised by the movie services and the record store."""


class MovieServiceError(Exception):
    code = "movie_service_error"


class NotFoundError(MovieServiceError):
    code = "not_found"


class InvalidArgumentError(MovieServiceError):
    code = "invalid_argument"


class EmptySelectionError(MovieServiceError):
    """A random pick was requested from an empty (or empty-filtered) snapshot."""

    code = "empty_selection"


class ConcurrencyConflictError(MovieServiceError):
    """The store could not apply a write because the row changed underneath it."""

    code = "concurrency_conflict"
