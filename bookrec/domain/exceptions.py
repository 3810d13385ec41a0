"""Domain exceptions for recommendation routing and proxying."""


class RecsysError(Exception):
    """Base class for all recommendation subsystem errors."""


class RecsysConfigurationError(RecsysError):
    """The model registry cannot be built from the configured backends."""


class ActiveBackendMisconfiguredError(RecsysConfigurationError):
    """The active model has no usable base URL."""


class UnknownModelError(RecsysError, LookupError):
    """A model key that is not present in the registry."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown recommender model: {key}")


class BackendError(RecsysError):
    """Calling or parsing the active recommendation backend failed."""


class BackendUnavailableError(BackendError):
    """The backend could not be reached or answered with a non-2xx status."""


class BackendTimeoutError(BackendError):
    """The backend did not answer within the configured deadline."""


class BackendMalformedResponseError(BackendError):
    """The backend answered with a body that is not a JSON items object."""


class BookLookupError(Exception):
    """A recommended book could not be loaded from the catalog."""

    def __init__(self, book_id: int, reason: str = "lookup failed") -> None:
        self.book_id = book_id
        super().__init__(f"Book {book_id}: {reason}")


class BookNotFoundError(BookLookupError):
    """The catalog has no book with this id."""

    def __init__(self, book_id: int) -> None:
        super().__init__(book_id, "not found")
