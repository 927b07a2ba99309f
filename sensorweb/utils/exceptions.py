class DomainError(Exception):
    """Base domain error."""


class NotFoundError(DomainError):
    pass


class DataAccessError(DomainError):
    """Raised when a query against the series store fails."""
