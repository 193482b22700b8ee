"""Exceptions raised by the link registry.

Each exception carries the HTTP status code the web layer answers with.

Classes:
    LinkRegistryError:
        Generic base class for link registry errors.

    InvalidInputError:
        Raised when a create request has a malformed URL or expiration.

    LinkNotFoundError:
        Raised when no record exists for a short id.

    LinkGoneError:
        Raised when a short id existed but its record has expired.

    LinkConflictError:
        Raised by a store when inserting over a live record.

    ShortIdExhaustedError:
        Raised when no free short id was found within the retry limit.
"""


class LinkRegistryError(Exception):
    """Generic base class for link registry errors."""

    status_code = 500
    title = "Internal server error"


class InvalidInputError(LinkRegistryError, ValueError):
    """Exception raised when request input fails validation."""

    status_code = 400
    title = "Invalid input"


class LinkNotFoundError(LinkRegistryError):
    """Exception raised when a short id is unknown."""

    status_code = 404
    title = "Not found"

    def __init__(self, short_id: str):
        super().__init__(f"Short link '{short_id}' not found")
        self.short_id = short_id


class LinkGoneError(LinkRegistryError):
    """Exception raised when a short link has expired."""

    status_code = 410
    title = "Gone"

    def __init__(self, short_id: str):
        super().__init__(f"Short link '{short_id}' has expired")
        self.short_id = short_id


class LinkConflictError(LinkRegistryError):
    """Exception raised when a short id is already taken by a live record."""

    status_code = 409
    title = "Conflict"

    def __init__(self, short_id: str):
        super().__init__(f"Short id '{short_id}' already exists")
        self.short_id = short_id


class ShortIdExhaustedError(LinkRegistryError):
    """Exception raised when collision retries run out."""

    pass
