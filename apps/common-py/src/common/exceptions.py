"""Domain errors raised by the user store and the request engines."""

from uuid import UUID


class UserApiError(Exception):
    """Base class for errors the API translates into client responses."""


class UserNotFoundError(UserApiError):
    """Raised when a user with the given id does not exist."""

    def __init__(self, user_id: UUID | None) -> None:
        super().__init__(f"User {user_id} not found.")
        self.user_id = user_id


class DuplicateIdError(UserApiError):
    """Raised when inserting a user whose explicit id is already taken."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"User with id {user_id} already exists.")
        self.user_id = user_id


class BadRequestError(UserApiError):
    """Raised when a request body is absent or cannot be used."""


class MalformedPatchError(BadRequestError):
    """Raised when a patch document cannot be applied."""

    def __init__(self, message: str, index: int | None = None) -> None:
        if index is not None:
            message = f"Operation {index}: {message}"
        super().__init__(message)
        self.index = index


class ValidationFailedError(UserApiError):
    """Raised when one or more field rules fail.

    Args:
        errors: Mapping of wire field name to every message produced for it
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__("One or more validation errors occurred.")
        self.errors = errors
