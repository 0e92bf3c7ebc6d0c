"""Error taxonomy shared by the network services and mapped to HTTP by the views."""

from __future__ import annotations


class GraphServiceError(Exception):
    """Base error carrying a short client-facing message and an HTTP status."""

    status_code = 500
    default_message = "unexpected error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(GraphServiceError):
    """Malformed or missing input, including self-follows."""

    status_code = 400
    default_message = "invalid request"


class NotFoundError(GraphServiceError):
    """A referenced user does not exist."""

    status_code = 404
    default_message = "user not found"


class ConflictError(GraphServiceError):
    """The follow relation already exists."""

    # Reported as 400 to keep the create-follow contract at 400/404.
    status_code = 400
    default_message = "follow relation already exists"


class InternalError(GraphServiceError):
    """Unexpected failure from the database."""

    status_code = 500
