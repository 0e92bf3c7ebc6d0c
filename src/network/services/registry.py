"""User registry: creating and listing graph members."""

from __future__ import annotations

import logging
from typing import Any, List

from django.db import DatabaseError

from ..models import User
from .errors import InternalError, ValidationError

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = User._meta.get_field("name").max_length


def create_user(name: Any) -> User:
    """
    Create a user from a display name.

    Args:
        name: Raw value from the request body. Must be a string that is
            non-empty once surrounding whitespace is stripped.

    Returns:
        User: The newly stored user with the trimmed name.

    Raises:
        ValidationError: If the name is missing, not a string, blank or too long.
        InternalError: If the database rejects the insert.
    """
    if not isinstance(name, str) or not name.strip():
        logger.info("Rejected user creation with invalid name: %r", name)
        raise ValidationError("name is required")

    cleaned = name.strip()
    if len(cleaned) > NAME_MAX_LENGTH:
        logger.info("Rejected user creation with %d character name", len(cleaned))
        raise ValidationError(f"name must be at most {NAME_MAX_LENGTH} characters")

    try:
        user = User.objects.create(name=cleaned)
    except DatabaseError as exc:
        logger.exception("Failed to create user %r: %s", cleaned, exc)
        raise InternalError("failed to create user") from exc

    logger.info("Created user %s (%s)", user.pk, user.name)
    return user


def list_users() -> List[User]:
    """Return every user ordered by id."""
    try:
        return list(User.objects.order_by("pk"))
    except DatabaseError as exc:
        logger.exception("Failed to list users: %s", exc)
        raise InternalError("failed to list users") from exc
