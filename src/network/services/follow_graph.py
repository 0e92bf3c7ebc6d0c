"""Validation and persistence of directed follow edges."""

from __future__ import annotations

import logging
import re
from typing import Any

from django.db import DatabaseError, IntegrityError, transaction

from ..models import Follow, User
from .errors import ConflictError, InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)

# Primary keys are BigAutoField (signed 64-bit).
MIN_USER_ID = -(2 ** 63)
MAX_USER_ID = 2 ** 63 - 1


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_user_id(value: Any) -> int:
    """Coerce a JSON id (int or numeric string) into an int."""
    # bool is an int subclass; true/false are not ids.
    if isinstance(value, bool):
        raise ValidationError("invalid ids")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_RE.fullmatch(text):
            return int(text)
    raise ValidationError("invalid ids")


def create_follow(follower_id: Any, following_id: Any) -> Follow:
    """
    Record that ``follower_id`` follows ``following_id``.

    Checks run in order: required fields, id format, self-follow, existence
    of both users, duplicate edge. The self-follow check happens before any
    database access.

    Raises:
        ValidationError: Missing or non-numeric ids, or a self-follow.
        NotFoundError: Either user does not exist.
        ConflictError: The edge is already stored.
        InternalError: Any other database failure.
    """
    if _is_missing(follower_id) or _is_missing(following_id):
        logger.info("Rejected follow with missing ids: %r -> %r", follower_id, following_id)
        raise ValidationError("followerId and followingId are required")

    follower_pk = parse_user_id(follower_id)
    following_pk = parse_user_id(following_id)

    if follower_pk == following_pk:
        logger.info("Rejected self-follow for user %s", follower_pk)
        raise ValidationError("cannot follow self")

    if not all(MIN_USER_ID <= pk <= MAX_USER_ID for pk in (follower_pk, following_pk)):
        logger.warning("Follow references out-of-range id: %s -> %s", follower_pk, following_pk)
        raise NotFoundError("user not found")

    try:
        found = set(
            User.objects.filter(pk__in=(follower_pk, following_pk)).values_list("pk", flat=True)
        )
    except DatabaseError as exc:
        logger.exception("Failed to look up users %s and %s: %s", follower_pk, following_pk, exc)
        raise InternalError("failed to create follow") from exc

    if follower_pk not in found or following_pk not in found:
        logger.warning("Follow references unknown user: %s -> %s", follower_pk, following_pk)
        raise NotFoundError("user not found")

    try:
        with transaction.atomic():
            if Follow.objects.filter(follower_id=follower_pk, following_id=following_pk).exists():
                raise ConflictError()
            edge = Follow.objects.create(follower_id=follower_pk, following_id=following_pk)
    except ConflictError:
        logger.warning("Duplicate follow %s -> %s", follower_pk, following_pk)
        raise
    except IntegrityError as exc:
        # A concurrent request won the race for the unique pair.
        logger.warning("Duplicate follow %s -> %s rejected by constraint", follower_pk, following_pk)
        raise ConflictError() from exc
    except DatabaseError as exc:
        logger.exception("Failed to create follow %s -> %s: %s", follower_pk, following_pk, exc)
        raise InternalError("failed to create follow") from exc

    logger.info("User %s now follows user %s", follower_pk, following_pk)
    return edge
