"""JSON API views for creating users and follows and fetching the graph."""
from __future__ import annotations

import json
import logging
from typing import Dict

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .services.errors import GraphServiceError, InternalError, ValidationError
from .services.follow_graph import create_follow
from .services.graph_assembler import get_graph
from .services.registry import create_user, list_users

logger = logging.getLogger(__name__)


def _parse_json_body(request) -> Dict[str, object]:
    """Decode the request body into a dict or raise ``ValidationError``."""
    try:
        data = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError("invalid request") from exc
    if not isinstance(data, dict):
        raise ValidationError("invalid request")
    return data


def _error_response(exc: GraphServiceError) -> JsonResponse:
    return JsonResponse({'error': exc.message}, status=exc.status_code)


@method_decorator(csrf_exempt, name='dispatch')
class UsersAPIView(View):
    """Create users and list the directory used by the follow form."""

    http_method_names = ['get', 'post']

    def get(self, request):
        """
        List every user.

        Args:
            request: The HTTP request object.

        Returns:
            JsonResponse: ``{users, count}``; lists stay present on failure.
        """
        try:
            users = list_users()
        except InternalError as exc:
            return JsonResponse(
                {'users': [], 'count': 0, 'error': exc.message},
                status=exc.status_code,
            )
        payload = [{'id': user.pk, 'name': user.name} for user in users]
        return JsonResponse({'users': payload, 'count': len(payload)})

    def post(self, request):
        """
        Create a user from ``{"name": ...}``.

        Args:
            request: The HTTP request object.

        Returns:
            JsonResponse: ``{id, name}`` with status 201, or ``{error}``.
        """
        try:
            data = _parse_json_body(request)
            user = create_user(data.get('name'))
        except GraphServiceError as exc:
            return _error_response(exc)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Unexpected error while creating user: %s", exc)
            return _error_response(InternalError("failed to create user"))
        return JsonResponse({'id': user.pk, 'name': user.name}, status=201)


@require_POST
@csrf_exempt
def follow(request):
    """Create a follow edge from ``{"followerId": ..., "followingId": ...}``."""
    try:
        data = _parse_json_body(request)
        create_follow(data.get('followerId'), data.get('followingId'))
    except GraphServiceError as exc:
        return _error_response(exc)
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Unexpected error while creating follow: %s", exc)
        return _error_response(InternalError("failed to create follow"))
    return JsonResponse({'ok': True})


class GraphAPIView(View):
    """Serve the node/edge projection consumed by the graph page."""

    http_method_names = ['get']

    def get(self, request):
        """
        Return ``{nodes, edges}``.

        Args:
            request: The HTTP request object.

        Returns:
            JsonResponse: The graph, or empty lists plus ``error`` with status 500.
        """
        graph = get_graph()
        status = 500 if graph.error else 200
        return JsonResponse(graph.as_dict(), status=status)
