"""Projection of users and follow edges into the node/edge view used by the graph page."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from django.conf import settings
from django.db import transaction

from ..models import User

logger = logging.getLogger(__name__)


@dataclass
class GraphView:
    nodes: List[Dict[str, str]] = field(default_factory=list)
    edges: List[Dict[str, str]] = field(default_factory=list)
    error: Optional[str] = None

    def as_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "nodes": self.nodes,
            "edges": self.edges,
        }
        if self.error:
            payload["error"] = self.error
        return payload


def node_id(user_pk: int) -> str:
    """Return the stable graph id for a user primary key, e.g. ``user-1``."""
    prefix = getattr(settings, "SOCIAL_GRAPH_NODE_PREFIX", "user-")
    return f"{prefix}{user_pk}"


def _load_users() -> List[User]:
    with transaction.atomic():
        return list(User.objects.order_by("pk").prefetch_related("following"))


def get_graph() -> GraphView:
    """
    Build the graph view from every user and their outgoing follows.

    Never raises: the view comes back with empty lists
    and ``error`` set so callers can always iterate ``nodes`` and ``edges``.
    """
    try:
        users = _load_users()
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Failed to load graph: %s", exc)
        return GraphView(error="failed to load graph")

    nodes = [{"id": node_id(user.pk), "label": user.name} for user in users]
    edges = [
        {"source": node_id(user.pk), "target": node_id(followed.pk)}
        for user in users
        for followed in user.following.all()
    ]
    logger.debug("Assembled graph with %d nodes and %d edges", len(nodes), len(edges))
    return GraphView(nodes=nodes, edges=edges)
