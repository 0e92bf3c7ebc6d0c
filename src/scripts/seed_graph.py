#!/usr/bin/env python3
"""
Load a demo social graph into the local database.

Usage: ``python scripts/seed_graph.py [fixture.json]``. Without an argument
the fixture named by ``SOCIAL_GRAPH_SEED_FIXTURE`` is used.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import django
from django.core.management import call_command
from django.core.management.base import CommandError


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("fixture", nargs="?", type=Path, help="fixture file to load")
    return parser.parse_args(argv)


def resolve_fixture(explicit: Optional[Path]) -> Path:
    """Return the fixture to load: the CLI argument, else the configured default."""
    if explicit is not None:
        return explicit
    from django.conf import settings

    return Path(settings.SOCIAL_GRAPH_SEED_FIXTURE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load users and follow edges, then report how many of each are stored."""
    args = _parse_args(argv)
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "socialgraph.settings")

    try:
        django.setup()
    except ModuleNotFoundError as exc:
        print(f"Django could not start, missing module: {exc.name}", file=sys.stderr)
        return 1

    fixture_path = resolve_fixture(args.fixture)
    if not fixture_path.exists():
        print(f"Seed fixture not found at {fixture_path}", file=sys.stderr)
        return 1

    try:
        call_command("loaddata", str(fixture_path))
    except CommandError as exc:
        print(f"Failed to seed graph from {fixture_path}: {exc}", file=sys.stderr)
        return 1

    from network.models import Follow, User

    print(
        f"Seeded {fixture_path.name}: "
        f"{User.objects.count()} users, {Follow.objects.count()} follows"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
