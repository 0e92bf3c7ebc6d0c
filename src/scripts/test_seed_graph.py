"""Tests for the seed_graph script."""

from pathlib import Path
from unittest.mock import patch

from django.conf import settings
from django.core.management.base import CommandError
from django.db.models import F
from django.test import TestCase, override_settings

from network.models import Follow, User
from network.services.graph_assembler import get_graph
from scripts.seed_graph import main, resolve_fixture

DEFAULT_FIXTURE = Path(settings.SOCIAL_GRAPH_SEED_FIXTURE)


@patch('scripts.seed_graph.django.setup')
class SeedGraphTests(TestCase):
    """Tests for seed_graph.main"""

    def test_fixture_ships_with_project(self, mock_setup):
        self.assertTrue(DEFAULT_FIXTURE.exists())

    def test_loads_configured_fixture(self, mock_setup):
        result = main([])

        self.assertEqual(result, 0)
        mock_setup.assert_called_once()
        self.assertEqual(User.objects.count(), 4)
        self.assertEqual(Follow.objects.count(), 4)
        self.assertFalse(Follow.objects.filter(follower=F("following")).exists())

    def test_reports_counts(self, mock_setup):
        with patch('builtins.print') as mock_print:
            main([])

        mock_print.assert_called_once_with('Seeded social_graph.json: 4 users, 4 follows')

    def test_seeded_graph_is_consistent(self, mock_setup):
        main([])
        graph = get_graph()

        self.assertEqual(len(graph.nodes), 4)
        self.assertIn({'source': 'user-1', 'target': 'user-2'}, graph.edges)

    def test_explicit_path_wins(self, mock_setup):
        self.assertEqual(resolve_fixture(Path('/tmp/other.json')), Path('/tmp/other.json'))

    @override_settings(SOCIAL_GRAPH_SEED_FIXTURE='/nonexistent/social_graph.json')
    def test_configured_fixture_missing(self, mock_setup):
        self.assertEqual(main([]), 1)
        self.assertEqual(User.objects.count(), 0)

    def test_missing_fixture_argument(self, mock_setup):
        self.assertEqual(main(['/nonexistent/social_graph.json']), 1)

    @patch('scripts.seed_graph.call_command', side_effect=CommandError('bad fixture'))
    def test_loaddata_failure(self, mock_call, mock_setup):
        result = main([str(DEFAULT_FIXTURE)])

        self.assertEqual(result, 1)
        mock_call.assert_called_once_with('loaddata', str(DEFAULT_FIXTURE))

    def test_missing_dependency(self, mock_setup):
        mock_setup.side_effect = ModuleNotFoundError(name='dotenv')

        self.assertEqual(main([]), 1)
