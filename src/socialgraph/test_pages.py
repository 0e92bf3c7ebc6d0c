from django.test import TestCase, Client
from django.urls import reverse
from unittest.mock import patch

from network.models import Follow, User
from network.services.graph_assembler import GraphView


class GraphPageViewTests(TestCase):
    def setUp(self):
        self.client = Client()
        self.ana = User.objects.create(name='Ana')
        self.bruno = User.objects.create(name='Bruno')
        Follow.objects.create(follower=self.ana, following=self.bruno)

    def test_home_renders_graph_page(self):
        response = self.client.get(reverse('home'))
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'index.html')
        self.assertContains(response, 'id="cy"')

    def test_graph_page_alias(self):
        response = self.client.get(reverse('graph-page'))
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'index.html')

    def test_context_counts(self):
        response = self.client.get(reverse('home'))
        self.assertEqual(response.context['user_count'], 2)
        self.assertEqual(response.context['edge_count'], 1)
        self.assertIsNone(response.context['graph_error'])

    def test_graph_embedded_as_json(self):
        response = self.client.get(reverse('home'))
        self.assertContains(response, '<script id="graph-data" type="application/json">')
        self.assertContains(response, f'user-{self.ana.pk}')
        self.assertEqual(
            response.context['graph']['edges'],
            [{'source': f'user-{self.ana.pk}', 'target': f'user-{self.bruno.pk}'}],
        )

    def test_page_links_api_endpoints(self):
        response = self.client.get(reverse('home'))
        self.assertContains(response, reverse('network:graph'))
        self.assertContains(response, reverse('network:users'))
        self.assertContains(response, reverse('network:follow'))

    @patch('socialgraph.views.get_graph', return_value=GraphView(error='failed to load graph'))
    def test_page_renders_when_graph_fails(self, mock_graph):
        response = self.client.get(reverse('home'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['user_count'], 0)
        self.assertEqual(response.context['graph_error'], 'failed to load graph')
