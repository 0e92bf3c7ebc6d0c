"""Views for the graph landing page"""
from django.shortcuts import render
from django.views import View

from network.services.graph_assembler import get_graph


class GraphPageView(View):
    """Render the interactive follow graph"""

    def get(self, request):
        """
        Render the page with the current graph embedded as JSON so the widget
        can draw immediately; the page refreshes it from the API after edits.
        """
        graph = get_graph()
        context = {
            'graph': graph.as_dict(),
            'user_count': len(graph.nodes),
            'edge_count': len(graph.edges),
            'graph_error': graph.error,
        }
        return render(request, 'index.html', context)
