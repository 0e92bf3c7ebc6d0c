"""
URL routes for the network JSON API.
"""
from django.urls import path

from .views import GraphAPIView, UsersAPIView, follow

app_name = 'network'

urlpatterns = [
    # GET lists users, POST creates one.
    path('users/', UsersAPIView.as_view(), name='users'),
    path('follow/', follow, name='follow'),
    path('graph/', GraphAPIView.as_view(), name='graph'),
]
