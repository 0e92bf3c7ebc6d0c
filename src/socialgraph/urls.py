"""
URL configuration for the social graph project.
"""
from django.contrib import admin
from django.urls import path, include
from .views import GraphPageView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', GraphPageView.as_view(), name='home'),
    path('graph/', GraphPageView.as_view(), name='graph-page'),
    path('api/', include('network.urls')),
]
