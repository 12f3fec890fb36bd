"""
Site Analytics URL Configuration
"""
from django.urls import path
from .views import VisitCountView, TrackVisitView

app_name = 'analytics'

urlpatterns = [
    path('visits', VisitCountView.as_view(), name='visits'),
    path('track-visit', TrackVisitView.as_view(), name='track-visit'),
]
