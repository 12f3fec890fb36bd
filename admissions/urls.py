"""
Admissions URL Configuration
"""
from django.urls import path
from .views import ApplicationSubmitView, ApplicationListView, ApplicationDetailView

app_name = 'admissions'

urlpatterns = [
    path('submit-application', ApplicationSubmitView.as_view(), name='submit'),
    path('applications', ApplicationListView.as_view(), name='list'),
    path('applications/<uuid:id>', ApplicationDetailView.as_view(), name='detail'),
]
