"""
URL configuration for the College Website Backend.

Routes are registered without trailing slashes (APPEND_SLASH is off),
matching the paths the website frontend calls.
"""
from django.contrib import admin
from django.urls import path, include

from core.views import health_check, api_root

urlpatterns = [
    path('', health_check, name='health'),
    path('admin/', admin.site.urls),
    path('api', api_root, name='api-root'),
    path('api/', include('contact.urls')),  # Enquiries
    path('api/', include('admissions.urls')),  # Applications
    path('api/analytics/', include('analytics.urls')),  # Visit counter
    path('api/admin/', include('accounts.urls')),  # Admin password check
]
