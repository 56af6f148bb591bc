"""
Root URL configuration for the subway station project.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('station.api_urls')),
]

# Custom error handlers
handler404 = 'core.error_handlers.handler404'
handler500 = 'core.error_handlers.handler500'
handler403 = 'core.error_handlers.handler403'
handler400 = 'core.error_handlers.handler400'
