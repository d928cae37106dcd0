"""
URL configuration for afriwiki project.

Encyclopedia pages are served by the wiki app, the editor preview endpoint
by the api app.
"""

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path('', include('wiki.urls')),
    path('api/v1/', include('api.urls')),
]
