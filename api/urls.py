from django.urls import path
from .views import ContentPreviewView

app_name = 'api'

urlpatterns = [
    path('preview/', ContentPreviewView.as_view(), name='content-preview'),
]
