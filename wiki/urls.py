from django.urls import path
from .views import EntrepreneurDetailView

urlpatterns = [
    path('e/<slug:slug>/', EntrepreneurDetailView.as_view(), name='entrepreneur_detail'),
]
