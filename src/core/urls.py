"""Root URL configuration for the article moderation API."""
from django.conf import settings
from django.urls import include, path, re_path
from django.views.static import serve
from drf_spectacular.views import SpectacularAPIView

from .views import HealthView

urlpatterns = [
    path("", HealthView.as_view(), name="health"),
    path("api/users/", include("authentication.urls")),
    path("api/articles/", include("articles.urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    re_path(r"^uploads/(?P<path>.+)$", serve, {"document_root": settings.MEDIA_ROOT}, name="uploads"),
]
