"""Article submission, moderation, and public read endpoints."""

from typing import Any

from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import generics, status
from rest_framework.parsers import FormParser, MultiPartParser

from access_control.permissions import IsAuthenticatedPrincipal, RejectedListPermission, RolePermission
from authentication.models import Role
from core.response import BaseAPIView, EnvelopeMixin, api_response
from .serializers import ArticleSerializer, ArticleSubmitSerializer, ReviewSerializer
from .services import ArticleService


class ArticleListView(EnvelopeMixin, generics.ListAPIView):
    """Unpaginated article list wrapped in the standard envelope."""

    serializer_class = ArticleSerializer
    pagination_class = None


class SubmitArticleView(BaseAPIView):
    permission_classes = [IsAuthenticatedPrincipal]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(request=ArticleSubmitSerializer, responses={201: ArticleSerializer})
    def post(self, request):
        """Submit an article with its image; it starts out pending."""
        serializer = ArticleSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        article = ArticleService.submit(
            request.user,
            title=serializer.validated_data["title"],
            description=serializer.validated_data["description"],
            image=serializer.validated_data["image"],
        )
        payload = {
            "message": "Article submitted successfully",
            "article": ArticleSerializer(article, context={"request": request}).data,
        }
        return api_response(payload, status=status.HTTP_201_CREATED)


class PendingArticlesView(ArticleListView):
    permission_classes = [RolePermission]
    required_role = Role.ADMIN

    def get_queryset(self):
        return ArticleService.pending(self.request.user)


class ReviewArticleView(BaseAPIView):
    permission_classes = [RolePermission]
    required_role = Role.ADMIN

    @extend_schema(request=ReviewSerializer, responses={200: ArticleSerializer})
    def post(self, request, article_id: str):
        """Approve or reject a pending article."""
        serializer = ReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        decision = serializer.validated_data["status"]
        article, changed = ArticleService.review(request.user, article_id, decision)
        message = f"Article has been {decision} successfully"
        if not changed:
            message = f"Article was already {decision}"
        return api_response(
            {"message": message, "article": ArticleSerializer(article, context={"request": request}).data}
        )


class ApprovedArticlesView(ArticleListView):
    authentication_classes: list[Any] = []
    permission_classes: list[Any] = []

    def get_queryset(self):
        return ArticleService.approved()


class RejectedArticlesView(ArticleListView):
    permission_classes = [RejectedListPermission]
    required_role = Role.ADMIN

    def get_authenticators(self):
        if getattr(settings, "REJECTED_ARTICLES_PUBLIC", False):
            return []
        return super().get_authenticators()

    def get_queryset(self):
        return ArticleService.rejected()


class ArticleBySlugView(BaseAPIView):
    authentication_classes: list[Any] = []
    permission_classes: list[Any] = []

    @extend_schema(responses={200: ArticleSerializer})
    def get(self, request, slug: str):
        """Fetch a single approved article by slug."""
        article = ArticleService.get_by_slug(slug)
        return api_response(ArticleSerializer(article, context={"request": request}).data)


__all__ = [
    "ApprovedArticlesView",
    "ArticleBySlugView",
    "PendingArticlesView",
    "RejectedArticlesView",
    "ReviewArticleView",
    "SubmitArticleView",
]
