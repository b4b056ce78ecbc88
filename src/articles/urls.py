"""Routing for article submission, moderation, and public reads."""

from django.urls import re_path

from .views import (
    ApprovedArticlesView,
    ArticleBySlugView,
    PendingArticlesView,
    RejectedArticlesView,
    ReviewArticleView,
    SubmitArticleView,
)

urlpatterns = [
    re_path(r"^submit/?$", SubmitArticleView.as_view(), name="article-submit"),
    re_path(r"^pending/?$", PendingArticlesView.as_view(), name="article-pending"),
    re_path(r"^review/(?P<article_id>\d+)/?$", ReviewArticleView.as_view(), name="article-review"),
    re_path(r"^approved/?$", ApprovedArticlesView.as_view(), name="article-approved"),
    re_path(r"^rejected/?$", RejectedArticlesView.as_view(), name="article-rejected"),
    re_path(r"^slug/(?P<slug>[-a-zA-Z0-9_]+)/?$", ArticleBySlugView.as_view(), name="article-by-slug"),
]
