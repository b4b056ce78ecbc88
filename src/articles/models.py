"""Article model and its moderation state machine."""

from django.conf import settings
from django.db import models


class ArticleStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    APPROVED = "approved", "Approved"
    REJECTED = "rejected", "Rejected"


# Approved and rejected are terminal: there is no re-review.
ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    ArticleStatus.PENDING: frozenset({ArticleStatus.APPROVED, ArticleStatus.REJECTED}),
    ArticleStatus.APPROVED: frozenset(),
    ArticleStatus.REJECTED: frozenset(),
}

REVIEW_DECISIONS = (ArticleStatus.APPROVED, ArticleStatus.REJECTED)


class Article(models.Model):
    """User-submitted article awaiting or past moderation."""

    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="articles")
    title = models.CharField(max_length=255)
    # Not unique: two articles with the same title share a slug.
    slug = models.SlugField(max_length=255)
    description = models.TextField()
    image = models.FileField(max_length=255)
    status = models.CharField(
        max_length=16,
        choices=ArticleStatus.choices,
        default=ArticleStatus.PENDING,
        db_index=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title

    def can_transition_to(self, target: str) -> bool:
        return target in ALLOWED_TRANSITIONS.get(self.status, frozenset())


__all__ = ["ALLOWED_TRANSITIONS", "Article", "ArticleStatus", "REVIEW_DECISIONS"]
