"""Article lifecycle: submission, moderation, and the public read views."""

import logging
import re
from typing import Tuple

from django.db import DatabaseError, transaction
from django.db.models import QuerySet
from django.utils.text import slugify
from rest_framework.exceptions import NotAuthenticated, NotFound, PermissionDenied, ValidationError

from authentication.models import Role
from core.exceptions import Conflict

from .models import Article, ArticleStatus, REVIEW_DECISIONS
from .uploads import discard_image, store_image

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[^a-z0-9]+")


def slugify_title(title: str) -> str:
    """Lowercase, ASCII-fold, and collapse every non-alphanumeric run to '-'."""
    return _SEPARATORS.sub("-", slugify(title)).strip("-")


class ArticleService:
    """Create articles as pending and move them through moderation."""

    @classmethod
    def submit(cls, principal, title: str, description: str, image) -> Article:
        """Store the image, then insert a pending article owned by ``principal``.

        The upload is written first; if the insert fails the stored file is
        removed before the database error propagates.
        """
        if not getattr(principal, "is_authenticated", False):
            raise NotAuthenticated("No token provided")
        if not title or not description:
            raise ValidationError("Title and description are required")
        if image is None:
            raise ValidationError("Image file is required")

        slug = slugify_title(title)
        if not slug:
            raise ValidationError("Title must contain at least one letter or digit")

        image_name = store_image(image)
        try:
            with transaction.atomic():
                article = Article.objects.create(
                    owner_id=principal.pk,
                    title=title,
                    slug=slug,
                    description=description,
                    image=image_name,
                    status=ArticleStatus.PENDING,
                )
        except DatabaseError:
            logger.error("Insert failed for upload %s; removing orphaned file", image_name)
            discard_image(image_name)
            raise

        logger.info("Article %s submitted by %s (slug=%s)", article.pk, principal.pk, slug)
        return article

    @classmethod
    def pending(cls, principal) -> QuerySet[Article]:
        cls._require_admin(principal)
        return Article.objects.filter(status=ArticleStatus.PENDING)

    @classmethod
    def review(cls, principal, article_id, decision: str) -> Tuple[Article, bool]:
        """Apply an admin decision; return the article and whether it changed.

        Re-applying the current decision is a no-op. Reversing a decision is a
        conflict because approved and rejected are terminal.
        """
        cls._require_admin(principal)
        if decision not in REVIEW_DECISIONS:
            raise ValidationError({"status": ["Invalid status"]})

        with transaction.atomic():
            try:
                article = Article.objects.select_for_update().get(pk=article_id)
            except Article.DoesNotExist:
                raise NotFound("Article not found")

            if article.status == decision:
                return article, False

            if not article.can_transition_to(decision):
                raise Conflict(f"Article has already been {article.status}")

            article.status = decision
            article.save(update_fields=["status"])

        logger.info("Article %s %s by %s", article.pk, decision, principal.pk)
        return article, True

    @classmethod
    def approved(cls) -> QuerySet[Article]:
        return Article.objects.filter(status=ArticleStatus.APPROVED)

    @classmethod
    def rejected(cls) -> QuerySet[Article]:
        return Article.objects.filter(status=ArticleStatus.REJECTED)

    @classmethod
    def get_by_slug(cls, slug: str) -> Article:
        """Return the newest approved article with ``slug``."""
        article = cls.approved().filter(slug=slug).order_by("-created_at", "-id").first()
        if article is None:
            logger.info("No approved article for slug %r", slug)
            raise NotFound("Article not found")
        return article

    @staticmethod
    def _require_admin(principal) -> None:
        if getattr(principal, "role", None) != Role.ADMIN:
            raise PermissionDenied("Access denied")


__all__ = ["ArticleService", "slugify_title"]
