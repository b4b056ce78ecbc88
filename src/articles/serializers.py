"""Serializers for article submission, review, and read views."""

from datetime import timezone

from rest_framework import serializers

from .models import Article, REVIEW_DECISIONS
from .uploads import public_image_url


class ArticleSubmitSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    image = serializers.FileField()


class ReviewSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=REVIEW_DECISIONS,
        error_messages={"invalid_choice": "Invalid status"},
    )


class ArticleSerializer(serializers.ModelSerializer):
    """Public article payload with an absolute image URL and upload date."""

    owner = serializers.PrimaryKeyRelatedField(read_only=True)
    image_url = serializers.SerializerMethodField()
    date_uploaded = serializers.SerializerMethodField()

    class Meta:
        """Every field is read-only; articles change only through review."""
        model = Article
        fields = [
            "id",
            "owner",
            "title",
            "slug",
            "description",
            "image_url",
            "status",
            "created_at",
            "date_uploaded",
        ]
        read_only_fields = fields

    def get_image_url(self, obj: Article) -> str:
        return public_image_url(obj.image.name, self.context.get("request"))

    def get_date_uploaded(self, obj: Article) -> str:
        return obj.created_at.astimezone(timezone.utc).date().isoformat()


__all__ = ["ArticleSerializer", "ArticleSubmitSerializer", "ReviewSerializer"]
