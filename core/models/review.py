"""Review model."""

from typing import ClassVar

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Q

from core.constants import MAX_REVIEW_SCORE, MIN_REVIEW_SCORE
from core.models.restaurant import Restaurant


class Review(models.Model):
    """Review model matching the reviews table.

    One row per user-submitted review with a 1-5 score. The ``service``
    column references the reviewed restaurant.
    """

    id = models.BigAutoField(primary_key=True)
    body = models.TextField(blank=True, default="")
    title = models.CharField(max_length=255, blank=True, default="")
    score = models.PositiveSmallIntegerField(
        validators=[
            MinValueValidator(MIN_REVIEW_SCORE),
            MaxValueValidator(MAX_REVIEW_SCORE),
        ],
    )
    likes = models.PositiveIntegerField(default=0)
    author_id = models.CharField(max_length=100)
    service = models.ForeignKey(
        Restaurant,
        on_delete=models.CASCADE,
        related_name="reviews",
        db_column="service",
    )
    date = models.DateField(null=True, blank=True)
    platform = models.CharField(max_length=50, blank=True, default="")

    class Meta:
        """Django model metadata."""

        db_table = "reviews"
        ordering: ClassVar[list[str]] = ["-date", "-id"]
        indexes: ClassVar[list[models.Index]] = [
            models.Index(fields=["author_id"], name="reviews_author_id_idx"),
        ]
        constraints: ClassVar[list[models.BaseConstraint]] = [
            models.CheckConstraint(
                condition=Q(score__gte=MIN_REVIEW_SCORE)
                & Q(score__lte=MAX_REVIEW_SCORE),
                name="reviews_score_range",
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of review."""
        return f"Review {self.id}: {self.score} stars for restaurant {self.service_id}"

    def __repr__(self) -> str:
        """Return detailed representation of review."""
        return (
            f"<Review(id={self.id}, "
            f"service_id={self.service_id}, "
            f"author_id='{self.author_id}', "
            f"score={self.score})>"
        )
