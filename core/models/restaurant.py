"""Restaurant model."""

from typing import ClassVar

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.constants import MAX_PRICE_RANGE, MIN_PRICE_RANGE


class Restaurant(models.Model):
    """Restaurant model matching the restaurants table.

    One row per dining establishment. ``stars`` is a denormalized copy of
    the average review score; see ``core.services.rating_service`` for how
    it is kept current. ``review_count`` is the count reported by the
    source platform and is not derived from the reviews table.
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255)
    categories = models.CharField(max_length=255, blank=True, default="")
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    district = models.CharField(max_length=100, blank=True, default="")
    address = models.CharField(max_length=255, blank=True, default="")
    stars = models.FloatField(null=True, blank=True)
    review_count = models.PositiveIntegerField(default=0)
    price_range = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[
            MinValueValidator(MIN_PRICE_RANGE),
            MaxValueValidator(MAX_PRICE_RANGE),
        ],
    )
    platform = models.CharField(max_length=50, blank=True, default="")

    class Meta:
        """Django model metadata."""

        db_table = "restaurants"
        ordering: ClassVar[list[str]] = ["name"]
        indexes: ClassVar[list[models.Index]] = [
            models.Index(fields=["district"], name="restaurants_district_idx"),
        ]

    @property
    def category_list(self) -> list[str]:
        """Return the category tags as a list of trimmed, non-empty strings."""
        return [tag.strip() for tag in self.categories.split(",") if tag.strip()]

    def __str__(self) -> str:
        """Return string representation of restaurant."""
        return f"{self.name} ({self.district})" if self.district else self.name

    def __repr__(self) -> str:
        """Return detailed representation of restaurant."""
        return (
            f"<Restaurant(id={self.id}, name='{self.name}', "
            f"stars={self.stars}, review_count={self.review_count})>"
        )
