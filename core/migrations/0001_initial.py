import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Restaurant",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                (
                    "categories",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                ("latitude", models.FloatField(blank=True, null=True)),
                ("longitude", models.FloatField(blank=True, null=True)),
                (
                    "district",
                    models.CharField(blank=True, default="", max_length=100),
                ),
                ("address", models.CharField(blank=True, default="", max_length=255)),
                ("stars", models.FloatField(blank=True, null=True)),
                ("review_count", models.PositiveIntegerField(default=0)),
                (
                    "price_range",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(4),
                        ],
                    ),
                ),
                ("platform", models.CharField(blank=True, default="", max_length=50)),
            ],
            options={
                "db_table": "restaurants",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["district"], name="restaurants_district_idx")
                ],
            },
        ),
        migrations.CreateModel(
            name="Review",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("body", models.TextField(blank=True, default="")),
                ("title", models.CharField(blank=True, default="", max_length=255)),
                (
                    "score",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ]
                    ),
                ),
                ("likes", models.PositiveIntegerField(default=0)),
                ("author_id", models.CharField(max_length=100)),
                (
                    "service",
                    models.ForeignKey(
                        db_column="service",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="reviews",
                        to="core.restaurant",
                    ),
                ),
                ("date", models.DateField(blank=True, null=True)),
                ("platform", models.CharField(blank=True, default="", max_length=50)),
            ],
            options={
                "db_table": "reviews",
                "ordering": ["-date", "-id"],
                "indexes": [
                    models.Index(fields=["author_id"], name="reviews_author_id_idx")
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("score__gte", 1), ("score__lte", 5)),
                        name="reviews_score_range",
                    )
                ],
            },
        ),
    ]
