"""Unit tests for the Restaurant and Review models."""

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from core.models import Restaurant, Review
from tests.base import BaseUnitTest
from tests.factories import RestaurantFactory, ReviewFactory


class TestRestaurantModel(BaseUnitTest):
    """Tests for Restaurant."""

    def test_table_name(self):
        """Test that the model maps to the restaurants table."""
        self.assertEqual(Restaurant._meta.db_table, "restaurants")

    def test_new_restaurant_has_no_stars(self):
        """Test that stars start NULL for a restaurant without reviews."""
        restaurant = RestaurantFactory()
        restaurant.refresh_from_db()
        self.assertIsNone(restaurant.stars)

    def test_category_list_splits_and_trims(self):
        """Test that category_list returns clean tags."""
        restaurant = RestaurantFactory.build(categories=" Pizza, Italian ,, Bar ")
        self.assertEqual(restaurant.category_list, ["Pizza", "Italian", "Bar"])

    def test_category_list_empty(self):
        restaurant = RestaurantFactory.build(categories="")
        self.assertEqual(restaurant.category_list, [])

    def test_str_includes_district(self):
        """Test string representation."""
        restaurant = RestaurantFactory.build(name="Luigi's", district="Harbor")
        self.assertEqual(str(restaurant), "Luigi's (Harbor)")

        restaurant.district = ""
        self.assertEqual(str(restaurant), "Luigi's")

    def test_repr(self):
        restaurant = RestaurantFactory.build(id=7, name="Luigi's", review_count=3)
        self.assertIn("id=7", repr(restaurant))
        self.assertIn("review_count=3", repr(restaurant))

    def test_price_range_validators(self):
        """Test that price_range outside 1-4 fails full_clean."""
        restaurant = RestaurantFactory.build(price_range=5)
        with self.assertRaises(ValidationError):
            restaurant.full_clean()

    def test_deleting_restaurant_cascades_to_reviews(self):
        """Test that reviews are removed with their restaurant."""
        review = ReviewFactory()
        review.service.delete()
        self.assertFalse(Review.objects.filter(pk=review.pk).exists())


class TestReviewModel(BaseUnitTest):
    """Tests for Review."""

    def test_table_and_column_names(self):
        """Test that the model maps to reviews.service."""
        self.assertEqual(Review._meta.db_table, "reviews")
        self.assertEqual(Review._meta.get_field("service").column, "service")

    def test_reverse_relation(self):
        """Test that a restaurant exposes its reviews."""
        restaurant = RestaurantFactory()
        ReviewFactory.create_batch(3, service=restaurant)
        self.assertEqual(restaurant.reviews.count(), 3)

    def test_score_check_constraint_rejects_out_of_range(self):
        """Test that the database rejects scores outside 1-5."""
        restaurant = RestaurantFactory()
        for score in (0, 6):
            with self.subTest(score=score):
                with self.assertRaises(IntegrityError), transaction.atomic():
                    Review.objects.create(service=restaurant, score=score, author_id="a")

    def test_score_bounds_accepted(self):
        restaurant = RestaurantFactory()
        for score in (1, 5):
            Review.objects.create(service=restaurant, score=score, author_id="a")
        self.assertEqual(restaurant.reviews.count(), 2)

    def test_full_clean_rejects_bad_score(self):
        review = ReviewFactory.build(score=9, service=RestaurantFactory())
        with self.assertRaises(ValidationError):
            review.full_clean()

    def test_default_ordering_newest_first(self):
        """Test that reviews order by date descending."""
        restaurant = RestaurantFactory()
        older = ReviewFactory(service=restaurant, date="2023-01-01")
        newer = ReviewFactory(service=restaurant, date="2024-01-01")
        self.assertEqual(list(restaurant.reviews.all()), [newer, older])

    def test_str(self):
        review = ReviewFactory.build(
            id=3, score=4, service=RestaurantFactory.build(id=9)
        )
        self.assertEqual(str(review), "Review 3: 4 stars for restaurant 9")
