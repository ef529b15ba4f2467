"""Unit tests for request and response schemas."""

import unittest

from pydantic import ValidationError

from core.schemas.analytics import RankingQuery
from core.schemas.rating import RatingDriftQuery, RatingSyncRequest
from core.schemas.restaurant import RestaurantDetail, RestaurantListQuery
from core.schemas.review import ReviewListQuery


class TestQuerySchemas(unittest.TestCase):
    """Tests for query parameter validation."""

    def test_ranking_defaults(self):
        query = RankingQuery()
        self.assertEqual(query.limit, 10)
        self.assertIsNone(query.min_reviews)

    def test_ranking_coerces_query_strings(self):
        query = RankingQuery(**{"limit": "5", "min_reviews": "2", "page": "1"})
        self.assertEqual((query.limit, query.min_reviews), (5, 2))

    def test_ranking_bounds(self):
        for params in ({"limit": "0"}, {"limit": "101"}, {"min_reviews": "-1"}):
            with self.subTest(params=params):
                with self.assertRaises(ValidationError):
                    RankingQuery(**params)

    def test_camel_case_keys_accepted(self):
        query = RankingQuery(**{"minReviews": "3"})
        self.assertEqual(query.min_reviews, 3)

    def test_query_strings_are_stripped(self):
        self.assertEqual(ReviewListQuery(authorId="  ann ").author_id, "ann")
        self.assertEqual(RestaurantListQuery(category=" Pizza ").category, "Pizza")

    def test_review_score_range(self):
        with self.assertRaises(ValidationError):
            ReviewListQuery(min_score=4, max_score=2)
        with self.assertRaises(ValidationError):
            ReviewListQuery(min_score=0)
        self.assertEqual(ReviewListQuery(min_score=3, max_score=3).min_score, 3)

    def test_restaurant_min_stars_range(self):
        with self.assertRaises(ValidationError):
            RestaurantListQuery(min_stars=6)

    def test_drift_tolerance_not_negative(self):
        with self.assertRaises(ValidationError):
            RatingDriftQuery(tolerance=-0.5)

    def test_sync_request_ids_optional_but_not_empty(self):
        self.assertIsNone(RatingSyncRequest().restaurant_ids)
        with self.assertRaises(ValidationError):
            RatingSyncRequest(restaurant_ids=[])


class TestRestaurantDetail(unittest.TestCase):
    """Tests for RestaurantDetail."""

    def test_categories_split_from_column_value(self):
        detail = RestaurantDetail(id=1, name="Pho 88", categories="Vietnamese, Noodles")
        self.assertEqual(detail.categories, ["Vietnamese", "Noodles"])

    def test_dumps_snake_case(self):
        detail = RestaurantDetail(id=1, name="Pho 88", review_count=12)
        self.assertIn("review_count", detail.model_dump())
