"""Factory classes for test data generation."""

import factory
from factory.django import DjangoModelFactory
from faker import Faker

fake = Faker()

DISTRICTS = ["Downtown", "Harbor", "Old Town", "University"]
PLATFORMS = ["yelp", "google", "tripadvisor"]


class RestaurantFactory(DjangoModelFactory):
    """Factory for Restaurant model.

    ``stars`` is left NULL: it is derived from the reviews.
    """

    class Meta:
        model = "core.Restaurant"

    name = factory.LazyAttribute(lambda _: fake.company())
    categories = factory.LazyAttribute(
        lambda _: ", ".join(fake.words(nb=2, unique=True))
    )
    latitude = factory.LazyAttribute(lambda _: float(fake.latitude()))
    longitude = factory.LazyAttribute(lambda _: float(fake.longitude()))
    district = factory.Iterator(DISTRICTS)
    address = factory.LazyAttribute(lambda _: fake.street_address())
    stars = None
    review_count = factory.LazyAttribute(lambda _: fake.random_int(min=0, max=900))
    price_range = factory.LazyAttribute(lambda _: fake.random_int(min=1, max=4))
    platform = factory.Iterator(PLATFORMS)


class ReviewFactory(DjangoModelFactory):
    """Factory for Review model."""

    class Meta:
        model = "core.Review"

    service = factory.SubFactory(RestaurantFactory)
    title = factory.LazyAttribute(lambda _: fake.sentence(nb_words=4))
    body = factory.LazyAttribute(lambda _: fake.text(max_nb_chars=200))
    score = factory.LazyAttribute(lambda _: fake.random_int(min=1, max=5))
    likes = factory.LazyAttribute(lambda _: fake.random_int(min=0, max=50))
    author_id = factory.LazyAttribute(lambda _: fake.user_name())
    date = factory.LazyAttribute(lambda _: fake.date_object())
    platform = factory.Iterator(PLATFORMS)
