"""Django signals keeping restaurant stars in step with review changes.

Active only when RATING_SYNC_MODE is "signal". Bulk operations such as
QuerySet.update() and bulk_create() do not send these signals; repair with
``manage.py sync_ratings``.
"""

from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver

import structlog

from core.enums import RatingSyncMode
from core.services.rating_service import rating_service

logger = structlog.get_logger(__name__)


def _signal_sync_enabled() -> bool:
    return rating_service.sync_mode() is RatingSyncMode.SIGNAL


@receiver(pre_save, sender="core.Review")
def remember_previous_restaurant(sender: type, instance, **_kwargs) -> None:
    """Record which restaurant a review belonged to before this save.

    A review moved to another restaurant must refresh both restaurants.
    """
    if not _signal_sync_enabled():
        return

    if instance.pk is None:
        instance._previous_service_id = None
        return

    instance._previous_service_id = (
        sender.objects.filter(pk=instance.pk)
        .values_list("service_id", flat=True)
        .first()
    )


@receiver(post_save, sender="core.Review")
def refresh_stars_after_save(
    sender: type,
    instance,
    created: bool,
    **_kwargs,
) -> None:
    """Refresh stars of the review's restaurant, and its previous one if it moved."""
    if not _signal_sync_enabled():
        return

    restaurant_ids = {
        instance.service_id,
        getattr(instance, "_previous_service_id", None),
    }
    rating_service.refresh_stars(restaurant_ids)

    logger.debug(
        "review_saved_stars_refreshed",
        review_id=instance.pk,
        created=created,
        restaurant_ids=sorted(rid for rid in restaurant_ids if rid is not None),
    )


@receiver(post_delete, sender="core.Review")
def refresh_stars_after_delete(sender: type, instance, **_kwargs) -> None:
    """Refresh stars of the restaurant a deleted review belonged to."""
    if not _signal_sync_enabled():
        return

    rating_service.refresh_stars([instance.service_id])

    logger.debug(
        "review_deleted_stars_refreshed",
        review_id=instance.pk,
        restaurant_id=instance.service_id,
    )
