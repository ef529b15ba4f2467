"""Unit tests for Django app configuration."""

from unittest.mock import patch

from django.apps import apps
from django.db.models.signals import post_delete, post_save, pre_save
from django.test import SimpleTestCase, override_settings

from core.apps import CoreConfig
from core.models import Review
from core.signals import (
    refresh_stars_after_delete,
    refresh_stars_after_save,
    remember_previous_restaurant,
)


class TestCoreAppConfig(SimpleTestCase):
    """Tests for CoreConfig."""

    def test_registered_config(self):
        config = apps.get_app_config("core")
        self.assertIsInstance(config, CoreConfig)
        self.assertEqual(config.default_auto_field, "django.db.models.BigAutoField")

    def test_review_signals_connected(self):
        """Test that ready() connected the rating receivers."""
        for signal, receiver in (
            (pre_save, remember_previous_restaurant),
            (post_save, refresh_stars_after_save),
            (post_delete, refresh_stars_after_delete),
        ):
            with self.subTest(receiver=receiver.__name__):
                self.assertTrue(signal.has_listeners(Review))
                self.assertTrue(signal.disconnect(receiver, sender=Review))
                signal.connect(receiver, sender=Review)

    @override_settings(TEST_MODE=False)
    @patch("core.logging.setup_logging")
    def test_ready_configures_logging_outside_tests(self, mock_setup_logging):
        apps.get_app_config("core").ready()
        mock_setup_logging.assert_called_once()

    @patch("core.logging.setup_logging")
    def test_ready_skips_logging_in_tests(self, mock_setup_logging):
        apps.get_app_config("core").ready()
        mock_setup_logging.assert_not_called()

    @override_settings(RATING_SYNC_MODE="bogus")
    def test_ready_rejects_unknown_sync_mode(self):
        with self.assertRaises(ValueError):
            apps.get_app_config("core").ready()
