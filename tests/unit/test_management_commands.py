"""Unit tests for the management commands."""

from io import StringIO
from unittest.mock import patch

from django.core.management import CommandError, call_command
from django.db import connection
from django.test import override_settings

from core.db import rating_trigger_installed
from core.exceptions import UnsupportedDatabaseError
from core.models import Restaurant
from tests.base import BaseUnitTest
from tests.factories import RestaurantFactory, ReviewFactory


def _call(name, *args):
    out = StringIO()
    call_command(name, *args, stdout=out)
    return out.getvalue()


class TestInstallAndDropCommands(BaseUnitTest):
    """Tests for install_db_objects and drop_db_objects."""

    def test_install_everything_by_default(self):
        output = _call("install_db_objects")

        self.assertIn("Installed SQL functions", output)
        self.assertIn("Installed rating trigger", output)
        self.assertTrue(rating_trigger_installed(connection))

    def test_install_functions_only(self):
        output = _call("install_db_objects", "--functions")

        self.assertIn("Installed SQL functions", output)
        self.assertNotIn("trigger", output)
        self.assertFalse(rating_trigger_installed(connection))

    def test_drop_trigger_only(self):
        _call("install_db_objects", "--trigger")

        output = _call("drop_db_objects", "--trigger")

        self.assertIn("Dropped rating trigger", output)
        self.assertNotIn("functions", output)
        self.assertFalse(rating_trigger_installed(connection))

    def test_drop_everything_by_default(self):
        _call("install_db_objects")
        output = _call("drop_db_objects")
        self.assertIn("Dropped rating trigger", output)
        self.assertIn("Dropped SQL functions", output)

    @patch("core.management.commands.install_db_objects.install_functions")
    def test_unsupported_database_becomes_command_error(self, mock_install):
        mock_install.side_effect = UnsupportedDatabaseError("oracle")

        with self.assertRaises(CommandError) as ctx:
            _call("install_db_objects", "--functions")

        self.assertIn("oracle", str(ctx.exception))


@override_settings(RATING_SYNC_MODE="off")
class TestRatingCommands(BaseUnitTest):
    """Tests for sync_ratings and rating_drift."""

    def setUp(self):
        self.first = RestaurantFactory(name="First")
        self.second = RestaurantFactory(name="Second")
        ReviewFactory(service=self.first, score=4)
        ReviewFactory(service=self.second, score=2)

    def test_sync_all(self):
        output = _call("sync_ratings")

        self.assertIn("Updated 2 restaurant(s)", output)
        self.assertAlmostEqual(Restaurant.objects.get(pk=self.first.pk).stars, 4.0)

    def test_sync_selected(self):
        output = _call("sync_ratings", "--restaurant", str(self.second.pk))

        self.assertIn("Updated 1 restaurant(s)", output)
        self.assertIsNone(Restaurant.objects.get(pk=self.first.pk).stars)
        self.assertAlmostEqual(Restaurant.objects.get(pk=self.second.pk).stars, 2.0)

    def test_drift_report(self):
        output = _call("rating_drift")

        self.assertIn("First", output)
        self.assertIn("Second", output)
        self.assertIn("2 restaurant(s) with rating drift", output)

    def test_drift_fail_on_drift(self):
        with self.assertRaises(CommandError):
            _call("rating_drift", "--fail-on-drift")

    def test_no_drift_after_sync(self):
        _call("sync_ratings")

        output = _call("rating_drift", "--fail-on-drift")

        self.assertIn("No rating drift found", output)

    def test_negative_tolerance_rejected(self):
        with self.assertRaises(CommandError):
            _call("rating_drift", "--tolerance", "-1")
