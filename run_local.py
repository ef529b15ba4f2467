#!/usr/bin/env python
"""Script to run the Django development server."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Apply migrations and run the Django development server.

    Database functions and the rating trigger are not installed here;
    run ``manage.py install_db_objects`` for that.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "review_analytics.settings")
    execute_from_command_line([sys.argv[0], "migrate", "--noinput"])
    execute_from_command_line([sys.argv[0], "runserver"])


if __name__ == "__main__":
    main()
