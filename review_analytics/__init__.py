"""Django project package for the restaurant review analytics service."""
