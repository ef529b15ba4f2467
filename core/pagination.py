"""Pagination classes for API endpoints."""

from rest_framework.pagination import PageNumberPagination


class StandardPageNumberPagination(PageNumberPagination):
    """Page-number pagination for restaurant and review listings.

    Clients choose the page size with ``page_size``, capped at 100.
    """

    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = 100
