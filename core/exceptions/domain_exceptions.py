"""Custom exceptions for the review analytics domain."""


class ReviewAnalyticsError(Exception):
    """Base exception for review analytics errors."""

    def __init__(self, message: str, status_code: int = 500):
        """Initialize review analytics error.

        Args:
            message: Error message
            status_code: HTTP status code the error maps to
        """
        self.status_code = status_code
        super().__init__(message)


class RestaurantNotFoundError(ReviewAnalyticsError):
    """Restaurant does not exist (404)."""

    def __init__(self, restaurant_id: int):
        """Initialize restaurant not found error.

        Args:
            restaurant_id: ID of the restaurant that was not found
        """
        self.restaurant_id = restaurant_id
        super().__init__(
            message=f"Restaurant with ID {restaurant_id} not found",
            status_code=404,
        )


class UnsupportedDatabaseError(ReviewAnalyticsError):
    """Database objects cannot be installed on this backend."""

    def __init__(self, vendor: str):
        """Initialize unsupported database error.

        Args:
            vendor: Django database vendor name (e.g. "mysql")
        """
        self.vendor = vendor
        super().__init__(
            message=(
                f"Database vendor '{vendor}' is not supported; "
                "use sqlite or postgresql"
            ),
            status_code=500,
        )
