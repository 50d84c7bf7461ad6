class CalendarError(ValueError):
    """Raised for invalid calendar construction or queries."""
