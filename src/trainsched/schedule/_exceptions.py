class SchedulerError(ValueError):
    """Raised for invalid scheduler configuration."""
