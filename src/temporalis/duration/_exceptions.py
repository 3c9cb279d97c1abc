class DurationError(ValueError):
    """A duration cannot be formatted (e.g. it is negative)."""
