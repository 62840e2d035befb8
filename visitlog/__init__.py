"""Visit logger service: records visits and lists the most recent ones."""

__version__ = "1.0.0"
