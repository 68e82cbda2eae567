"""Marker base for domain services."""


class Service:
    """Stateless business logic that works across aggregates.

    Tag resolution and linking touch problems, reviews and tags at once, so
    they live in services rather than on any single model.
    """
