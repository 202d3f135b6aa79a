"""Domain service base."""


class Service:
    """Marker base for domain services.

    Services hold rules that span entities, such as slug uniqueness,
    comment threading and credential checks, and talk to repositories.
    They never know about use case request or response models.
    """
