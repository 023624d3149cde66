"""Base class for domain services."""


class Service:
    """Forum rules that span entities: quotas, ownership, moderation.

    Services receive repositories and settings through their constructor
    and are built per request by the DI container.
    """
