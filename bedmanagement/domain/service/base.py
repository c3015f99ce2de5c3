"""Base class for domain services."""


class Service:
    """Base class for bed management domain services.

    Services sit between use cases and repositories and own the logic that
    reads or changes more than a single entity, such as lookups across every
    bed tag.
    """

    pass
