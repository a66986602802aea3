"""Domain exceptions."""


class DescRegistryError(Exception):
    """Base exception for the description registry."""

    pass


class AccessRestricted(DescRegistryError):
    """Caller lacks the role required for the requested action."""

    pass


class AddressZeroNotAllowed(DescRegistryError):
    """Subject account is the zero address."""

    pass


class EmptyStringNotAllowed(DescRegistryError):
    """Description text is empty."""

    pass


class DescriptionAlreadyExists(DescRegistryError):
    """Account already has a description."""

    pass


class DescriptionNotFound(DescRegistryError):
    """Account has no description."""

    pass
