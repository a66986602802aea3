"""Input checks run before any role or existence check."""

from descregistry.domain.exceptions import AddressZeroNotAllowed, EmptyStringNotAllowed
from descregistry.domain.value_objects import Address


def validate_description_input(account: Address, text: str | None = None) -> None:
    """Reject the zero account, then empty text. text=None skips the text check."""
    if account.is_zero:
        raise AddressZeroNotAllowed("Description account cannot be the zero address")
    if text is not None and not text:
        raise EmptyStringNotAllowed("Description cannot be empty")
