"""Domain value objects."""

from descregistry.domain.value_objects.address import ZERO_ADDRESS, Address
from descregistry.domain.value_objects.fingerprint import ZERO_FINGERPRINT, Fingerprint
from descregistry.domain.value_objects.role import Role

__all__ = [
    "ZERO_ADDRESS",
    "ZERO_FINGERPRINT",
    "Address",
    "Fingerprint",
    "Role",
]
