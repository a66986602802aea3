"""Description record entity - one fingerprint per account."""

from dataclasses import dataclass
from datetime import datetime

from descregistry.domain.value_objects import Address, Fingerprint


@dataclass
class DescriptionRecord:
    """Stored description of an account. The account owns it, not the writer."""

    account: Address
    fingerprint: Fingerprint
    updated_at: datetime
    updated_by: Address | None = None
