"""Account address."""

from dataclasses import dataclass

ADDRESS_LENGTH = 20


@dataclass(frozen=True)
class Address:
    """20-byte account address."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != ADDRESS_LENGTH:
            raise ValueError("Address must be 20 bytes")

    @classmethod
    def from_hex(cls, text: str) -> "Address":
        """Parse 0x-prefixed (or bare) hex. Case-insensitive."""
        if not isinstance(text, str):
            raise ValueError(f"Invalid address: {text!r}")
        raw = text.strip()
        if raw[:2].lower() == "0x":
            raw = raw[2:]
        if len(raw) != ADDRESS_LENGTH * 2:
            raise ValueError(f"Invalid address: {text!r}")
        try:
            return cls(bytes.fromhex(raw))
        except ValueError:
            raise ValueError(f"Invalid address: {text!r}") from None

    @property
    def is_zero(self) -> bool:
        return not any(self.value)

    def to_hex(self) -> str:
        return "0x" + self.value.hex()

    def __str__(self) -> str:
        return self.to_hex()


ZERO_ADDRESS = Address(bytes(ADDRESS_LENGTH))
