"""Description fingerprint."""

from dataclasses import dataclass

FINGERPRINT_LENGTH = 32


@dataclass(frozen=True)
class Fingerprint:
    """Fixed-size digest stored in place of the description text."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != FINGERPRINT_LENGTH:
            raise ValueError("Fingerprint must be 32 bytes")

    @classmethod
    def from_hex(cls, text: str) -> "Fingerprint":
        if not isinstance(text, str):
            raise ValueError(f"Invalid fingerprint: {text!r}")
        raw = text.strip()
        if raw[:2].lower() == "0x":
            raw = raw[2:]
        if len(raw) != FINGERPRINT_LENGTH * 2:
            raise ValueError(f"Invalid fingerprint: {text!r}")
        try:
            return cls(bytes.fromhex(raw))
        except ValueError:
            raise ValueError(f"Invalid fingerprint: {text!r}") from None

    @property
    def is_zero(self) -> bool:
        """True for the sentinel meaning "no description stored"."""
        return not any(self.value)

    def to_hex(self) -> str:
        return "0x" + self.value.hex()

    def __str__(self) -> str:
        return self.to_hex()


ZERO_FINGERPRINT = Fingerprint(bytes(FINGERPRINT_LENGTH))
