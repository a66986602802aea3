"""Keccak-256 encoder (Ethereum keccak256 over the UTF-8 bytes)."""

from Crypto.Hash import keccak

from descregistry.domain.value_objects import Fingerprint


class Keccak256Encoder:
    """Fingerprint = keccak256(utf8(text))."""

    name = "keccak256"

    def encode(self, text: str) -> Fingerprint:
        h = keccak.new(digest_bits=256)
        h.update(text.encode("utf-8"))
        return Fingerprint(h.digest())
