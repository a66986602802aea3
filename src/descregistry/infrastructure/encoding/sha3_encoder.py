"""SHA3-256 encoder (NIST padding)."""

import hashlib

from descregistry.domain.value_objects import Fingerprint


class Sha3Encoder:
    """Fingerprint = sha3_256(utf8(text))."""

    name = "sha3_256"

    def encode(self, text: str) -> Fingerprint:
        return Fingerprint(hashlib.sha3_256(text.encode("utf-8")).digest())
