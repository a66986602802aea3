"""Encoder port - turns description text into a fingerprint."""

from typing import Protocol

from descregistry.domain.value_objects import Fingerprint


class Encoder(Protocol):
    """Deterministic, pure text -> fingerprint function.

    Never returns the zero fingerprint for non-empty text. Callers guarantee
    the text is non-empty.
    """

    name: str

    def encode(self, text: str) -> Fingerprint: ...
