"""Fingerprint encoders."""

from descregistry.infrastructure.encoding.keccak_encoder import Keccak256Encoder
from descregistry.infrastructure.encoding.registry import create_encoder, get_encoder_names
from descregistry.infrastructure.encoding.sha3_encoder import Sha3Encoder

__all__ = [
    "Keccak256Encoder",
    "Sha3Encoder",
    "create_encoder",
    "get_encoder_names",
]
