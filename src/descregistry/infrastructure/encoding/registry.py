"""Encoder lookup by configured name."""

from descregistry.application.ports import Encoder
from descregistry.infrastructure.encoding.keccak_encoder import Keccak256Encoder
from descregistry.infrastructure.encoding.sha3_encoder import Sha3Encoder

_ENCODERS: dict[str, type] = {
    Keccak256Encoder.name: Keccak256Encoder,
    Sha3Encoder.name: Sha3Encoder,
}


def get_encoder_names() -> list[str]:
    """Return supported encoder names."""
    return sorted(_ENCODERS)


def create_encoder(name: str) -> Encoder:
    """Instantiate encoder by name. Raises ValueError for unknown names."""
    try:
        return _ENCODERS[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown encoder {name!r}. Supported: {', '.join(get_encoder_names())}"
        ) from None
