"""Application ports - interfaces for external adapters."""

from descregistry.application.ports.encoder import Encoder
from descregistry.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Encoder",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
