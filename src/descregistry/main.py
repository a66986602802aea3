"""Application entry point and composition root."""

import logging

from descregistry import __version__
from descregistry.application.registry import DescriptionRegistry
from descregistry.config import Settings, get_settings
from descregistry.domain.value_objects import Address
from descregistry.infrastructure.encoding import create_encoder
from descregistry.infrastructure.persistence.memory.store import MemoryStore
from descregistry.infrastructure.persistence.memory.unit_of_work import (
    create_uow_factory as create_memory_uow_factory,
)
from descregistry.infrastructure.persistence.postgres.connection import create_pool
from descregistry.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory as create_postgres_uow_factory,
)
from descregistry.interfaces.api.app import create_app
from descregistry.interfaces.api.middleware.cors import CORSMiddleware
from descregistry.interfaces.api.middleware.lifespan import RegistryLifespanMiddleware


def main() -> None:
    """CLI entry point."""
    print(f"descregistry v{__version__}")


def create_descregistry_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pool = None
    if settings.storage_backend == "postgres":
        pool = create_pool(settings.database_url)
        uow_factory = create_postgres_uow_factory(pool)
    else:
        uow_factory = create_memory_uow_factory(MemoryStore())

    registry = DescriptionRegistry(
        unit_of_work_factory=uow_factory,
        encoder=create_encoder(settings.encoder),
    )
    admin_address = (
        Address.from_hex(settings.admin_address) if settings.admin_address else None
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        registry,
        middleware=[
            CORSMiddleware(cors_origins),
            RegistryLifespanMiddleware(registry, admin_address, pool),
        ],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_descregistry_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run_server()
