"""Pytest fixtures for descregistry tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from descregistry.application.registry import DescriptionRegistry
from descregistry.domain.entities import RoleGrant
from descregistry.domain.value_objects import Address, Role
from descregistry.infrastructure.encoding import Keccak256Encoder
from descregistry.infrastructure.persistence.memory.store import MemoryStore
from descregistry.infrastructure.persistence.memory.unit_of_work import create_uow_factory

DEPLOYER = Address.from_hex("0x" + "d0" * 20)
ALICE = Address.from_hex("0x" + "a1" * 20)
BOB = Address.from_hex("0x" + "b0" * 20)


def seed_role(store: MemoryStore, role: Role, account: Address) -> None:
    """Helper to grant a role directly in the store (for tests)."""
    store.memberships.setdefault(account, {})[role] = RoleGrant(
        role=role, account=account, granted_at=datetime.now(UTC)
    )


@pytest.fixture
def deployer() -> Address:
    return DEPLOYER


@pytest.fixture
def alice() -> Address:
    return ALICE


@pytest.fixture
def bob() -> Address:
    return BOB


@pytest.fixture
def encoder() -> Keccak256Encoder:
    return Keccak256Encoder()


@pytest.fixture
def store(deployer: Address) -> MemoryStore:
    """Fresh in-memory store with the deployer holding ADMIN, as after deployment."""
    store = MemoryStore()
    seed_role(store, Role.ADMIN, deployer)
    return store


@pytest.fixture
def uow_factory(store: MemoryStore):
    return create_uow_factory(store)


@pytest.fixture
def registry(uow_factory, encoder) -> DescriptionRegistry:
    return DescriptionRegistry(unit_of_work_factory=uow_factory, encoder=encoder)
