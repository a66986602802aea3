"""Unit tests for DescriptionRegistry: roles, CRUD, error precedence."""

import asyncio

import pytest

from descregistry.application.registry import DescriptionRegistry
from descregistry.domain.exceptions import (
    AccessRestricted,
    AddressZeroNotAllowed,
    DescriptionAlreadyExists,
    DescriptionNotFound,
    EmptyStringNotAllowed,
)
from descregistry.domain.value_objects import ZERO_ADDRESS, ZERO_FINGERPRINT, Role
from descregistry.infrastructure.persistence.memory.description_repository import (
    MemoryDescriptionRepository,
)


# --- Deployment and roles ---


@pytest.mark.asyncio
async def test_deployer_holds_only_admin(registry, deployer) -> None:
    """After deployment the deployer holds ADMIN and nothing else."""
    assert await registry.has_role(Role.ADMIN, deployer)
    assert await registry.roles_of(deployer) == [Role.ADMIN]


@pytest.mark.asyncio
async def test_grant_role(registry, deployer, alice) -> None:
    await registry.grant_role(deployer, Role.ADD, alice)
    assert await registry.has_role(Role.ADD, alice)


@pytest.mark.asyncio
@pytest.mark.parametrize("granted", list(Role))
async def test_role_isolation(registry, deployer, alice, granted) -> None:
    """Granting one role does not make any other role true."""
    await registry.grant_role(deployer, granted, alice)
    for role in Role:
        assert await registry.has_role(role, alice) is (role is granted)


@pytest.mark.asyncio
async def test_grant_and_revoke_idempotent(registry, deployer, alice) -> None:
    await registry.grant_role(deployer, Role.UPDATE, alice)
    await registry.grant_role(deployer, Role.UPDATE, alice)
    assert await registry.roles_of(alice) == [Role.UPDATE]

    await registry.revoke_role(deployer, Role.UPDATE, alice)
    await registry.revoke_role(deployer, Role.UPDATE, alice)
    assert not await registry.has_role(Role.UPDATE, alice)


@pytest.mark.asyncio
@pytest.mark.parametrize("held", [None, Role.ADD, Role.UPDATE, Role.REMOVE])
async def test_non_admin_cannot_grant_or_revoke(registry, deployer, alice, bob, held) -> None:
    """Only ADMIN holders manage roles, whatever else the caller holds."""
    if held is not None:
        await registry.grant_role(deployer, held, alice)
    await registry.grant_role(deployer, Role.REMOVE, bob)

    with pytest.raises(AccessRestricted):
        await registry.grant_role(alice, Role.ADD, bob)
    with pytest.raises(AccessRestricted):
        await registry.revoke_role(alice, Role.REMOVE, bob)
    assert await registry.has_role(Role.REMOVE, bob)
    assert not await registry.has_role(Role.ADD, bob)


@pytest.mark.asyncio
async def test_admin_can_grant_admin(registry, deployer, alice, bob) -> None:
    await registry.grant_role(deployer, Role.ADMIN, alice)
    await registry.grant_role(alice, Role.UPDATE, bob)
    assert await registry.has_role(Role.UPDATE, bob)


@pytest.mark.asyncio
async def test_admin_can_revoke_admin(registry, deployer, alice) -> None:
    await registry.grant_role(deployer, Role.ADMIN, alice)
    await registry.revoke_role(alice, Role.ADMIN, deployer)
    assert not await registry.has_role(Role.ADMIN, deployer)
    with pytest.raises(AccessRestricted):
        await registry.grant_role(deployer, Role.ADD, deployer)


@pytest.mark.asyncio
async def test_renounce_own_role(registry, deployer, alice) -> None:
    await registry.grant_role(deployer, Role.ADD, alice)
    await registry.renounce_role(alice, Role.ADD, alice)
    assert not await registry.has_role(Role.ADD, alice)
    # Renouncing again is a no-op.
    await registry.renounce_role(alice, Role.ADD, alice)


@pytest.mark.asyncio
async def test_renounce_for_other_account_rejected(registry, deployer, alice) -> None:
    await registry.grant_role(deployer, Role.ADD, alice)
    with pytest.raises(AccessRestricted):
        await registry.renounce_role(deployer, Role.ADD, alice)
    assert await registry.has_role(Role.ADD, alice)


# --- Role identifiers ---


def test_role_identifier_is_fingerprint_of_wire_name(registry, encoder) -> None:
    assert registry.role_identifier(Role.ADD) == encoder.encode("ADD_CONTRACT_ROLE")
    assert len({registry.role_identifier(r) for r in Role}) == len(Role)


def test_resolve_role_by_name_or_identifier(registry) -> None:
    assert registry.resolve_role("add") is Role.ADD
    assert registry.resolve_role("REMOVE_CONTRACT_ROLE") is Role.REMOVE
    identifier = registry.role_identifier(Role.UPDATE).to_hex()
    assert registry.resolve_role(identifier) is Role.UPDATE


def test_resolve_role_identifier_with_surrounding_whitespace(registry) -> None:
    identifier = registry.role_identifier(Role.ADD).to_hex()
    assert registry.resolve_role(" " + identifier + " ") is Role.ADD
    assert registry.resolve_role(" add ") is Role.ADD


def test_resolve_role_unknown(registry) -> None:
    with pytest.raises(ValueError, match="Unknown role"):
        registry.resolve_role("OWNER")
    with pytest.raises(ValueError, match="Unknown role"):
        registry.resolve_role("0x" + "12" * 32)


# --- Initialization ---


@pytest.mark.asyncio
async def test_initialize_skipped_when_admin_exists(registry, alice) -> None:
    assert await registry.initialize(alice) is False
    assert not await registry.has_role(Role.ADMIN, alice)


@pytest.mark.asyncio
async def test_initialize_grants_admin_on_empty_registry(encoder, alice) -> None:
    from descregistry.application.registry import DescriptionRegistry
    from descregistry.infrastructure.persistence.memory.store import MemoryStore
    from descregistry.infrastructure.persistence.memory.unit_of_work import (
        create_uow_factory,
    )

    registry = DescriptionRegistry(create_uow_factory(MemoryStore()), encoder)
    assert await registry.initialize(alice) is True
    assert await registry.roles_of(alice) == [Role.ADMIN]
    assert await registry.initialize(alice) is False


@pytest.mark.asyncio
async def test_initialize_rejects_zero_deployer(registry) -> None:
    with pytest.raises(AddressZeroNotAllowed):
        await registry.initialize(ZERO_ADDRESS)


# --- Description CRUD (deployer) ---


@pytest.mark.asyncio
async def test_add_description_for_owner(registry, deployer, encoder) -> None:
    fingerprint = await registry.add_description(deployer, "Owner", deployer)
    assert fingerprint == encoder.encode("Owner")
    assert await registry.get_description(deployer) == encoder.encode("Owner")


@pytest.mark.asyncio
async def test_update_description_for_owner(registry, deployer, encoder) -> None:
    await registry.add_description(deployer, "Owner", deployer)
    await registry.update_description(deployer, deployer, "The Owner")
    assert await registry.get_description(deployer) == encoder.encode("The Owner")


@pytest.mark.asyncio
async def test_remove_description_for_owner(registry, deployer) -> None:
    await registry.add_description(deployer, "Owner", deployer)
    await registry.remove_description(deployer, deployer)
    assert await registry.get_description(deployer) == ZERO_FINGERPRINT


@pytest.mark.asyncio
async def test_get_description_absent_is_zero(registry, alice) -> None:
    assert await registry.get_description(alice) == ZERO_FINGERPRINT
    assert await registry.get_description(ZERO_ADDRESS) == ZERO_FINGERPRINT


@pytest.mark.asyncio
async def test_crud_cycle_allows_re_add(registry, deployer, alice, encoder) -> None:
    await registry.add_description(deployer, "X", alice)
    await registry.remove_description(deployer, alice)
    await registry.add_description(deployer, "Y", alice)
    assert await registry.get_description(alice) == encoder.encode("Y")


@pytest.mark.asyncio
async def test_record_belongs_to_subject_account(registry, deployer, alice, store) -> None:
    await registry.add_description(deployer, "Alice", alice)
    record = store.descriptions[alice]
    assert record.account == alice
    assert record.updated_by == deployer
    assert deployer not in store.descriptions


# --- Access control on descriptions ---


@pytest.mark.asyncio
async def test_add_requires_add_role(registry, deployer, alice, encoder) -> None:
    with pytest.raises(AccessRestricted):
        await registry.add_description(alice, "Owner", deployer)
    assert await registry.get_description(deployer) == ZERO_FINGERPRINT

    await registry.grant_role(deployer, Role.ADD, alice)
    await registry.add_description(alice, "Owner", deployer)
    assert await registry.get_description(deployer) == encoder.encode("Owner")


@pytest.mark.asyncio
async def test_update_requires_update_role(registry, deployer, alice, encoder) -> None:
    await registry.grant_role(deployer, Role.ADD, alice)
    await registry.add_description(alice, "Owner", deployer)

    with pytest.raises(AccessRestricted):
        await registry.update_description(alice, deployer, "The Owner")
    assert await registry.get_description(deployer) == encoder.encode("Owner")

    await registry.grant_role(deployer, Role.UPDATE, alice)
    await registry.update_description(alice, deployer, "The Owner")
    assert await registry.get_description(deployer) == encoder.encode("The Owner")


@pytest.mark.asyncio
async def test_remove_requires_remove_role(registry, deployer, alice, encoder) -> None:
    await registry.grant_role(deployer, Role.ADD, alice)
    await registry.add_description(alice, "Owner", deployer)

    with pytest.raises(AccessRestricted):
        await registry.remove_description(alice, deployer)
    assert await registry.get_description(deployer) == encoder.encode("Owner")

    await registry.grant_role(deployer, Role.REMOVE, alice)
    await registry.remove_description(alice, deployer)
    assert await registry.get_description(deployer) == ZERO_FINGERPRINT


@pytest.mark.asyncio
async def test_revoked_role_no_longer_passes(registry, deployer, alice) -> None:
    await registry.grant_role(deployer, Role.ADD, alice)
    await registry.revoke_role(deployer, Role.ADD, alice)
    with pytest.raises(AccessRestricted):
        await registry.add_description(alice, "Owner", alice)


@pytest.mark.asyncio
async def test_owner_scenario(registry, deployer, alice, bob, encoder) -> None:
    """Deployer adds, grants UPDATE to A, A updates, B without roles cannot remove."""
    await registry.add_description(deployer, "Owner", deployer)
    assert await registry.get_description(deployer) == encoder.encode("Owner")

    await registry.grant_role(deployer, Role.UPDATE, alice)
    await registry.update_description(alice, deployer, "The Owner")
    assert await registry.get_description(deployer) == encoder.encode("The Owner")

    with pytest.raises(AccessRestricted):
        await registry.remove_description(bob, deployer)
    assert await registry.get_description(deployer) == encoder.encode("The Owner")


# --- Invalid inputs and precedence ---


@pytest.mark.asyncio
async def test_zero_address_rejected(registry, deployer) -> None:
    with pytest.raises(AddressZeroNotAllowed):
        await registry.add_description(deployer, "Owner", ZERO_ADDRESS)
    with pytest.raises(AddressZeroNotAllowed):
        await registry.update_description(deployer, ZERO_ADDRESS, "The Owner")
    with pytest.raises(AddressZeroNotAllowed):
        await registry.remove_description(deployer, ZERO_ADDRESS)


@pytest.mark.asyncio
async def test_empty_string_rejected_for_authorized_caller(registry, deployer) -> None:
    with pytest.raises(EmptyStringNotAllowed):
        await registry.add_description(deployer, "", deployer)

    await registry.add_description(deployer, "Owner", deployer)
    with pytest.raises(EmptyStringNotAllowed):
        await registry.update_description(deployer, deployer, "")


@pytest.mark.asyncio
async def test_input_validation_precedes_authorization(registry, bob, deployer) -> None:
    """A caller without roles still sees input errors first."""
    with pytest.raises(AddressZeroNotAllowed):
        await registry.add_description(bob, "", ZERO_ADDRESS)
    with pytest.raises(EmptyStringNotAllowed):
        await registry.add_description(bob, "", deployer)
    with pytest.raises(AddressZeroNotAllowed):
        await registry.update_description(bob, ZERO_ADDRESS, "")
    with pytest.raises(EmptyStringNotAllowed):
        await registry.update_description(bob, deployer, "")
    with pytest.raises(AddressZeroNotAllowed):
        await registry.remove_description(bob, ZERO_ADDRESS)


@pytest.mark.asyncio
async def test_authorization_precedes_existence(registry, deployer, bob) -> None:
    await registry.add_description(deployer, "Owner", deployer)
    with pytest.raises(AccessRestricted):
        await registry.add_description(bob, "Again", deployer)
    with pytest.raises(AccessRestricted):
        await registry.update_description(bob, bob, "Nobody")
    with pytest.raises(AccessRestricted):
        await registry.remove_description(bob, bob)


@pytest.mark.asyncio
async def test_duplicate_add_rejected(registry, deployer, encoder) -> None:
    await registry.add_description(deployer, "Owner", deployer)
    with pytest.raises(DescriptionAlreadyExists):
        await registry.add_description(deployer, "Other", deployer)
    assert await registry.get_description(deployer) == encoder.encode("Owner")


@pytest.mark.asyncio
async def test_update_missing_rejected(registry, deployer) -> None:
    with pytest.raises(DescriptionNotFound):
        await registry.update_description(deployer, deployer, "The Owner")
    assert await registry.get_description(deployer) == ZERO_FINGERPRINT


@pytest.mark.asyncio
async def test_remove_missing_rejected(registry, deployer) -> None:
    with pytest.raises(DescriptionNotFound):
        await registry.remove_description(deployer, deployer)


@pytest.mark.asyncio
async def test_remove_twice_rejected(registry, deployer) -> None:
    await registry.add_description(deployer, "Owner", deployer)
    await registry.remove_description(deployer, deployer)
    with pytest.raises(DescriptionNotFound):
        await registry.remove_description(deployer, deployer)


# --- Concurrency ---


@pytest.fixture
def yielding_reads(monkeypatch):
    """Make description reads suspend before returning.

    Every check-then-write then crosses an await point, so concurrent
    mutations interleave unless their units of work are serialized.
    """
    original = MemoryDescriptionRepository.get

    async def get_then_yield(self, account):
        record = await original(self, account)
        await asyncio.sleep(0)
        return record

    monkeypatch.setattr(MemoryDescriptionRepository, "get", get_then_yield)


@pytest.mark.asyncio
async def test_concurrent_adds_single_winner(registry, deployer, alice, yielding_reads) -> None:
    """Concurrent adds on one account: exactly one succeeds."""
    results = await asyncio.gather(
        *(registry.add_description(deployer, f"desc {i}", alice) for i in range(20)),
        return_exceptions=True,
    )
    successes = [r for r in results if not isinstance(r, BaseException)]
    failures = [r for r in results if isinstance(r, BaseException)]

    assert len(successes) == 1
    assert all(isinstance(f, DescriptionAlreadyExists) for f in failures)
    assert await registry.get_description(alice) == successes[0]


@pytest.mark.asyncio
async def test_concurrent_removes_single_winner(registry, deployer, alice, yielding_reads) -> None:
    await registry.add_description(deployer, "Owner", alice)
    results = await asyncio.gather(
        registry.remove_description(deployer, alice),
        registry.remove_description(deployer, alice),
        return_exceptions=True,
    )
    assert sum(isinstance(r, DescriptionNotFound) for r in results) == 1
    assert (await registry.get_description(alice)).is_zero


@pytest.mark.asyncio
async def test_unserialized_adds_would_race(uow_factory, encoder, deployer, alice, yielding_reads) -> None:
    """With the lock bypassed, interleaved adds all pass the duplicate guard."""

    def shared_only(*, exclusive: bool = False):
        return uow_factory()

    registry = DescriptionRegistry(shared_only, encoder)
    results = await asyncio.gather(
        *(registry.add_description(deployer, f"desc {i}", alice) for i in range(5)),
        return_exceptions=True,
    )
    assert not any(isinstance(r, BaseException) for r in results)
