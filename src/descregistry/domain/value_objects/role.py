"""Roles for the registry's access control."""

from enum import StrEnum


class Role(StrEnum):
    """Permission classes. ADMIN manages membership of every role."""

    ADMIN = "ADMIN_ROLE"
    ADD = "ADD_CONTRACT_ROLE"
    UPDATE = "UPDATE_CONTRACT_ROLE"
    REMOVE = "REMOVE_CONTRACT_ROLE"

    @classmethod
    def parse(cls, text: str) -> "Role":
        """Accept the wire name ("ADD_CONTRACT_ROLE") or the short name ("add")."""
        key = text.strip().upper()
        for role in cls:
            if key in (role.value, role.name):
                return role
        raise ValueError(f"Unknown role: {text!r}")
