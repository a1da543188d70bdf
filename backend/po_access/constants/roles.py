"""Closed role catalog shared by menus, routing and the permission matrix.

Role values are the exact strings the identity provider emits. Extend
cautiously; every new role needs a menu audience, a permission entry and a
default route or configuration validation fails at startup.
"""
from __future__ import annotations
from typing import FrozenSet, Iterable, List, Optional

ADMIN = 'Admin'
MATERIAL_CONTROL = 'MaterialControl'
APP_USER = 'AppUser'
VENDOR = 'Vendor'

ALL_ROLES: FrozenSet[str] = frozenset({ADMIN, MATERIAL_CONTROL, APP_USER, VENDOR})

# Least privileged first: when an identity carries several roles the
# earliest entry wins.
ROLE_PRECEDENCE = (VENDOR, APP_USER, MATERIAL_CONTROL, ADMIN)

ROLE_LABELS = {
    ADMIN: 'ผู้ดูแลระบบ',
    MATERIAL_CONTROL: 'เจ้าหน้าที่จัดซื้อ',
    APP_USER: 'ผู้ใช้ทั่วไป',
    VENDOR: 'ผู้ขาย',
}


def is_known_role(candidate) -> bool:
    """Exact membership test. No trimming or case folding happens here."""
    return isinstance(candidate, str) and candidate in ALL_ROLES


def all_roles() -> FrozenSet[str]:
    return ALL_ROLES


def normalize_role(raw) -> Optional[str]:
    """Trim a raw role name from the identity provider; None for non-strings/blank."""
    if not isinstance(raw, str):
        return None
    value = raw.strip()
    return value or None


def normalize_roles(raw_roles: Optional[Iterable]) -> List[str]:
    if not raw_roles or isinstance(raw_roles, str):
        return []
    out = []
    for raw in raw_roles:
        value = normalize_role(raw)
        if value is not None:
            out.append(value)
    return out


def coerce_role(raw) -> Optional[str]:
    """Normalize then validate a single raw role name."""
    value = normalize_role(raw)
    return value if is_known_role(value) else None


def role_label(role: str) -> str:
    return ROLE_LABELS.get(role, role)


__all__ = [
    'ADMIN', 'MATERIAL_CONTROL', 'APP_USER', 'VENDOR', 'ALL_ROLES', 'ROLE_PRECEDENCE', 'ROLE_LABELS',
    'is_known_role', 'all_roles', 'normalize_role', 'normalize_roles', 'coerce_role', 'role_label',
]
