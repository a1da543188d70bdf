"""Per-role UI capability flags and field masking rules for PO screens.
Extend cautiously; a new capability must be added to CAPABILITIES and to every
role row, otherwise configuration validation fails at startup.
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Dict, FrozenSet, Any

from po_access.constants.roles import ADMIN, MATERIAL_CONTROL, APP_USER, VENDOR

CAPABILITIES = (
    'can_edit_basic_info',
    'can_edit_items',
    'can_edit_vendor',
    'can_edit_remarks',
    'can_send_email',
    'can_save',
    'can_approve',
    'can_cancel',
    'can_view_acknowledge_status',
    'can_resend_email',
    'can_copy_acknowledge_link',
    'can_edit_material',
)

# Pseudo-field covering material rows flagged confidential
CONFIDENTIAL_MATERIAL = 'confidential_material'

# Every field a role may have redacted. The restrictive fallback masks all of them.
MASKABLE_FIELDS: FrozenSet[str] = frozenset({
    'unit_price', 'total_price', 'total_amount', 'created_by', CONFIDENTIAL_MATERIAL,
})

PRICE_FIELDS = frozenset({'unit_price', 'total_price', 'total_amount'})


@dataclass(frozen=True)
class PermissionEntry:
    can_edit_basic_info: bool = False
    can_edit_items: bool = False
    can_edit_vendor: bool = False
    can_edit_remarks: bool = False
    can_send_email: bool = False
    can_save: bool = False
    can_approve: bool = False
    can_cancel: bool = False
    can_view_acknowledge_status: bool = False
    can_resend_email: bool = False
    can_copy_acknowledge_link: bool = False
    can_edit_material: bool = False
    masked_fields: FrozenSet[str] = frozenset()

    def allows(self, capability: str) -> bool:
        # Unknown capability names are never granted
        if capability not in CAPABILITIES:
            return False
        return bool(getattr(self, capability))

    def as_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != 'masked_fields'}
        data['masked_fields'] = sorted(self.masked_fields)
        return data


RESTRICTED_ENTRY = PermissionEntry(masked_fields=MASKABLE_FIELDS)

ROLE_PERMISSIONS: Dict[str, PermissionEntry] = {
    ADMIN: PermissionEntry(
        can_edit_basic_info=True,
        can_edit_items=True,
        can_edit_vendor=True,
        can_edit_remarks=True,
        can_send_email=True,
        can_save=True,
        can_approve=True,
        can_cancel=True,
        can_view_acknowledge_status=True,
        can_resend_email=True,
        can_copy_acknowledge_link=True,
        can_edit_material=True,
    ),
    # Purchasing staff: full PO editing except vendor swap and approval decisions
    MATERIAL_CONTROL: PermissionEntry(
        can_edit_basic_info=True,
        can_edit_items=True,
        can_edit_remarks=True,
        can_send_email=True,
        can_save=True,
        can_view_acknowledge_status=True,
        can_resend_email=True,
        can_copy_acknowledge_link=True,
        can_edit_material=True,
    ),
    APP_USER: PermissionEntry(
        can_edit_remarks=True,
        can_save=True,
        can_view_acknowledge_status=True,
        masked_fields=PRICE_FIELDS,
    ),
    VENDOR: PermissionEntry(
        masked_fields=PRICE_FIELDS | {'created_by', CONFIDENTIAL_MATERIAL},
    ),
}

__all__ = ['CAPABILITIES', 'CONFIDENTIAL_MATERIAL', 'MASKABLE_FIELDS', 'PRICE_FIELDS', 'PermissionEntry', 'RESTRICTED_ENTRY', 'ROLE_PERMISSIONS']
