from __future__ import annotations
from typing import Any, Dict, Mapping, Optional

from po_access.constants.permissions import ROLE_PERMISSIONS, RESTRICTED_ENTRY, CONFIDENTIAL_MATERIAL, PermissionEntry


class _Redacted(str):
    """String marker for intentionally hidden values.

    Serializes as ``***`` but is distinguishable from real data by identity:
    ``value is REDACTED``.
    """

    def __repr__(self):
        return 'REDACTED'


REDACTED = _Redacted('***')


def permissions_for(role: Optional[str]) -> PermissionEntry:
    """Table lookup; unknown or missing roles get the most restrictive entry."""
    if not isinstance(role, str):
        return RESTRICTED_ENTRY
    return ROLE_PERMISSIONS.get(role, RESTRICTED_ENTRY)


def is_field_masked(field: str, role: Optional[str]) -> bool:
    return field in permissions_for(role).masked_fields


def mask_if_needed(value: Any, field: str, role: Optional[str]) -> Any:
    if is_field_masked(field, role):
        return REDACTED
    return value


def mask_record(record: Mapping[str, Any], role: Optional[str]) -> Dict[str, Any]:
    """Copy of a PO-shaped mapping with masked fields redacted, including line ``items``."""
    masked_fields = permissions_for(role).masked_fields
    out: Dict[str, Any] = {}
    for key, value in record.items():
        if key == 'items' and isinstance(value, list):
            out[key] = [mask_record(item, role) if isinstance(item, Mapping) else item for item in value]
        elif key in masked_fields:
            out[key] = REDACTED
        else:
            out[key] = value
    return out


def can_edit_material(role: Optional[str]) -> bool:
    return permissions_for(role).can_edit_material


def mask_material_value(value: str, role: Optional[str], is_confidential: bool):
    """Confidential material data is hidden from vendors and from unrecognized roles."""
    if not is_confidential:
        return value
    return mask_if_needed(value, CONFIDENTIAL_MATERIAL, role)


__all__ = ['REDACTED', 'permissions_for', 'is_field_masked', 'mask_if_needed', 'mask_record',
           'can_edit_material', 'mask_material_value']
