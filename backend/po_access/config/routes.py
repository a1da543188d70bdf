"""Route → allowed roles table backing the route guard.

Covers drill-in pages that have no sidebar entry. Patterns may contain one
``[id]`` style wildcard segment. Routes missing here are Admin-only.
"""
from __future__ import annotations
from typing import Dict, FrozenSet

from po_access.constants.roles import ADMIN, MATERIAL_CONTROL, APP_USER, VENDOR

UNAUTHORIZED_ROUTE = '/auth/unauthorized'

_EVERYONE = frozenset({ADMIN, MATERIAL_CONTROL, APP_USER, VENDOR})
_INTERNAL = frozenset({ADMIN, MATERIAL_CONTROL, APP_USER})
_PURCHASING = frozenset({ADMIN, MATERIAL_CONTROL})
_VENDOR_PORTAL = frozenset({VENDOR, ADMIN})

ROUTE_PERMISSIONS: Dict[str, FrozenSet[str]] = {
    '/': _EVERYONE,
    UNAUTHORIZED_ROUTE: _EVERYONE,
    '/po': _INTERNAL,
    '/po/list': _INTERNAL,
    '/po/create': _PURCHASING,
    '/po/material': _PURCHASING,
    '/po/[id]': _INTERNAL,
    '/po/[id]/edit': _INTERNAL,
    '/po/[id]/send-email': _PURCHASING,
    '/po/[id]/acknowledge-status': _PURCHASING,
    '/email': _PURCHASING,
    '/reports': _INTERNAL,
    '/reports/timeline': _INTERNAL,
    '/reports/audit-log': _PURCHASING,
    '/vendor': _VENDOR_PORTAL,
    '/vendor/po': _VENDOR_PORTAL,
    '/vendor/acknowledge': _VENDOR_PORTAL,
    '/admin': frozenset({ADMIN}),
    '/admin/users': frozenset({ADMIN}),
    '/admin/settings': frozenset({ADMIN}),
}

DEFAULT_ROUTES: Dict[str, str] = {
    APP_USER: '/po/list',
    MATERIAL_CONTROL: '/po/material',
    ADMIN: '/',
    VENDOR: '/vendor/po',
}

__all__ = ['UNAUTHORIZED_ROUTE', 'ROUTE_PERMISSIONS', 'DEFAULT_ROUTES']
