"""Static navigation tree. Built once at import, never mutated.

Nodes flagged ``in_sidebar=False`` are structural: they are not rendered as
sidebar links but give drill-in pages (PO detail, edit, send email) a place in
the tree so breadcrumbs come from the same source as the menu.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Tuple

from po_access.constants.roles import ADMIN, MATERIAL_CONTROL, APP_USER, VENDOR


@dataclass(frozen=True)
class MenuNode:
    id: str
    title: str
    path: str
    icon: str
    allowed_roles: FrozenSet[str]
    children: Tuple['MenuNode', ...] = ()
    description: str = ''
    in_sidebar: bool = True


def node(id, title, path, icon, roles, children=(), description='', in_sidebar=True) -> MenuNode:
    return MenuNode(
        id=id,
        title=title,
        path=path,
        icon=icon,
        allowed_roles=frozenset(roles),
        children=tuple(children),
        description=description,
        in_sidebar=in_sidebar,
    )


EVERYONE = (ADMIN, MATERIAL_CONTROL, APP_USER, VENDOR)
INTERNAL = (ADMIN, MATERIAL_CONTROL, APP_USER)
PURCHASING = (ADMIN, MATERIAL_CONTROL)

MENU_TREE: Tuple[MenuNode, ...] = (
    node('home', 'Home', '/', 'Home', EVERYONE, description='System home page'),
    node(
        'po-management', 'PO Management', '/po', 'ShoppingCart', INTERNAL,
        description='Manage all purchase orders',
        children=(
            node('po-list', 'PO List', '/po/list', 'Assignment', INTERNAL, description='Browse purchase orders'),
            node('po-create', 'Create PO', '/po/create', 'ShoppingCart', PURCHASING, description='Create a new purchase order'),
            node('material', 'Material Management', '/po/material', 'Inventory', PURCHASING,
                 description='Maintain material alias names'),
            node(
                'po-detail', 'PO Detail', '/po/[id]', 'Receipt', INTERNAL, in_sidebar=False,
                children=(
                    node('po-edit', 'Edit PO', '/po/[id]/edit', 'Receipt', INTERNAL, in_sidebar=False),
                ),
            ),
        ),
    ),
    node(
        'email-management', 'PO Email', '/email', 'Email', PURCHASING,
        description='Send purchase orders to vendors',
        children=(
            node('email-send', 'Send PO Email', '/po/[id]/send-email', 'Email', PURCHASING, in_sidebar=False,
                 description='Email a PO to its vendor'),
            node('email-tracking', 'Vendor Acknowledgement', '/po/[id]/acknowledge-status', 'CheckCircle', PURCHASING,
                 in_sidebar=False, description='Track vendor acknowledgement'),
        ),
    ),
    node(
        'reports', 'Reports & Status', '/reports', 'Assessment', INTERNAL,
        description='Reports and PO status',
        children=(
            node('status-timeline', 'Status Timeline', '/reports/timeline', 'Timeline', INTERNAL,
                 description='PO status changes over time'),
            node('audit-log', 'Audit Log', '/reports/audit-log', 'Assignment', PURCHASING,
                 description='History of data changes'),
        ),
    ),
    node(
        'vendor-portal', 'Vendor Portal', '/vendor', 'AccountCircle', (VENDOR,),
        description='Portal for vendors',
        children=(
            node('vendor-po', 'Received POs', '/vendor/po', 'Receipt', (VENDOR,), description='Purchase orders sent to you'),
            node('vendor-acknowledge', 'Acknowledge PO', '/vendor/acknowledge', 'CheckCircle', (VENDOR,),
                 description='Confirm receipt of a purchase order'),
        ),
    ),
    node(
        'admin', 'Administration', '/admin', 'Settings', (ADMIN,),
        description='System administration (Admin only)',
        children=(
            node('user-management', 'Manage Users', '/admin/users', 'AccountCircle', (ADMIN,),
                 description='Manage user accounts'),
            node('system-settings', 'System Settings', '/admin/settings', 'Settings', (ADMIN,),
                 description='System configuration'),
        ),
    ),
)

__all__ = ['MenuNode', 'node', 'MENU_TREE']
