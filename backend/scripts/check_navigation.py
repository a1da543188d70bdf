#!/usr/bin/env python
"""Validate the static navigation / permission tables and print per-role views.

Usage:
    python backend/scripts/check_navigation.py                  # validate only
    python backend/scripts/check_navigation.py --show-roles     # role -> menu / capability summary
    python backend/scripts/check_navigation.py --role Vendor --show-menu
    python backend/scripts/check_navigation.py --export-json    # role -> permissions JSON on stdout
"""
from __future__ import annotations
import os, sys, argparse, textwrap, json

# Allow running from repo root
sys.path.append(os.path.abspath('backend'))

from po_access.config.menu import MENU_TREE  # type: ignore
from po_access.config.routes import ROUTE_PERMISSIONS
from po_access.constants.permissions import CAPABILITIES
from po_access.constants.roles import ROLE_PRECEDENCE, coerce_role, role_label
from po_access.services.menu import sidebar_menu, visible_menu, iter_nodes
from po_access.services.policy import permissions_for
from po_access.services.routing import default_route_for, can_access_route
from po_access.utils.validation import configuration_problems


def summarize_roles(roles):
    rows = []
    for role in roles:
        entry = permissions_for(role)
        granted = [c for c in CAPABILITIES if entry.allows(c)]
        menu_ids = [n.id for n, _chain in iter_nodes(visible_menu(MENU_TREE, role))]
        routes = [r for r in ROUTE_PERMISSIONS if can_access_route(role, r)]
        rows.append((role, len(granted), len(menu_ids), len(routes), default_route_for(role)))
    return rows


def print_role_summary(roles):
    rows = summarize_roles(roles)
    name_w = max(len(r[0]) for r in rows)
    print(f"{'Role'.ljust(name_w)} | Caps | Menu | Routes | Landing")
    print('-' * (name_w + 40))
    for name, caps, menu, routes, landing in rows:
        print(f"{name.ljust(name_w)} | {str(caps).rjust(4)} | {str(menu).rjust(4)} | {str(routes).rjust(6)} | {landing}")


def print_menu(role):
    print(f"[MENU] {role} ({role_label(role)})")
    for node, chain in iter_nodes(sidebar_menu(MENU_TREE, role)):
        print(f"{'  ' * len(chain)}{node.title}  {node.path}")


def parse_args():
    p = argparse.ArgumentParser(
        description="Validate navigation & permission configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""Examples:\n  validate: check_navigation.py\n  summary: check_navigation.py --show-roles\n  one role: check_navigation.py --role AppUser --show-menu\n""")
    )
    p.add_argument('--role', help='Limit output to one role')
    p.add_argument('--show-roles', action='store_true', help='Print per-role capability, menu and route counts')
    p.add_argument('--show-menu', action='store_true', help='Print the sidebar tree per role')
    p.add_argument('--export-json', action='store_true', help='Export role -> permissions JSON to stdout')
    return p.parse_args()


def main():
    args = parse_args()
    problems = configuration_problems()
    if problems:
        print('[VALIDATION] FAIL:')
        for msg in problems:
            print(' -', msg)
        sys.exit(2)
    print('[VALIDATION] OK: menu, routes and permission matrix are consistent.')

    roles = list(ROLE_PRECEDENCE)
    if args.role:
        role = coerce_role(args.role)
        if role is None:
            print(f"[ERROR] Unknown role: {args.role!r}")
            sys.exit(3)
        roles = [role]
    if args.show_roles:
        print_role_summary(roles)
    if args.show_menu:
        for role in roles:
            print_menu(role)
    if args.export_json:
        print(json.dumps({r: permissions_for(r).as_dict() for r in roles}, indent=2, ensure_ascii=False))


if __name__ == '__main__':
    main()
