from __future__ import annotations
"""Load-time validation of the static authorization configuration.

Violations are programming errors in the tables, so they raise
ConfigurationError and stop the app from starting rather than being tolerated
per call.
"""
from typing import Iterable, List, Mapping, Sequence, FrozenSet, Optional

from po_access.constants.roles import ALL_ROLES, ROLE_PRECEDENCE
from po_access.constants.permissions import CAPABILITIES, MASKABLE_FIELDS, ROLE_PERMISSIONS, PermissionEntry
from po_access.config.menu import MenuNode, MENU_TREE
from po_access.config.routes import ROUTE_PERMISSIONS, DEFAULT_ROUTES
from po_access.services.menu import iter_nodes
from po_access.services.routing import can_access_route
from po_access.utils.patterns import wildcard_count


class ConfigurationError(ValueError):
    def __init__(self, problems: Sequence[str]):
        self.problems = list(problems)
        super().__init__('Invalid authorization configuration: ' + '; '.join(self.problems))


def _raise_if(problems: List[str]) -> None:
    if problems:
        raise ConfigurationError(problems)


def menu_tree_problems(tree: Sequence[MenuNode], roles: FrozenSet[str] = ALL_ROLES) -> List[str]:
    problems: List[str] = []
    seen_ids = set()
    seen_paths = set()
    # Node identity on the current descent path; a repeat means a cycle
    stack: List[int] = []

    def visit(nodes: Iterable[MenuNode]):
        for n in nodes:
            if id(n) in stack:
                problems.append(f"Cycle detected at node '{n.id}'")
                continue
            if n.id in seen_ids:
                problems.append(f"Duplicate menu id '{n.id}'")
            seen_ids.add(n.id)
            if n.path in seen_paths:
                problems.append(f"Duplicate menu path '{n.path}' (node '{n.id}')")
            seen_paths.add(n.path)
            if not n.allowed_roles:
                problems.append(f"Menu node '{n.id}' has no allowed roles")
            unknown = set(n.allowed_roles) - set(roles)
            if unknown:
                problems.append(f"Menu node '{n.id}' references unknown roles: {sorted(unknown)}")
            if wildcard_count(n.path) > 1:
                problems.append(f"Menu node '{n.id}' path has more than one wildcard segment")
            stack.append(id(n))
            visit(n.children)
            stack.pop()

    visit(tree)
    return problems


def validate_menu_tree(tree: Sequence[MenuNode], roles: FrozenSet[str] = ALL_ROLES) -> None:
    _raise_if(menu_tree_problems(tree, roles))


def permission_matrix_problems(matrix: Mapping[str, PermissionEntry], roles: FrozenSet[str] = ALL_ROLES) -> List[str]:
    problems: List[str] = []
    missing = set(roles) - set(matrix)
    if missing:
        problems.append(f"Roles missing from permission matrix: {sorted(missing)}")
    extra = set(matrix) - set(roles)
    if extra:
        problems.append(f"Permission matrix has rows for unknown roles: {sorted(extra)}")
    for role, entry in matrix.items():
        if not isinstance(entry, PermissionEntry):
            problems.append(f"Permission row for '{role}' is not a PermissionEntry")
            continue
        for cap in CAPABILITIES:
            if not isinstance(getattr(entry, cap, None), bool):
                problems.append(f"Capability '{cap}' for '{role}' is not a bool")
        unknown_fields = set(entry.masked_fields) - MASKABLE_FIELDS
        if unknown_fields:
            problems.append(f"Role '{role}' masks unknown fields: {sorted(unknown_fields)}")
    return problems


def validate_permission_matrix(matrix: Mapping[str, PermissionEntry], roles: FrozenSet[str] = ALL_ROLES) -> None:
    _raise_if(permission_matrix_problems(matrix, roles))


def _malformed_routes(table: Mapping[str, FrozenSet[str]]) -> List[str]:
    return [route for route in table if wildcard_count(route) > 1]


def route_permission_problems(
    table: Mapping[str, FrozenSet[str]],
    default_routes: Mapping[str, str],
    roles: FrozenSet[str] = ALL_ROLES,
    precedence: Sequence[str] = (),
) -> List[str]:
    problems: List[str] = []
    for route, allowed in table.items():
        if wildcard_count(route) > 1:
            problems.append(f"Route '{route}' has more than one wildcard segment")
        unknown = set(allowed) - set(roles)
        if unknown:
            problems.append(f"Route '{route}' references unknown roles: {sorted(unknown)}")
    missing = set(roles) - set(default_routes)
    if missing:
        problems.append(f"Roles without a default route: {sorted(missing)}")
    # Lookups would fail to compile a malformed table; its problems are already listed
    if not _malformed_routes(table):
        for role, route in default_routes.items():
            if role in roles and not can_access_route(role, route, table):
                problems.append(f"Default route '{route}' is not accessible to '{role}'")
    unknown_precedence = set(precedence) - set(roles)
    if unknown_precedence:
        problems.append(f"Role precedence references unknown roles: {sorted(unknown_precedence)}")
    if len(set(precedence)) != len(tuple(precedence)):
        problems.append("Role precedence lists a role twice")
    return problems


def validate_route_permissions(
    table: Mapping[str, FrozenSet[str]],
    default_routes: Mapping[str, str],
    roles: FrozenSet[str] = ALL_ROLES,
    precedence: Sequence[str] = (),
) -> None:
    _raise_if(route_permission_problems(table, default_routes, roles, precedence))


def menu_route_problems(
    tree: Sequence[MenuNode],
    table: Mapping[str, FrozenSet[str]],
    roles: FrozenSet[str] = ALL_ROLES,
) -> List[str]:
    """Every role that can reach a menu node (allowed on the whole chain) must pass the route guard for its path."""
    problems: List[str] = []
    malformed = _malformed_routes(table)
    if malformed:
        return [f"Route '{route}' has more than one wildcard segment" for route in malformed]
    for node, chain in iter_nodes(tree):
        for role in sorted(roles):
            reachable = all(role in n.allowed_roles for n in chain)
            if reachable and not can_access_route(role, node.path, table):
                problems.append(f"Menu node '{node.id}' is reachable by '{role}' but route '{node.path}' denies it")
    return problems


def validate_menu_route_consistency(
    tree: Sequence[MenuNode],
    table: Mapping[str, FrozenSet[str]],
    roles: FrozenSet[str] = ALL_ROLES,
) -> None:
    _raise_if(menu_route_problems(tree, table, roles))


def configuration_problems(
    tree: Optional[Sequence[MenuNode]] = None,
    matrix: Optional[Mapping[str, PermissionEntry]] = None,
    table: Optional[Mapping[str, FrozenSet[str]]] = None,
    default_routes: Optional[Mapping[str, str]] = None,
    precedence: Optional[Sequence[str]] = None,
) -> List[str]:
    """Collect every problem across the static tables (defaults: the shipped ones)."""
    tree = MENU_TREE if tree is None else tree
    matrix = ROLE_PERMISSIONS if matrix is None else matrix
    table = ROUTE_PERMISSIONS if table is None else table
    default_routes = DEFAULT_ROUTES if default_routes is None else default_routes
    precedence = ROLE_PRECEDENCE if precedence is None else precedence

    tree_problems = menu_tree_problems(tree)
    problems = list(tree_problems)
    problems += permission_matrix_problems(matrix)
    problems += route_permission_problems(table, default_routes, precedence=precedence)
    # A cyclic tree would make the chain walk unbounded; malformed routes are reported above
    if not tree_problems and not _malformed_routes(table):
        problems += menu_route_problems(tree, table)
    return problems


def validate_configuration(**tables) -> None:
    _raise_if(configuration_problems(**tables))


__all__ = [
    'ConfigurationError', 'validate_menu_tree', 'validate_permission_matrix', 'validate_route_permissions',
    'validate_menu_route_consistency', 'validate_configuration', 'configuration_problems',
]
