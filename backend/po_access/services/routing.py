from __future__ import annotations
import logging
from typing import Iterable, Mapping, Optional, Sequence, FrozenSet

from po_access.constants.roles import ADMIN, ROLE_PRECEDENCE, is_known_role, normalize_roles
from po_access.config.routes import ROUTE_PERMISSIONS, DEFAULT_ROUTES, UNAUTHORIZED_ROUTE
from po_access.utils.patterns import compile_pattern

log = logging.getLogger(__name__)


def resolve_primary_role(raw_roles: Optional[Iterable], precedence: Sequence[str] = ROLE_PRECEDENCE) -> Optional[str]:
    """Pick the session role from the identity provider's raw role names.

    Raw names are trimmed here, once. The first role of ``precedence`` present
    in the normalized list wins, so input order never matters. Returns None
    when nothing matches; callers must treat that as an authentication failure.
    """
    present = set(normalize_roles(raw_roles))
    for role in precedence:
        if role in present and is_known_role(role):
            return role
    log.debug('No primary role resolvable from %r', raw_roles)
    return None


def default_route_for(role: Optional[str]) -> str:
    if not is_known_role(role):
        return UNAUTHORIZED_ROUTE
    return DEFAULT_ROUTES[role]


def _allowed_roles_for(route: str, table: Mapping[str, FrozenSet[str]]) -> Optional[FrozenSet[str]]:
    if route in table:
        return table[route]
    for raw, roles in table.items():
        pattern = compile_pattern(raw)
        if pattern.is_literal:
            continue
        if pattern.match(route) is not None:
            return roles
    return None


def can_access_route(role: Optional[str], route: str, table: Mapping[str, FrozenSet[str]] = ROUTE_PERMISSIONS) -> bool:
    """Exact entry first, then wildcard patterns. Unlisted routes are Admin-only."""
    if not is_known_role(role):
        return False
    allowed = _allowed_roles_for(route, table)
    if allowed is None:
        log.debug('Route %s has no permission entry; deny-by-default applies', route)
        return role == ADMIN
    return role in allowed


def redirect_route_for(role: Optional[str], current_route: str) -> Optional[str]:
    """None when the role may stay on ``current_route``, else where to send it."""
    if not is_known_role(role):
        return UNAUTHORIZED_ROUTE
    if can_access_route(role, current_route):
        return None
    return default_route_for(role)


__all__ = ['resolve_primary_role', 'default_route_for', 'can_access_route', 'redirect_route_for']
