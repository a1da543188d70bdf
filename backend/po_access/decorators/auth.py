from functools import wraps
from flask import abort, current_app, g
from flask_jwt_extended import verify_jwt_in_request, get_jwt
from po_access.services.routing import resolve_primary_role


def session_role() -> str:
    """Primary role of the current request; set by ``require_role``."""
    return g.primary_role


def require_role(fn):
    """Verify the JWT and resolve its raw role claim to one primary role.

    A token whose roles resolve to nothing is refused with 403; no role is
    ever guessed.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        claim = current_app.config.get('JWT_ROLES_CLAIM', 'roles')
        raw_roles = get_jwt().get(claim) or []
        if isinstance(raw_roles, str):
            # Some identity providers emit a lone role as a plain string
            raw_roles = [raw_roles]
        elif not isinstance(raw_roles, (list, tuple)):
            current_app.logger.info('Roles claim %r has unsupported type %s', claim, type(raw_roles).__name__)
            raw_roles = []
        role = resolve_primary_role(raw_roles)
        if role is None:
            current_app.logger.info('Rejected token without usable role: %r', raw_roles)
            abort(403, description='No usable role')
        g.primary_role = role
        return fn(*args, **kwargs)
    return wrapper
