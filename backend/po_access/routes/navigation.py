from flask import Blueprint, request, abort, current_app
from po_access.config.menu import MENU_TREE
from po_access.constants.roles import role_label
from po_access.decorators.auth import require_role, session_role
from po_access.services.menu import sidebar_menu, visible_menu, breadcrumb, menu_to_dict
from po_access.services.routing import default_route_for, can_access_route, redirect_route_for
from po_access.services.policy import permissions_for, mask_record

nav_bp = Blueprint('nav', __name__)


def _required_path() -> str:
    path = (request.args.get('path') or '').strip()
    if not path:
        abort(400, description='path required')
    return path


@nav_bp.get('/session')
@require_role
def get_session():
    role = session_role()
    return {'role': role, 'label': role_label(role), 'default_route': default_route_for(role)}


@nav_bp.get('/menu')
@require_role
def get_menu():
    role = session_role()
    if request.args.get('include_hidden') in ('1', 'true'):
        nodes = visible_menu(MENU_TREE, role)
    else:
        nodes = sidebar_menu(MENU_TREE, role)
    return {'role': role, 'data': menu_to_dict(nodes)}


@nav_bp.get('/breadcrumb')
@require_role
def get_breadcrumb():
    path = _required_path()
    return {'path': path, 'data': breadcrumb(MENU_TREE, path, session_role())}


@nav_bp.get('/permissions')
@require_role
def get_permissions():
    role = session_role()
    return {'role': role, 'permissions': permissions_for(role).as_dict()}


@nav_bp.get('/access')
@require_role
def check_access():
    role = session_role()
    path = _required_path()
    allowed = can_access_route(role, path)
    if not allowed:
        current_app.logger.info('Role %s denied route %s', role, path)
    return {'path': path, 'allowed': allowed, 'redirect': redirect_route_for(role, path)}


@nav_bp.post('/mask')
@require_role
def mask():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description='JSON object required')
    return {'data': mask_record(data, session_role())}
