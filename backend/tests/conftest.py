import os, sys, pytest
# Ensure backend directory is on path so 'po_access' can be imported without install
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from flask_jwt_extended import create_access_token
from po_access import create_app
from po_access.config.menu import node


@pytest.fixture(scope='session', autouse=True)
def app_instance():
    app = create_app({'TESTING': True, 'JWT_SECRET_KEY': 'test-secret-key-with-enough-length-123'})
    yield app


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()


@pytest.fixture()
def auth_headers(app_instance):
    """Build Authorization headers for a token carrying the given raw role list."""
    def make(*raw_roles):
        with app_instance.app_context():
            token = create_access_token(identity='user-1', additional_claims={'roles': list(raw_roles)})
        return {'Authorization': f'Bearer {token}'}
    return make


@pytest.fixture()
def admin_tree():
    return (
        node('home', 'Home', '/', 'Home', ('Admin', 'MaterialControl', 'AppUser', 'Vendor')),
        node('admin', 'Administration', '/admin', 'Settings', ('Admin',), children=(
            node('users', 'Manage Users', '/admin/users', 'AccountCircle', ('Admin',)),
            node('settings', 'System Settings', '/admin/settings', 'Settings', ('Admin',)),
        )),
    )
