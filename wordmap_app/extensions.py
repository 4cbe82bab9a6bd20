"""Extension singletons, bound to the app in core.bootstrap.register_extensions.

Kept apart from the factory so models, services and blueprints can import
them without a circular import.
"""

from flask_login import LoginManager
from flask_wtf import CSRFProtect

from .db_instance import db

# API only: no login_view, unauthenticated calls get a JSON 401
login_manager = LoginManager()
login_manager.session_protection = "basic"

csrf_protect = CSRFProtect()

__all__ = ["db", "login_manager", "csrf_protect"]
