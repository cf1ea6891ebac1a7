from iedc.blueprints.auth import auth_bp
from iedc.blueprints.content import content_bp
from iedc.blueprints.dashboard import dashboard_bp
from iedc.blueprints.events import events_bp
from iedc.blueprints.system import system_bp
from iedc.blueprints.users import users_bp

__all__ = [
    "auth_bp",
    "content_bp",
    "dashboard_bp",
    "events_bp",
    "system_bp",
    "users_bp",
]
